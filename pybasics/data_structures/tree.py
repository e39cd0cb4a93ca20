"""
Binary search tree.

For every node, values in the left subtree are smaller and values in the
right subtree are greater or equal (duplicates go right).

insert / search: O(log n) average, O(n) worst case. Traversals: O(n).
Every operation walks the tree with a loop and an explicit stack, so a
degenerate (sorted-insert) tree does not exhaust the recursion limit.
"""

from collections import deque
from typing import List, Optional


class TreeNode:
    def __init__(self, value: int):
        self.value = value
        self.left: Optional["TreeNode"] = None
        self.right: Optional["TreeNode"] = None


class BinaryTree:
    def __init__(self):
        self.root: Optional[TreeNode] = None

    # -----------------
    # MUTATION / LOOKUP
    # -----------------

    def insert(self, value: int) -> None:
        if self.root is None:
            self.root = TreeNode(value)
            return

        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right

    def search(self, value: int) -> bool:
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        if self.root is None:
            return 0
        levels = 0
        frontier = deque([self.root])
        while frontier:
            levels += 1
            for _ in range(len(frontier)):
                node = frontier.popleft()
                if node.left:
                    frontier.append(node.left)
                if node.right:
                    frontier.append(node.right)
        return levels

    # -----------------
    # TRAVERSALS
    # -----------------

    def inorder_traversal(self) -> List[int]:
        # left -> node -> right; sorted for a BST
        result = []
        stack = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def preorder_traversal(self) -> List[int]:
        # node -> left -> right
        result = []
        stack = [self.root] if self.root else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right:
                stack.append(node.right)
            if node.left:
                stack.append(node.left)
        return result

    def postorder_traversal(self) -> List[int]:
        # left -> right -> node; built as reversed (node -> right -> left)
        result = []
        stack = [self.root] if self.root else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left:
                stack.append(node.left)
            if node.right:
                stack.append(node.right)
        result.reverse()
        return result


def main():
    tree = BinaryTree()

    print("Example 1: Building the tree")
    print("Inserting: 5, 3, 7, 1, 4, 6, 8")
    #       5
    #      / \
    #     3   7
    #    / \ / \
    #   1  4 6  8
    for value in (5, 3, 7, 1, 4, 6, 8):
        tree.insert(value)

    print("\nExample 2: Tree Traversals")
    print("Inorder (sorted):", tree.inorder_traversal())
    print("Preorder:", tree.preorder_traversal())
    print("Postorder:", tree.postorder_traversal())

    print("\nExample 3: Searching for values")
    for value in (4, 9):
        print(f"Is {value} in the tree? {tree.search(value)}")


if __name__ == "__main__":
    main()
