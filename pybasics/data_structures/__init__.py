"""
Classic data structures (linked list, stack, queue, graph, binary search tree).
"""

from .linked_list import LinkedList, Node
from .stack import EmptyStackError, Stack, is_valid_brackets
from .queue import EmptyQueueError, Queue
from .graph import Graph
from .tree import BinaryTree, TreeNode

__all__ = [
    "LinkedList",
    "Node",
    "Stack",
    "EmptyStackError",
    "is_valid_brackets",
    "Queue",
    "EmptyQueueError",
    "Graph",
    "BinaryTree",
    "TreeNode",
]
