"""
Undirected graph backed by an adjacency list.

Time complexity:
- add_vertex / add_edge / get_neighbors: O(1)
- bfs / dfs: O(V + E)
"""

from collections import deque
from typing import Dict, Hashable, List


class Graph:
    def __init__(self):
        self._vertices: Dict[Hashable, List[Hashable]] = {}

    # -----------------
    # VERTEX OPERATIONS
    # -----------------

    def add_vertex(self, vertex: Hashable) -> None:
        if vertex not in self._vertices:
            self._vertices[vertex] = []

    def vertices(self) -> List[Hashable]:
        return list(self._vertices)

    def has_vertex(self, vertex: Hashable) -> bool:
        return vertex in self._vertices

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def add_edge(self, vertex1: Hashable, vertex2: Hashable) -> None:
        # Undirected: store the edge on both endpoints
        self._vertices.setdefault(vertex1, []).append(vertex2)
        self._vertices.setdefault(vertex2, []).append(vertex1)

    def get_neighbors(self, vertex: Hashable) -> List[Hashable]:
        return list(self._vertices.get(vertex, []))

    def edges(self) -> List[tuple]:
        """Return each undirected edge once, in insertion order."""
        seen = set()
        result = []
        for vertex, neighbors in self._vertices.items():
            for neighbor in neighbors:
                key = frozenset((vertex, neighbor))
                if key in seen:
                    continue
                seen.add(key)
                result.append((vertex, neighbor))
        return result

    def adjacency(self) -> Dict[Hashable, List[Hashable]]:
        return {vertex: list(neighbors) for vertex, neighbors in self._vertices.items()}

    # -----------------
    # TRAVERSALS
    # -----------------

    def bfs(self, start: Hashable) -> List[Hashable]:
        """Breadth-first order of every vertex reachable from ``start``."""
        visited = {start}
        queue = deque([start])
        result = []

        while queue:
            vertex = queue.popleft()
            result.append(vertex)
            for neighbor in self._vertices.get(vertex, []):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        return result

    def dfs(self, start: Hashable) -> List[Hashable]:
        """Depth-first order of every vertex reachable from ``start``.

        Uses an explicit stack instead of recursion so long paths cannot hit
        the interpreter recursion limit. Neighbors are pushed in reverse so the
        visiting order matches the recursive formulation.
        """
        visited = set()
        stack = [start]
        result = []

        while stack:
            vertex = stack.pop()
            if vertex in visited:
                continue
            visited.add(vertex)
            result.append(vertex)
            for neighbor in reversed(self._vertices.get(vertex, [])):
                if neighbor not in visited:
                    stack.append(neighbor)

        return result

    def __len__(self) -> int:
        return len(self._vertices)


def main():
    graph = Graph()

    print("Example 1: Adding vertices 0-5")
    for i in range(6):
        graph.add_vertex(i)

    # 0 -- 1 -- 2
    # |    |    |
    # 3 -- 4 -- 5
    print("\nExample 2: Adding edges")
    edges = [
        (0, 1), (1, 2),
        (0, 3), (1, 4), (2, 5),
        (3, 4), (4, 5),
    ]
    for v1, v2 in edges:
        graph.add_edge(v1, v2)
        print(f"Added edge: {v1} -- {v2}")

    print("\nExample 3: Graph Adjacency List:")
    for vertex, neighbors in graph.adjacency().items():
        print(f"Vertex {vertex}: {neighbors}")

    print("\nExample 4: BFS starting from vertex 0:")
    print(f"BFS path: {graph.bfs(0)}")

    print("\nExample 5: DFS starting from vertex 0:")
    print(f"DFS path: {graph.dfs(0)}")

    vertex = 1
    print(f"\nExample 6: Neighbors of vertex {vertex}:")
    print(f"Neighbors: {graph.get_neighbors(vertex)}")


if __name__ == "__main__":
    main()
