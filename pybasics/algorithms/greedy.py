"""
Greedy algorithms: take the locally best choice at every step and never
revisit it.
"""

import heapq
import itertools
import math
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence


# ==========================================================
# ACTIVITY SELECTION
# ==========================================================

@dataclass(frozen=True)
class Activity:
    start: int
    end: int


def activity_selection(activities: Sequence[Activity]) -> List[Activity]:
    """Maximum set of non-overlapping activities, earliest finish first. O(n log n)."""
    if not activities:
        return []

    ordered = sorted(activities, key=lambda a: a.end)
    selected = [ordered[0]]
    last_end = ordered[0].end

    for activity in ordered[1:]:
        if activity.start >= last_end:
            selected.append(activity)
            last_end = activity.end

    return selected


# ==========================================================
# FRACTIONAL KNAPSACK
# ==========================================================

@dataclass(frozen=True)
class Item:
    value: float
    weight: float

    @property
    def ratio(self) -> float:
        # Weightless items are worth taking first
        if self.weight == 0:
            return math.inf
        return self.value / self.weight


def fractional_knapsack(items: Sequence[Item], capacity: float) -> float:
    """Best value when items may be split. O(n log n)."""
    total_value = 0.0
    current_weight = 0.0

    for item in sorted(items, key=lambda i: i.ratio, reverse=True):
        if current_weight + item.weight <= capacity:
            current_weight += item.weight
            total_value += item.value
        else:
            # Take the fraction that still fits, then the bag is full
            total_value += item.ratio * (capacity - current_weight)
            break

    return total_value


# ==========================================================
# HUFFMAN CODING
# ==========================================================

@dataclass
class HuffmanNode:
    freq: int
    char: Optional[str] = None
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_huffman_tree(text: str) -> Optional[HuffmanNode]:
    """Build the Huffman tree of ``text``; the root frequency equals ``len(text)``."""
    if not text:
        return None

    # The counter breaks frequency ties so nodes are never compared directly
    order = itertools.count()
    heap = [(freq, next(order), HuffmanNode(freq, char)) for char, freq in Counter(text).items()]
    heapq.heapify(heap)

    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        internal = HuffmanNode(left_freq + right_freq, left=left, right=right)
        heapq.heappush(heap, (internal.freq, next(order), internal))

    return heap[0][2]


def huffman_codes(root: Optional[HuffmanNode]) -> Dict[str, str]:
    """Map each character to its bit string (left = 0, right = 1)."""
    if root is None:
        return {}
    if root.is_leaf:
        return {root.char: "0"}

    codes = {}
    stack = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf:
            codes[node.char] = prefix
            continue
        if node.right:
            stack.append((node.right, prefix + "1"))
        if node.left:
            stack.append((node.left, prefix + "0"))
    return codes


# ==========================================================
# DIJKSTRA
# ==========================================================

@dataclass(frozen=True)
class WeightedEdge:
    to: int
    weight: int


def dijkstra_shortest_path(graph: Sequence[Sequence[WeightedEdge]], start: int) -> List[float]:
    """Shortest distance from ``start`` to every vertex; unreachable stays ``math.inf``.

    ``graph[u]`` lists the outgoing edges of vertex ``u``. Weights must be
    non-negative. O((V + E) log V) with a binary heap.
    """
    dist = [math.inf] * len(graph)
    dist[start] = 0
    pq = [(0, start)]

    while pq:
        d, u = heapq.heappop(pq)
        # Stale entry, a shorter path was already settled
        if d > dist[u]:
            continue
        for edge in graph[u]:
            new_dist = d + edge.weight
            if new_dist < dist[edge.to]:
                dist[edge.to] = new_dist
                heapq.heappush(pq, (new_dist, edge.to))

    return dist


def main():
    activities = [
        Activity(1, 4), Activity(3, 5), Activity(0, 6), Activity(5, 7),
        Activity(3, 9), Activity(5, 9), Activity(6, 10), Activity(8, 11),
        Activity(8, 12), Activity(2, 14), Activity(12, 16),
    ]
    print("Activity Selection Problem:")
    print(f"Selected activities: {activity_selection(activities)}\n")

    items = [Item(60, 10), Item(100, 20), Item(120, 30)]
    print("Fractional Knapsack Problem:")
    print(f"Maximum value: {fractional_knapsack(items, 50.0):.2f}\n")

    text = "this is an example for huffman encoding"
    tree = build_huffman_tree(text)
    codes = huffman_codes(tree)
    encoded_bits = sum(len(codes[c]) for c in text)
    print("Huffman Coding:")
    print(f"Huffman tree root frequency: {tree.freq}")
    print(f"Encoded size: {encoded_bits} bits (vs {len(text) * 8} bits uncompressed)\n")

    graph = [
        [WeightedEdge(1, 4), WeightedEdge(2, 1)],
        [WeightedEdge(3, 1)],
        [WeightedEdge(1, 2), WeightedEdge(3, 5)],
        [WeightedEdge(4, 3)],
        [],
    ]
    print("Dijkstra's Shortest Path:")
    print(f"Shortest distances from vertex 0: {dijkstra_shortest_path(graph, 0)}")


if __name__ == "__main__":
    main()
