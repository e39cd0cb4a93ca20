"""HTML views of the graph and binary search tree demos."""

from .base import Visualizer
from .plugin import GraphVisualizer, TreeVisualizer, get_graph_levels

__all__ = [
    "Visualizer",
    "GraphVisualizer",
    "TreeVisualizer",
    "get_graph_levels",
]
