import logging
import os
from collections import deque
from typing import Dict, Hashable, Iterator, List, Optional, Tuple

from jinja2 import Environment, FileSystemLoader

from pybasics.data_structures.graph import Graph
from pybasics.data_structures.tree import BinaryTree, TreeNode
from .base import Visualizer

LOGGER = logging.getLogger(__name__)

# Width and height of the drawing area
WIDTH = 800
HEIGHT = 600
OUTPUT_DIR = "out"

TEMPLATE_PATH = os.path.join(os.path.dirname(__file__), "templates")


def _environment() -> Environment:
    return Environment(loader=FileSystemLoader(TEMPLATE_PATH), autoescape=True)


def get_graph_levels(graph: Graph, start: Optional[Hashable] = None) -> Dict[int, List[Hashable]]:
    """
    Performs BFS to determine the depth level of each vertex.
    Returns a dictionary mapping level (int) to a list of vertices.
    """
    vertices = graph.vertices()
    if not vertices:
        return {}

    if start is None or not graph.has_vertex(start):
        start = vertices[0]

    levels = {start: 0}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        for neighbor in graph.get_neighbors(current):
            if neighbor not in levels:
                levels[neighbor] = levels[current] + 1
                queue.append(neighbor)

    # Vertices not reachable from start sit in the first column
    for vertex in vertices:
        if vertex not in levels:
            levels[vertex] = 0

    columns: Dict[int, List[Hashable]] = {}
    for vertex in vertices:
        columns.setdefault(levels[vertex], []).append(vertex)
    return columns


def _walk_inorder(tree: BinaryTree) -> Iterator[Tuple[TreeNode, int]]:
    # Yields (node, depth) left to right
    stack = []
    node, depth = tree.root, 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node, depth = node.left, depth + 1
        node, depth = stack.pop()
        yield node, depth
        node, depth = node.right, depth + 1


class GraphVisualizer(Visualizer):
    @property
    def plugin_id(self) -> str:
        return "graph-visualizer"

    @property
    def display_name(self) -> str:
        return "Graph Layered View"

    def render_options_schema(self) -> dict:
        return {
            "start": {
                "type": "any",
                "label": "Vertex placed in the first column",
                "required": False,
            },
            "width": {"type": "int", "label": "Canvas width", "required": False, "default": WIDTH},
            "height": {"type": "int", "label": "Canvas height", "required": False, "default": HEIGHT},
        }

    def render(self, graph: Graph, **options) -> str:
        if len(graph) == 0:
            return "<html><body>Empty Graph</body></html>"

        columns = get_graph_levels(graph, options.get("start"))

        # --- Calculate Coords ---
        width = options.get("width", WIDTH)
        height = options.get("height", HEIGHT)
        max_lvl = max(columns.keys())
        dx = width / (max_lvl + 2)

        positions = {}
        for lvl, vertices in columns.items():
            x = (lvl + 1) * dx
            dy = height / (len(vertices) + 1)
            for i, vertex in enumerate(vertices):
                positions[vertex] = {"x": x, "y": dy * (i + 1)}

        # --- Scaling ---
        scale = max(0.4, 1.0 - (len(graph) / 100))

        nodes = [{"label": str(v), **positions[v]} for v in graph.vertices()]
        edges = [
            {"x1": positions[a]["x"], "y1": positions[a]["y"], "x2": positions[b]["x"], "y2": positions[b]["y"]}
            for a, b in graph.edges()
        ]

        template = _environment().get_template("graph.html")
        return template.render(
            title=self.display_name,
            nodes=nodes,
            edges=edges,
            width=width,
            height=height,
            radius=25 * scale,
            font_size=12 * scale,
        )


class TreeVisualizer(Visualizer):
    @property
    def plugin_id(self) -> str:
        return "tree-visualizer"

    @property
    def display_name(self) -> str:
        return "Binary Search Tree View"

    def render(self, tree: BinaryTree, **options) -> str:
        if tree.root is None:
            return "<html><body>Empty Tree</body></html>"

        placed = list(_walk_inorder(tree))
        n_nodes = len(placed)
        max_depth = max(depth for _, depth in placed)

        width = options.get("width", max(WIDTH, (n_nodes + 1) * 60))
        height = options.get("height", max(HEIGHT, (max_depth + 2) * 90))
        dx = width / (n_nodes + 1)
        dy = height / (max_depth + 2)

        # Keyed by node identity, values may repeat
        coords = {
            id(node): {"x": (rank + 1) * dx, "y": (depth + 1) * dy}
            for rank, (node, depth) in enumerate(placed)
        }
        nodes = [{"label": str(node.value), **coords[id(node)]} for node, _ in placed]

        edges = []
        for node, _ in placed:
            for child in (node.left, node.right):
                if child is not None:
                    start, end = coords[id(node)], coords[id(child)]
                    edges.append({"x1": start["x"], "y1": start["y"], "x2": end["x"], "y2": end["y"]})

        scale = max(0.4, 1.0 - (n_nodes / 100))
        template = _environment().get_template("tree.html")
        return template.render(
            title=self.display_name,
            nodes=nodes,
            edges=edges,
            width=width,
            height=height,
            radius=20 * scale,
            font_size=12 * scale,
        )


def _sample_graph() -> Graph:
    graph = Graph()
    for v1, v2 in [(0, 1), (1, 2), (0, 3), (1, 4), (2, 5), (3, 4), (4, 5)]:
        graph.add_edge(v1, v2)
    return graph


def _sample_tree() -> BinaryTree:
    tree = BinaryTree()
    for value in (5, 3, 7, 1, 4, 6, 8):
        tree.insert(value)
    return tree


def main(output_dir: str = OUTPUT_DIR) -> List[str]:
    os.makedirs(output_dir, exist_ok=True)
    written = []

    for visualizer, structure, filename in (
        (GraphVisualizer(), _sample_graph(), "graph.html"),
        (TreeVisualizer(), _sample_tree(), "tree.html"),
    ):
        print(f"Rendering {visualizer.display_name}...")
        html = visualizer.render(structure)

        out_path = os.path.join(output_dir, filename)
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(html)

        LOGGER.info("wrote %s", os.path.abspath(out_path))
        print(f"  Saved to {out_path}")
        written.append(out_path)

    return written


if __name__ == "__main__":
    main()
