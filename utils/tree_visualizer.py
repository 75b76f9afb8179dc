# utils/tree_visualizer.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# Graphviz rendering of expression trees

import os
from typing import List, Optional, Tuple

from parser import ast_nodes as ast
from utils.logger import get_logger

# Conditional import of graphviz
try:
    from graphviz import Digraph

    GRAPHVIZ_AVAILABLE = True
except ImportError:
    GRAPHVIZ_AVAILABLE = False

logger = get_logger()

VISUALIZATION_OUTPUT_FOLDER = "tree_visualizations"

_NODE_COLORS = {
    "Var": "palegreen",
    "Not": "lightcoral",
    "And": "lightblue",
    "Or": "khaki",
    "Implies": "plum",
}


def _node_label(node: ast.Expr) -> str:
    if isinstance(node, ast.Var):
        return node.name
    return node.op.symbol


def build_tree_graph(root: ast.Expr, fmt: str = "png") -> "Digraph":
    """
    Builds a Graphviz Digraph with one graph node per tree node.
    Operands are drawn left to right in the order the connective takes them.

    Args:
        root: Root of the expression tree.
        fmt: Output format used when the graph is rendered.

    Returns:
        The populated Digraph.
    """
    dot = Digraph(comment=str(root), format=fmt)
    dot.attr(rankdir="TB", nodesep="0.4", ranksep="0.5")

    # Pre-order: each entry is a node and the id of its parent, if any
    stack: List[Tuple[ast.Expr, Optional[str]]] = [(root, None)]
    counter = 0

    while stack:
        node, parent_id = stack.pop()
        node_id = f"n{counter}"
        counter += 1

        dot.node(
            node_id,
            _node_label(node),
            shape="box" if isinstance(node, ast.Var) else "circle",
            style="filled",
            fillcolor=_NODE_COLORS.get(type(node).__name__, "white"),
        )
        if parent_id is not None:
            dot.edge(parent_id, node_id)

        stack.extend((child, node_id) for child in reversed(ast.operands(node)))

    return dot


def visualize_tree(root: ast.Expr, base_filename: str, fmt: str = "png") -> Optional[str]:
    """
    Renders an expression tree to an image in the 'tree_visualizations' folder.

    Args:
        root: Root of the expression tree.
        base_filename: The base name for the output file.
        fmt: The output format for the image (e.g., "png", "svg").

    Returns:
        Path of the rendered file, or None when Graphviz is unavailable.
    """
    if not GRAPHVIZ_AVAILABLE:
        logger.warning("Graphviz library not installed. Skipping tree visualization. "
                       "To enable, install graphviz: pip install graphviz")
        return None

    os.makedirs(VISUALIZATION_OUTPUT_FOLDER, exist_ok=True)
    output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)

    dot = build_tree_graph(root, fmt)
    try:
        rendered = dot.render(output_path, view=False, cleanup=True)
        logger.info(f"Tree visualization saved to {rendered}")
        return rendered
    except Exception as e:
        logger.error(f"Failed to render tree visualization: {e}. "
                     "Ensure the Graphviz executables are installed and on PATH.")
        return None
