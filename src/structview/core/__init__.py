"""Graph preparation core: normalize, index, extract, wrap."""

from .extract import extract_subtree, resolve_root, subtree_ids
from .index import GraphIndex, TreeItem, build_index, containment_children, find_dangling_edges, tree_items
from .normalizer import kind_from_id, normalize_graph
from .types import Edge, GraphSnapshot, Node, NodeKind, RawGraph
from .view import GraphView, PreparedView, Selection, ViewMode, clear_selection, select_node, select_path, view_mode
from .wrap import max_fan_out, wrap_wide_layers

__all__ = [
    "Edge",
    "GraphIndex",
    "GraphSnapshot",
    "GraphView",
    "Node",
    "NodeKind",
    "PreparedView",
    "RawGraph",
    "Selection",
    "TreeItem",
    "ViewMode",
    "build_index",
    "clear_selection",
    "containment_children",
    "extract_subtree",
    "find_dangling_edges",
    "kind_from_id",
    "max_fan_out",
    "normalize_graph",
    "resolve_root",
    "select_node",
    "select_path",
    "subtree_ids",
    "tree_items",
    "view_mode",
    "wrap_wide_layers",
]
