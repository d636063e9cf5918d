"""
Index Builder.

Lookup structures derived from a canonical snapshot:
- label -> id, used to turn a path chosen in the sidebar into a focus id
- file -> parent directory, used to focus a file's enclosing folder
- parent -> children over containment edges, built on demand because it
  depends on whichever edge set is being processed
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .normalizer import kind_from_id, normalize_path
from .types import Edge, GraphSnapshot, NodeKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeItem:
    """Sidebar entry: a normalized path and whether it is a directory."""
    path: str
    is_dir: bool


@dataclass
class GraphIndex:
    """Lookups consumed by the selection handler and the Subtree Extractor."""

    label_to_id: Dict[str, str] = field(default_factory=dict)
    parent_of_file: Dict[str, str] = field(default_factory=dict)

    def resolve(self, path: str) -> Optional[str]:
        """Resolve a path (either separator style) to a node id."""
        return self.label_to_id.get(normalize_path(path))

    def parent_of(self, node_id: str) -> Optional[str]:
        return self.parent_of_file.get(node_id)


def build_index(snapshot: GraphSnapshot) -> GraphIndex:
    """
    Build label and parent lookups for a snapshot.

    Duplicate labels resolve last-write-wins, as do files with more than
    one containment parent.
    """
    index = GraphIndex()

    for node in snapshot.nodes:
        if not node.label:
            continue
        previous = index.label_to_id.get(node.label)
        if previous is not None and previous != node.id:
            logger.debug(f"Label {node.label!r} remapped from {previous} to {node.id}")
        index.label_to_id[node.label] = node.id

    # Edges only carry ids, so endpoints are classified at the boundary here
    for edge in snapshot.edges:
        if not edge.is_containment:
            continue
        if kind_from_id(edge.target) == NodeKind.FILE and kind_from_id(edge.source) == NodeKind.DIRECTORY:
            index.parent_of_file[edge.target] = edge.source

    return index


def containment_children(edges: Iterable[Edge]) -> Dict[str, List[str]]:
    """
    Map each parent to its direct containment children.

    Parents appear in first-seen order and children keep edge order.
    """
    children: Dict[str, List[str]] = defaultdict(list)
    for edge in edges:
        if edge.is_containment:
            children[edge.source].append(edge.target)
    return dict(children)


def find_dangling_edges(snapshot: GraphSnapshot) -> List[Edge]:
    """Edges whose source or target has no node in the snapshot."""
    node_ids = snapshot.node_ids()
    dangling = [
        edge for edge in snapshot.edges
        if edge.source not in node_ids or edge.target not in node_ids
    ]
    if dangling:
        logger.warning(f"{len(dangling)} edge(s) reference nodes missing from the graph")
    return dangling


def tree_items(snapshot: GraphSnapshot) -> List[TreeItem]:
    """Sidebar entries for every labelled node, in input order."""
    return [
        TreeItem(path=node.label, is_dir=node.is_directory)
        for node in snapshot.nodes
        if node.label
    ]
