"""
Subtree Extractor.

Derives the focused subgraph for a directory or file: the full containment
subtree of the directory, or of the file's parent directory.
"""

import logging
from collections import deque
from typing import Iterable, Optional, Set

from .index import GraphIndex, build_index, containment_children
from .normalizer import kind_from_id
from .types import Edge, GraphSnapshot, NodeKind

logger = logging.getLogger(__name__)


def resolve_root(focus_id: str, index: GraphIndex) -> Optional[str]:
    """
    Pick the traversal root for a focus id.

    Directories are their own root. Anything else is rooted at its recorded
    parent directory, or has no root at all (e.g. a root-level file).
    """
    if kind_from_id(focus_id) == NodeKind.DIRECTORY:
        return focus_id
    return index.parent_of(focus_id)


def subtree_ids(edges: Iterable[Edge], root: str) -> Set[str]:
    """
    Collect every id reachable from root over containment edges.

    Breadth-first; ids are marked visited before they are queued so a
    containment cycle cannot loop forever.
    """
    children = containment_children(edges)
    keep = {root}
    queue = deque([root])

    while queue:
        current = queue.popleft()
        for child in children.get(current, []):
            if child not in keep:
                keep.add(child)
                queue.append(child)

    return keep


def extract_subtree(
    snapshot: GraphSnapshot,
    focus_id: Optional[str],
    index: Optional[GraphIndex] = None,
) -> GraphSnapshot:
    """
    Compute the focused subgraph of a snapshot.

    Args:
        snapshot: The full canonical graph.
        focus_id: Selected node id, or None for the full view.
        index: Precomputed lookups for the snapshot. Built when omitted.

    Returns:
        GraphSnapshot: Nodes in the subtree and edges with both endpoints in
        it. The input snapshot itself when there is no focus or the focus
        has no resolvable root.
    """
    if not focus_id:
        return snapshot

    if index is None:
        index = build_index(snapshot)

    root = resolve_root(focus_id, index)
    if root is None:
        logger.debug(f"No parent directory for {focus_id}, keeping full graph")
        return snapshot

    keep = subtree_ids(snapshot.edges, root)

    nodes = tuple(node for node in snapshot.nodes if node.id in keep)

    # Ids reached through dangling containment edges have no node; drop them
    kept_ids = {node.id for node in nodes}
    missing = keep - kept_ids
    if missing:
        logger.warning(f"Subtree of {root} references {len(missing)} id(s) with no node")

    edges = tuple(
        edge for edge in snapshot.edges
        if edge.source in kept_ids and edge.target in kept_ids
    )

    return GraphSnapshot(nodes=nodes, edges=edges)
