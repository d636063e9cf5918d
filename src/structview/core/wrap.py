"""
Wide-Layer Wrapper.

A layered layout puts every child of a parent into one column, so a folder
with hundreds of entries becomes one unreadable row. For any parent with too
many direct children this inserts small router nodes and routes the children
through them, so the layer wraps into additional sub-columns.

Only the path by which containment is expressed changes. Original nodes and
non-containment edges pass through untouched.
"""

import logging
from typing import List, Set, Tuple

from ..config import (
    CONTAINMENT_EDGE_TYPE,
    GROUP_NODE_PREFIX,
    MAX_CHILDREN_PER_GROUP,
    ROUTER_NODE_HEIGHT,
    ROUTER_NODE_WIDTH,
    ROUTER_TEXT,
)
from .index import containment_children
from .types import Edge, GraphSnapshot, Node, NodeKind

logger = logging.getLogger(__name__)


def router_id(parent_id: str, chunk: int, depth: int = 0) -> str:
    """
    Deterministic id for a router node.

    First-level routers are `group:<parent>:<chunk>`. Routers that group
    other routers carry their nesting depth as well.
    """
    if depth == 0:
        return f"{GROUP_NODE_PREFIX}{parent_id}:{chunk}"
    return f"{GROUP_NODE_PREFIX}{parent_id}:L{depth}:{chunk}"


def child_edge(parent_id: str, child_id: str) -> Edge:
    return Edge(
        id=f"{parent_id}->{child_id}",
        source=parent_id,
        target=child_id,
        type=CONTAINMENT_EDGE_TYPE,
    )


def router_node(node_id: str) -> Node:
    return Node(
        id=node_id,
        kind=NodeKind.ROUTER,
        text=ROUTER_TEXT,
        width=ROUTER_NODE_WIDTH,
        height=ROUTER_NODE_HEIGHT,
    )


def _chunks(items: List[str], size: int) -> List[List[str]]:
    return [items[i:i + size] for i in range(0, len(items), size)]


def _claim_router_id(parent_id: str, chunk: int, depth: int, taken: Set[str]) -> str:
    """
    Router id not yet used by any node or edge endpoint.

    A snapshot that was wrapped before already holds routers under the
    plain ids, so a clash gets a `#<n>` suffix with the smallest free n.
    """
    candidate = router_id(parent_id, chunk, depth)
    suffix = 1
    while candidate in taken:
        candidate = f"{router_id(parent_id, chunk, depth)}#{suffix}"
        suffix += 1
    taken.add(candidate)
    return candidate


def _route_children(
    parent_id: str,
    kids: List[str],
    max_children: int,
    taken: Set[str],
    depth: int = 0,
) -> Tuple[List[Node], List[Edge]]:
    """Edges (and any routers) expressing parent -> kids within the fan-out limit."""
    if len(kids) <= max_children:
        return [], [child_edge(parent_id, kid) for kid in kids]

    chunks = _chunks(kids, max_children)
    router_ids = [_claim_router_id(parent_id, i, depth, taken) for i in range(len(chunks))]
    routers = [router_node(gid) for gid in router_ids]

    if len(router_ids) <= max_children:
        edges: List[Edge] = []
        for gid, chunk in zip(router_ids, chunks):
            edges.append(child_edge(parent_id, gid))
            edges.extend(child_edge(gid, kid) for kid in chunk)
        return routers, edges

    # More routers than the limit allows: group the routers themselves
    upper_routers, upper_edges = _route_children(parent_id, router_ids, max_children, taken, depth + 1)
    chunk_edges = [
        child_edge(gid, kid)
        for gid, chunk in zip(router_ids, chunks)
        for kid in chunk
    ]
    return routers + upper_routers, upper_edges + chunk_edges


def wrap_wide_layers(
    snapshot: GraphSnapshot,
    max_children: int = MAX_CHILDREN_PER_GROUP,
) -> GraphSnapshot:
    """
    Bound the containment fan-out of every node.

    Args:
        snapshot: Nodes and edges to lay out (usually an extracted subtree).
        max_children: Maximum direct containment children per node.

    Returns:
        GraphSnapshot: The original nodes followed by any routers, and the
        non-containment edges followed by the rebuilt containment edges.

    Raises:
        ValueError: If max_children is less than 2; a fan-out of one
            cannot be bounded by adding routers.
    """
    if max_children < 2:
        raise ValueError(f"max_children must be at least 2, got {max_children}")

    new_nodes: List[Node] = list(snapshot.nodes)
    new_edges: List[Edge] = [edge for edge in snapshot.edges if not edge.is_containment]

    taken = snapshot.node_ids()
    for edge in snapshot.edges:
        taken.update((edge.source, edge.target))

    for parent_id, kids in containment_children(snapshot.edges).items():
        routers, edges = _route_children(parent_id, kids, max_children, taken)
        if routers:
            logger.debug(f"Routed {len(kids)} children of {parent_id} through {len(routers)} routers")
        new_nodes.extend(routers)
        new_edges.extend(edges)

    return GraphSnapshot(nodes=tuple(new_nodes), edges=tuple(new_edges))


def max_fan_out(snapshot: GraphSnapshot) -> int:
    """Largest number of direct containment children of any node."""
    children = containment_children(snapshot.edges)
    return max((len(kids) for kids in children.values()), default=0)
