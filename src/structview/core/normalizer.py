"""
Graph Model Normalizer.

Converts a raw graph (arbitrary node/edge records) into canonical Node and
Edge models. This is the only place the id-prefix convention is parsed;
everything downstream works on NodeKind.

Malformed input never raises here: absent fields fall back to empty strings
and records that are not mappings are skipped with a warning.
"""

import logging
from typing import Any, Mapping

from ..config import (
    CHAR_WIDTH,
    DIR_MARKER,
    DIR_NODE_HEIGHT,
    DIR_PREFIX,
    FILE_NODE_HEIGHT,
    FILE_PREFIX,
    GROUP_NODE_PREFIX,
    MAX_NODE_WIDTH,
    MIN_NODE_WIDTH,
)
from .types import Edge, GraphSnapshot, Node, NodeKind, RawGraph

logger = logging.getLogger(__name__)


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


def normalize_path(value: Any) -> str:
    """Stringify a path-like value and use forward slashes throughout."""
    return _as_str(value).replace("\\", "/")


def filename(path: Any) -> str:
    """Final path segment, or the whole string when that segment is empty."""
    text = normalize_path(path)
    return text.split("/")[-1] or text


def kind_from_id(node_id: str) -> NodeKind:
    """Classify a raw node id by its prefix."""
    if node_id.startswith(DIR_PREFIX):
        return NodeKind.DIRECTORY
    if node_id.startswith(FILE_PREFIX):
        return NodeKind.FILE
    if node_id.startswith(GROUP_NODE_PREFIX):
        return NodeKind.ROUTER
    return NodeKind.UNKNOWN


def display_text(node_id: str, label: str | None, kind: NodeKind) -> str:
    name = filename(label or node_id)
    if kind == NodeKind.DIRECTORY:
        return f"{DIR_MARKER}{name}"
    return name


def node_width(text: str) -> int:
    """Scale width with the text length, clamped to the node width range."""
    return min(MAX_NODE_WIDTH, max(MIN_NODE_WIDTH, len(text) * CHAR_WIDTH))


def node_height(kind: NodeKind) -> int:
    return DIR_NODE_HEIGHT if kind == NodeKind.DIRECTORY else FILE_NODE_HEIGHT


def normalize_node(raw: Mapping[str, Any]) -> Node:
    """Build a canonical Node from a raw node record."""
    node_id = _as_str(raw.get("id"))
    label = normalize_path(raw.get("label")) or None
    kind = kind_from_id(node_id)
    text = display_text(node_id, label, kind)
    return Node(
        id=node_id,
        kind=kind,
        label=label,
        text=text,
        width=node_width(text),
        height=node_height(kind),
    )


def normalize_edge(raw: Mapping[str, Any], position: int) -> Edge:
    """
    Build a canonical Edge from a raw edge record.

    The position in the input list disambiguates duplicate from/to pairs.
    """
    source = _as_str(raw.get("from"))
    target = _as_str(raw.get("to"))
    edge_type = _as_str(raw.get("type"))
    return Edge(
        id=f"{source}->{target}:{position}",
        source=source,
        target=target,
        type=edge_type,
        text=edge_type,
    )


def normalize_graph(raw: RawGraph | Mapping[str, Any]) -> GraphSnapshot:
    """
    Convert a raw graph into the canonical snapshot.

    Args:
        raw: A RawGraph, or any mapping with `nodes` / `edges` lists.

    Returns:
        GraphSnapshot: Canonical nodes and edges in input order.
    """
    if not isinstance(raw, RawGraph):
        raw = RawGraph.model_validate(raw)

    nodes = []
    for record in raw.nodes:
        if not isinstance(record, Mapping):
            logger.warning(f"Skipping malformed node record: {record!r}")
            continue
        nodes.append(normalize_node(record))

    # Edge ids use the raw position so they stay stable when records are skipped
    edges = []
    for position, record in enumerate(raw.edges):
        if not isinstance(record, Mapping):
            logger.warning(f"Skipping malformed edge record at {position}: {record!r}")
            continue
        edges.append(normalize_edge(record, position))

    logger.debug(f"Normalized {len(nodes)} nodes and {len(edges)} edges")
    return GraphSnapshot(nodes=tuple(nodes), edges=tuple(edges))
