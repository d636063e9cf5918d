"""
Core type definitions for structview.

Nodes and edges are immutable pydantic models. A GraphSnapshot pairs a node
set with an edge set; every transformation in the core returns a new
snapshot rather than mutating its input.
"""

from collections import Counter
from enum import StrEnum
from typing import Any, Dict, List, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import CONTAINMENT_EDGE_TYPE


class NodeKind(StrEnum):
    """Categories of nodes in a project structure graph."""
    DIRECTORY = "directory"
    FILE = "file"
    ROUTER = "router"
    UNKNOWN = "unknown"


class Node(BaseModel):
    """
    A diagram node.

    `label` is the full forward-slash path of the entry and is absent on
    synthetic router nodes. `text` is the short display string.
    """
    id: str
    kind: NodeKind = NodeKind.UNKNOWN
    label: str | None = None
    text: str = ""
    width: int = 0
    height: int = 0

    model_config = ConfigDict(frozen=True)

    @property
    def is_directory(self) -> bool:
        return self.kind == NodeKind.DIRECTORY


class Edge(BaseModel):
    """
    Directed relation between two nodes.

    Serialized with the renderer's `from` / `to` keys.
    """
    id: str
    source: str = Field(alias="from")
    target: str = Field(alias="to")
    type: str = ""
    text: str = ""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def is_containment(self) -> bool:
        return self.type == CONTAINMENT_EDGE_TYPE


class GraphSnapshot(BaseModel):
    """Immutable (nodes, edges) pair at a point in time."""
    nodes: Tuple[Node, ...] = ()
    edges: Tuple[Edge, ...] = ()

    model_config = ConfigDict(frozen=True)

    def node_ids(self) -> Set[str]:
        return {node.id for node in self.nodes}

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data payload for the layout/render collaborator."""
        return {
            "nodes": [node.model_dump(mode="json", exclude_none=True) for node in self.nodes],
            "edges": [edge.model_dump(mode="json", by_alias=True) for edge in self.edges],
        }

    def stats(self) -> Dict[str, Any]:
        nodes_by_kind = Counter(node.kind.value for node in self.nodes)
        edges_by_type = Counter(edge.type for edge in self.edges)
        return {
            "total_nodes": len(self.nodes),
            "total_edges": len(self.edges),
            "nodes_by_kind": dict(nodes_by_kind),
            "edges_by_type": dict(edges_by_type),
        }


class RawGraph(BaseModel):
    """
    Loosely-typed graph as delivered by the data-loading collaborator.

    Records are kept as-is; the Normalizer decides what to make of them.
    """
    nodes: List[Any] = Field(default_factory=list)
    edges: List[Any] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @field_validator("nodes", "edges", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value
