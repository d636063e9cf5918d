"""
Focus and selection state transitions.

The diagram is recomputed whenever the raw graph or the focus changes. This
module expresses those transitions as plain functions the caller invokes:
resolve a sidebar selection into a focus, clear it, and produce the
extracted and wrapped snapshot for the current focus.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Mapping, Optional, Tuple

from ..config import MAX_CHILDREN_PER_GROUP
from .extract import extract_subtree
from .index import GraphIndex, build_index
from .normalizer import kind_from_id, normalize_graph
from .types import GraphSnapshot, NodeKind, RawGraph
from .wrap import wrap_wide_layers

logger = logging.getLogger(__name__)


class ViewMode(StrEnum):
    """What the diagram is currently showing."""
    FULL = "full"
    FOLDER = "folder"
    FILE = "file"

    @property
    def title(self) -> str:
        return _VIEW_TITLES[self]


_VIEW_TITLES = {
    ViewMode.FULL: "Full view",
    ViewMode.FOLDER: "Folder subtree",
    ViewMode.FILE: "Focused file view",
}


@dataclass(frozen=True)
class Selection:
    """
    Current focus plus the path handed to the details panel.

    details_path is only set when a file was selected.
    """
    focus_id: Optional[str] = None
    details_path: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.focus_id is None and self.details_path is None


def select_path(index: GraphIndex, path: str, is_dir: bool) -> Optional[Selection]:
    """
    Translate a path chosen in the sidebar into a selection.

    Returns None when the path is not in the graph; the caller keeps its
    current selection in that case.
    """
    node_id = index.resolve(path)
    if node_id is None:
        logger.debug(f"Selected path {path!r} is not in the graph")
        return None
    return Selection(focus_id=node_id, details_path=None if is_dir else path)


def select_node(snapshot: GraphSnapshot, node_id: str) -> Selection:
    """
    Selection for a node chosen by id.

    A labelled file node hands its path to the details panel, the same as
    choosing that file in the sidebar. Unknown ids are still focused.
    """
    for node in snapshot.nodes:
        if node.id == node_id:
            if node.kind == NodeKind.FILE and node.label:
                return Selection(focus_id=node_id, details_path=node.label)
            break
    return Selection(focus_id=node_id)


def clear_selection() -> Selection:
    return Selection()


def view_mode(focus_id: Optional[str]) -> ViewMode:
    if not focus_id:
        return ViewMode.FULL
    if kind_from_id(focus_id) == NodeKind.DIRECTORY:
        return ViewMode.FOLDER
    return ViewMode.FILE


@dataclass(frozen=True)
class PreparedView:
    """Snapshot ready for the layout collaborator, and how it was derived."""
    mode: ViewMode
    focus_id: Optional[str]
    snapshot: GraphSnapshot

    @property
    def title(self) -> str:
        return self.mode.title


@dataclass(frozen=True)
class GraphView:
    """
    A canonical graph with its lookups, producing views on demand.

    Only the most recent view is memoized; a different focus or fan-out
    limit recomputes it. The graph is fixed for the lifetime of the view
    object; build a new one when the raw graph changes.
    """

    snapshot: GraphSnapshot
    index: GraphIndex
    max_children: int = MAX_CHILDREN_PER_GROUP
    _last: Optional[Tuple[Tuple[Optional[str], int], PreparedView]] = field(
        default=None, init=False, repr=False, compare=False
    )

    @classmethod
    def from_snapshot(cls, snapshot: GraphSnapshot, max_children: int = MAX_CHILDREN_PER_GROUP) -> GraphView:
        return cls(snapshot=snapshot, index=build_index(snapshot), max_children=max_children)

    @classmethod
    def from_raw(cls, raw: RawGraph | Mapping[str, Any], max_children: int = MAX_CHILDREN_PER_GROUP) -> GraphView:
        """Normalize a raw graph and build its lookups once."""
        return cls.from_snapshot(normalize_graph(raw), max_children=max_children)

    def view(self, focus_id: Optional[str] = None) -> PreparedView:
        """Extract the focused subtree and bound its fan-out."""
        key = (focus_id, self.max_children)
        if self._last is not None and self._last[0] == key:
            return self._last[1]

        subtree = extract_subtree(self.snapshot, focus_id, self.index)
        wrapped = wrap_wide_layers(subtree, max_children=self.max_children)
        prepared = PreparedView(mode=view_mode(focus_id), focus_id=focus_id, snapshot=wrapped)

        object.__setattr__(self, "_last", (key, prepared))
        return prepared

    def view_for(self, selection: Selection) -> PreparedView:
        return self.view(selection.focus_id)
