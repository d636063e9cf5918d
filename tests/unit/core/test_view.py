"""Unit tests for focus/selection transitions and prepared views."""

import dataclasses

import pytest

from structview.core.extract import extract_subtree
from structview.core.index import build_index
from structview.core.types import NodeKind
from structview.core.view import (
    GraphView,
    Selection,
    ViewMode,
    clear_selection,
    select_node,
    select_path,
    view_mode,
)
from structview.core.wrap import wrap_wide_layers


class TestSelection:
    def test_select_directory(self, project):
        selection = select_path(build_index(project), "src/components", is_dir=True)

        assert selection == Selection(focus_id="dir:/src/components", details_path=None)

    def test_select_file_sets_details_path(self, project):
        selection = select_path(build_index(project), "src\\a.ts", is_dir=False)

        assert selection.focus_id == "file:/src/a.ts"
        assert selection.details_path == "src\\a.ts"

    def test_unknown_path(self, project):
        assert select_path(build_index(project), "missing.ts", is_dir=False) is None

    def test_select_file_node_by_id(self, project):
        selection = select_node(project, "file:/src/components/Button.tsx")

        assert selection == Selection(
            focus_id="file:/src/components/Button.tsx",
            details_path="src/components/Button.tsx",
        )

    def test_select_directory_node_by_id(self, project):
        assert select_node(project, "dir:/docs") == Selection(focus_id="dir:/docs")

    def test_select_unknown_node_by_id(self, project):
        assert select_node(project, "file:/missing.ts") == Selection(focus_id="file:/missing.ts")

    def test_clear(self):
        assert clear_selection().is_empty


class TestViewMode:
    @pytest.mark.parametrize("focus_id,mode,title", [
        (None, ViewMode.FULL, "Full view"),
        ("dir:/src", ViewMode.FOLDER, "Folder subtree"),
        ("file:/src/a.ts", ViewMode.FILE, "Focused file view"),
    ])
    def test_modes(self, focus_id, mode, title):
        assert view_mode(focus_id) == mode
        assert mode.title == title


class TestGraphView:
    def test_from_raw(self, raw_project, project):
        graph_view = GraphView.from_raw(raw_project)

        assert graph_view.snapshot == project
        assert graph_view.index.resolve("src") == "dir:/src"

    def test_full_view(self, project):
        view = GraphView.from_snapshot(project).view()

        assert view.mode == ViewMode.FULL
        assert view.snapshot == wrap_wide_layers(project)

    def test_focused_view_is_extracted_then_wrapped(self, make_fan):
        snapshot = make_fan("dir:/src", 20)
        view = GraphView.from_snapshot(snapshot).view("file:/src/f3.ts")

        assert view.mode == ViewMode.FILE
        assert view.snapshot == wrap_wide_layers(extract_subtree(snapshot, "dir:/src"))
        assert sum(1 for n in view.snapshot.nodes if n.kind == NodeKind.ROUTER) == 3

    def test_custom_fan_out(self, make_fan):
        view = GraphView.from_snapshot(make_fan("dir:/src", 20), max_children=10).view()
        assert sum(1 for n in view.snapshot.nodes if n.kind == NodeKind.ROUTER) == 2

    def test_most_recent_view_is_memoized(self, project):
        graph_view = GraphView.from_snapshot(project)

        first = graph_view.view("dir:/src")
        assert graph_view.view("dir:/src") is first

        other = graph_view.view("dir:/docs")
        assert other is not first
        # Only the latest result is kept
        assert graph_view.view("dir:/src") is not first
        assert graph_view.view("dir:/src") == first

    def test_view_for_selection(self, project):
        graph_view = GraphView.from_snapshot(project)
        selection = select_path(graph_view.index, "docs/guide.md", is_dir=False)

        view = graph_view.view_for(selection)

        assert view.focus_id == "file:/docs/guide.md"
        assert {n.id for n in view.snapshot.nodes} == {"dir:/docs", "file:/docs/guide.md"}

    def test_graph_cannot_be_swapped_under_the_memo(self, project, make_fan):
        graph_view = GraphView.from_snapshot(project)
        graph_view.view()

        with pytest.raises(dataclasses.FrozenInstanceError):
            graph_view.snapshot = make_fan("dir:/src", 20)
