"""
Prepare Command - Produce renderer-ready diagram data.

Runs the full preparation pipeline on a raw graph: normalize, focus on a
directory or file, wrap wide layers, and emit the node/edge payload the
diagram renderer lays out.
"""

import sys

import click

from ...config import DEFAULT_GRAPH_FILE, MAX_CHILDREN_PER_GROUP
from ...core.normalizer import kind_from_id
from ...core.types import NodeKind
from ...core.view import clear_selection, select_node, select_path
from ...loader import view_to_json, write_view
from ..utils import echo_error, echo_info, echo_success, load_graph_view


@click.command()
@click.argument("graph_file", type=click.Path(dir_okay=False), default=DEFAULT_GRAPH_FILE)
@click.option("--focus", "focus_id", default=None, help="Node id to focus (e.g. dir:src)")
@click.option("--path", "focus_path", default=None, help="Repository-relative path to focus (e.g. src/app.ts)")
@click.option(
    "--max-children",
    type=click.IntRange(min=2),
    default=MAX_CHILDREN_PER_GROUP,
    show_default=True,
    help="Maximum direct children per node before routers are inserted",
)
@click.option("-o", "--output", default=None, help="Output JSON file (stdout if omitted)")
def prepare(graph_file: str, focus_id: str | None, focus_path: str | None, max_children: int, output: str | None):
    """
    Prepare a focused, layout-friendly graph.

    \b
    Examples:
      structview prepare graph.json
      structview prepare graph.json --path src/components
      structview prepare graph.json --focus file:src/app.ts -o view.json
    """
    if focus_id and focus_path:
        raise click.UsageError("Use either --focus or --path, not both.")

    graph_view = load_graph_view(graph_file, max_children)
    if graph_view is None:
        sys.exit(1)

    selection = select_node(graph_view.snapshot, focus_id) if focus_id else clear_selection()
    if focus_path:
        node_id = graph_view.index.resolve(focus_path)
        if node_id is None:
            echo_error(f"Path not found in graph: {focus_path}")
            sys.exit(1)
        selection = select_path(
            graph_view.index, focus_path, is_dir=kind_from_id(node_id) == NodeKind.DIRECTORY
        )

    view = graph_view.view_for(selection)

    if output:
        path = write_view(view, output, details_path=selection.details_path)
        echo_success(f"{view.title}: {len(view.snapshot.nodes)} nodes, {len(view.snapshot.edges)} edges")
        echo_info(f"Wrote: {path}")
    else:
        click.echo(view_to_json(view, details_path=selection.details_path))
