"""
Stats Command - Summarize a graph and the effect of wrapping.
"""

import sys

import click
from rich.console import Console
from rich.table import Table

from ...config import DEFAULT_GRAPH_FILE, MAX_CHILDREN_PER_GROUP
from ...core.index import find_dangling_edges
from ...core.wrap import max_fan_out
from ..utils import echo_warning, load_graph_view

console = Console()


@click.command()
@click.argument("graph_file", type=click.Path(dir_okay=False), default=DEFAULT_GRAPH_FILE)
@click.option("--focus", "focus_id", default=None, help="Node id to focus before wrapping")
@click.option(
    "--max-children",
    type=click.IntRange(min=2),
    default=MAX_CHILDREN_PER_GROUP,
    show_default=True,
    help="Maximum direct children per node before routers are inserted",
)
def stats(graph_file: str, focus_id: str | None, max_children: int):
    """
    Show node/edge counts and fan-out before and after wrapping.
    """
    graph_view = load_graph_view(graph_file, max_children)
    if graph_view is None:
        sys.exit(1)

    full = graph_view.snapshot
    view = graph_view.view(focus_id)
    prepared = view.snapshot
    before, after = full.stats(), prepared.stats()

    table = Table(title=f"{view.title} ({graph_file})")
    table.add_column("Metric", style="cyan")
    table.add_column("Full graph", justify="right")
    table.add_column("Prepared view", justify="right")

    table.add_row("Nodes", str(before["total_nodes"]), str(after["total_nodes"]))
    table.add_row("Edges", str(before["total_edges"]), str(after["total_edges"]))

    kinds = sorted(set(before["nodes_by_kind"]) | set(after["nodes_by_kind"]))
    for kind in kinds:
        table.add_row(
            f"  {kind}",
            str(before["nodes_by_kind"].get(kind, 0)),
            str(after["nodes_by_kind"].get(kind, 0)),
        )

    edge_types = sorted(set(before["edges_by_type"]) | set(after["edges_by_type"]))
    for edge_type in edge_types:
        table.add_row(
            f"  {edge_type or '(untyped)'} edges",
            str(before["edges_by_type"].get(edge_type, 0)),
            str(after["edges_by_type"].get(edge_type, 0)),
        )

    table.add_row("Max fan-out", str(max_fan_out(full)), str(max_fan_out(prepared)))
    console.print(table)

    dangling = find_dangling_edges(full)
    if dangling:
        echo_warning(f"{len(dangling)} edge(s) point at nodes missing from the graph")
