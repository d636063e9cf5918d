"""
Tree Command - Show the sidebar file tree of a graph.

Prints every labelled node as a nested tree, the same entries the sidebar
offers for selection.
"""

import sys
from typing import Dict

import click
from rich.console import Console
from rich.tree import Tree

from ...config import DEFAULT_GRAPH_FILE, DIR_MARKER, MAX_CHILDREN_PER_GROUP
from ...core.index import tree_items
from ..utils import load_graph_view

console = Console()


@click.command()
@click.argument("graph_file", type=click.Path(dir_okay=False), default=DEFAULT_GRAPH_FILE)
def tree(graph_file: str):
    """
    Show the file tree contained in a graph.
    """
    graph_view = load_graph_view(graph_file, MAX_CHILDREN_PER_GROUP)
    if graph_view is None:
        sys.exit(1)

    items = tree_items(graph_view.snapshot)
    root = Tree(f"[bold]{graph_file}[/bold] ({len(items)} entries)")
    if not items:
        root.add("[dim]No labelled nodes[/dim]")
        console.print(root)
        return

    branches: Dict[str, Tree] = {}
    dirs = {item.path for item in items if item.is_dir}

    for item in sorted(items, key=lambda i: i.path):
        parent = root
        segments = [s for s in item.path.split("/") if s]
        # Intermediate folders missing from the graph still get a branch
        for depth in range(1, len(segments) + 1):
            prefix = "/".join(segments[:depth])
            if prefix not in branches:
                is_dir = depth < len(segments) or prefix in dirs
                name = segments[depth - 1]
                label = f"{DIR_MARKER}[cyan]{name}[/cyan]" if is_dir else name
                branches[prefix] = parent.add(label)
            parent = branches[prefix]

    console.print(root)
