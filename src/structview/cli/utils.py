"""
CLI Utilities - Shared helper functions for command line operations.

Formatted printing, logging setup and graph loading shared by the
structview commands.
"""

import logging
from typing import Optional

import click

from ..core.view import GraphView
from ..loader import GraphLoadError, load_raw_graph


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"), err=True)


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    click.echo(click.style(f"⚠️  {message}", fg="yellow"), err=True)


def echo_info(message: str) -> None:
    click.echo(click.style(f"   {message}", dim=True), err=True)


def configure_logging(verbose: bool) -> None:
    """Send core diagnostics to stderr; INFO and up when verbose."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="[%X]",
    )


def load_graph_view(graph_file: str, max_children: int) -> Optional[GraphView]:
    """
    Load a raw graph file and prepare it for viewing.

    Args:
        graph_file (str): Path to the raw graph JSON.
        max_children (int): Fan-out limit for wrapped views.

    Returns:
        Optional[GraphView]: The prepared graph, or None if loading failed.
    """
    try:
        raw = load_raw_graph(graph_file)
    except GraphLoadError as e:
        echo_error(f"Failed to load graph: {e}")
        return None

    return GraphView.from_raw(raw, max_children=max_children)
