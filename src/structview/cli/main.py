"""
structview CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import click

from .commands import prepare, stats, tree
from .utils import configure_logging


@click.group()
@click.version_option(package_name="structview")
@click.option("-v", "--verbose", is_flag=True, help="Log preparation details to stderr")
def main(verbose: bool):
    """structview: project structure diagrams that stay readable.

    Focuses a project graph on a folder or file and wraps wide folders
    into bounded columns before handing it to the diagram renderer.

    \b
    Quick Start:
      structview tree graph.json
      structview prepare graph.json --path src -o view.json
      structview stats graph.json --focus dir:src
    """
    configure_logging(verbose)


# Register commands
main.add_command(prepare.prepare)
main.add_command(tree.tree)
main.add_command(stats.stats)

if __name__ == "__main__":
    main()
