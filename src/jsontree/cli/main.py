"""
jsontree CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging

import click

from .commands import generate, initialize, path, search


@click.group()
@click.version_option(package_name="jsontree")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """jsontree: JSON Tree Visualizer.

    Turns a JSON document into a laid-out tree of nodes and edges and
    highlights nodes matching a JSONPath query.

    \b
    Quick Start:
      jsontree generate data.json
      jsontree search '$.user.address.city' data.json
      jsontree path city data.json
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register commands
main.add_command(generate.generate)
main.add_command(search.search)
main.add_command(path.path)
main.add_command(initialize.init)

if __name__ == "__main__":
    main()
