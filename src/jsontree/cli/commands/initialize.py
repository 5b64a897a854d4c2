"""
Init Command - Write a project configuration file.

Creates .jsontree/config.yaml with the default layout settings so they can
be tuned per project.
"""

import copy
from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm

from ...config import CONFIG_DIR, DEFAULT_CONFIG, THEMES, default_config_path

console = Console()

POSITIVE = click.FloatRange(min=0, min_open=True)


def write_config(root_dir: Path, theme: str, spacing: float, row_height: float) -> Path:
    """Write the config file under root_dir and return its path."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    config["theme"] = theme
    config["layout"]["spacing"] = spacing
    config["layout"]["row_height"] = row_height

    config_file = default_config_path(root_dir)
    config_file.parent.mkdir(exist_ok=True)
    with open(config_file, "w") as f:
        yaml.dump(config, f, sort_keys=False, default_flow_style=False)
    return config_file


@click.command()
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
@click.option("--theme", type=click.Choice(THEMES), default="light", help="Colour theme for renderers")
@click.option("--spacing", type=POSITIVE, default=DEFAULT_CONFIG["layout"]["spacing"],
              help="Horizontal distance between nodes")
@click.option("--row-height", type=POSITIVE, default=DEFAULT_CONFIG["layout"]["row_height"],
              help="Vertical distance between levels")
def init(force: bool, theme: str, spacing: float, row_height: float):
    """
    Initialize jsontree settings in the current directory.
    """
    console.print(Panel.fit("🌳 [bold blue]jsontree Initialization[/bold blue]", border_style="blue"))

    root_dir = Path.cwd()
    config_file = default_config_path(root_dir)

    if config_file.exists() and not force:
        console.print(f"[yellow]Configuration already exists at {config_file}[/yellow]")
        if not Confirm.ask("Do you want to overwrite it?"):
            console.print("Aborted.")
            return

    written = write_config(root_dir, theme, spacing, row_height)

    console.print("\n✨ [bold green]Initialized successfully![/bold green]")
    console.print(f"   Config created at: [dim]{written}[/dim]")
    console.print(f"   Add [dim]{CONFIG_DIR}/[/dim] to version control to share layout settings.")
