"""
Global Configuration and Defaults.

Layout constants live here together with the loader for the optional
project configuration file (.jsontree/config.yaml). Environment variables
override file values.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

# --- Layout ---
# Horizontal distance between neighbouring nodes on one level
LEVEL_WIDTH = 300

# Vertical distance between levels
LEVEL_HEIGHT = 120

# --- Safety Limits ---
# Input larger than this is refused by the CLI before parsing
MAX_INPUT_BYTES = 10 * 1024 * 1024  # 10MB

CONFIG_DIR = ".jsontree"
CONFIG_FILE = "config.yaml"

THEMES = ("light", "dark")


class LayoutSettings(BaseModel):
    spacing: float = Field(default=LEVEL_WIDTH, gt=0)
    row_height: float = Field(default=LEVEL_HEIGHT, gt=0)


class Settings(BaseModel):
    """Effective settings for a run."""
    layout: LayoutSettings = Field(default_factory=LayoutSettings)
    theme: str = "light"

    @field_validator("theme")
    @classmethod
    def _known_theme(cls, value: str) -> str:
        if value not in THEMES:
            raise ValueError(f"theme must be one of {', '.join(THEMES)}")
        return value


DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0",
    "layout": {
        "spacing": LEVEL_WIDTH,
        "row_height": LEVEL_HEIGHT,
    },
    "theme": "light",
}


def default_config_path(root_dir: Optional[Path] = None) -> Path:
    return (root_dir or Path.cwd()) / CONFIG_DIR / CONFIG_FILE


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    layout: Dict[str, Any] = {}
    if os.getenv("JSONTREE_LEVEL_WIDTH"):
        layout["spacing"] = os.environ["JSONTREE_LEVEL_WIDTH"]
    if os.getenv("JSONTREE_LEVEL_HEIGHT"):
        layout["row_height"] = os.environ["JSONTREE_LEVEL_HEIGHT"]
    if layout:
        overrides["layout"] = layout
    if os.getenv("JSONTREE_THEME"):
        overrides["theme"] = os.environ["JSONTREE_THEME"]
    return overrides


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Ignoring unreadable config {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring config {path}: expected a mapping")
        return {}
    return data


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """
    Load settings from YAML and the environment.

    Missing files mean defaults. Invalid values are logged and replaced by
    defaults rather than aborting the run.
    """
    path = config_path or default_config_path()
    data = _read_yaml(path)
    env = _env_overrides()

    file_layout = data.get("layout")
    if not isinstance(file_layout, dict):
        file_layout = {}

    merged = {
        "layout": {**file_layout, **env.get("layout", {})},
        "theme": env.get("theme", data.get("theme", "light")),
    }

    try:
        return Settings.model_validate(merged)
    except ValidationError as e:
        logger.warning(f"Invalid settings in {path}, using defaults: {e}")
        return Settings()
