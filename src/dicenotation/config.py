"""TOML config loading for dice.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

CONFIG_NAME = "dice.toml"


@dataclass
class DiagnosticsConfig:
    color: bool = True


@dataclass
class FormatConfig:
    highlight: bool = False
    style: str = "default"


@dataclass
class ViewConfig:
    indent: int = 2


@dataclass
class DiceConfig:
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)
    format: FormatConfig = field(default_factory=FormatConfig)
    view: ViewConfig = field(default_factory=ViewConfig)


def find_config(start_path: Path | None = None) -> Path:
    """Walk up directories to find dice.toml. Raises FileNotFoundError."""
    path = (start_path or Path.cwd()).resolve()
    if path.is_file():
        path = path.parent
    while True:
        candidate = path / CONFIG_NAME
        if candidate.exists():
            return candidate
        parent = path.parent
        if parent == path:
            raise FileNotFoundError(f"No {CONFIG_NAME} found in any parent directory")
        path = parent


def load_config(path: Path) -> DiceConfig:
    """Parse a dice.toml file into a DiceConfig."""
    with open(path, "rb") as f:
        data = tomllib.load(f)

    config = DiceConfig()

    if "diagnostics" in data:
        diag = data["diagnostics"]
        config.diagnostics = DiagnosticsConfig(
            color=diag.get("color", True),
        )

    if "format" in data:
        fmt = data["format"]
        config.format = FormatConfig(
            highlight=fmt.get("highlight", False),
            style=fmt.get("style", "default"),
        )

    if "view" in data:
        view = data["view"]
        config.view = ViewConfig(
            indent=view.get("indent", 2),
        )

    return config


def load_config_or_default(start_path: Path | None = None) -> DiceConfig:
    """Load the nearest dice.toml, or the defaults when there is none."""
    try:
        return load_config(find_config(start_path))
    except FileNotFoundError:
        return DiceConfig()
