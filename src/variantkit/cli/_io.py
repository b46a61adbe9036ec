"""Shared config-file reading for CLI commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click


def read_config(path: str) -> Any:
    """Read a JSON config file, exiting with code 1 on malformed input."""
    config_path = Path(path)
    try:
        return json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON in {config_path.name}: {exc}", err=True)
        sys.exit(1)
