"""CLI command: variantkit resolve -- resolve a config file into a render plan."""

from __future__ import annotations

import json
import sys

import click

from variantkit.cli._io import read_config
from variantkit.config.schema import TOP_LEVEL_KINDS
from variantkit.config.settings import EngineConfig
from variantkit.engine import Engine
from variantkit.errors import ConfigError
from variantkit.serialize import to_jsonable


@click.command()
@click.argument("kind", type=click.Choice(TOP_LEVEL_KINDS))
@click.argument("configfile", type=click.Path(exists=True))
@click.option("--lenient", is_flag=True, help="Drop unknown keys instead of failing.")
@click.option("--indent", default=2, type=int, show_default=True, help="JSON indentation.")
def resolve(kind: str, configfile: str, lenient: bool, indent: int) -> None:
    """Resolve a JSON component configuration and print the plan as JSON.

    Deprecated keys are reported on stderr; exits with code 1 on
    configuration errors.
    """
    data = read_config(configfile)
    engine = Engine(EngineConfig(strict_keys=not lenient))

    deprecations: list[str] = []
    try:
        plan = engine.resolve(kind, data, deprecations=deprecations)
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)

    for message in deprecations:
        click.echo(f"Warning: {message}", err=True)

    click.echo(json.dumps(to_jsonable(plan), indent=indent, ensure_ascii=False))
