"""CLI command: variantkit validate -- check a config file without resolving it."""

from __future__ import annotations

import sys

import click

from variantkit.cli._io import read_config
from variantkit.config.schema import TOP_LEVEL_KINDS
from variantkit.model.diagnostic import Severity
from variantkit.validation import validate as run_validate


@click.command()
@click.argument("kind", type=click.Choice(TOP_LEVEL_KINDS))
@click.argument("configfile", type=click.Path(exists=True))
def validate(kind: str, configfile: str) -> None:
    """Validate a JSON component configuration.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    data = read_config(configfile)
    diagnostics = run_validate(kind, data)

    if not diagnostics:
        click.echo(f"OK: {click.format_filename(configfile)} is a valid {kind} (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
