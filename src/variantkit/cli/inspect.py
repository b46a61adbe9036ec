"""CLI command: variantkit inspect -- display style tables and layout presets."""

from __future__ import annotations

import click

from variantkit.registry.tables import ALL_SPECS, LAYOUT_PRESETS, MAX_WIDTH


@click.command()
@click.option("--component", "-c", default=None, help="Only show this component's table.")
def inspect(component: str | None) -> None:
    """Show dimensions, defaults and conditional rules of each style table.

    Also lists the page layout presets and max-width keys.
    """
    specs = [s for s in ALL_SPECS if component in (None, s.name)]
    if component and not specs and component != "page":
        raise click.BadParameter(f"unknown component {component!r}", param_hint="--component")

    for spec in specs:
        click.echo(f"{spec.name}:")
        for dim in spec.dimensions:
            values = ", ".join(sorted(dim.allowed_values))
            click.echo(f"  {dim.name}: {values}  (default={dim.default})")
        if spec.rules:
            click.echo(f"  rules: {', '.join(r.name for r in spec.rules)}")
        click.echo()

    if component in (None, "page"):
        click.echo("page presets:")
        for name, layout in LAYOUT_PRESETS.items():
            click.echo(f"  {name}")
            click.echo(f"    container: {layout.container_classes}")
            click.echo(f"    main:      {layout.main_classes}")
            if layout.footer_classes:
                click.echo(f"    footer:    {layout.footer_classes}")
        click.echo(f"  max_width: {', '.join(MAX_WIDTH.fragments)}")
