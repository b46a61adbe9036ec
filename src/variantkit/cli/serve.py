"""CLI command: variantkit serve -- run the JSON resolution API."""

from __future__ import annotations

import click


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--cache-size", default=256, type=int, help="Style cache size (0 disables)")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str, port: int, cache_size: int, debug: bool) -> None:
    """Start the variantkit web API."""
    from variantkit.config.settings import EngineConfig
    from variantkit.engine import Engine
    from variantkit.web.app import create_app

    app = create_app(engine=Engine(EngineConfig(cache_size=cache_size)))
    click.echo(f"Starting variantkit on {host}:{port}")
    app.run(host=host, port=port, debug=debug)
