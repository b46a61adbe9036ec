from __future__ import annotations

from flask import Flask

from variantkit.engine import Engine


def create_app(engine: Engine | None = None, config: dict | None = None) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(config or {})

    # Store the engine on the app for access in routes
    app.extensions["engine"] = engine or Engine()

    from variantkit.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
