from __future__ import annotations

import pytest

from variantkit.config.settings import EngineConfig
from variantkit.engine import Engine
from variantkit.web.app import create_app


@pytest.fixture
def engine():
    return Engine(EngineConfig(cache_size=32))


@pytest.fixture
def app(engine):
    """Create a Flask app for testing."""
    application = create_app(engine=engine)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
