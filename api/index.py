"""Vercel serverless entry point for the variantkit API."""
import sys
import os

# Add src to path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from variantkit.config.settings import EngineConfig
from variantkit.engine import Engine
from variantkit.web.app import create_app

# Serverless instances are short-lived; a small cache is enough.
app = create_app(engine=Engine(EngineConfig(cache_size=64)))
