"""Application composition root.

This module wires configuration and the interval filters into a Jinja2 environment.
"""

from __future__ import annotations

from dataclasses import dataclass

from jinja2 import BaseLoader, Environment

from src.config.settings import Settings
from src.templating.filters import register_filters


@dataclass(frozen=True)
class App:
    """Shared dependencies for template rendering."""

    settings: Settings
    env: Environment


def create_environment(settings: Settings, loader: BaseLoader | None = None) -> Environment:
    """Create a Jinja2 environment with the `interval` and `age` filters installed."""

    env = Environment(loader=loader, autoescape=True)
    return register_filters(env, settings)


def create_app(settings: Settings, loader: BaseLoader | None = None) -> App:
    """Create the application container."""

    return App(settings=settings, env=create_environment(settings, loader))
