"""FinanceFlow application factory."""

from __future__ import annotations

from importlib import import_module
from typing import Iterable

from flask import Flask

from .config import BaseConfig, DevConfig, TestConfig

_CONFIG_MAP = {
    "development": DevConfig,
    "testing": TestConfig,
    "default": BaseConfig,
}


def _resolve_config(name: str | None) -> type[BaseConfig]:
    """Return the config class for the provided environment name."""

    if not name:
        return BaseConfig
    return _CONFIG_MAP.get(name.lower(), BaseConfig)


def _blueprint_paths() -> Iterable[str]:
    yield "financeflow.blueprints.credit_cards"
    yield "financeflow.blueprints.emergency_fund"
    yield "financeflow.blueprints.budgets"
    yield "financeflow.blueprints.transactions"


def create_app(config_name: str | None = None, *, config: BaseConfig | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__, instance_relative_config=True)
    config_obj = config or _resolve_config(config_name)()
    app.config.from_object(config_obj)
    app.config["FINANCEFLOW_CONFIG"] = config_obj

    # Deferred so importing the package does not configure mappers.
    from . import cli
    from .blueprints.common import register_error_handlers
    from .extensions import init_db
    from .logging_config import setup_logging

    setup_logging(config_obj)
    _register_blueprints(app)
    register_error_handlers(app)
    init_db(app)
    cli.init_app(app)
    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register all blueprints declared in `_blueprint_paths`."""

    for dotted_path in _blueprint_paths():
        module = import_module(dotted_path)
        app.register_blueprint(getattr(module, "bp"))


__all__ = ["BaseConfig", "DevConfig", "TestConfig", "create_app"]
