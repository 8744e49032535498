"""Tests for environment-driven configuration and the app factory."""

from __future__ import annotations

import pytest

from financeflow import create_app
from financeflow.config import BaseConfig, DevConfig, TestConfig


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv("FINANCEFLOW_DATA_DIR", str(tmp_path))
    for name in (
        "FINANCEFLOW_SECRET_KEY",
        "FINANCEFLOW_DATABASE_URL",
        "FINANCEFLOW_DEV_MODE",
        "FINANCEFLOW_EMERGENCY_FUND_MONTHS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults(tmp_path):
    config = BaseConfig()

    assert config.DEV_MODE is True
    assert config.DATA_DIR == tmp_path.resolve()
    assert config.DATABASE_URL == f"sqlite:///{tmp_path.resolve() / 'financeflow.db'}"
    assert config.EMERGENCY_FUND_MONTHS == 6


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("FINANCEFLOW_DATABASE_URL", "sqlite:///elsewhere.db")
    monkeypatch.setenv("FINANCEFLOW_EMERGENCY_FUND_MONTHS", "3")
    monkeypatch.setenv("FINANCEFLOW_DEV_MODE", "yes")

    config = BaseConfig()
    assert config.DATABASE_URL == "sqlite:///elsewhere.db"
    assert config.EMERGENCY_FUND_MONTHS == 3
    assert config.DEV_MODE is True


def test_non_dev_mode_requires_secret(monkeypatch):
    monkeypatch.setenv("FINANCEFLOW_DEV_MODE", "false")
    with pytest.raises(ValueError, match="FINANCEFLOW_SECRET_KEY"):
        BaseConfig()

    monkeypatch.setenv("FINANCEFLOW_SECRET_KEY", "s3cret")
    assert BaseConfig().SECRET_KEY == "s3cret"


@pytest.mark.parametrize("value", ["six", "0", "-2"])
def test_invalid_fund_months(monkeypatch, value):
    monkeypatch.setenv("FINANCEFLOW_EMERGENCY_FUND_MONTHS", value)
    with pytest.raises(ValueError):
        BaseConfig()


def test_engine_options():
    config = BaseConfig()
    assert config.sqlalchemy_engine_options() == {"connect_args": {"check_same_thread": False}}

    config.DATABASE_URL = "postgresql://localhost/financeflow"
    assert config.sqlalchemy_engine_options() == {"pool_pre_ping": True}


def test_named_configs():
    assert DevConfig.DEBUG is True
    assert TestConfig().DATABASE_URL == "sqlite://"


def test_create_app_registers_blueprints():
    app = create_app("testing")

    assert app.config["TESTING"] is True
    assert {"credit_cards", "emergency_fund", "budgets", "transactions"} <= set(app.blueprints)
    assert "financeflow" in app.extensions


def test_unknown_config_name_falls_back_to_base():
    app = create_app("staging")
    assert app.config["TESTING"] is False
