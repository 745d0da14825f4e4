"""Pytest configuration for the ZeroHour backend."""
from datetime import datetime, timezone

import pytest

from zerohour.base.config import ZeroHourConfig
from zerohour.catalog.service import ScenarioCatalog
from zerohour.engine.state_engine import StateEngine

FIXED_NOW = datetime(2026, 3, 5, 14, 30, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return FIXED_NOW


@pytest.fixture
def config():
    # No static frontend in tests
    return ZeroHourConfig(static_dir="__no_static_dir__")


@pytest.fixture
def engine(config):
    return StateEngine(config.catalog, clock=fixed_clock)


@pytest.fixture
def catalog(config):
    return ScenarioCatalog(config.catalog, clock=fixed_clock)


@pytest.fixture
def app(config):
    from zerohour.server.api import create_app
    return create_app(config, clock=fixed_clock)


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(config):
    return {"Authorization": f"Bearer {config.security.admin_token}"}
