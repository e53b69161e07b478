from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from simulator.app import create_app
from simulator.config import SimulatorConfig


@pytest.fixture()
def app_config() -> SimulatorConfig:
    return SimulatorConfig()


@pytest.fixture()
def client(app_config: SimulatorConfig) -> FlaskClient:
    flask_app = create_app(app_config)
    with flask_app.test_client() as test_client:
        yield test_client
