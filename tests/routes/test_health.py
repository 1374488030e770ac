"""
Tests for GET /health.
"""

import logging

from fastapi.testclient import TestClient

from pcbuilder.main import app

client = TestClient(app)


def test_health_returns_ok():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "pcbuilder-backend"}


def test_health_carries_cors_headers():
    response = client.get("/health")

    assert response.headers["access-control-allow-origin"] == "*"


def test_health_logger_has_no_handler_of_its_own():
    # Records go through the root handler configured in main.py only
    assert logging.getLogger("pcbuilder.routes.health").handlers == []
