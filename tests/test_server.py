"""Tests for the factorial HTTP service."""

import math
import os
import tempfile

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("BIG_FACTORIAL_LOG_DIR", tempfile.mkdtemp(prefix="big-factorial-logs-"))

from big_factorial.server import app, settings  # noqa: E402


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


class TestFactorialEndpoint:
    """Test cases for POST /factorial."""

    def test_optimized_by_default(self, client):
        response = client.post("/factorial", json={"n": 25})

        assert response.status_code == 200
        data = response.json()
        assert data["value"] == "15511210043330985984000000"
        assert data["strategy"] == "optimized"
        assert data["digits"] == 26
        assert data["multiplications"] == 11

    def test_linear_strategy(self, client):
        response = client.post("/factorial", json={"n": 10, "strategy": "linear"})

        assert response.status_code == 200
        data = response.json()
        assert data["value"] == "3628800"
        assert data["multiplications"] == 10

    def test_strategies_agree(self, client):
        linear = client.post("/factorial", json={"n": 321, "strategy": "linear"}).json()
        optimized = client.post("/factorial", json={"n": 321, "strategy": "optimized"}).json()

        assert linear["value"] == optimized["value"] == str(math.factorial(321))
        assert optimized["multiplications"] < linear["multiplications"]

    def test_zero(self, client):
        response = client.post("/factorial", json={"n": 0})

        assert response.status_code == 200
        assert response.json()["value"] == "1"
        assert response.json()["multiplications"] == 0

    def test_negative_n_is_validation_error(self, client):
        response = client.post("/factorial", json={"n": -1})
        assert response.status_code == 422

    def test_unknown_strategy_is_validation_error(self, client):
        response = client.post("/factorial", json={"n": 5, "strategy": "recursive"})
        assert response.status_code == 422

    def test_n_above_limit_is_rejected(self, client):
        response = client.post("/factorial", json={"n": settings.max_service_n + 1})

        assert response.status_code == 400
        assert str(settings.max_service_n) in response.json()["detail"]


class TestServiceEndpoints:
    """Test cases for /health, /metrics and /."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["service"] == "big_factorial"

    def test_metrics_count_requests(self, client):
        client.post("/factorial", json={"n": 6})
        response = client.get("/metrics")

        assert response.status_code == 200
        assert "factorial_requests_total" in response.text
        assert 'factorial_multiplications_total{strategy="optimized"}' in response.text

    def test_root_lists_strategies(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["strategies"] == ["linear", "optimized"]
