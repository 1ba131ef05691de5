"""Tests for the factorial HTTP API."""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from factorial_calculator import FactorialCalculator, IFactorialCalculator
from factorial_calculator.server import app, container


@pytest.fixture
def client():
    with container.calculator.override(FactorialCalculator(max_n=30)):
        yield TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_post_factorial(client):
    response = client.post("/factorial", json={"n": 5})
    assert response.status_code == 200
    assert response.json() == {"n": 5, "result": 120, "digits": 3}


def test_post_factorial_of_zero(client):
    response = client.post("/factorial", json={"n": 0})
    assert response.status_code == 200
    assert response.json()["result"] == 1


def test_post_negative_fails_validation(client):
    response = client.post("/factorial", json={"n": -1})
    assert response.status_code == 422


def test_post_non_integer_fails_validation(client):
    response = client.post("/factorial", json={"n": "five"})
    assert response.status_code == 422


def test_get_factorial(client):
    response = client.get("/factorial/10")
    assert response.status_code == 200
    assert response.json() == {"n": 10, "result": 3628800, "digits": 7}


def test_get_negative_is_domain_error(client):
    response = client.get("/factorial/-1")
    assert response.status_code == 400
    assert "negative" in response.json()["detail"]


def test_above_limit_is_rejected(client):
    response = client.get("/factorial/31")
    assert response.status_code == 413
    assert "max_n=30" in response.json()["detail"]

    response = client.post("/factorial", json={"n": 31})
    assert response.status_code == 413


def test_at_limit_is_computed(client):
    response = client.get("/factorial/30")
    assert response.status_code == 200
    assert response.json()["result"] == 265252859812191058636308480000000


def test_unexpected_error_returns_500():
    broken = Mock(spec=IFactorialCalculator)
    broken.compute_factorial.side_effect = RuntimeError("boom")
    with container.calculator.override(broken):
        response = TestClient(app).get("/factorial/3")
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
    broken.compute_factorial.assert_called_once_with(3)


@pytest.fixture
def unbounded_client():
    with container.calculator.override(FactorialCalculator(max_n=None)):
        yield TestClient(app)


def test_unbounded_unprintable_result_is_rejected(unbounded_client):
    response = unbounded_client.get("/factorial/2000")
    assert response.status_code == 413

    response = unbounded_client.post("/factorial", json={"n": 2000})
    assert response.status_code == 413


def test_unbounded_printable_result_is_returned(unbounded_client):
    response = unbounded_client.get("/factorial/1200")
    assert response.status_code == 200
    assert response.json()["digits"] == 3176
