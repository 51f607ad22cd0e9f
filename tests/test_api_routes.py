"""End-to-end tests for the FastAPI application routes.

These tests use the FastAPI TestClient to hit every endpoint and
verify the contract without any real AWS calls.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from helpers.errors import ConfigurationError
from services.billing_collector import AwsBillingCollector
from services.registry import build_registry
from wrappers.cost_explorer import WrapperCostExplorer


@pytest.fixture
def collector(ce_client):
    return AwsBillingCollector(cost_explorer=WrapperCostExplorer(client=ce_client))


@pytest.fixture
def client(collector):
    """Create a TestClient with the registry wired to a mocked Cost Explorer."""
    registry = build_registry(collector, include_runtime=False)
    with patch("fastapi_app.routes._get_registry", return_value=registry):
        from fastapi_app.app import app
        yield TestClient(app)


class TestLandingPage:
    def test_root_links_to_metrics(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "<title>AWS Billing Exporter</title>" in resp.text
        assert "href='/metrics'" in resp.text

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"

    def test_favicon(self, client):
        resp = client.get("/favicon.ico")
        assert resp.status_code == 204


class TestMetricsEndpoint:
    def test_metrics_exposition(self, client, collector):
        resp = client.get("/metrics")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/plain")
        assert 'aws_billing_server_blended_cost{type="BlendedCost",unit="USD"} 12.34' in resp.text
        assert "aws_billing_up 1.0" in resp.text
        assert collector.total_scrapes == 1

    def test_metrics_on_aws_failure_still_200(self, client, ce_client):
        ce_client.get_cost_and_usage.side_effect = RuntimeError("throttled")
        resp = client.get("/metrics")
        assert resp.status_code == 200
        assert "aws_billing_up 0.0" in resp.text
        assert "aws_billing_server_" not in resp.text

    def test_health_does_not_scrape(self, client, collector):
        client.get("/health")
        client.get("/")
        assert collector.total_scrapes == 0


class TestStartup:
    def test_invalid_metric_filter_aborts_startup(self, monkeypatch):
        from fastapi_app import routes
        from fastapi_app.app import app

        monkeypatch.setattr(routes, "_registry", None)
        monkeypatch.setattr(routes, "AWS_BILLING_METRICS", "1,abc")

        with pytest.raises(ConfigurationError):
            with TestClient(app):
                pass

    def test_startup_builds_registry_once(self, monkeypatch, collector):
        from fastapi_app import routes
        from fastapi_app.app import app

        monkeypatch.setattr(routes, "_registry", None)
        with patch("services.billing_collector.AwsBillingCollector", return_value=collector):
            with TestClient(app) as test_client:
                first = routes._registry
                test_client.get("/metrics")
                assert routes._registry is first
        assert first is not None
