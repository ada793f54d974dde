"""
HTTP tests for the gateway routes.

The app lifespan (Neo4j connection) is not started; the asset service and
Neo4j handler are swapped in through FastAPI dependency overrides.
"""

import logging

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

from asset_graph.gateway.app import app
from asset_graph.gateway.dependencies import get_asset_service, get_neo4j_handler
from asset_graph.gateway.routes import health, links


@pytest.fixture
def client(service):
    app.dependency_overrides[get_asset_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def _create(client, name="Laptop", price="12.47", date="31/01/2023 10:15"):
    return client.post(
        "/api/asset/create", params={"name": name, "price": price, "date": date}
    )


# ─── Assets ─────────────────────────────────────────────────


class TestAssetRoutes:

    def test_create_returns_201(self, client):
        response = _create(client)

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Laptop"
        assert body["price"] == "12.47"
        assert body["purchaseDate"] == "2023-01-31T10:15:00"
        assert body["id"]

    @pytest.mark.parametrize(
        "price", ["100", "10000000000000000", "0.0000001", "-2.5", "1234567.89"]
    )
    def test_price_renders_in_plain_notation(self, client, price):
        response = _create(client, price=price)

        assert response.status_code == 201
        assert response.json()["price"] == price

    def test_create_missing_field_is_403(self, client, fake_graph):
        response = _create(client, name="")

        assert response.status_code == 403
        assert response.json() == {
            "error": "MISSING_FIELD",
            "field": "name",
            "detail": "This parameter cannot be empty.",
        }
        assert fake_graph.executed == []

    def test_create_bad_price_is_403(self, client):
        response = _create(client, price="abc")

        assert response.status_code == 403
        assert response.json()["error"] == "BAD_FORMAT"

    def test_find_without_parameters_is_403(self, client):
        response = client.post("/api/asset/find")

        assert response.status_code == 403
        assert response.json()["error"] == "NO_SEARCH_CRITERIA"

    def test_find_rows(self, client):
        created = _create(client, name="Office chair").json()

        response = client.post("/api/asset/find", params={"name": "CHAIR"})

        assert response.status_code == 200
        assert response.json() == [[created]]

    def test_find_with_links(self, client):
        a = _create(client, name="a").json()
        b = _create(client, name="b").json()
        client.post(
            "/api/link/create",
            params={"idFrom": a["id"], "idTo": b["id"], "linkType": "OWNS"},
        )

        response = client.post(
            "/api/asset/find", params={"id": a["id"], "whichLinks": "both"}
        )

        assert response.status_code == 200
        assert response.json() == [[a, None, b]]

    def test_correlation_id_header(self, client):
        response = client.post("/api/asset/find", headers={"X-Correlation-ID": "abc123"})
        assert response.headers["X-Correlation-ID"] == "abc123"


# ─── Links ──────────────────────────────────────────────────


class TestLinkRoutes:

    def test_create_and_delete(self, client):
        a = _create(client, name="a").json()
        b = _create(client, name="b").json()
        params = {"idFrom": a["id"], "idTo": b["id"], "linkType": "owns"}

        created = client.post("/api/link/create", params=params)
        deleted = client.post("/api/link/delete", params=params)
        again = client.post("/api/link/delete", params=params)

        triple = [[a, b, {"from": a["id"], "to": b["id"], "type": "OWNS"}]]
        assert created.status_code == 201
        assert created.json() == triple
        assert deleted.status_code == 201
        assert deleted.json() == triple
        assert again.status_code == 200
        assert again.json() == {"detail": "There was no such link to delete."}

    def test_unknown_asset_is_200_noop(self, client):
        response = client.post(
            "/api/link/create",
            params={"idFrom": "x", "idTo": "y", "linkType": "OWNS"},
        )

        assert response.status_code == 200
        assert "not found" in response.json()["detail"]

    @pytest.mark.parametrize(
        "link_type, code",
        [
            ("", "MISSING_FIELD"),
            ("A" * 20, "TOO_LONG"),
            ("has_space and more", "ILLEGAL_CHARACTERS"),
        ],
    )
    def test_invalid_link_type_is_403(self, client, link_type, code):
        response = client.post(
            "/api/link/create",
            params={"idFrom": "x", "idTo": "y", "linkType": link_type},
        )

        assert response.status_code == 403
        assert response.json()["error"] == code
        assert response.json()["field"] == "linkType"


# ─── Health ─────────────────────────────────────────────────


class TestHealthRoute:

    @pytest.fixture
    def handler(self):
        handler = MagicMock()
        handler.database = "neo4j"
        handler.verify = AsyncMock(return_value=True)
        app.dependency_overrides[get_neo4j_handler] = lambda: handler
        yield handler
        app.dependency_overrides.clear()

    def test_healthy(self, handler):
        response = TestClient(app).get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": "neo4j"}

    def test_unhealthy(self, handler):
        handler.verify.return_value = False

        response = TestClient(app).get("/api/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"


# ─── Logging ────────────────────────────────────────────────


class TestRouteLogging:

    @pytest.mark.parametrize("module", [links, health])
    def test_route_loggers_follow_configured_level(self, module):
        assert module.logger.name.startswith("asset_graph.gateway.")
        assert module.logger.level == logging.NOTSET
        assert module.logger.getEffectiveLevel() == logging.getLogger().getEffectiveLevel()
