"""
Tests for the Flask JSON API.
"""

import pytest

from app import app as flask_app


@pytest.fixture
def client():
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as client:
        yield client


@pytest.fixture
def chain_payload(chain_graph) -> dict:
    return {"graph": chain_graph.to_dict(), "source": "A", "target": "D"}


class TestRandomGraph:
    """Test /api/graph/random."""

    def test_generates_connected_graph(self, client):
        """Requested node count comes back with at least a spanning tree."""
        resp = client.get("/api/graph/random?nodes=6&density=0.5&seed=1")
        assert resp.status_code == 200
        data = resp.get_json()
        assert len(data["nodes"]) == 6
        assert len(data["edges"]) >= 5

    def test_seed_is_reproducible(self, client):
        """The same seed returns the same graph."""
        first = client.get("/api/graph/random?nodes=8&seed=3").get_json()
        second = client.get("/api/graph/random?nodes=8&seed=3").get_json()
        assert first == second

    def test_too_many_nodes(self, client):
        """Oversized requests are refused."""
        resp = client.get("/api/graph/random?nodes=5000")
        assert resp.status_code == 400
        assert "at most" in resp.get_json()["error"]

    def test_bad_density(self, client):
        """Density outside [0, 1] is a client error."""
        resp = client.get("/api/graph/random?nodes=5&density=2")
        assert resp.status_code == 400


class TestDijkstraEndpoint:
    """Test /api/dijkstra."""

    def test_returns_trace_and_path(self, client, chain_payload):
        """Distances, route and highlights are returned."""
        resp = client.post("/api/dijkstra", json=chain_payload)
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["distances"]["D"] == 4
        assert data["distances"]["E"] is None
        assert data["path"] == ["A", "B", "C", "D"]
        assert data["distance"] == 4
        assert len(data["highlights"]) == len(data["steps"])
        assert data["highlights"][-1]["edges"]["C-D"] == "path"

    def test_without_target(self, client, chain_payload):
        """Omitting the target runs to exhaustion."""
        del chain_payload["target"]
        data = client.post("/api/dijkstra", json=chain_payload).get_json()
        assert data["path"] is None
        assert data["order"] == ["A", "B", "C", "D"]

    def test_unknown_source(self, client, chain_payload):
        """A bad source id is reported by name."""
        chain_payload["source"] = "Z"
        resp = client.post("/api/dijkstra", json=chain_payload)
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Start node Z not found in the graph"

    def test_missing_source(self, client, chain_payload):
        """The source is required."""
        del chain_payload["source"]
        assert client.post("/api/dijkstra", json=chain_payload).status_code == 400

    def test_non_json_body(self, client):
        """A body that is not a JSON object is rejected."""
        resp = client.post("/api/dijkstra", data="nope", content_type="text/plain")
        assert resp.status_code == 400

    def test_malformed_graph(self, client):
        """Nodes without ids are rejected."""
        resp = client.post("/api/dijkstra", json={"graph": {"nodes": [{}]}, "source": "A"})
        assert resp.status_code == 400

    def test_non_numeric_weight(self, client, chain_payload):
        """String weights are a client error, not a crash."""
        chain_payload["graph"]["edges"][0]["weight"] = "5"
        resp = client.post("/api/dijkstra", json=chain_payload)
        assert resp.status_code == 400
        assert "invalid weight" in resp.get_json()["error"]


class TestGridEndpoint:
    """Test /api/grid."""

    def test_two_by_two(self, client):
        """Path cells come back as [row, col] pairs."""
        resp = client.post("/api/grid", json={"grid": [[1, 3], [2, 1]]})
        assert resp.status_code == 200
        assert resp.get_json() == {"path": [[0, 0], [1, 0], [1, 1]], "total_cost": 4}

    def test_empty_grid(self, client):
        """An empty grid is a client error."""
        resp = client.post("/api/grid", json={"grid": []})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Grid cannot be empty"

    def test_missing_grid(self, client):
        """The grid is required."""
        assert client.post("/api/grid", json={}).status_code == 400

    def test_nan_cost(self, client):
        """A NaN cell is a client error, not a crash."""
        resp = client.post(
            "/api/grid", data='{"grid": [[NaN], [1]]}', content_type="application/json"
        )
        assert resp.status_code == 400
        assert "finite" in resp.get_json()["error"]


class TestHealth:
    """Test /api/health."""

    def test_reports_ok(self, client):
        """The health check answers with a static status."""
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.get_json() == {"status": "ok"}
