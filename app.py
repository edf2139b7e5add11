"""
Pathtrace - Flask JSON API for a graph algorithm viewer.

Endpoints:
- /api/graph/random: Generate a connected random graph
- /api/dijkstra: Run Dijkstra and return the full step trace
- /api/grid: Cheapest right/down route through a cost grid

The API only hands out plain data. Layout, colors and animation belong to
the client.
"""

import logging

from flask import Flask, jsonify, request

from pathtrace.algorithms import compute_shortest_path, dijkstra, step_highlights
from pathtrace.config import (
    DEFAULT_EDGE_DENSITY,
    DEFAULT_MAX_VALUE,
    DEFAULT_MIN_VALUE,
    DEFAULT_NODE_COUNT,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
    MAX_API_NODE_COUNT,
    PORT,
)
from pathtrace.graph import Graph, create_random_graph

logger = logging.getLogger(__name__)

app = Flask(__name__)


# ====================
# Error Handling
# ====================

class BadRequest(ValueError):
    """Request payload is missing or malformed."""


@app.errorhandler(ValueError)
def handle_value_error(error: ValueError):
    logger.info(f"Rejected request to {request.path}: {error}")
    return jsonify({"error": str(error)}), 400


def _json_body() -> dict:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise BadRequest("Request body must be a JSON object")
    return body


def _graph_from_body(body: dict) -> Graph:
    payload = body.get("graph")
    if not isinstance(payload, dict):
        raise BadRequest("Missing 'graph' object")
    try:
        return Graph.from_dict(payload)
    except (KeyError, TypeError) as e:
        raise BadRequest(f"Malformed graph payload: {e}") from e


# ====================
# Routes
# ====================

@app.route("/api/graph/random")
def random_graph():
    """Generate a random connected graph from query parameters."""
    node_count = request.args.get("nodes", DEFAULT_NODE_COUNT, type=int)
    density = request.args.get("density", DEFAULT_EDGE_DENSITY, type=float)
    min_value = request.args.get("min", DEFAULT_MIN_VALUE, type=int)
    max_value = request.args.get("max", DEFAULT_MAX_VALUE, type=int)
    seed = request.args.get("seed", None, type=int)

    if node_count > MAX_API_NODE_COUNT:
        raise BadRequest(f"nodes must be at most {MAX_API_NODE_COUNT}, got {node_count}")

    graph = create_random_graph(node_count, density, min_value, max_value, seed=seed)
    return jsonify(graph.to_dict())


@app.route("/api/dijkstra", methods=["POST"])
def run_dijkstra():
    """Run Dijkstra over a posted graph; include per-step highlights."""
    body = _json_body()
    graph = _graph_from_body(body)
    source = body.get("source")
    target = body.get("target")
    if source is None:
        raise BadRequest("Missing 'source' node id")

    result = dijkstra(graph, str(source), str(target) if target is not None else None)

    payload = result.to_dict()
    last = len(result.steps) - 1
    payload["highlights"] = [
        step_highlights(step, result, is_final=(i == last))
        for i, step in enumerate(result.steps)
    ]
    return jsonify(payload)


@app.route("/api/grid", methods=["POST"])
def run_grid():
    """Cheapest monotone path through a posted grid."""
    body = _json_body()
    grid = body.get("grid")
    if not isinstance(grid, list):
        raise BadRequest("Missing 'grid' array")
    try:
        return jsonify(compute_shortest_path(grid).to_dict())
    except TypeError as e:
        raise BadRequest(f"Grid cells must be numbers: {e}") from e


@app.route("/api/health")
def health():
    return jsonify({"status": "ok"})


# ====================
# Main
# ====================

if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    print("\n=== Pathtrace API ===")
    print(f"Listening on http://localhost:{PORT}\n")
    app.run(host="0.0.0.0", port=PORT, debug=False)
