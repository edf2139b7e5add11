"""
Configuration constants for Pathtrace.

All tunable parameters live here. Values that differ between
environments are read from environment variables.
"""

import os

# =============================================================================
# Graph Generation
# =============================================================================

# Default number of nodes in a generated graph
DEFAULT_NODE_COUNT = 10

# Fraction of all unordered node pairs that should carry an edge.
# The spanning tree always wins over this cap.
DEFAULT_EDGE_DENSITY = 0.2

# Inclusive range for node display values
DEFAULT_MIN_VALUE = 0
DEFAULT_MAX_VALUE = 20

# Inclusive range for randomly drawn edge weights
EDGE_WEIGHT_MIN = 1
EDGE_WEIGHT_MAX = 10

# Prefix for generated node ids ("node-0", "node-1", ...)
NODE_ID_PREFIX = "node-"

# Seed for reproducible generation (unset = fresh randomness)
_seed = os.environ.get("PATHTRACE_SEED")
RANDOM_SEED = int(_seed) if _seed else None

# =============================================================================
# Algorithm
# =============================================================================

# Weight used by Graph.add_edge when none is given
DEFAULT_EDGE_WEIGHT = 1

# Sentinel distance for unreached nodes
INFINITY = float("inf")

# =============================================================================
# Web API
# =============================================================================

PORT = int(os.environ.get("PORT", 7860))

# Upper bound on generated graph size served over HTTP
MAX_API_NODE_COUNT = 200

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_generation_params(
    node_count: int,
    edge_density: float,
    min_value: int,
    max_value: int,
) -> None:
    """Raise ValueError if random graph parameters are out of range."""
    if node_count < 0:
        raise ValueError(f"node_count must be non-negative, got {node_count}")
    if not 0.0 <= edge_density <= 1.0:
        raise ValueError(f"edge_density must be within [0, 1], got {edge_density}")
    if min_value > max_value:
        raise ValueError(
            f"min_value ({min_value}) must not exceed max_value ({max_value})"
        )
