"""Deterministic backbone path guaranteeing the minimum graph depth."""

import logging

from src.graph.store import GraphStore

log = logging.getLogger(__name__)


def build_backbone(store: GraphStore, min_depth: int) -> int:
    """Chain vertices 0 -> 1 -> ... -> min_depth-1.

    Runs before any random sampling, so every generated graph contains this
    path regardless of seed. min_depth <= 1 adds nothing.

    Args:
        store: Empty graph store to write into.
        min_depth: Number of vertices on the backbone path.

    Returns:
        Number of backbone edges added (max(min_depth - 1, 0)).
    """
    for i in range(1, min_depth):
        store.add_edge(i - 1, i)

    added = max(min_depth - 1, 0)
    log.debug("Backbone built: %d edges over vertices 0..%d", added, min_depth - 1)
    return added
