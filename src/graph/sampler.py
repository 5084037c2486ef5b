"""Random placement of additional edges under cyclic or acyclic policies.

Two policies share one retry loop:

- Cycles allowed: the very first additional edge is forced into the
  backbone region [0, min_depth) so it can close a cycle with the backbone;
  every later edge is drawn from the whole vertex set.
- Acyclic: the source is always drawn below the destination, so every edge
  points from a lower to a higher internal index and no cycle can form.

A proposal is rejected when it is a self-loop, duplicates an existing edge,
or no valid draw exists. More than ``max_retries`` consecutive rejections
abort generation with GraphGenerationError.
"""

import logging

import numpy as np

from src.config.experiment import DEFAULT_MAX_RETRIES
from src.graph.store import GraphStore

log = logging.getLogger(__name__)


class GraphGenerationError(Exception):
    """Raised when graph generation cannot place the requested edges."""


def _draw(rng: np.random.Generator, high: int) -> int | None:
    """Uniform integer in [0, high), or None when the range is empty."""
    if high <= 0:
        return None
    return int(rng.integers(0, high))


def propose_forced_cycle_edge(
    rng: np.random.Generator, num_vertices: int, min_depth: int
) -> tuple[int, int] | None:
    """Propose the first edge of a cyclic graph, inside the backbone region.

    rand_to is clamped into [0, min_depth) and rand_from drawn from the same
    range, so the edge joins two backbone vertices.
    """
    rand_to = _draw(rng, num_vertices)
    if rand_to is None or min_depth < 1:
        return None
    rand_to %= min_depth
    rand_from = int(rng.integers(0, min_depth))
    return rand_from, rand_to


def propose_cyclic_edge(
    rng: np.random.Generator, num_vertices: int
) -> tuple[int, int] | None:
    """Propose an unrestricted edge; cycles may form anywhere."""
    rand_to = _draw(rng, num_vertices)
    if rand_to is None:
        return None
    rand_from = int(rng.integers(0, num_vertices))
    return rand_from, rand_to


def propose_acyclic_edge(
    rng: np.random.Generator, num_vertices: int
) -> tuple[int, int] | None:
    """Propose an edge with rand_from < rand_to.

    Returns None when rand_to is 0, since no lower source exists.
    """
    rand_to = _draw(rng, num_vertices)
    if not rand_to:
        return None
    rand_from = int(rng.integers(0, rand_to))
    return rand_from, rand_to


def sample_additional_edges(
    store: GraphStore,
    additional_edges: int,
    min_depth: int,
    has_cycles: bool,
    rng: np.random.Generator,
    max_retries: int = DEFAULT_MAX_RETRIES,
) -> int:
    """Add exactly ``additional_edges`` new edges to the store.

    Args:
        store: Graph store, usually already holding the backbone.
        additional_edges: Number of edges to place.
        min_depth: Backbone length in vertices (bounds the forced cycle edge).
        has_cycles: Use the cyclic policy instead of the acyclic one.
        rng: numpy random Generator for reproducibility.
        max_retries: Consecutive rejections tolerated before giving up.

    Returns:
        Total number of rejected proposals across the whole run.

    Raises:
        GraphGenerationError: If more than max_retries consecutive
            proposals are rejected.
    """
    n = store.num_vertices
    placed = 0
    consecutive_failures = 0
    total_rejected = 0

    while placed < additional_edges:
        if has_cycles:
            if placed == 0:
                candidate = propose_forced_cycle_edge(rng, n, min_depth)
            else:
                candidate = propose_cyclic_edge(rng, n)
        else:
            candidate = propose_acyclic_edge(rng, n)

        if candidate is not None:
            src, dst = candidate
            if src != dst and not store.has_edge(src, dst):
                store.add_edge(src, dst)
                placed += 1
                consecutive_failures = 0
                continue

        consecutive_failures += 1
        total_rejected += 1
        log.debug(
            "Rejected proposal %s (%d consecutive, %d/%d placed)",
            candidate,
            consecutive_failures,
            placed,
            additional_edges,
        )

        if consecutive_failures > max_retries:
            log.warning(
                "Edge sampling gave up after %d consecutive rejections "
                "(%d/%d edges placed)",
                consecutive_failures,
                placed,
                additional_edges,
            )
            raise GraphGenerationError(
                f"Too many iterations trying to generate an edge "
                f"({consecutive_failures} consecutive rejections, "
                f"{placed}/{additional_edges} edges placed). "
                f"Are you sure a graph with these parameters is possible?"
            )

    log.debug(
        "Placed %d additional edges with %d rejected proposals",
        placed,
        total_rejected,
    )
    return total_rejected
