"""Structural checks for generated graphs.

Verifies the guarantees the generator promises (cheapest first):
1. No self-loops
2. Edge count matches backbone + additional edges (catches duplicates)
3. Backbone path 0 -> 1 -> ... -> min_depth-1 is present
4. Acyclic mode: every edge points to a higher internal index
5. Cyclic mode: an additional edge joins two backbone vertices

has_cycle reports whether a cyclic-mode graph actually closed a directed
cycle, which the forced backbone edge does not promise on its own.
"""

import logging

import numpy as np
import scipy.sparse
from scipy.sparse.csgraph import connected_components

from src.config.experiment import GeneratorConfig
from src.graph.store import GraphStore

log = logging.getLogger(__name__)


def has_cycle(adj: scipy.sparse.csr_matrix) -> bool:
    """Check whether a directed graph contains any cycle.

    A directed graph is acyclic iff every strongly connected component is a
    single vertex and there are no self-loops.

    Args:
        adj: Sparse directed adjacency matrix (n x n).

    Returns:
        True if at least one directed cycle exists.
    """
    n = adj.shape[0]
    if n == 0:
        return False
    if adj.diagonal().any():
        return True
    n_components, _ = connected_components(
        adj, directed=True, connection="strong"
    )
    return n_components < n


def find_violations(store: GraphStore, config: GeneratorConfig) -> list[str]:
    """Validate a generated graph against its configuration.

    Args:
        store: Graph store after backbone and sampling.
        config: Configuration the graph was generated from.

    Returns:
        List of error strings (empty = valid graph).
    """
    errors: list[str] = []
    matrix = store.matrix
    d = config.min_depth

    # 1. No self-loops
    loops = int(np.count_nonzero(matrix.diagonal()))
    if loops:
        errors.append(f"Self-loops detected: {loops}")

    # 2. Edge count: counter, matrix and config must agree
    stored = int(np.count_nonzero(matrix))
    if store.num_edges != stored:
        errors.append(
            f"Edge counter {store.num_edges} != {stored} stored edges "
            f"(duplicate insertion)"
        )
    if stored != config.expected_edges:
        errors.append(
            f"Expected {config.expected_edges} edges, found {stored}"
        )

    # 3. Backbone path
    missing = [i for i in range(d - 1) if not matrix[i, i + 1]]
    if missing:
        errors.append(
            f"Backbone edges missing from vertices {missing[:10]}"
        )

    # 4. Acyclic mode: strictly upper triangular (row views, no n x n copy)
    if not config.has_cycles:
        backward = sum(
            int(np.count_nonzero(matrix[i, : i + 1]))
            for i in range(store.num_vertices)
        )
        if backward:
            errors.append(
                f"Acyclic graph has {backward} edges not pointing to a "
                f"higher index"
            )

    # 5. Cyclic mode: forced first edge lies inside the backbone region
    if config.has_cycles and config.additional_edges >= 1:
        region_edges = int(np.count_nonzero(matrix[:d, :d]))
        if region_edges <= config.backbone_edges:
            errors.append(
                f"No additional edge inside backbone region [0, {d})"
            )

    log.debug("Validation found %d violations", len(errors))
    return errors
