"""Dense directed adjacency storage over a fixed vertex set."""

from collections.abc import Iterator

import numpy as np
import scipy.sparse


class GraphStore:
    """Fixed-size directed graph backed by an n x n boolean matrix.

    matrix[from, to] is True when the edge from -> to exists. The store
    does no validation: callers must keep indices in range, avoid
    self-loops and check has_edge before add_edge, otherwise the edge
    count overcounts.
    """

    def __init__(self, num_vertices: int) -> None:
        self.num_vertices = num_vertices
        self.num_edges = 0
        self.matrix = np.zeros((num_vertices, num_vertices), dtype=bool)

    def add_edge(self, src: int, dst: int) -> None:
        self.matrix[src, dst] = True
        self.num_edges += 1

    def has_edge(self, src: int, dst: int) -> bool:
        return bool(self.matrix[src, dst])

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield (from, to) pairs in ascending from, then ascending to."""
        # argwhere walks the matrix in row-major order
        for src, dst in np.argwhere(self.matrix):
            yield int(src), int(dst)

    def to_sparse(self) -> scipy.sparse.csr_matrix:
        """Sparse CSR copy of the adjacency, for csgraph routines.

        Built from the edge coordinates, so memory scales with the edge
        count rather than n^2.
        """
        rows, cols = np.nonzero(self.matrix)
        data = np.ones(rows.size, dtype=np.int8)
        return scipy.sparse.csr_matrix(
            (data, (rows, cols)),
            shape=(self.num_vertices, self.num_vertices),
        )

    def __repr__(self) -> str:
        return (
            f"GraphStore(num_vertices={self.num_vertices}, "
            f"num_edges={self.num_edges})"
        )
