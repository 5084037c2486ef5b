"""Plain-text edge list output.

Format::

    <vertex_count>
    <edge_count>
    <from> <to>
    ...

Edges are enumerated over internal indices (ascending from, then ascending
to) and printed through the label mapping, so shuffling changes only the
printed numbers, never which edges appear or their order.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import numpy as np

from src.graph.store import GraphStore

log = logging.getLogger(__name__)


def format_graph(store: GraphStore, labels: np.ndarray) -> Iterator[str]:
    """Yield the output lines (without newlines) for a graph.

    Args:
        store: Graph store to serialize.
        labels: labels[i] is the printed label of internal vertex i.
    """
    yield str(store.num_vertices)
    yield str(store.num_edges)
    for src, dst in store.edges():
        yield f"{labels[src]} {labels[dst]}"


def write_graph(path: str | Path, store: GraphStore, labels: np.ndarray) -> Path:
    """Write a graph to ``path`` in edge list format.

    Args:
        path: Output file path.
        store: Graph store to serialize.
        labels: Output label mapping.

    Returns:
        Path of the written file.
    """
    path = Path(path)
    with open(path, "w") as f:
        for line in format_graph(store, labels):
            f.write(line + "\n")
    log.info(
        "Graph written to %s (%d vertices, %d edges)",
        path,
        store.num_vertices,
        store.num_edges,
    )
    return path


def read_graph(path: str | Path) -> tuple[int, list[tuple[int, int]]]:
    """Parse an edge list file written by write_graph.

    Args:
        path: File to read.

    Returns:
        (num_vertices, edges) with edges in file order.

    Raises:
        ValueError: If the header is missing, a line is malformed, a label is
            out of range, or the edge line count disagrees with the header.
    """
    with open(path) as f:
        lines = f.read().splitlines()

    if len(lines) < 2:
        raise ValueError(f"{path}: missing vertex/edge count header")

    num_vertices = int(lines[0])
    num_edges = int(lines[1])

    edges: list[tuple[int, int]] = []
    for lineno, line in enumerate(lines[2:], start=3):
        parts = line.split(" ")
        if len(parts) != 2:
            raise ValueError(f"{path}:{lineno}: expected '<from> <to>', got {line!r}")
        src, dst = int(parts[0]), int(parts[1])
        if not (0 <= src < num_vertices and 0 <= dst < num_vertices):
            raise ValueError(
                f"{path}:{lineno}: label out of range [0, {num_vertices})"
            )
        edges.append((src, dst))

    if len(edges) != num_edges:
        raise ValueError(
            f"{path}: header declares {num_edges} edges, found {len(edges)}"
        )
    return num_vertices, edges
