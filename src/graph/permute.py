"""Output label mapping that hides the internal topological index order."""

import numpy as np


def build_label_mapping(
    num_vertices: int, shuffle: bool, rng: np.random.Generator
) -> np.ndarray:
    """Map internal vertex indices to printed labels.

    The acyclic sampler relies on index order, so an unshuffled output leaks
    a topological ordering. Shuffling replaces labels with a uniformly random
    permutation; the graph store itself is never touched.

    Args:
        num_vertices: Number of vertices.
        shuffle: Return a random permutation instead of the identity.
        rng: numpy random Generator, independent of the edge sampling stream.

    Returns:
        int64 array where labels[i] is the printed label of internal vertex i.
    """
    if shuffle:
        return rng.permutation(num_vertices)
    return np.arange(num_vertices)
