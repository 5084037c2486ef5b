"""Graph data structures for constrained generation and output."""

from dataclasses import dataclass

import numpy as np

from src.config.experiment import GeneratorConfig
from src.graph.store import GraphStore


@dataclass(frozen=True)
class GeneratedGraph:
    """Immutable container for a generated graph and its provenance.

    Holds the adjacency store alongside the output label mapping and the
    counters collected during generation. Uses frozen=True but omits
    slots=True since numpy arrays don't interact well with __slots__.
    """

    store: GraphStore
    labels: np.ndarray  # int array of length n, internal index -> printed label
    config: GeneratorConfig
    seed: int  # resolved master seed (edge stream; label stream is offset)
    backbone_edges: int
    additional_edges: int
    rejected_attempts: int  # proposals rejected by the sampler over the run
    contains_cycle: bool  # a directed cycle exists (always False when acyclic)

    @property
    def num_vertices(self) -> int:
        return self.store.num_vertices

    @property
    def num_edges(self) -> int:
        return self.store.num_edges
