"""Constrained directed graph generation: backbone, sampling, labels."""

from src.graph.backbone import build_backbone
from src.graph.generator import generate_graph
from src.graph.permute import build_label_mapping
from src.graph.sampler import (
    GraphGenerationError,
    propose_acyclic_edge,
    propose_cyclic_edge,
    propose_forced_cycle_edge,
    sample_additional_edges,
)
from src.graph.store import GraphStore
from src.graph.types import GeneratedGraph
from src.graph.validation import find_violations, has_cycle

__all__ = [
    "GeneratedGraph",
    "GraphGenerationError",
    "GraphStore",
    "build_backbone",
    "build_label_mapping",
    "find_violations",
    "generate_graph",
    "has_cycle",
    "propose_acyclic_edge",
    "propose_cyclic_edge",
    "propose_forced_cycle_edge",
    "sample_additional_edges",
]
