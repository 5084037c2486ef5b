"""Graph file output and metadata sidecars."""

from src.output.metadata import (
    build_metadata,
    load_metadata,
    validate_metadata,
    write_metadata,
)
from src.output.writer import format_graph, read_graph, write_graph

__all__ = [
    "build_metadata",
    "format_graph",
    "load_metadata",
    "read_graph",
    "validate_metadata",
    "write_graph",
    "write_metadata",
]
