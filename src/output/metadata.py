"""JSON metadata sidecar recording how a graph file was produced.

Stores the config, resolved seed, hashes and counts so that any output
file can be regenerated exactly and traced to the generator version.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from src.config.experiment import GeneratorConfig
from src.config.hashing import config_hash, structure_hash
from src.config.serialization import config_from_dict, config_to_dict
from src.graph.types import GeneratedGraph
from src.reproducibility.git_hash import get_git_hash

log = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"

REQUIRED_FIELDS = {
    "schema_version",
    "timestamp",
    "config",
    "seed",
    "config_hash",
    "structure_hash",
    "git_hash",
    "num_vertices",
    "num_edges",
    "backbone_edges",
    "additional_edges",
    "rejected_attempts",
    "contains_cycle",
}


def build_metadata(graph: GeneratedGraph) -> dict[str, Any]:
    """Assemble the metadata dict for a generated graph."""
    return {
        "schema_version": SCHEMA_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "config": config_to_dict(graph.config),
        "seed": graph.seed,
        "config_hash": config_hash(graph.config),
        "structure_hash": structure_hash(graph.config),
        "git_hash": get_git_hash(),
        "num_vertices": graph.num_vertices,
        "num_edges": graph.num_edges,
        "backbone_edges": graph.backbone_edges,
        "additional_edges": graph.additional_edges,
        "rejected_attempts": graph.rejected_attempts,
        "contains_cycle": graph.contains_cycle,
    }


def validate_metadata(metadata: dict[str, Any]) -> list[str]:
    """Validate a metadata dict.

    Returns a list of error strings. An empty list means the metadata is valid.
    """
    errors: list[str] = []

    missing = REQUIRED_FIELDS - set(metadata.keys())
    if missing:
        errors.append(f"Missing required fields: {sorted(missing)}")

    if "config" in metadata and not isinstance(metadata["config"], dict):
        errors.append("config must be a dict")

    if "timestamp" in metadata:
        try:
            datetime.fromisoformat(metadata["timestamp"])
        except (TypeError, ValueError):
            errors.append("timestamp must be in ISO 8601 format")

    if {"num_edges", "backbone_edges", "additional_edges"} <= set(metadata):
        total = metadata["backbone_edges"] + metadata["additional_edges"]
        if metadata["num_edges"] != total:
            errors.append(
                f"num_edges ({metadata['num_edges']}) != backbone_edges + "
                f"additional_edges ({total})"
            )

    return errors


def write_metadata(path: str | Path, graph: GeneratedGraph) -> Path:
    """Write the metadata sidecar for ``graph`` to ``path``.

    Raises:
        ValueError: If the assembled metadata fails validation.
    """
    path = Path(path)
    metadata = build_metadata(graph)
    errors = validate_metadata(metadata)
    if errors:
        raise ValueError(f"Invalid metadata: {'; '.join(errors)}")

    with open(path, "w") as f:
        json.dump(metadata, f, indent=2)
    log.info("Metadata written to %s", path)
    return path


def load_metadata(path: str | Path) -> tuple[GeneratorConfig, dict[str, Any]]:
    """Load a metadata sidecar.

    Returns:
        (config, metadata) where config is rebuilt with the resolved seed, so
        generating from it reproduces the original graph.
    """
    with open(path) as f:
        metadata = json.load(f)

    errors = validate_metadata(metadata)
    if errors:
        raise ValueError(f"Invalid metadata in {path}: {'; '.join(errors)}")

    config_data = dict(metadata["config"])
    config_data["seed"] = metadata["seed"]
    return config_from_dict(config_data), metadata
