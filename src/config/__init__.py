"""Generator configuration system with frozen, hashable, serializable dataclasses."""

from src.config.experiment import (
    DEFAULT_MAX_RETRIES,
    SHUFFLE_SEED_OFFSET,
    GeneratorConfig,
)
from src.config.defaults import ANCHOR_CONFIG
from src.config.hashing import config_hash, structure_hash
from src.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "GeneratorConfig",
    "DEFAULT_MAX_RETRIES",
    "SHUFFLE_SEED_OFFSET",
    "ANCHOR_CONFIG",
    "config_hash",
    "structure_hash",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
]
