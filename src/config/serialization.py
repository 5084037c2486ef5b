"""JSON serialization and deserialization for generator configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from src.config.experiment import GeneratorConfig

_DACITE_CONFIG = DaciteConfig(check_types=True, strict=True)


def config_to_json(config: GeneratorConfig) -> str:
    """Serialize a GeneratorConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> GeneratorConfig:
    """Deserialize a JSON string to a GeneratorConfig.

    Uses dacite with strict=True to reject unknown keys and check_types=True
    so that e.g. a string vertex count is refused instead of coerced.
    Cross-field validation still runs through __post_init__.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: GeneratorConfig) -> dict[str, Any]:
    """Convert a GeneratorConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> GeneratorConfig:
    """Reconstruct a GeneratorConfig from a plain dictionary."""
    return from_dict(data_class=GeneratorConfig, data=d, config=_DACITE_CONFIG)
