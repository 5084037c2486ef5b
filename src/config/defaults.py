"""Anchor configuration: single source of truth for default generation parameters."""

from src.config.experiment import GeneratorConfig

# Anchor config used by tests and smoke runs. Instantiated with all-default
# values plus a fixed seed: n=100, min_depth=10, additional_edges=50,
# acyclic, unshuffled, max_retries=256, seed=42.
ANCHOR_CONFIG = GeneratorConfig(seed=42)
