"""Reproducibility infrastructure: seed management and code provenance tracking."""

from src.reproducibility.seed import make_rngs, resolve_seed
from src.reproducibility.git_hash import get_git_hash

__all__ = [
    "make_rngs",
    "resolve_seed",
    "get_git_hash",
]
