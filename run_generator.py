#!/usr/bin/env python3
"""Entry point for generating a constrained synthetic directed graph.

Chains all stages into a single command:
config validation -> backbone -> edge sampling -> labels -> output.

Usage:
    python run_generator.py 100 10 50 false true graph.txt
    python run_generator.py 100 10 50 true false graph.txt --seed 42
    python run_generator.py 100 10 50 true false graph.txt --metadata graph.json
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from typing import Generator

from src.config import DEFAULT_MAX_RETRIES, GeneratorConfig
from src.graph import GraphGenerationError, generate_graph
from src.output import write_graph, write_metadata

log = logging.getLogger(__name__)

POSITIONALS = (
    "num_vertices",
    "min_graph_depth",
    "additional_edges",
    "has_cycles",
    "shuffle",
    "output_name",
)

USAGE_LINE = (
    "run_generator.py "
    + " ".join(f"$({name})" for name in POSITIONALS)
    + " [--seed N] [--max-retries N] [--metadata PATH] [--verbose]"
)
USAGE = f"Usage: {USAGE_LINE}"


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that logs stage start and elapsed time."""
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    log.info("Completed: %s in %.3fs", name, time.monotonic() - t0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic directed graph with a guaranteed "
        "minimum depth and optional cycles",
        usage=USAGE_LINE,
        allow_abbrev=False,
        exit_on_error=False,
    )
    # Collected loosely so a wrong count prints usage instead of an error
    parser.add_argument("params", nargs="*", help=" ".join(POSITIONALS))
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Master RNG seed (default: wall clock)",
    )
    parser.add_argument(
        "--max-retries",
        type=int,
        default=DEFAULT_MAX_RETRIES,
        help="Consecutive rejected edge proposals before giving up",
    )
    parser.add_argument(
        "--metadata",
        type=str,
        default=None,
        help="Also write a JSON metadata sidecar to this path",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    return parser


def config_from_params(
    params: list[str], seed: int | None, max_retries: int
) -> GeneratorConfig:
    """Build a validated config from the six positional strings.

    Raises:
        ValueError: If a count is not an integer or the combination is invalid.
    """
    counts = []
    for name, raw in zip(POSITIONALS[:3], params[:3]):
        try:
            counts.append(int(raw))
        except ValueError:
            raise ValueError(f"{name} must be an integer, got {raw!r}") from None

    num_vertices, min_depth, additional_edges = counts
    return GeneratorConfig(
        num_vertices=num_vertices,
        min_depth=min_depth,
        additional_edges=additional_edges,
        has_cycles=params[3] == "true",
        shuffle=params[4] == "true",
        seed=seed,
        max_retries=max_retries,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args, extras = parser.parse_known_args(argv)
    except argparse.ArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    # Unknown dash-prefixed tokens (e.g. an output name like "-g.txt") are
    # kept as positionals so the count check below still applies
    params = args.params + extras

    if len(params) != len(POSITIONALS):
        print(USAGE)
        return 0

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_params(params, args.seed, args.max_retries)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output_name = params[5]

    try:
        with stage_timer("Graph Generation"):
            graph = generate_graph(config)
    except GraphGenerationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    with stage_timer("Write Output"):
        write_graph(output_name, graph.store, graph.labels)
        if args.metadata:
            write_metadata(args.metadata, graph)

    return 0


if __name__ == "__main__":
    sys.exit(main())
