"""Generator configuration dataclass, frozen and slotted for immutability."""

from dataclasses import dataclass

# Consecutive rejected sampling attempts tolerated before giving up.
# Heuristic only: some feasible parameter sets can still exhaust it.
DEFAULT_MAX_RETRIES = 256

# Offset applied to the master seed for the label-shuffling stream.
SHUFFLE_SEED_OFFSET = 1000


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Parameters for a single constrained directed graph.

    All fields are frozen and typed. Cross-parameter validation runs
    in __post_init__ to reject invalid configurations before any graph
    is built.
    """

    num_vertices: int = 100
    min_depth: int = 10  # backbone covers vertices 0..min_depth-1
    additional_edges: int = 50  # randomly placed edges beyond the backbone
    has_cycles: bool = False
    shuffle: bool = False
    seed: int | None = None  # None = seed from wall clock
    max_retries: int = DEFAULT_MAX_RETRIES  # consecutive rejections allowed

    def __post_init__(self) -> None:
        """Cross-parameter validation."""
        if self.num_vertices < 0:
            raise ValueError(
                f"num_vertices ({self.num_vertices}) must be >= 0"
            )
        if self.min_depth < 0:
            raise ValueError(f"min_depth ({self.min_depth}) must be >= 0")
        if self.additional_edges < 0:
            raise ValueError(
                f"additional_edges ({self.additional_edges}) must be >= 0"
            )
        if self.min_depth > self.num_vertices:
            raise ValueError(
                f"min_graph_depth ({self.min_depth}) must be "
                f"<= num_vertices ({self.num_vertices})"
            )
        if self.has_cycles and self.additional_edges < 1:
            raise ValueError(
                "has_cycles must be false if additional_edges is less than 1"
            )
        if self.max_retries < 0:
            raise ValueError(
                f"max_retries ({self.max_retries}) must be >= 0"
            )

    @property
    def backbone_edges(self) -> int:
        """Number of edges the backbone contributes."""
        return max(self.min_depth - 1, 0)

    @property
    def expected_edges(self) -> int:
        """Total edge count of a successfully generated graph."""
        return self.backbone_edges + self.additional_edges
