"""Configuration classes for adjgraph algorithms."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class EngineConfig:
    """Tunables for the combinatorial parts of the engine."""

    # Odd-node count above which route inspection logs a cost warning
    odd_node_warning_threshold: int = 10

    # Upper limit on pairings scored by route inspection; None means unlimited
    max_pairings: Optional[int] = None

    def __post_init__(self) -> None:
        if self.odd_node_warning_threshold < 0:
            raise ValueError("odd_node_warning_threshold must be non-negative")
        if self.max_pairings is not None and self.max_pairings < 1:
            raise ValueError("max_pairings must be a positive integer or None")

    def allows_pairings(self, count: int) -> bool:
        """Return True if scoring `count` pairings stays within the budget."""
        return self.max_pairings is None or count <= self.max_pairings


# Global configuration instance
ENGINE_CONFIG = EngineConfig()
