"""Configuration dataclasses for pattern simulation runs."""

from __future__ import annotations

from dataclasses import dataclass

from dig_patterns.config.constants import METRIC_PRECISION, PADDING, SIMULATION_SIZE

__all__ = ["SimulationConfig"]


@dataclass(frozen=True)
class SimulationConfig:
    """Window geometry and display precision for one evaluation batch."""

    simulation_size: int = SIMULATION_SIZE
    padding: int = PADDING
    precision: int = METRIC_PRECISION

    def __post_init__(self) -> None:
        if self.simulation_size < 1:
            raise ValueError("simulation_size must be >= 1")
        # A zero-width border would let the window edge truncate propagation
        # into the core.
        if self.padding < 1:
            raise ValueError("padding must be >= 1")
        if self.precision < 0:
            raise ValueError("precision must be >= 0")

    @property
    def window_size(self) -> int:
        """Side length of the padded window that is actually simulated."""
        return self.simulation_size + 2 * self.padding

    @property
    def total_cells(self) -> int:
        return self.simulation_size * self.simulation_size
