from __future__ import annotations

from dataclasses import dataclass

from .payroll import BASE_HOURLY_WAGE, OVERTIME_HOURLY_WAGE, REGULAR_HOURS


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of one customs hall run."""

    num_agents: int = 10
    num_groups: int = 1000
    seed: int | None = None

    # Pay (dollars per hour)
    base_hourly_wage: int = BASE_HOURLY_WAGE
    overtime_hourly_wage: int = OVERTIME_HOURLY_WAGE
    regular_hours: int = REGULAR_HOURS

    def __post_init__(self) -> None:
        if self.num_agents <= 0:
            raise ValueError("num_agents must be > 0")
        if self.num_groups < 0:
            raise ValueError("num_groups must be >= 0")
