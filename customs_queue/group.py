from __future__ import annotations

"""Traveler groups and the random model that produces them.

Each group arriving at customs is described by three numbers:
- adults: at least 1, no more than 3 (uniform)
- children: usually 0, occasionally several
- domestic: citizens make up 80% of the groups

Pass a `random.Random` instance as `rng` to make arrivals deterministic.
"""

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Group:
    """One group of travelers, serviced together as a unit."""

    adult_count: int
    child_count: int
    is_domestic: bool

    def __post_init__(self) -> None:
        if self.adult_count < 1:
            raise ValueError("adult_count must be >= 1")
        if self.child_count < 0:
            raise ValueError("child_count must be >= 0")


def create_group(*, rng: random.Random | None = None) -> Group:
    """Create a group with random values.

    Args:
        rng: optional RNG (useful for deterministic tests).

    Returns:
        A new `Group`.

    Implementation detail:
        The child count is the sum of two draws from [0, 3] minus 2, clamped
        at 0. That gives 0 for 6 out of 16 outcomes and up to 4 children in
        the rare case.
    """
    r = rng or random

    adults = 1 + r.randrange(3)

    children = r.randrange(4) + r.randrange(4) - 2
    if children < 0:
        children = 0

    # one foreign group in five
    domestic = r.randrange(5) != 0

    return Group(adult_count=adults, child_count=children, is_domestic=domestic)


def create_groups(count: int, *, rng: random.Random | None = None) -> list[Group]:
    """Create `count` groups in arrival order."""
    if count < 0:
        raise ValueError("count must be >= 0")
    return [create_group(rng=rng) for _ in range(count)]
