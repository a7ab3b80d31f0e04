from __future__ import annotations

# Service time model.
#
# How long an agent spends with one group, in whole minutes:
#   processing_minutes = adult_count (x2 for foreign groups) + (1 + child_count) // 2
#
# This gives you:
# - one minute per adult, two for non-citizens
# - half a minute per child, rounded so that an odd count rounds up

from .group import Group


def compute_processing_minutes(group: Group) -> int:
    """Compute how long an agent needs to clear a single group.

    Args:
        group: the group at the head of the line.

    Returns:
        Positive integer number of minutes.
    """
    result = group.adult_count

    if not group.is_domestic:
        result *= 2

    result += (1 + group.child_count) // 2

    return result
