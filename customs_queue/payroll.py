from __future__ import annotations

# Payroll rule.
#
# Agents are paid per full hour on the clock (partial hours are dropped):
#   hours <= 8: hours * base wage
#   hours  > 8: 8 * base wage + (hours - 8) * overtime wage

BASE_HOURLY_WAGE = 20
OVERTIME_HOURLY_WAGE = 30
REGULAR_HOURS = 8


def compute_payroll_dollars(
    worked_minutes: int,
    *,
    base_hourly_wage: int = BASE_HOURLY_WAGE,
    overtime_hourly_wage: int = OVERTIME_HOURLY_WAGE,
    regular_hours: int = REGULAR_HOURS,
) -> int:
    """Compute what one agent is paid for a shift.

    Args:
        worked_minutes: minutes the agent was busy (>= 0).

    Returns:
        Non-negative integer number of dollars.
    """
    if worked_minutes < 0:
        raise ValueError("worked_minutes must be >= 0")

    hours = worked_minutes // 60
    if hours > regular_hours:
        return regular_hours * base_hourly_wage + (hours - regular_hours) * overtime_hourly_wage
    return hours * base_hourly_wage
