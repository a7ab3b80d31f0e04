from __future__ import annotations

"""End-of-run statistics.

A `SimulationReport` is built once after every line has been drained and is
read-only afterwards. `format_report` produces the three lines printed by the
CLI; `format_agent_table` is the optional per-agent breakdown.
"""

from dataclasses import dataclass, field

from tabulate import tabulate


@dataclass(frozen=True)
class AgentShift:
    """What one agent did during the run."""

    agent_id: int
    groups_served: int
    worked_minutes: int
    payroll_dollars: int
    max_wait_minutes: int


@dataclass(frozen=True)
class SimulationReport:
    total_worked_minutes: int
    total_payroll_dollars: int
    average_wait_minutes: int | None  # None when no group was processed
    max_wait_minutes: int
    groups_processed: int = 0
    shifts: tuple[AgentShift, ...] = field(default_factory=tuple)


def format_report(report: SimulationReport) -> list[str]:
    """Return the three summary lines, without trailing newlines."""
    if report.average_wait_minutes is None:
        avg = f"no data ({report.groups_processed} groups processed)"
    else:
        avg = f"{report.average_wait_minutes} minutes"

    return [
        f"Total payroll costs for all agents: {report.total_payroll_dollars} dollars",
        f"Average wait time: {avg}",
        f"Max wait time: {report.max_wait_minutes} minutes",
    ]


def format_agent_table(report: SimulationReport) -> str:
    rows = [
        [s.agent_id, s.groups_served, s.worked_minutes, s.payroll_dollars, s.max_wait_minutes]
        for s in report.shifts
    ]
    return tabulate(
        rows,
        headers=["Agent", "Groups", "Worked (min)", "Payroll ($)", "Max wait (min)"],
        tablefmt="simple",
    )
