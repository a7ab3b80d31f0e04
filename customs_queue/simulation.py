from __future__ import annotations

# Simulation driver.
#
# Two phases:
# 1) setup: register N agents and deal groups out round-robin
# 2) replay: drain each agent's line in turn, accumulating wait times,
#    worked minutes and payroll
#
# Everything is sequential. An agent's line is fully drained before the next
# agent is looked at.

import random
import sys

from .agent import Agent, dequeue
from .config import SimulationConfig
from .group import create_group
from .manager import QueueManager
from .payroll import compute_payroll_dollars
from .report import AgentShift, SimulationReport
from .service_time import compute_processing_minutes


def build_hall(*, num_agents: int, num_groups: int, rng: random.Random | None = None) -> QueueManager:
    """Create the agents and fill their lines with `num_groups` random groups."""
    if num_agents <= 0:
        raise ValueError("num_agents must be > 0")
    if num_groups < 0:
        raise ValueError("num_groups must be >= 0")

    manager = QueueManager()
    for i in range(num_agents):
        manager.register_agent(i)

    for _ in range(num_groups):
        manager.assign_group(create_group(rng=rng))

    return manager


def replay_agent(agent: Agent) -> tuple[list[int], int]:
    """Drain one agent's line.

    Returns:
        (waits, elapsed): the wait of every group in service order, and the
        minutes the agent worked in total.
    """
    waits: list[int] = []
    elapsed = 0

    group = dequeue(agent)
    while group is not None:
        # a group waits for everyone ahead of it in the same line
        waits.append(elapsed)
        elapsed += compute_processing_minutes(group)
        group = dequeue(agent)

    agent.timecard = elapsed
    return waits, elapsed


def simulate(
    config: SimulationConfig,
    *,
    rng: random.Random | None = None,
    verbose: bool = False,
) -> SimulationReport:
    """Run one customs hall simulation.

    Args:
        config: agent/group counts, seed and pay rates.
        rng: optional RNG. Takes precedence over `config.seed`.
        verbose: print progress to stderr.
    """
    if rng is None and config.seed is not None:
        rng = random.Random(config.seed)

    manager = build_hall(num_agents=config.num_agents, num_groups=config.num_groups, rng=rng)
    if verbose:
        _log("simulation", f"{config.num_agents} agents, {config.num_groups} groups, seed={config.seed}")

    total_worked = 0
    total_payroll = 0
    total_wait = 0
    groups_processed = 0
    max_wait = 0
    shifts: list[AgentShift] = []

    for agent in manager.agents:
        waits, elapsed = replay_agent(agent)
        pay = compute_payroll_dollars(
            elapsed,
            base_hourly_wage=config.base_hourly_wage,
            overtime_hourly_wage=config.overtime_hourly_wage,
            regular_hours=config.regular_hours,
        )
        agent_max = max(waits, default=0)

        total_worked += elapsed
        total_payroll += pay
        total_wait += sum(waits)
        groups_processed += len(waits)
        if agent_max > max_wait:
            max_wait = agent_max

        shifts.append(
            AgentShift(
                agent_id=agent.agent_id,
                groups_served=len(waits),
                worked_minutes=elapsed,
                payroll_dollars=pay,
                max_wait_minutes=agent_max,
            )
        )
        if verbose:
            _log(f"agent {agent.agent_id}", f"served {len(waits)} groups, worked {elapsed} min, paid ${pay}")

    if groups_processed:
        average_wait: int | None = total_wait // groups_processed
    else:
        average_wait = None
        if verbose:
            _log("simulation", "no groups processed, average wait undefined")

    return SimulationReport(
        total_worked_minutes=total_worked,
        total_payroll_dollars=total_payroll,
        average_wait_minutes=average_wait,
        max_wait_minutes=max_wait,
        groups_processed=groups_processed,
        shifts=tuple(shifts),
    )


def run_simulation(
    *,
    num_agents: int = 10,
    num_groups: int = 1000,
    seed: int | None = None,
    rng: random.Random | None = None,
    verbose: bool = False,
) -> SimulationReport:
    """Convenience wrapper around `simulate` using the default pay rates."""
    config = SimulationConfig(num_agents=num_agents, num_groups=num_groups, seed=seed)
    return simulate(config, rng=rng, verbose=verbose)


def _log(component: str, message: str) -> None:
    print(f"[{component}] {message}", file=sys.stderr)
