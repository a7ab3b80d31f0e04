from __future__ import annotations

# Single-entrypoint runner.
#
#     python -m customs_queue.app
#
# With no arguments this runs 10 agents and 1000 groups and prints the three
# summary lines. The flags only exist for reproducible runs and debugging.

import argparse

from .config import SimulationConfig
from .report import format_agent_table, format_report
from .simulation import simulate

_DEFAULTS = SimulationConfig()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Customs hall queue simulation - main entrypoint")
    parser.add_argument("--num-agents", type=int, default=_DEFAULTS.num_agents)
    parser.add_argument("--num-groups", type=int, default=_DEFAULTS.num_groups)
    parser.add_argument("--seed", type=int, default=None, help="make the run deterministic")
    parser.add_argument("--per-agent", action="store_true", help="also print a per-agent table")
    parser.add_argument("-v", "--verbose", action="store_true", help="progress messages on stderr")
    args = parser.parse_args(argv)

    try:
        config = SimulationConfig(num_agents=args.num_agents, num_groups=args.num_groups, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    report = simulate(config, verbose=args.verbose)

    for line in format_report(report):
        print(line)

    if args.per_agent:
        print()
        print(format_agent_table(report))


if __name__ == "__main__":
    main()
