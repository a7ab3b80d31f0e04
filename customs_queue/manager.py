from __future__ import annotations

# The Queue Manager owns every agent in the customs hall.
#
# It is pure logic: groups are handed out round-robin in arrival order, and
# agents pull the next group from their own line until it is empty.

from typing import Any

from .agent import Agent, dequeue, enqueue
from .group import Group


class QueueManager:
    """Round-robin assignment of arriving groups to agent lines."""

    def __init__(self) -> None:
        self._agents: dict[int, Agent] = {}

        # Next agent (by registration order) to receive a group.
        self._rr_index: int = 0

    # -------------------- agent lifecycle --------------------

    def register_agent(self, agent_id: int) -> Agent:
        """Create an agent with an empty line."""
        if agent_id in self._agents:
            raise ValueError(f"duplicate agent_id {agent_id}")
        agent = Agent(agent_id=agent_id)
        self._agents[agent_id] = agent
        return agent

    @property
    def agents(self) -> list[Agent]:
        """Agents in registration order."""
        return list(self._agents.values())

    # -------------------- queue operations --------------------

    def status(self) -> dict[str, Any]:
        """Return current sizes of all lines."""
        return {
            "agents": {
                aid: {"queue_len": agent.queue_len, "timecard": agent.timecard}
                for aid, agent in self._agents.items()
            },
            "waiting": sum(agent.queue_len for agent in self._agents.values()),
        }

    def assign_group(self, group: Group) -> tuple[int, int]:
        """Append a group to the next agent's line.

        Policy: plain round-robin, so the i-th group assigned goes to the
        agent at index i mod N.

        Returns:
            (agent_id, position) where position is 1-based.
        """
        if not self._agents:
            raise ValueError("no_agents")

        agents = self.agents
        chosen = agents[self._rr_index % len(agents)]
        self._rr_index += 1

        enqueue(chosen, group)
        return chosen.agent_id, chosen.queue_len

    def next_group(self, agent_id: int) -> Group | None:
        """Pop the next group from a specific agent's line."""
        agent = self._agents.get(agent_id)
        if agent is None:
            raise KeyError("unknown_agent")
        return dequeue(agent)
