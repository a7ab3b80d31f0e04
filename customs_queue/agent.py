from __future__ import annotations

# Customs agents and their lines.
#
# Every agent owns exactly one FIFO line. Groups are appended at the tail and
# served from the head; nothing is ever reordered or shared between agents.

from collections import deque
from dataclasses import dataclass, field

from .group import Group


@dataclass
class Agent:
    """In-memory state for one customs agent."""

    agent_id: int
    queue: deque[Group] = field(default_factory=deque)  # groups in FIFO order
    timecard: int = 0  # minutes worked so far

    @property
    def queue_len(self) -> int:
        return len(self.queue)


def enqueue(agent: Agent, group: Group) -> None:
    """Add a group to the tail of the agent's line."""
    agent.queue.append(group)


def dequeue(agent: Agent) -> Group | None:
    """Remove the next group from the agent's line.

    Returns None when the line is empty.
    """
    if not agent.queue:
        return None
    return agent.queue.popleft()
