from customs_queue.agent import Agent, dequeue, enqueue
from customs_queue.group import Group


def test_dequeue_empty_returns_none():
    assert dequeue(Agent(agent_id=0)) is None


def test_fifo_order():
    agent = Agent(agent_id=0)
    groups = [Group(adult_count=n, child_count=0, is_domestic=True) for n in (1, 2, 3)]
    for g in groups:
        enqueue(agent, g)
    assert agent.queue_len == 3

    assert [dequeue(agent) for _ in range(3)] == groups
    assert dequeue(agent) is None
    assert agent.queue_len == 0
