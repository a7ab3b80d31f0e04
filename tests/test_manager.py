import pytest

from customs_queue.group import Group
from customs_queue.manager import QueueManager


def _group(adults: int = 1) -> Group:
    return Group(adult_count=adults, child_count=0, is_domestic=True)


def test_assign_round_robin():
    m = QueueManager()
    for i in range(3):
        m.register_agent(i)

    order = [m.assign_group(_group())[0] for _ in range(7)]
    assert order == [0, 1, 2, 0, 1, 2, 0]


def test_assign_preserves_arrival_order_per_agent():
    m = QueueManager()
    m.register_agent(0)
    m.register_agent(1)

    groups = [_group(1 + i % 3) for i in range(6)]
    positions = [m.assign_group(g) for g in groups]
    assert positions == [(0, 1), (1, 1), (0, 2), (1, 2), (0, 3), (1, 3)]

    assert [m.next_group(0) for _ in range(3)] == groups[0::2]
    assert m.next_group(0) is None


def test_queue_lengths_differ_by_at_most_one():
    m = QueueManager()
    for i in range(10):
        m.register_agent(i)
    for _ in range(25):
        m.assign_group(_group())

    lengths = [a["queue_len"] for a in m.status()["agents"].values()]
    assert lengths == [3] * 5 + [2] * 5
    assert m.status()["waiting"] == 25


def test_assign_without_agents():
    with pytest.raises(ValueError):
        QueueManager().assign_group(_group())


def test_duplicate_agent_rejected():
    m = QueueManager()
    m.register_agent(0)
    with pytest.raises(ValueError):
        m.register_agent(0)


def test_next_group_unknown_agent():
    with pytest.raises(KeyError):
        QueueManager().next_group(5)
