import random

from customs_queue.group import Group, create_group
from customs_queue.service_time import compute_processing_minutes


def test_domestic_group():
    g = Group(adult_count=2, child_count=0, is_domestic=True)
    assert compute_processing_minutes(g) == 2


def test_foreign_adults_take_twice_as_long():
    g = Group(adult_count=1, child_count=3, is_domestic=False)
    assert compute_processing_minutes(g) == 4


def test_odd_child_count_rounds_up():
    g = Group(adult_count=1, child_count=1, is_domestic=True)
    assert compute_processing_minutes(g) == 2


def test_processing_time_always_positive():
    rng = random.Random(99)
    for _ in range(1000):
        assert compute_processing_minutes(create_group(rng=rng)) >= 1
