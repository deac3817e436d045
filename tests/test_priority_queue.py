import pytest
from hypothesis import given, strategies as st

from treekit.priority_queue import PriorityQueue, SearchResult


def _make(pairs):
    queue = PriorityQueue()
    for value, priority in pairs:
        queue.insert(value, priority)
    return queue


PRAC = [(50, 3), (20, 1), (70, 5), (10, 0), (40, 2), (60, 4)]
DEMO = [(10, 10), (1, 5), (15, 15), (12, 12), (1, 7), (1, 1), (17, 17)]


def test_items_ascending_by_priority():
    queue = _make(PRAC)
    assert queue.items() == sorted(PRAC, key=lambda p: p[1])
    assert len(queue) == len(PRAC)


def test_items_descending():
    queue = _make(DEMO)
    assert queue.items_descending() == sorted(DEMO, key=lambda p: p[1], reverse=True)
    assert queue.items_descending() == list(reversed(queue.items()))


def test_search_found_counts_visits():
    queue = _make(PRAC)
    result = queue.search(60)
    assert result == SearchResult(True, 6, 4)


def test_search_missing_visits_every_node():
    queue = _make([(100, 4), (200, 2), (150, 5), (300, 1)])
    result = queue.search(999)
    assert result.found is False
    assert result.comparisons == len(queue)
    assert result.priority is None


def test_pop_min_removes_lowest():
    queue = _make([(100, 4), (200, 2), (150, 5), (300, 1)])
    assert queue.pop_min() == (300, 1)
    assert queue.items() == [(200, 2), (100, 4), (150, 5)]
    assert queue.search(150).found is True


def test_pop_min_when_root_is_min():
    queue = _make([(1, 1), (2, 2), (3, 3)])
    assert queue.pop_min() == (1, 1)
    assert queue.peek_min() == (2, 2)
    assert len(queue) == 2


def test_equal_priorities_latest_first():
    queue = _make([("a", 1), ("b", 1)])
    assert queue.pop_min() == ("b", 1)
    assert queue.pop_min() == ("a", 1)
    assert not queue


def test_empty_queue_raises():
    queue = PriorityQueue()
    assert len(queue) == 0
    with pytest.raises(IndexError):
        queue.pop_min()
    with pytest.raises(IndexError):
        queue.peek_min()


@given(st.lists(st.tuples(st.integers(), st.integers(-30, 30))))
def test_pop_order_is_nondecreasing(pairs):
    queue = _make(pairs)
    popped = [queue.pop_min() for _ in range(len(pairs))]
    priorities = [p for _, p in popped]
    assert priorities == sorted(p for _, p in pairs)
    assert sorted(popped) == sorted(pairs)
    assert not queue


@given(st.lists(st.tuples(st.integers(0, 10), st.integers(-10, 10)), min_size=1), st.integers(0, 10))
def test_search_agrees_with_membership(pairs, target):
    queue = _make(pairs)
    result = queue.search(target)
    assert result.found == any(v == target for v, _ in pairs)
    assert 1 <= result.comparisons <= len(pairs)
    if result.found:
        assert (target, result.priority) in pairs