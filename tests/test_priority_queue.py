"""Tests for the PriorityQueue used by the shortest path and spanning tree algorithms."""

import math

import pytest

from graphkit import InvalidPriorityError, KeyNotFoundError, PriorityQueue, PriorityQueueError, QueueUnderflowError


@pytest.fixture
def pq() -> PriorityQueue:
    return PriorityQueue()


class TestPriorityQueueBasics:
    """Tests for size, membership and priority lookup."""

    def test_new_queue_is_empty(self, pq: PriorityQueue) -> None:
        assert pq.size() == 0
        assert len(pq) == 0
        assert pq.keys() == []

    def test_size_counts_added_keys(self, pq: PriorityQueue) -> None:
        pq.add("a", 1)
        pq.add("b", 2)
        assert pq.size() == 2
        assert len(pq) == 2

    def test_keys_returns_all_keys(self, pq: PriorityQueue) -> None:
        pq.add("a", 1)
        pq.add(1, 2)  # type: ignore[arg-type]
        pq.add("b", 3)
        assert sorted(pq.keys()) == ["1", "a", "b"]

    def test_has(self, pq: PriorityQueue) -> None:
        pq.add("a", 1)
        assert pq.has("a")
        assert not pq.has("b")
        assert "a" in pq
        assert "b" not in pq

    def test_priority(self, pq: PriorityQueue) -> None:
        pq.add("a", 1)
        pq.add("b", 2)
        assert pq.priority("a") == 1
        assert pq.priority("b") == 2

    def test_priority_of_missing_key_is_none(self, pq: PriorityQueue) -> None:
        assert pq.priority("a") is None


class TestPriorityQueueAdd:
    """Tests for add."""

    def test_add_returns_true_for_new_key(self, pq: PriorityQueue) -> None:
        assert pq.add("a", 1) is True

    def test_add_existing_key_returns_false_and_keeps_priority(self, pq: PriorityQueue) -> None:
        pq.add("a", 1)
        assert pq.add("a", 0) is False
        assert pq.priority("a") == 1
        assert pq.size() == 1

    def test_add_accepts_infinite_priority(self, pq: PriorityQueue) -> None:
        pq.add("a", math.inf)
        pq.add("b", 3)
        assert pq.min() == "b"


class TestPriorityQueueMin:
    """Tests for min and remove_min."""

    def test_min_on_empty_queue_raises(self, pq: PriorityQueue) -> None:
        with pytest.raises(QueueUnderflowError, match="Queue underflow"):
            pq.min()

    def test_min_returns_smallest_without_removing(self, pq: PriorityQueue) -> None:
        pq.add("b", 2)
        pq.add("a", 1)
        assert pq.min() == "a"
        assert pq.size() == 2

    def test_remove_min_on_empty_queue_raises(self, pq: PriorityQueue) -> None:
        with pytest.raises(QueueUnderflowError):
            pq.remove_min()

    def test_remove_min_returns_keys_in_priority_order(self, pq: PriorityQueue) -> None:
        for key, priority in [("c", 3), ("a", 1), ("e", 5), ("b", 2), ("d", 4)]:
            pq.add(key, priority)
        assert [pq.remove_min() for _ in range(5)] == ["a", "b", "c", "d", "e"]
        assert pq.size() == 0

    def test_remove_min_forgets_the_key(self, pq: PriorityQueue) -> None:
        pq.add("a", 1)
        pq.remove_min()
        assert not pq.has("a")
        assert pq.add("a", 1) is True

    def test_underflow_is_a_priority_queue_error(self, pq: PriorityQueue) -> None:
        with pytest.raises(PriorityQueueError):
            pq.remove_min()


class TestPriorityQueueDecrease:
    """Tests for decrease."""

    def test_decrease_lowers_priority(self, pq: PriorityQueue) -> None:
        pq.add("a", 1)
        pq.decrease("a", -1)
        assert pq.priority("a") == -1

    def test_decrease_to_same_priority_is_allowed(self, pq: PriorityQueue) -> None:
        pq.add("a", 1)
        pq.decrease("a", 1)
        assert pq.priority("a") == 1

    def test_decrease_moves_key_to_front(self, pq: PriorityQueue) -> None:
        pq.add("a", 1)
        pq.add("b", 2)
        pq.add("c", 3)
        pq.decrease("c", 0)
        assert pq.min() == "c"
        assert [pq.remove_min() for _ in range(3)] == ["c", "a", "b"]

    def test_decrease_from_infinity(self, pq: PriorityQueue) -> None:
        pq.add("a", math.inf)
        pq.add("b", math.inf)
        pq.decrease("b", 7)
        assert pq.remove_min() == "b"

    def test_decrease_missing_key_raises(self, pq: PriorityQueue) -> None:
        with pytest.raises(KeyNotFoundError, match="Key not found: a"):
            pq.decrease("a", 1)

    def test_decrease_to_greater_priority_raises(self, pq: PriorityQueue) -> None:
        pq.add("a", 1)
        with pytest.raises(InvalidPriorityError, match="Old: 1 New: 2") as exc_info:
            pq.decrease("a", 2)
        assert exc_info.value.key == "a"
        assert pq.priority("a") == 1

    def test_many_decreases_keep_heap_order(self, pq: PriorityQueue) -> None:
        keys = [f"n{i}" for i in range(20)]
        for i, key in enumerate(keys):
            pq.add(key, 100 + i)
        for i, key in enumerate(reversed(keys)):
            pq.decrease(key, i)
        removed = [pq.remove_min() for _ in range(len(keys))]
        assert removed == list(reversed(keys))
