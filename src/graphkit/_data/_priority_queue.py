"""Min-priority queue with decrease-key, after Cormen et al., "Introduction to Algorithms"."""

from dataclasses import dataclass

from graphkit._errors import InvalidPriorityError, KeyNotFoundError, QueueUnderflowError


@dataclass(slots=True)
class _Entry:
    key: str
    priority: float


class PriorityQueue:
    """A binary min-heap over string keys with an index for O(1) key lookup.

    The smallest key is available in O(1) time; adding, removing the minimum
    and decreasing a priority take O(log n) time. Each key can be queued at
    most once.

    Example:
        >>> pq = PriorityQueue()
        >>> pq.add("a", 3)
        True
        >>> pq.add("b", 1)
        True
        >>> pq.decrease("a", 0)
        >>> pq.remove_min()
        'a'

    """

    __slots__ = ("_arr", "_key_indices")

    def __init__(self) -> None:
        self._arr: list[_Entry] = []
        self._key_indices: dict[str, int] = {}

    def size(self) -> int:
        """Return the number of queued keys."""
        return len(self._arr)

    def keys(self) -> list[str]:
        """Return all queued keys in heap order."""
        return [entry.key for entry in self._arr]

    def has(self, key: str) -> bool:
        """Return whether ``key`` is queued."""
        return key in self._key_indices

    def priority(self, key: str) -> float | None:
        """Return the priority of ``key``, or None if it is not queued."""
        index = self._key_indices.get(key)
        if index is None:
            return None
        return self._arr[index].priority

    def min(self) -> str:
        """Return the key with the smallest priority without removing it.

        Raises:
            QueueUnderflowError: If the queue is empty.

        """
        if not self._arr:
            msg = "Queue underflow"
            raise QueueUnderflowError(msg)
        return self._arr[0].key

    def add(self, key: str, priority: float) -> bool:
        """Insert ``key`` with ``priority``.

        Returns:
            False if the key is already queued (the queue is left unchanged),
            True otherwise.

        """
        key = str(key)
        if key in self._key_indices:
            return False
        index = len(self._arr)
        self._key_indices[key] = index
        self._arr.append(_Entry(key, priority))
        self._sift_up(index)
        return True

    def remove_min(self) -> str:
        """Remove and return the key with the smallest priority.

        Raises:
            QueueUnderflowError: If the queue is empty.

        """
        if not self._arr:
            msg = "Queue underflow"
            raise QueueUnderflowError(msg)
        self._swap(0, len(self._arr) - 1)
        entry = self._arr.pop()
        del self._key_indices[entry.key]
        self._sift_down(0)
        return entry.key

    def decrease(self, key: str, priority: float) -> None:
        """Lower the priority of a queued key.

        Raises:
            KeyNotFoundError: If ``key`` is not queued.
            InvalidPriorityError: If ``priority`` is greater than the current one.

        """
        index = self._key_indices.get(key)
        if index is None:
            raise KeyNotFoundError(key)
        entry = self._arr[index]
        if priority > entry.priority:
            raise InvalidPriorityError(key, entry.priority, priority)
        entry.priority = priority
        self._sift_up(index)

    def __len__(self) -> int:
        return len(self._arr)

    def __contains__(self, key: object) -> bool:
        return key in self._key_indices

    def _sift_down(self, index: int) -> None:
        arr = self._arr
        size = len(arr)
        while True:
            smallest = index
            left = 2 * index + 1
            right = left + 1
            if left < size and arr[left].priority < arr[smallest].priority:
                smallest = left
            if right < size and arr[right].priority < arr[smallest].priority:
                smallest = right
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def _sift_up(self, index: int) -> None:
        arr = self._arr
        priority = arr[index].priority
        while index > 0:
            parent = (index - 1) // 2
            if arr[parent].priority < priority:
                break
            self._swap(index, parent)
            index = parent

    def _swap(self, i: int, j: int) -> None:
        arr = self._arr
        arr[i], arr[j] = arr[j], arr[i]
        self._key_indices[arr[i].key] = i
        self._key_indices[arr[j].key] = j
