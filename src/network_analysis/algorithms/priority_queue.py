"""Indexed minimum priority queue.

Binary heap over integer ids in ``[0, capacity)`` with a position-inverse
array, so that an id's heap slot can be found in O(1) and its key lowered
in O(log n). Shared by the shortest-path and spanning-forest computations.
"""

from __future__ import annotations


class IndexMinPQ:
    """
    Min-priority queue keyed by integer ids.

    Layout (1-based heap):
        _pq[k]: id stored in heap slot k
        _qp[i]: heap slot of id i, or -1 if i is not in the queue
        _keys[i]: priority of id i

    Invariant: ``_qp[_pq[k]] == k`` for every occupied slot k.

    Usage:
        pq = IndexMinPQ(4)
        pq.insert(2, 0.5)
        pq.insert(3, 0.1)
        pq.decrease_key(2, 0.05)
        pq.extract_min()  # -> 2
    """

    def __init__(self, capacity: int):
        """
        Initialize an empty queue.

        Args:
            capacity: Ids accepted by the queue are 0 .. capacity-1

        Raises:
            ValueError: If capacity is negative
        """
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._n = 0
        self._pq: list[int] = [-1] * (capacity + 1)
        self._qp: list[int] = [-1] * capacity
        self._keys: list[float] = [0.0] * capacity

    def __len__(self) -> int:
        return self._n

    def __contains__(self, i: int) -> bool:
        return self.contains(i)

    @property
    def capacity(self) -> int:
        """Maximum number of ids the queue can hold."""
        return self._capacity

    def is_empty(self) -> bool:
        """Check if the queue holds no ids."""
        return self._n == 0

    def contains(self, i: int) -> bool:
        """Check if id ``i`` is in the queue. O(1)."""
        self._validate(i)
        return self._qp[i] != -1

    def key_of(self, i: int) -> float:
        """
        Return the key currently associated with id ``i``.

        Raises:
            ValueError: If ``i`` is not in the queue
        """
        if not self.contains(i):
            raise ValueError(f"id {i} is not in the priority queue")
        return self._keys[i]

    def insert(self, i: int, key: float) -> None:
        """
        Associate ``key`` with id ``i``. O(log n).

        Raises:
            ValueError: If ``i`` is already in the queue
        """
        if self.contains(i):
            raise ValueError(f"id {i} is already in the priority queue")
        self._n += 1
        self._qp[i] = self._n
        self._pq[self._n] = i
        self._keys[i] = key
        self._swim(self._n)

    def decrease_key(self, i: int, key: float) -> None:
        """
        Lower the key associated with id ``i``. O(log n).

        Raises:
            ValueError: If ``i`` is not in the queue or ``key`` exceeds
                its current key
        """
        if not self.contains(i):
            raise ValueError(f"id {i} is not in the priority queue")
        if key > self._keys[i]:
            raise ValueError(
                f"decrease_key would increase key of id {i}: {key} > {self._keys[i]}"
            )
        self._keys[i] = key
        self._swim(self._qp[i])

    def min_index(self) -> int:
        """
        Return the id with the smallest key without removing it.

        Raises:
            IndexError: If the queue is empty
        """
        if self._n == 0:
            raise IndexError("priority queue underflow")
        return self._pq[1]

    def extract_min(self) -> int:
        """
        Remove and return the id with the smallest key. O(log n).

        Raises:
            IndexError: If the queue is empty
        """
        if self._n == 0:
            raise IndexError("priority queue underflow")
        smallest = self._pq[1]
        self._exch(1, self._n)
        self._n -= 1
        self._sink(1)
        self._qp[smallest] = -1
        self._pq[self._n + 1] = -1
        return smallest

    # ── heap helpers ──────────────────────────────────────────────────

    def _validate(self, i: int) -> None:
        if not 0 <= i < self._capacity:
            raise IndexError(f"id {i} out of range [0, {self._capacity})")

    def _greater(self, a: int, b: int) -> bool:
        return self._keys[self._pq[a]] > self._keys[self._pq[b]]

    def _exch(self, a: int, b: int) -> None:
        pq = self._pq
        pq[a], pq[b] = pq[b], pq[a]
        self._qp[pq[a]] = a
        self._qp[pq[b]] = b

    def _swim(self, k: int) -> None:
        while k > 1 and self._greater(k // 2, k):
            self._exch(k, k // 2)
            k //= 2

    def _sink(self, k: int) -> None:
        n = self._n
        while 2 * k <= n:
            j = 2 * k
            if j < n and self._greater(j, j + 1):
                j += 1
            if not self._greater(k, j):
                break
            self._exch(k, j)
            k = j


__all__ = [
    "IndexMinPQ",
]
