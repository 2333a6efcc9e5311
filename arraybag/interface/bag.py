from __future__ import annotations

import copy
import logging
import warnings
from collections.abc import Collection
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

ElementT = TypeVar("ElementT")

logger = logging.getLogger(__name__)


class Bag(Collection, Generic[ElementT]):
    """Class representing a growable multi-set (i.e. set where elements are allowed to repeat).

    The bag elements are stored in a contiguous backing list which holds `capacity` slots, of which
    the first `size()` are in use. When an insertion finds the bag full, the capacity is doubled.
    Lookup time is linear in terms of the size of the bag, as the elements are neither sorted nor
    hashed.

    Element order follows insertion order, modified by erasures which shift later elements left.
    Two bags compare equal only if they agree on capacity, size and the element at every position.

    Bags are not safe to share across threads without external synchronization.
    """

    def __init__(self, values: Iterable[ElementT] = (), initial_capacity: int = 1) -> None:
        _check_capacity(initial_capacity, "initial_capacity")

        self._data: List[Optional[ElementT]] = [None] * initial_capacity
        self._capacity = initial_capacity
        self._used = 0

        if isinstance(values, Bag):
            warnings.warn(
                "Building a bag from another bag inserts its elements one by one and does not "
                "preserve capacity; use `Bag.from_bag` to get an exact copy",
                stacklevel=2,
            )

        for value in values:
            self.insert(value)

    @classmethod
    def from_bag(cls, source: Bag[ElementT]) -> Bag[ElementT]:
        """Create an independent copy of `source` with the same capacity and elements."""
        bag: Bag[ElementT] = cls(initial_capacity=source.capacity)
        for idx, value in enumerate(source):
            bag._data[idx] = copy.deepcopy(value)
        bag._used = source._used
        return bag

    def copy(self) -> Bag[ElementT]:
        return type(self).from_bag(self)

    def __copy__(self) -> Bag[ElementT]:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Bag[ElementT]:
        return self.copy()

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated in the backing list."""
        return self._capacity

    def get_capacity(self) -> int:
        return self._capacity

    def size(self) -> int:
        """Number of elements currently held in the bag."""
        return self._used

    def get_data(self) -> List[ElementT]:
        """Return the used elements as a new list, in their stored order."""
        return list(self)

    def _reallocate(self, new_capacity: int) -> None:
        logger.debug(f"Reallocating bag storage from {self._capacity} to {new_capacity} slots")

        new_data: List[Optional[ElementT]] = [None] * new_capacity
        new_data[: self._used] = self._data[: self._used]

        self._data = new_data
        self._capacity = new_capacity

    def ensure_capacity(self, new_capacity: int) -> None:
        """Grow the backing list so that it can hold at least `new_capacity` elements.

        Args:
            new_capacity: Requested number of slots; must be positive. Requests which do not exceed
                the current capacity leave the bag untouched.

        Raises:
            ValueError: If `new_capacity` is smaller than 1. The bag is not modified in this case.
        """
        _check_capacity(new_capacity, "new_capacity")

        if new_capacity > self._capacity:
            self._reallocate(new_capacity)

    def trim_to_size(self) -> None:
        """Shrink capacity down to the number of used elements (but never below 1)."""
        if self._used < self._capacity:
            self._reallocate(max(self._used, 1))

    def insert(self, value: ElementT) -> None:
        if self._used == self._capacity:
            self.ensure_capacity(2 * self._capacity)

        self._data[self._used] = value
        self._used += 1

    def occurrences(self, target: ElementT) -> int:
        """Count the elements equal to `target`."""
        return sum(1 for value in self if value == target)

    def _remove_at(self, idx: int) -> None:
        # Shift the tail left by one to close the gap, keeping relative order.
        self._data[idx : self._used - 1] = self._data[idx + 1 : self._used]
        self._used -= 1
        self._data[self._used] = None

    def erase(self, target: ElementT) -> int:
        """Remove every element equal to `target`.

        Returns:
            The number of elements removed (0 if `target` was not present).
        """
        num_removed = 0
        idx = 0
        while idx < self._used:
            if self._data[idx] == target:
                self._remove_at(idx)
                num_removed += 1
            else:
                idx += 1

        return num_removed

    def erase_one(self, target: ElementT) -> bool:
        """Remove the first element equal to `target`, returning whether one was found."""
        for idx, value in enumerate(self):
            if value == target:
                self._remove_at(idx)
                return True

        return False

    def add_assign(self, other: Bag[ElementT]) -> Bag[ElementT]:
        """Append all elements of `other` to this bag, in order.

        The resulting capacity is the capacity of this bag (after any growth needed to hold the
        merged elements) plus the capacity of `other`; it is not trimmed to the new size.
        """
        # Take the snapshot first, so that `bag += bag` sees the pre-merge contents.
        incoming = [copy.deepcopy(value) for value in other]
        other_capacity = other.capacity

        # Growing to fit the merged elements and adding the capacity of `other` on top are folded
        # into a single reallocation.
        grown_capacity = max(self._capacity, self._used + len(incoming))
        self._reallocate(grown_capacity + other_capacity)
        self._data[self._used : self._used + len(incoming)] = incoming
        self._used += len(incoming)
        return self

    def add(self, other: Bag[ElementT]) -> Bag[ElementT]:
        """Return a new bag holding the elements of this bag followed by those of `other`."""
        result: Bag[ElementT] = type(self)(initial_capacity=self.capacity + other.capacity)
        result.add_assign(self)
        result.add_assign(other)
        return result

    def __iadd__(self, other: Any) -> Bag[ElementT]:
        if not isinstance(other, Bag):
            return NotImplemented
        return self.add_assign(other)

    def __add__(self, other: Any) -> Bag[ElementT]:
        if not isinstance(other, Bag):
            return NotImplemented
        return self.add(other)

    def __iter__(self) -> Iterator[ElementT]:
        for idx in range(self._used):
            yield self._data[idx]  # type: ignore[misc]

    def __contains__(self, element) -> bool:
        return any(value == element for value in self)

    def __len__(self) -> int:
        return self._used

    def __eq__(self, other) -> bool:
        if isinstance(other, Bag):
            return (
                self._capacity == other._capacity
                and self._used == other._used
                and all(x == y for x, y in zip(self, other))
            )
        else:
            return False

    def __ne__(self, other) -> bool:
        return not self == other

    # Bags are mutable, so they cannot be used as dictionary keys or set members.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Bag({self.get_data()!r}, capacity={self._capacity})"

    def __str__(self) -> str:
        data = ", ".join(str(value) for value in self)
        return f"Bag\ndata: {data}\ncapacity: {self._capacity}\nused: {self._used}"


def _check_capacity(capacity: int, name: str) -> None:
    if capacity < 1:
        raise ValueError(f"{name} must be at least 1, got {capacity}")
