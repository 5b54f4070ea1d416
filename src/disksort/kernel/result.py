"""
Kernel Component: Sort Result

Output of the alternating disks problem: the final row plus the number
of adjacent swaps performed to reach it.

Invariant:
  The stored row is private; after hands out copies, so swap_count always
  describes the row the sorter produced.
"""

from .row import DiskState


class SortedDisks:
    """Final DiskState and swap count. Built once by a sorter, never mutated."""

    __slots__ = ("_after", "_swap_count")

    def __init__(self, after: DiskState, swap_count: int):
        self._after = after.copy()
        self._swap_count = swap_count

    @property
    def after(self) -> DiskState:
        return self._after.copy()

    @property
    def swap_count(self) -> int:
        return self._swap_count

    def __eq__(self, other):
        if not isinstance(other, SortedDisks):
            return NotImplemented
        return self._after == other._after and self._swap_count == other._swap_count

    __hash__ = None

    def __repr__(self):
        return f"SortedDisks(after='{self._after.to_string()}', swap_count={self._swap_count})"
