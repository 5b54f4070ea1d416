"""
Kernel Component: Sorters (LEFT-TO-RIGHT, LAWNMOWER)

Two adjacent-swap algorithms taking an alternating row to a sorted row.

Both take the input row by value: they sort a copy and return it inside
SortedDisks, leaving the caller's DiskState untouched.

Invariant:
  From the canonical alternating start with k light disks, both perform
  exactly k(k-1)/2 swaps.
"""

from typing import Callable

from .row import DiskState, DISK_LIGHT, DISK_DARK, PreconditionError
from .result import SortedDisks


def expected_swap_count(light_count: int) -> int:
    """
    Swaps needed from the alternating start with light_count light disks.

    The light disk at index 2m must travel m places left, so the total
    is 0 + 1 + ... + (k-1) = k(k-1)/2.
    """
    return light_count * (light_count - 1) // 2


def _require_alternating(before: DiskState) -> None:
    if not before.is_alternating():
        raise PreconditionError(
            f"Sort input must be alternating, got '{before.to_string()}'"
        )


# ============================================================================
# LEFT-TO-RIGHT
# ============================================================================

def _left_to_right_passes(state: DiskState) -> int:
    """Run the left-to-right passes in place; return the swap count."""
    swap_count = 0
    light_count, total_count = state.light_count(), state.total_count()

    for i in range(light_count):
        for j in range(i + 1, total_count - i - 1):
            if state.get(j) == DISK_DARK and state.get(j + 1) == DISK_LIGHT:
                state.swap(j)
                swap_count += 1

    return swap_count


def sort_left_to_right(before: DiskState) -> SortedDisks:
    """
    Sort disks with the left-to-right algorithm.

    Runs k passes. Pass i scans j = i+1 .. 2k-i-2 and swaps (j, j+1)
    whenever a dark disk sits directly left of a light disk. After i
    passes, i light disks are settled on the left and i dark disks on
    the right, so each pass skips them.

    Args:
        before: Alternating row (not modified).

    Returns:
        SortedDisks: Sorted copy and number of swaps performed.

    Raises:
        PreconditionError: If before is not alternating.
    """
    _require_alternating(before)

    state = before.copy()
    swap_count = _left_to_right_passes(state)
    return SortedDisks(state, swap_count)


# ============================================================================
# LAWNMOWER
# ============================================================================

def _lawnmower_passes(state: DiskState) -> int:
    """
    Run the lawnmower iterations in place; return the swap count.

    Window at iteration t:
      rightward, level i = t:    j = i+1 .. 2k-i-2, swap (j, j+1) on DARK,LIGHT
      leftward,  level i = t+1:  j = 2k-i-1 down to i+1, swap (j-1, j) on DARK,LIGHT
    """
    swap_count = 0
    light_count, total_count = state.light_count(), state.total_count()

    for t in range(light_count // 2):
        i = t

        # Rightward
        for j in range(i + 1, total_count - i - 1):
            if state.get(j) == DISK_DARK and state.get(j + 1) == DISK_LIGHT:
                state.swap(j)
                swap_count += 1

        # One more disk settled at each end
        i += 1

        # Leftward
        for j in range(total_count - i - 1, i, -1):
            if state.get(j) == DISK_LIGHT and state.get(j - 1) == DISK_DARK:
                state.swap(j - 1)
                swap_count += 1

    return swap_count


def sort_lawnmower(before: DiskState) -> SortedDisks:
    """
    Sort disks with the lawnmower algorithm.

    Runs floor(k/2) iterations. Each iteration makes a rightward pass
    (dark disks move right), tightens the window by one at each end,
    then makes a leftward pass (light disks move left).

    Args:
        before: Alternating row (not modified).

    Returns:
        SortedDisks: Sorted copy and number of swaps performed.

    Raises:
        PreconditionError: If before is not alternating.
    """
    _require_alternating(before)

    state = before.copy()
    swap_count = _lawnmower_passes(state)
    return SortedDisks(state, swap_count)


# Frozen name → sorter mapping (order matches param_registry()["algorithms"])
ALGORITHMS: dict[str, Callable[[DiskState], SortedDisks]] = {
    "left-to-right": sort_left_to_right,
    "lawnmower": sort_lawnmower,
}
