"""
Sorters - Unit Tests

Verifies both sorters against the swap-count oracle k(k-1)/2:
  ✓ Concrete scenarios (k = 1, 2, 4)
  ✓ Sortedness and oracle for k = 1..40
  ✓ Cross-check: both sorters agree on the final row
  ✓ Input is not mutated (taken by value)
  ✓ Precondition: non-alternating input rejected
  ✓ Passes on an already sorted row make zero swaps
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from disksort.kernel import (
    DISK_LIGHT,
    DISK_DARK,
    DiskState,
    SortedDisks,
    PreconditionError,
    sort_left_to_right,
    sort_lawnmower,
    expected_swap_count,
    ALGORITHMS,
)
from disksort.kernel.sorters import _left_to_right_passes, _lawnmower_passes


SORTERS = [sort_left_to_right, sort_lawnmower]


def _sorted_row(k):
    return DiskState.from_string(" ".join(["L"] * k + ["D"] * k))


# ═══════════════════════════════════════════════════════════════════════
# Test 1: Concrete Scenarios
# ═══════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("sorter", SORTERS)
def test_single_pair(sorter):
    result = sorter(DiskState(1))
    assert result.after.to_string() == "L D"
    assert result.swap_count == 0


@pytest.mark.parametrize("sorter", SORTERS)
def test_two_pairs(sorter):
    result = sorter(DiskState(2))
    assert result.after.to_string() == "L L D D"
    assert result.swap_count == 1


@pytest.mark.parametrize("sorter", SORTERS)
def test_four_pairs(sorter):
    result = sorter(DiskState(4))
    assert result.after.to_string() == "L L L L D D D D"
    assert result.swap_count == 6


def test_result_shape():
    result = sort_lawnmower(DiskState(3))
    assert isinstance(result, SortedDisks)
    assert result.swap_count == 3
    assert result.after == _sorted_row(3)
    assert result == SortedDisks(_sorted_row(3), 3)
    assert repr(result) == "SortedDisks(after='L L L D D D', swap_count=3)"

    with pytest.raises(AttributeError):
        result.swap_count = 0
    with pytest.raises(AttributeError):
        result.after = DiskState(3)


@pytest.mark.parametrize("sorter", SORTERS)
def test_result_row_cannot_be_changed_through_after(sorter):
    """Swapping the returned row leaves the result's row and count consistent."""
    result = sorter(DiskState(2))
    exposed = result.after
    exposed.swap(1)
    assert exposed.to_string() == "L D L D"

    assert result.after.to_string() == "L L D D"
    assert result.after.is_sorted()
    assert result.swap_count == 1


def test_result_owns_its_row():
    """Changing the row passed to SortedDisks does not reach the result."""
    row = _sorted_row(2)
    result = SortedDisks(row, 0)
    row.swap(1)
    assert result.after == _sorted_row(2)


# ═══════════════════════════════════════════════════════════════════════
# Test 2: Oracle Sweep
# ═══════════════════════════════════════════════════════════════════════

def test_expected_swap_count():
    assert [expected_swap_count(k) for k in range(1, 7)] == [0, 1, 3, 6, 10, 15]


@pytest.mark.parametrize("k", range(1, 41))
@pytest.mark.parametrize("sorter", SORTERS)
def test_sorted_with_oracle_swap_count(sorter, k):
    result = sorter(DiskState(k))
    assert result.after.is_sorted(), result.after.to_string()
    assert result.swap_count == expected_swap_count(k)
    assert result.after.count(DISK_LIGHT) == k
    assert result.after.count(DISK_DARK) == k


@pytest.mark.parametrize("k", [1, 2, 3, 5, 8, 13, 21])
def test_sorters_agree(k):
    ltr = sort_left_to_right(DiskState(k))
    lawn = sort_lawnmower(DiskState(k))
    assert ltr.after == lawn.after == _sorted_row(k)
    assert ltr.swap_count == lawn.swap_count


def test_algorithms_mapping():
    assert list(ALGORITHMS) == ["left-to-right", "lawnmower"]
    assert ALGORITHMS["left-to-right"] is sort_left_to_right
    assert ALGORITHMS["lawnmower"] is sort_lawnmower


# ═══════════════════════════════════════════════════════════════════════
# Test 3: Ownership
# ═══════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("sorter", SORTERS)
def test_input_not_mutated(sorter):
    before = DiskState(6)
    result = sorter(before)

    assert before == DiskState(6)
    assert before.is_alternating()
    assert result.after is not before


@pytest.mark.parametrize("sorter", SORTERS)
def test_repeat_sort_same_input(sorter):
    before = DiskState(5)
    first = sorter(before)
    second = sorter(before)
    assert first.after == second.after
    assert first.swap_count == second.swap_count == 10


# ═══════════════════════════════════════════════════════════════════════
# Test 4: Preconditions
# ═══════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("sorter", SORTERS)
@pytest.mark.parametrize("text", ["L L D D", "D L D L", "L D D L", "L L L D D D"])
def test_non_alternating_rejected(sorter, text):
    with pytest.raises(PreconditionError):
        sorter(DiskState.from_string(text))


# ═══════════════════════════════════════════════════════════════════════
# Test 5: Already Sorted
# ═══════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("sorter", SORTERS)
def test_sorted_and_alternating_single_pair(sorter):
    """k=1 is the only row that is both alternating and sorted."""
    before = DiskState(1)
    assert before.is_sorted()

    result = sorter(before)
    assert result.swap_count == 0
    assert result.after == before


@pytest.mark.parametrize("k", range(1, 15))
@pytest.mark.parametrize("passes", [_left_to_right_passes, _lawnmower_passes])
def test_passes_on_sorted_row_make_no_swaps(passes, k):
    state = _sorted_row(k)
    assert passes(state) == 0
    assert state == _sorted_row(k)


@pytest.mark.parametrize("k", range(1, 15))
@pytest.mark.parametrize("passes", [_left_to_right_passes, _lawnmower_passes])
def test_passes_are_idempotent(passes, k):
    state = DiskState(k)
    passes(state)
    assert state.is_sorted()

    snapshot = state.copy()
    assert passes(state) == 0
    assert state == snapshot
