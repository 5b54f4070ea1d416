"""
Row State, Sort Result & Sorters

Minimal kernel of the alternating disks problem.

Components:
  - row: DiskState (alternating construction, adjacent swap, predicates)
  - result: SortedDisks (final row + swap count)
  - sorters: sort_left_to_right, sort_lawnmower, expected_swap_count
"""

from .row import (
    DISK_LIGHT,
    DISK_DARK,
    DiskState,
    ContractError,
    PreconditionError,
    IndexOutOfRangeError
)
from .result import SortedDisks
from .sorters import (
    sort_left_to_right,
    sort_lawnmower,
    expected_swap_count,
    ALGORITHMS
)

__all__ = [
    # Row
    "DISK_LIGHT",
    "DISK_DARK",
    "DiskState",
    "ContractError",
    "PreconditionError",
    "IndexOutOfRangeError",

    # Result
    "SortedDisks",

    # Sorters
    "sort_left_to_right",
    "sort_lawnmower",
    "expected_swap_count",
    "ALGORITHMS",

    # Receipts
    "state_hash",
    "sort_receipts",
]


def state_hash(state: DiskState) -> str:
    """BLAKE3 hex digest of the row's DSK1 frame."""
    from ..core import blake3_hash, serialize_disk_state

    return blake3_hash(serialize_disk_state(state))


def sort_receipts(section_label: str, light_counts: list[int]) -> dict:
    """
    Generate receipts for both sorters over fixed light counts.

    Args:
        section_label: ASCII identifier (e.g., "kernel-sorters").
        light_counts: Values of k to construct and sort.

    Returns:
        dict: Receipt digest with, per k and per algorithm, the before/after
        hashes, swap count, sortedness and agreement with k(k-1)/2.

    Raises:
        PreconditionError: If any k < 1.
    """
    from ..core import Receipts

    receipts = Receipts(section_label)

    runs = []
    for k in light_counts:
        before = DiskState(k)
        before_hash = state_hash(before)

        for name, sorter in ALGORITHMS.items():
            result = sorter(before)
            after = result.after
            runs.append({
                "k": k,
                "algorithm": name,
                "before_hash": before_hash,
                "after_hash": state_hash(after),
                "swap_count": result.swap_count,
                "sorted": after.is_sorted(),
                "oracle_ok": result.swap_count == expected_swap_count(k),
            })

    receipts.put("light_counts", list(light_counts))
    receipts.put("runs", runs)

    # Both sorters must land on the same row for every k
    agree = []
    for k in light_counts:
        hashes = {r["after_hash"] for r in runs if r["k"] == k}
        agree.append({"k": k, "after_agree": len(hashes) == 1})
    receipts.put("after_agree", agree)

    receipts.put("all_ok", all(r["sorted"] and r["oracle_ok"] for r in runs)
                 and all(a["after_agree"] for a in agree))

    return receipts.digest()
