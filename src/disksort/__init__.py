"""
Alternating Disks Kernel

Deterministic, receipts-first adjacent-swap sorting of a light/dark row.
"""

__version__ = "1.0.0"

from .kernel import (
    DISK_LIGHT,
    DISK_DARK,
    DiskState,
    SortedDisks,
    sort_left_to_right,
    sort_lawnmower,
    expected_swap_count,
    ContractError,
    PreconditionError,
    IndexOutOfRangeError
)

__all__ = [
    "DISK_LIGHT",
    "DISK_DARK",
    "DiskState",
    "SortedDisks",
    "sort_left_to_right",
    "sort_lawnmower",
    "expected_swap_count",
    "ContractError",
    "PreconditionError",
    "IndexOutOfRangeError",
]
