"""
Core foundation: receipts, hashing, serialization, parameter registry.

Frozen constants and deterministic byte-level I/O.
"""

from .registry import param_registry, RegistryError
from .hashing import blake3_hash
from .bytesio import (
    serialize_row_be,
    serialize_disk_state,
    SerializationError
)
from .receipts import (
    Receipts,
    assert_double_run_equal,
    ReceiptError,
    DeterminismError
)

__all__ = [
    # Registry
    "param_registry",
    "RegistryError",

    # Hashing
    "blake3_hash",

    # Serialization
    "serialize_row_be",
    "serialize_disk_state",
    "SerializationError",

    # Receipts
    "Receipts",
    "assert_double_run_equal",
    "ReceiptError",
    "DeterminismError",
]
