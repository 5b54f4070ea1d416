"""
Core Component: Parameter Registry

Frozen constants for deterministic kernel operation.
Token letters, byte frame tag, hash algorithm and algorithm names are
defined here with exact values.

No randomness, no environment leakage, no optionals.
"""


def param_registry() -> dict:
    """
    Returns a frozen mapping of all global constants used by the kernel.

    Keys and values are JSON-serializable primitives or lists.
    This registry is hashed into every section receipt to prove parametric consistency.

    Returns:
        dict: Frozen parameter mapping with exact keys and values.

    Raises:
        RegistryError: If any required key is missing (internal consistency check).
    """
    registry = {
        # Version binding
        "version": "1.0",

        # Debug rendering letters, index order, single-space separated
        "token_letters": {"LIGHT": "L", "DARK": "D"},
        "token_separator": " ",

        # Canonical start layout: index 0 is LIGHT, colors strictly alternate
        "start_layout": "alternating-light-first",

        # Bit packing of a row (DARK = 1, bit 7 -> index 0)
        "endianness": "BE",
        "byte_frame_tags": {
            "ROW": "DSK1"
        },

        # Hashing
        "hash_algo": "BLAKE3",

        # Algorithm names (frozen order)
        "algorithms": ["left-to-right", "lawnmower"],

        # Swap-count oracle for the canonical start with k light disks
        "swap_count_oracle": "k*(k-1)/2",
    }

    # Consistency check: ensure all required keys are present
    required_keys = {
        "version", "token_letters", "token_separator", "start_layout",
        "endianness", "byte_frame_tags", "hash_algo", "algorithms",
        "swap_count_oracle"
    }

    actual_keys = set(registry.keys())
    if actual_keys != required_keys:
        missing = required_keys - actual_keys
        extra = actual_keys - required_keys
        raise RegistryError(
            f"param_registry() key mismatch. Missing: {missing}, Extra: {extra}"
        )

    return registry


class RegistryError(Exception):
    """Raised when param_registry() has missing or unexpected keys."""
    pass
