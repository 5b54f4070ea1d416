"""
Core Component: Section Receipts & Double-Run Checker

A receipt is an ordered record of what one section (construct, sort, ...)
observed about a row of disks, committed to by a BLAKE3 section_hash that
also binds the parameter registry.

Payload values are restricted to int, bool, str, None and lists/dicts of
those, so the same inputs always hash to the same bytes.
"""

import json
from typing import Any, Callable

from .registry import param_registry
from .hashing import blake3_hash
from .bytesio import serialize_disk_state

_SCALARS = (bool, int, str, type(None))


class Receipts:
    """Section-scoped receipt builder."""

    def __init__(self, section: str):
        self.section = section
        self.payload: dict[str, Any] = {}

    def put(self, key: str, value: Any) -> None:
        """
        Record key/value once.

        Raises:
            ReceiptError: On a repeated key, or a value that is not
                int/bool/str/None or a list/tuple/dict of them.
        """
        if key in self.payload:
            raise ReceiptError(f"Duplicate key in receipts: '{key}'")
        _check_value(value, key)
        self.payload[key] = list(value) if isinstance(value, tuple) else value

    def put_state(self, key: str, state) -> None:
        """Record a row as its rendering under key and its DSK1 hash under key_hash."""
        self.put(key, state.to_string())
        self.put(f"{key}_hash", blake3_hash(serialize_disk_state(state)))

    def digest(self) -> dict:
        """
        Returns:
            dict: {section, version, param_registry_hash, payload, section_hash}
            where section_hash = blake3(stable_json(all other fields)).
        """
        registry = param_registry()
        body = {
            "section": self.section,
            "version": registry["version"],
            "param_registry_hash": blake3_hash(_stable_json_bytes(registry)),
            "payload": dict(self.payload),
        }
        body["section_hash"] = blake3_hash(_stable_json_bytes(body))
        return body


def assert_double_run_equal(build_section_callable: Callable[[], Receipts]) -> dict:
    """
    Build a section twice and require identical section_hash.

    Returns:
        dict: Digest of the first run.

    Raises:
        DeterminismError: If the two digests differ.
    """
    first = build_section_callable().digest()
    second = build_section_callable().digest()

    if first["section_hash"] == second["section_hash"]:
        return first

    payload_a, payload_b = first["payload"], second["payload"]
    keys = list(payload_a) + [k for k in payload_b if k not in payload_a]
    differing = next(
        (k for k in keys if payload_a.get(k, "<MISSING>") != payload_b.get(k, "<MISSING>")),
        None
    )

    raise DeterminismError(
        section=first["section"],
        first_differing_key=differing,
        value_a=payload_a.get(differing, "<MISSING>") if differing else None,
        value_b=payload_b.get(differing, "<MISSING>") if differing else None,
        hash_a=first["section_hash"],
        hash_b=second["section_hash"]
    )


def _stable_json_bytes(obj: Any) -> bytes:
    # Sorted keys, compact separators, UTF-8
    return json.dumps(
        obj, sort_keys=True, ensure_ascii=False, separators=(',', ':')
    ).encode('utf-8')


def _check_value(value: Any, path: str) -> None:
    if isinstance(value, float):
        raise ReceiptError(f"Floats forbidden in receipts (key: '{path}').")
    if isinstance(value, _SCALARS):
        return
    if isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            _check_value(item, f"{path}[{i}]")
        return
    if isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                raise ReceiptError(f"Non-string dict key {k!r} in receipts (key: '{path}')")
            _check_value(v, f"{path}.{k}")
        return
    raise ReceiptError(
        f"Invalid type in receipts: {type(value).__name__} (key: '{path}')"
    )


class ReceiptError(Exception):
    """Raised when a receipt value or key is rejected."""
    pass


class DeterminismError(Exception):
    """Raised when double-run produces different section hashes."""

    def __init__(self, section, first_differing_key, value_a, value_b, hash_a, hash_b):
        self.section = section
        self.first_differing_key = first_differing_key
        self.value_a = value_a
        self.value_b = value_b
        self.hash_a = hash_a
        self.hash_b = hash_b
        super().__init__(
            f"Double-run hash mismatch in section '{section}' "
            f"at key '{first_differing_key}': {value_a!r} != {value_b!r} "
            f"({hash_a[:16]} vs {hash_b[:16]})"
        )
