"""
Core Component: BLAKE3 Hashing

Fingerprints for DSK1 row frames and receipt JSON. Unkeyed, no salt.
"""

import blake3


def blake3_hash(data: bytes) -> str:
    """
    Lowercase 64-character hex BLAKE3-256 digest of data.

    Example:
        >>> len(blake3_hash(b"DSK1"))
        64
    """
    return blake3.blake3(data).hexdigest()
