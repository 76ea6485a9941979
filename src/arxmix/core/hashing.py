"""
Core Component: Hashing

BLAKE3 fingerprints for receipts. JSON values are hashed through their
canonical encoding: sorted keys, compact separators, UTF-8, no NaN/Infinity.
"""

import json
from typing import Any

import blake3


def blake3_hash(data: bytes) -> str:
    """Return the lowercase hex BLAKE3-256 digest of data (64 characters)."""
    return blake3.blake3(data).hexdigest()


def canonical_json(obj: Any) -> bytes:
    """
    Encode a JSON value to its canonical byte form.

    Raises:
        HashingError: If obj holds a value JSON cannot represent exactly
            (sets, objects, NaN, mixed-type dict keys).
    """
    try:
        text = json.dumps(
            obj,
            sort_keys=True,
            ensure_ascii=False,
            separators=(',', ':'),
            allow_nan=False
        )
    except (TypeError, ValueError) as e:
        raise HashingError(f"Value has no canonical JSON form: {e}") from e
    return text.encode('utf-8')


def json_hash(obj: Any) -> str:
    """BLAKE3 digest of canonical_json(obj)."""
    return blake3_hash(canonical_json(obj))


class HashingError(ValueError):
    """Raised when a value cannot be canonically encoded for hashing."""
    pass
