"""
Core foundation: parameter registry, hashing, receipts.

Frozen constants and deterministic receipt digests.
"""

from .registry import param_registry, RegistryError
from .hashing import blake3_hash, canonical_json, json_hash, HashingError
from .receipts import (
    Receipts,
    registry_hash,
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
    "canonical_json",
    "json_hash",
    "HashingError",

    # Receipts
    "Receipts",
    "registry_hash",
    "assert_double_run_equal",
    "ReceiptError",
    "DeterminismError",
]
