"""
Core Component: Section Receipts

A receipt is a hashed record of one section of work (a runner pass, a codec
check): the registry constants in effect and what the section produced.

Digest layout:
  {
    "section": str,
    "registry_hash": json_hash(param_registry()),
    "payload": {key: value, ...},
    "section_hash": json_hash({section, registry_hash, payload})
  }

Same input, same constants → same section_hash.
"""

import json
from typing import Any, Callable

from .hashing import canonical_json, json_hash, HashingError
from .registry import param_registry


def registry_hash() -> str:
    """Fingerprint of the frozen parameter registry."""
    return json_hash(param_registry())


class Receipts:
    """Ordered key/value collector for one section."""

    def __init__(self, section: str):
        self.section = section
        self.payload = {}

    def put(self, key: str, value: Any) -> None:
        """
        Record a value under a new key.

        The value is snapshotted through its canonical JSON form, so later
        mutation by the caller does not change the receipt.

        Raises:
            ReceiptError: If key is already present or value is not canonical JSON.
        """
        if key in self.payload:
            raise ReceiptError(f"Duplicate key in receipts: '{key}'")
        try:
            snapshot = json.loads(canonical_json(value))
        except HashingError as e:
            raise ReceiptError(f"Cannot record '{key}': {e}") from e
        self.payload[key] = snapshot

    def digest(self) -> dict:
        body = {
            "section": self.section,
            "registry_hash": registry_hash(),
            "payload": dict(self.payload),
        }
        return {**body, "section_hash": json_hash(body)}


def assert_double_run_equal(build_section_callable: Callable[[], Receipts]) -> str:
    """
    Build a section twice and require identical section_hash.

    Returns:
        str: The agreed section_hash.

    Raises:
        DeterminismError: Naming every payload key whose value differed.
    """
    a = build_section_callable().digest()
    b = build_section_callable().digest()

    if a["section_hash"] != b["section_hash"]:
        keys = a["payload"].keys() | b["payload"].keys()
        differing = sorted(
            k for k in keys if a["payload"].get(k) != b["payload"].get(k)
        )
        raise DeterminismError(a["section"], differing)

    return a["section_hash"]


class ReceiptError(ValueError):
    """Raised on duplicate receipt keys or values without a canonical JSON form."""
    pass


class DeterminismError(Exception):
    """Raised when two builds of the same section hash differently."""

    def __init__(self, section: str, differing_keys: list[str]):
        self.section = section
        self.differing_keys = differing_keys
        super().__init__(
            f"Section '{section}' is not deterministic; differing keys: {differing_keys}"
        )
