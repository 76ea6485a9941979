"""
Core Component: Parameter Registry

Frozen constants shared by the codec, renderer and path sharder.
Kernel modules load their tables from here at import time. The type table
and the shard mixer constants are fixed by the backend that wrote the stored
definitions and image files; changing any of them breaks compatibility with
existing data.
"""


def param_registry() -> dict:
    """
    Returns a frozen mapping of all global constants used by arxmix.

    Keys and values are JSON-serializable primitives or lists.
    This registry is hashed into every section receipt to prove parametric consistency.

    Returns:
        dict: Fresh parameter mapping with exact keys and values.

    Raises:
        RegistryError: If any required key is missing (internal consistency check).
    """
    registry = {
        "registry_version": "1.0",

        # type_id -> [rotation_bits, operator_count, term_count], frozen order
        # Word width is 2**rotation_bits
        "mix_types": {
            "8x2": [3, 4, 2], "8x3": [3, 6, 3], "8x4": [3, 8, 4],
            "16x2": [4, 4, 2], "16x3": [4, 6, 3], "16x4": [4, 8, 4],
            "32x2": [5, 4, 2], "32x3": [5, 6, 3], "32x4": [5, 8, 4],
            "64x2": [6, 4, 2], "64x3": [6, 6, 3], "64x4": [6, 8, 4],
        },

        # Feistel chain variable names, receiver starts at "a"
        "pseudocode_variables": "abcd",

        # Asset sharding: xorshift amounts interleave with the multipliers
        # (shift, mul, shift, mul, shift, mul, shift)
        "image_path_prefix": "/images",
        "image_extension": ".png",
        "shard_bits": 12,
        "shard_shifts": [21, 37, 44, 21],
        "shard_constants": [
            "0x2AE264A9B1A36D69",
            "0x396747CA3A58E56F",
            "0xFB7719182775D593",
        ],

        "hash_algo": "BLAKE3",
    }

    required_keys = {
        "registry_version", "mix_types", "pseudocode_variables",
        "image_path_prefix", "image_extension", "shard_bits",
        "shard_shifts", "shard_constants", "hash_algo"
    }

    actual_keys = set(registry.keys())
    if actual_keys != required_keys:
        missing = required_keys - actual_keys
        extra = actual_keys - required_keys
        raise RegistryError(
            f"param_registry() key mismatch. Missing: {missing}, Extra: {extra}"
        )

    if len(registry["shard_shifts"]) != len(registry["shard_constants"]) + 1:
        raise RegistryError("shard_shifts must have one more entry than shard_constants")

    return registry


class RegistryError(Exception):
    """Raised when param_registry() has missing or unexpected keys."""
    pass
