"""
Kernel Component: Packed Definition Codec

Packed definition ↔ ordered operation list.

Bit mapping (frozen, bit 0 = LSB), with B = rotation_bits, N = operator_count:
  - bits [0, N*B):      rotation fields, last operator in the lowest field
  - bits [N*B, N*B+N):  XOR flags, last operator in the lowest bit
  - bits above N*(B+1): ignored

The producer shifts flags in first (operator 0 first) and rotations after,
so unpacking walks operator indices from N-1 down to 0.
"""

from typing import TypedDict

from .types import lookup_type


MASK64 = (1 << 64) - 1


class Operation(TypedDict):
    """One ARX step: receiver (^= or +=) ROTL(argument, rotation)."""
    is_xor: bool
    rotation: int


class MixDescriptor(TypedDict):
    """Decoded view of a packed definition."""
    type_id: str
    operations: list[Operation]


def to_unsigned64(value: int) -> int:
    """
    Reinterpret a signed or unsigned 64-bit integer as unsigned.

    Raises:
        DefinitionError: If value is not an int or lies outside [-2**63, 2**64).
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise DefinitionError(
            f"Definition must be an int, got {type(value).__name__}"
        )
    if value < -(1 << 63) or value > MASK64:
        raise DefinitionError(f"Definition {value} does not fit in 64 bits")
    return value & MASK64


def to_signed64(value: int) -> int:
    """Reinterpret a 64-bit integer as signed int64 (record-layer form)."""
    v = to_unsigned64(value)
    return v - (1 << 64) if v >> 63 else v


def decode_definition(type_id: str, definition: int) -> list[Operation]:
    """
    Unpack a definition into its ordered operations.

    Args:
        type_id: Registered mix type.
        definition: Packed definition (signed int64 form is accepted).

    Returns:
        list[Operation]: operator_count operations in execution order.

    Raises:
        UnknownTypeError: If type_id is not registered (checked first).
        DefinitionError: If definition is not a 64-bit int.

    Example:
        >>> decode_definition("8x2", 0)[0]
        {'is_xor': False, 'rotation': 0}
    """
    info = lookup_type(type_id)
    v = to_unsigned64(definition)

    n = info["operator_count"]
    bits = info["rotation_bits"]
    rot_mask = (1 << bits) - 1

    rotations = [0] * n
    xors = [False] * n

    for i in range(n - 1, -1, -1):
        rotations[i] = v & rot_mask
        v >>= bits

    for i in range(n - 1, -1, -1):
        xors[i] = (v & 1) == 1
        v >>= 1

    return [{"is_xor": xors[i], "rotation": rotations[i]} for i in range(n)]


def encode_definition(type_id: str, operations: list[Operation]) -> int:
    """
    Pack operations into a definition (inverse of decode_definition).

    Args:
        type_id: Registered mix type.
        operations: Exactly operator_count operations.

    Returns:
        int: Unsigned definition, always < 2**definition_bits.

    Raises:
        UnknownTypeError: If type_id is not registered.
        DefinitionError: On wrong operation count or out-of-range rotation.

    Invariant:
        decode_definition(t, encode_definition(t, ops)) == ops
    """
    info = lookup_type(type_id)
    n = info["operator_count"]
    bits = info["rotation_bits"]

    if len(operations) != n:
        raise DefinitionError(
            f"{type_id} needs {n} operations, got {len(operations)}"
        )

    v = 0
    for op in operations:
        v = (v << 1) | (1 if op["is_xor"] else 0)
    for i, op in enumerate(operations):
        r = op["rotation"]
        if isinstance(r, bool) or not isinstance(r, int) or not 0 <= r < (1 << bits):
            raise DefinitionError(
                f"Rotation {r!r} at operator {i} outside [0, {1 << bits}) for {type_id}"
            )
        v = (v << bits) | r

    return v


def decode_mix(type_id: str, definition: int) -> MixDescriptor:
    """Decode into a MixDescriptor."""
    return {
        "type_id": type_id,
        "operations": decode_definition(type_id, definition),
    }


class DefinitionError(ValueError):
    """Raised when a definition or operation list cannot be packed/unpacked."""
    pass
