"""
Kernel Component: Mix Type Registry

Static table of the recognised ARX mix types.

A type id has the form "<width>x<terms>":
  - width: word size in bits (8, 16, 32, 64) -> rotation field width
  - terms: number of working variables (2, 3, 4) -> operator count

Tables are parallel tuples indexed by position in TYPES, loaded once from
param_registry()["mix_types"].
"""

from typing import TypedDict

from ..core.registry import param_registry


_MIX_TYPES = param_registry()["mix_types"]

TYPES = tuple(_MIX_TYPES)

# Bits per rotation field (enough to express 0..width-1)
ROT_BITS = tuple(_MIX_TYPES[t][0] for t in TYPES)

# ARX operations per mix
OPERATORS = tuple(_MIX_TYPES[t][1] for t in TYPES)

# Working variables threaded through the chain
TERMS = tuple(_MIX_TYPES[t][2] for t in TYPES)

WIDTHS = tuple(1 << bits for bits in ROT_BITS)


class MixInfo(TypedDict):
    """Structural parameters of one mix type."""
    type_id: str
    width: int
    rotation_bits: int
    operator_count: int
    term_count: int
    definition_bits: int  # operator_count * (rotation_bits + 1)


def mix_types() -> list[str]:
    """Return all registered type ids in frozen order."""
    return list(TYPES)


def lookup_type(type_id: str) -> MixInfo:
    """
    Return the structural parameters for a mix type.

    Args:
        type_id: Type identifier such as "32x3" (exact, case-sensitive).

    Returns:
        MixInfo: Fresh dict with width, rotation_bits, operator_count,
            term_count and definition_bits.

    Raises:
        UnknownTypeError: If type_id is not one of TYPES.
    """
    if not isinstance(type_id, str) or type_id not in TYPES:
        raise UnknownTypeError(type_id)

    i = TYPES.index(type_id)
    return {
        "type_id": type_id,
        "width": WIDTHS[i],
        "rotation_bits": ROT_BITS[i],
        "operator_count": OPERATORS[i],
        "term_count": TERMS[i],
        "definition_bits": OPERATORS[i] * (ROT_BITS[i] + 1),
    }


class UnknownTypeError(ValueError):
    """Raised when a mix type id is not registered."""

    def __init__(self, type_id):
        self.type_id = type_id
        super().__init__(f"Unknown mix type: {type_id!r}")
