"""
Kernel Component: ARX Evaluator

Runs a decoded mix over concrete words, following the same chain that
code_string() prints:

    a ^= ROTL(b,r0);   (or +=, modulo 2**width)
    b ^= ROTL(a,r1);
    ...

Word packing (frozen): variable "a" is the most significant word of the
width*term_count-bit input, the last variable the least significant.
"""

from .definition import Operation, decode_definition
from .types import lookup_type


def rotl(value: int, amount: int, width: int) -> int:
    """Rotate value left by amount within width bits. amount 0 is identity."""
    mask = (1 << width) - 1
    value &= mask
    amount %= width
    return ((value << amount) | (value >> (width - amount))) & mask


def apply_operations(
    words: list[int],
    operations: list[Operation],
    width: int,
    rounds: int = 1
) -> list[int]:
    """
    Apply the operation chain to words for a number of rounds.

    Args:
        words: One word per variable; words[0] is "a".
        operations: Decoded operations in execution order.
        width: Word size in bits.
        rounds: Number of passes over the operation list (>= 0).

    Returns:
        list[int]: New word list (input is not modified).

    Raises:
        ValueError: If words is empty or rounds is negative.
    """
    if not words:
        raise ValueError("At least one word is required")
    if rounds < 0:
        raise ValueError(f"rounds must be >= 0, got {rounds}")

    mask = (1 << width) - 1
    terms = len(words)
    v = [w & mask for w in words]

    for _ in range(rounds):
        receiver = 0
        argument = terms - 1
        for op in operations:
            rotated = rotl(v[argument], op["rotation"], width)
            if op["is_xor"]:
                v[receiver] ^= rotated
            else:
                v[receiver] = (v[receiver] + rotated) & mask
            receiver = (receiver + 1) % terms
            argument = (argument + 1) % terms

    return v


def split_words(value: int, width: int, terms: int) -> list[int]:
    """Split value into terms words of width bits, most significant first."""
    mask = (1 << width) - 1
    return [(value >> (width * (terms - 1 - i))) & mask for i in range(terms)]


def join_words(words: list[int], width: int) -> int:
    """Inverse of split_words."""
    mask = (1 << width) - 1
    value = 0
    for w in words:
        value = (value << width) | (w & mask)
    return value


def diffuse(type_id: str, definition: int, value: int, rounds: int = 1) -> int:
    """
    Evaluate a packed mix on a width*term_count-bit input.

    Args:
        type_id: Registered mix type.
        definition: Packed definition.
        value: Input state in [0, 2**(width*term_count)).
        rounds: Number of rounds (>= 0).

    Returns:
        int: Output state, same bit size as the input.

    Raises:
        UnknownTypeError: If type_id is not registered.
        ValueError: If value is out of range or rounds is negative.
    """
    info = lookup_type(type_id)
    width = info["width"]
    terms = info["term_count"]
    state_bits = width * terms

    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < (1 << state_bits):
        raise ValueError(
            f"Input for {type_id} must be an int in [0, 2**{state_bits}), got {value!r}"
        )

    operations = decode_definition(type_id, definition)
    words = apply_operations(split_words(value, width, terms), operations, width, rounds)
    return join_words(words, width)
