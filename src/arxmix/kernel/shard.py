"""
Kernel Component: Image Path Sharder

Maps a hex image reference to its bucketed asset path:

    /images/<BBB>/<image_ref>.png

BBB is the low 12 bits of a 64-bit avalanche finalizer over the parsed
reference, printed as 3 uppercase hex digits. The mixer constants match the
backend that wrote the image tree; all arithmetic wraps at 64 bits.
"""

import re

from ..core.registry import param_registry


_REGISTRY = param_registry()

MASK64 = (1 << 64) - 1

SHARD_BITS = _REGISTRY["shard_bits"]
SHARD_MASK = (1 << SHARD_BITS) - 1

# Applied as shift, mul, shift, mul, shift, mul, shift
SHIFTS = tuple(_REGISTRY["shard_shifts"])
MULTIPLIERS = tuple(int(c, 16) for c in _REGISTRY["shard_constants"])

IMAGE_PATH_PREFIX = _REGISTRY["image_path_prefix"]
IMAGE_EXTENSION = _REGISTRY["image_extension"]

_HEX_RE = re.compile(r"(?:0[xX])?([0-9A-Fa-f]+)")


def parse_image_ref(image_ref: str) -> int:
    """
    Parse an unsigned 64-bit hexadecimal image reference.

    Upper and lower case digits are equivalent; an optional "0x"/"0X" prefix
    is accepted. Signs, whitespace and underscores are not.

    Raises:
        InvalidHexFormatError: If image_ref is not a hex string or exceeds 64 bits.
    """
    if not isinstance(image_ref, str):
        raise InvalidHexFormatError(image_ref, "not a string")

    m = _HEX_RE.fullmatch(image_ref)
    if m is None:
        raise InvalidHexFormatError(image_ref, "not hexadecimal")

    value = int(m.group(1), 16)
    if value > MASK64:
        raise InvalidHexFormatError(image_ref, "exceeds 64 bits")
    return value


def mix12bits(v: int) -> int:
    """
    Avalanche-mix a 64-bit value and keep the low 12 bits.

    Returns:
        int: Bucket in [0, 4095].
    """
    v &= MASK64
    for shift, mul in zip(SHIFTS, MULTIPLIERS):
        v ^= v >> shift
        v = (v * mul) & MASK64
    v ^= v >> SHIFTS[-1]
    return v & SHARD_MASK


def shard_bucket(image_ref: str) -> int:
    """Return the bucket for an image reference."""
    return mix12bits(parse_image_ref(image_ref))


def shard_path(image_ref: str, prefix: str = IMAGE_PATH_PREFIX) -> str:
    """
    Return the asset path for an image reference.

    The reference is echoed verbatim, so "ff" and "FF" share a bucket
    but not a path.

    Example:
        >>> shard_path("00")
        '/images/000/00.png'
    """
    bucket = shard_bucket(image_ref)
    return f"{prefix}/{bucket:03X}/{image_ref}{IMAGE_EXTENSION}"


class InvalidHexFormatError(ValueError):
    """Raised when an image reference cannot be parsed as unsigned 64-bit hex."""

    def __init__(self, image_ref, reason: str):
        self.image_ref = image_ref
        self.reason = reason
        super().__init__(f"Invalid image reference {image_ref!r}: {reason}")
