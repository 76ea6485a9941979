"""
ARX Mix Definitions

Deterministic decoding, description and asset sharding for packed
ARX (add/rotate/xor) mix candidates.
"""

__version__ = "0.1.0"

from .kernel import (
    lookup_type,
    mix_types,
    decode_definition,
    encode_definition,
    decode_mix,
    terse_string,
    code_string,
    describe_mix,
    shard_path,
    diffuse,
    UnknownTypeError,
    DefinitionError,
    InvalidHexFormatError
)
from .entry import (
    MixEntry,
    parse_mix_entry,
    render_entry,
    EntryError
)

__all__ = [
    # Kernel
    "lookup_type",
    "mix_types",
    "decode_definition",
    "encode_definition",
    "decode_mix",
    "terse_string",
    "code_string",
    "describe_mix",
    "shard_path",
    "diffuse",
    "UnknownTypeError",
    "DefinitionError",
    "InvalidHexFormatError",

    # Entries
    "MixEntry",
    "parse_mix_entry",
    "render_entry",
    "EntryError",
]
