"""
Kernel: pure mix-definition operations.

Components:
  - types: mix type registry (rotation bits, operator count, term count)
  - definition: packed definition DECODE/ENCODE
  - describe: terse and pseudocode renderings
  - shard: image reference → bucketed asset path
  - diffuse: evaluate a decoded mix over concrete words
"""

from .types import (
    MixInfo,
    lookup_type,
    mix_types,
    UnknownTypeError
)
from .definition import (
    Operation,
    MixDescriptor,
    decode_definition,
    encode_definition,
    decode_mix,
    to_signed64,
    to_unsigned64,
    DefinitionError
)
from .describe import (
    terse_string,
    code_string,
    describe_mix
)
from .shard import (
    parse_image_ref,
    mix12bits,
    shard_bucket,
    shard_path,
    InvalidHexFormatError
)
from .diffuse import (
    rotl,
    apply_operations,
    diffuse
)

__all__ = [
    # Types
    "MixInfo",
    "lookup_type",
    "mix_types",
    "UnknownTypeError",

    # Definition codec
    "Operation",
    "MixDescriptor",
    "decode_definition",
    "encode_definition",
    "decode_mix",
    "to_signed64",
    "to_unsigned64",
    "DefinitionError",

    # Description
    "terse_string",
    "code_string",
    "describe_mix",

    # Shard
    "parse_image_ref",
    "mix12bits",
    "shard_bucket",
    "shard_path",
    "InvalidHexFormatError",

    # Evaluator
    "rotl",
    "apply_operations",
    "diffuse",

    # Receipts
    "codec_receipts",
]


def codec_receipts(
    section_label: str,
    fixtures: list[dict],
    image_refs: list[str] | None = None
) -> dict:
    """
    Generate receipts for codec and shard operations over fixed fixtures.

    Args:
        section_label: ASCII identifier (e.g., "codec").
        fixtures: List of dicts with keys:
            - "type_id": str
            - "definition": int
            - "label": str (description)
        image_refs: Hex image references to bucket.

    Returns:
        dict: Receipt digest with codec round-trip and shard proofs.

    Raises:
        UnknownTypeError: If a fixture names an unregistered type.
    """
    from ..core import Receipts, json_hash

    receipts = Receipts(section_label)

    # 1. kernel.params_hash: type table
    table = {t: lookup_type(t) for t in mix_types()}
    receipts.put("kernel.params_hash", json_hash(table))

    # 2. decode_roundtrip: decode then re-encode within definition_bits
    roundtrip = []
    for fix in fixtures:
        type_id = fix["type_id"]
        info = lookup_type(type_id)
        definition = to_unsigned64(fix["definition"])

        operations = decode_definition(type_id, definition)
        reencoded = encode_definition(type_id, operations)
        used_bits = definition & ((1 << info["definition_bits"]) - 1)

        roundtrip.append({
            "label": fix["label"],
            "type_id": type_id,
            "definition": definition,
            "terse": terse_string(operations),
            "operations_hash": json_hash(operations),
            "ignored_high_bits": definition != used_bits,
            "roundtrip_ok": reencoded == used_bits
        })

    receipts.put("decode_roundtrip", roundtrip)
    receipts.put("decode_roundtrip_ok", all(r["roundtrip_ok"] for r in roundtrip))

    # 3. shard_buckets
    buckets = []
    for ref in image_refs or []:
        buckets.append({
            "image_ref": ref,
            "bucket": shard_bucket(ref),
            "path": shard_path(ref)
        })

    receipts.put("shard_buckets", buckets)

    return receipts.digest()
