"""
Mix Entry Records

Parse mix candidate records handed over by the data-access layer and turn
them into the payload a display layer needs.

Accepted record forms:
  - API form: {"type", "definition", "avScore1".."avScore4", "avImage1".."avImage4"}
  - list form: {"type", "definition", "avalanche_scores": [4], "avalanche_image_refs": [4]}

Score i / image i belong to the mix run for i rounds.
"""

from typing import Any, TypedDict

from .kernel import (
    lookup_type,
    describe_mix,
    shard_path,
    to_unsigned64,
    DefinitionError
)
from .kernel.shard import IMAGE_PATH_PREFIX


ROUNDS = 4


class MixEntry(TypedDict):
    """One mix candidate as returned by the backend."""
    type_id: str
    definition: int  # signed int64 as stored
    avalanche_scores: list[float]  # rounds 1..4
    avalanche_image_refs: list[str]  # rounds 1..4


def parse_mix_entry(obj: dict) -> MixEntry:
    """
    Validate and normalise a raw record.

    Args:
        obj: Decoded JSON object in API or list form.

    Returns:
        MixEntry: Normalised record.

    Raises:
        EntryError: If a field is missing or has the wrong type.
        UnknownTypeError: If the type id is not registered.
    """
    if not isinstance(obj, dict):
        raise EntryError(f"Mix entry must be an object, got {type(obj).__name__}")

    if "type" not in obj:
        raise EntryError("Mix entry missing 'type'")
    type_id = obj["type"]
    lookup_type(type_id)

    if "definition" not in obj:
        raise EntryError("Mix entry missing 'definition'")
    definition = obj["definition"]
    try:
        to_unsigned64(definition)
    except DefinitionError as e:
        raise EntryError(f"Bad definition: {e}") from e

    if "avalanche_scores" in obj or "avalanche_image_refs" in obj:
        scores = obj.get("avalanche_scores")
        images = obj.get("avalanche_image_refs")
    else:
        scores = [obj.get(f"avScore{i}") for i in range(1, ROUNDS + 1)]
        images = [obj.get(f"avImage{i}") for i in range(1, ROUNDS + 1)]

    scores = _check_list(scores, "avalanche_scores", _is_number)
    images = _check_list(images, "avalanche_image_refs", lambda x: isinstance(x, str))

    return {
        "type_id": type_id,
        "definition": definition,
        "avalanche_scores": [float(s) for s in scores],
        "avalanche_image_refs": list(images),
    }


def render_entry(entry: MixEntry, prefix: str = IMAGE_PATH_PREFIX) -> dict:
    """
    Build the display payload for an entry.

    Returns:
        dict: describe_mix() output plus avalanche_scores and image_paths.

    Raises:
        UnknownTypeError: If the entry's type is not registered.
        InvalidHexFormatError: If an image reference is not 64-bit hex.
    """
    payload = describe_mix(entry["type_id"], entry["definition"])
    payload["avalanche_scores"] = list(entry["avalanche_scores"])
    payload["image_paths"] = [
        shard_path(ref, prefix) for ref in entry["avalanche_image_refs"]
    ]
    return payload


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _check_list(values: Any, name: str, check) -> list:
    if not isinstance(values, list) or len(values) != ROUNDS:
        raise EntryError(f"'{name}' must hold {ROUNDS} values, got {values!r}")
    for i, v in enumerate(values):
        if not check(v):
            raise EntryError(f"'{name}'[{i}] has invalid value {v!r}")
    return values


class EntryError(ValueError):
    """Raised when a mix record is missing fields or has malformed values."""
    pass
