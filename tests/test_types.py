"""
Mix type registry tests

Verifies:
  - All twelve type ids resolve with the frozen parameters
  - operator_count and term_count are independent tables
  - Unknown ids fail explicitly
  - Type tables agree with param_registry()
"""

import pytest

from arxmix.core import param_registry
from arxmix.kernel import lookup_type, mix_types, UnknownTypeError


EXPECTED = {
    "8x2": (8, 3, 4, 2), "8x3": (8, 3, 6, 3), "8x4": (8, 3, 8, 4),
    "16x2": (16, 4, 4, 2), "16x3": (16, 4, 6, 3), "16x4": (16, 4, 8, 4),
    "32x2": (32, 5, 4, 2), "32x3": (32, 5, 6, 3), "32x4": (32, 5, 8, 4),
    "64x2": (64, 6, 4, 2), "64x3": (64, 6, 6, 3), "64x4": (64, 6, 8, 4),
}


def test_mix_types_frozen_order():
    """Type ids are listed width-major, terms-minor."""
    assert mix_types() == [
        "8x2", "8x3", "8x4",
        "16x2", "16x3", "16x4",
        "32x2", "32x3", "32x4",
        "64x2", "64x3", "64x4",
    ]


def test_lookup_all_types():
    """Every registered type returns its exact parameters."""
    for type_id, (width, rot_bits, ops, terms) in EXPECTED.items():
        info = lookup_type(type_id)
        assert info["type_id"] == type_id
        assert info["width"] == width, f"{type_id} width"
        assert info["rotation_bits"] == rot_bits, f"{type_id} rotation_bits"
        assert info["operator_count"] == ops, f"{type_id} operator_count"
        assert info["term_count"] == terms, f"{type_id} term_count"
        assert info["definition_bits"] == ops * (rot_bits + 1)
        assert info["definition_bits"] <= 64

    print("✓ All 12 types resolve")


def test_rotation_bits_cover_width():
    """A rotation field can express every amount 0..width-1 and no more."""
    for type_id in mix_types():
        info = lookup_type(type_id)
        assert 1 << info["rotation_bits"] == info["width"]


def test_counts_depend_only_on_terms():
    """operator_count is twice term_count for every width."""
    for type_id in mix_types():
        info = lookup_type(type_id)
        terms = int(type_id.split("x")[1])
        assert info["term_count"] == terms
        assert info["operator_count"] == 2 * terms


def test_lookup_returns_fresh_dict():
    """Mutating a lookup result does not leak into later lookups."""
    info = lookup_type("32x3")
    info["operator_count"] = 99
    assert lookup_type("32x3")["operator_count"] == 6


@pytest.mark.parametrize("bad", ["", "8X2", "8x5", "128x2", "x2", " 8x2", "8x2 ", None, 82])
def test_unknown_type_rejected(bad):
    """Unrecognised ids raise UnknownTypeError instead of defaulting."""
    with pytest.raises(UnknownTypeError) as exc:
        lookup_type(bad)
    assert exc.value.type_id == bad


def test_unknown_type_is_value_error():
    """UnknownTypeError is catchable as ValueError."""
    with pytest.raises(ValueError):
        lookup_type("16x16")


def test_tables_match_param_registry():
    """Type tables and the frozen registry describe the same types."""
    registry_types = param_registry()["mix_types"]
    assert list(registry_types.keys()) == mix_types()
    for type_id, (rot_bits, ops, terms) in registry_types.items():
        info = lookup_type(type_id)
        assert [info["rotation_bits"], info["operator_count"], info["term_count"]] == [rot_bits, ops, terms]
