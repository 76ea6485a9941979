"""
Description renderer tests

Verifies terse strings, the Feistel pseudocode form, and describe_mix().
"""

import pytest

from arxmix.kernel import (
    decode_definition,
    terse_string,
    code_string,
    describe_mix,
    UnknownTypeError,
)


def test_terse_zero_8x2():
    """8x2 definition 0 renders as four ADD 0."""
    assert terse_string(decode_definition("8x2", 0)) == "ADD 0 ADD 0 ADD 0 ADD 0"


def test_terse_mixed():
    assert terse_string(decode_definition("8x2", 0xA29C)) == "XOR 1 ADD 2 XOR 3 ADD 4"


def test_terse_empty():
    assert terse_string([]) == ""


def test_terse_no_trailing_space():
    s = terse_string(decode_definition("64x4", -1))
    assert s == " ".join(["XOR 63"] * 8)
    assert not s.endswith(" ")


def test_code_8x2():
    """Two terms: receiver alternates a/b, argument is the other one."""
    code = code_string(decode_definition("8x2", 0xA29C), 2)
    assert code == (
        "a ^= ROTL(b,1);\n"
        "b += ROTL(a,2);\n"
        "a ^= ROTL(b,3);\n"
        "b += ROTL(a,4);\n"
    )


def test_code_32x3_chain():
    """Three terms: a<-c, b<-a, c<-b, repeated."""
    code = code_string(decode_definition("32x3", 0), 3)
    assert code.splitlines() == [
        "a += ROTL(c,0);",
        "b += ROTL(a,0);",
        "c += ROTL(b,0);",
        "a += ROTL(c,0);",
        "b += ROTL(a,0);",
        "c += ROTL(b,0);",
    ]


def test_code_64x4_chain():
    """Four terms: argument starts at d."""
    code = code_string(decode_definition("64x4", (1 << 64) - 1), 4)
    lines = code.splitlines()
    assert len(lines) == 8
    assert lines[0] == "a ^= ROTL(d,63);"
    assert lines[3] == "d ^= ROTL(c,63);"
    assert lines[4] == "a ^= ROTL(d,63);"
    assert lines[7] == "d ^= ROTL(c,63);"


def test_code_line_count_matches_operations():
    ops = decode_definition("16x4", 0x123456789)
    assert code_string(ops, 4).count("\n") == len(ops) == 8


@pytest.mark.parametrize("terms", [0, 5, -1])
def test_code_bad_term_count(terms):
    with pytest.raises(ValueError):
        code_string(decode_definition("8x2", 0), terms)


def test_describe_mix():
    d = describe_mix("8x2", 0xA29C)
    assert d["type_id"] == "8x2"
    assert d["definition"] == 0xA29C
    assert d["terse"] == "XOR 1 ADD 2 XOR 3 ADD 4"
    assert d["code"].startswith("a ^= ROTL(b,1);\n")
    assert len(d["operations"]) == 4


def test_describe_unknown_type():
    with pytest.raises(UnknownTypeError):
        describe_mix("32x8", 0)
