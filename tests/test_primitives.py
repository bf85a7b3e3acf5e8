import math

import pytest

from hipack.primitives import (
    encode_bool,
    encode_float,
    encode_int,
    encode_key,
    encode_primitive,
    encode_string,
    escape_string,
    is_valid_key,
)


def test_booleans_are_capitalized() -> None:
    assert encode_bool(True) == "True"
    assert encode_bool(False) == "False"


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, "0"),
        (-34, "-34"),
        (1000000, "1000000"),
        (2**64 - 1, "18446744073709551615"),
        (-(2**63), "-9223372036854775808"),
    ],
)
def test_integers(value: int, expected: str) -> None:
    assert encode_int(value) == expected


@pytest.mark.parametrize("value", [2**64, -(2**63) - 1])
def test_integers_outside_64_bits_overflow(value: int) -> None:
    with pytest.raises(OverflowError):
        encode_int(value)


@pytest.mark.parametrize(
    "value,expected",
    [
        (0.0, "0.0"),
        (-0.0, "-0.0"),
        (1.0, "1.0"),
        (4.5, "4.5"),
        (-3.2, "-3.2"),
        (3.14, "3.14"),
        (1e16, "10000000000000000.0"),
        (1e-07, "0.0000001"),
        (float("nan"), "NaN"),
        (float("inf"), "inf"),
        (float("-inf"), "-inf"),
    ],
)
def test_floats(value: float, expected: str) -> None:
    assert encode_float(value) == expected


@pytest.mark.parametrize("value", [0.1, 1.5e300, 5e-324, 123456789.125, -2.5e-10, 1e22])
def test_finite_floats_have_one_point_and_round_trip(value: float) -> None:
    text = encode_float(value)
    assert text.count(".") == 1
    assert "e" not in text.lower()
    assert float(text) == value


def test_non_finite_floats_have_no_point() -> None:
    assert "." not in encode_float(math.nan)
    assert "." not in encode_float(math.inf)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("", '""'),
        ("foo bar", '"foo bar"'),
        ("☺", '"☺"'),
        ("\n\r\t\\\"", '"\\n\\r\\t\\\\\\""'),
        ("\0", '"\\00"'),
        ("\x0f", '"\\0F"'),
        ("\x1b", '"\\1B"'),
        ("\x7f", '"\x7f"'),
    ],
)
def test_strings(value: str, expected: str) -> None:
    assert encode_string(value) == expected


def test_escape_string_leaves_plain_text_alone() -> None:
    assert escape_string("plain text, with: punctuation") == "plain text, with: punctuation"


@pytest.mark.parametrize("key", ["k", "~t", "café", "a-b_c.d", "x1"])
def test_valid_keys_are_written_verbatim(key: str) -> None:
    assert is_valid_key(key)
    assert encode_key(key) == key


@pytest.mark.parametrize("key", ["", "a b", "a\tb", "a:b", "a,b", "[x", "x]", "{", "}", '"q"', "#c"])
def test_keys_with_delimiters_are_rejected(key: str) -> None:
    assert not is_valid_key(key)
    with pytest.raises(ValueError):
        encode_key(key)


def test_encode_primitive_dispatches_on_type() -> None:
    assert encode_primitive(True) == "True"
    assert encode_primitive(7) == "7"
    assert encode_primitive(7.0) == "7.0"
    assert encode_primitive("7") == '"7"'
    with pytest.raises(TypeError):
        encode_primitive([7])  # type: ignore[arg-type]
