"""Scalar encoding: the exact text of booleans, numbers, strings and keys."""

import math
from decimal import Decimal

from .constants import (
    CONTROL_LIMIT,
    DOUBLE_QUOTE,
    ESCAPES,
    FALSE_LITERAL,
    INFINITY_LITERAL,
    INT_MIN,
    KEY_FORBIDDEN_CHARS,
    NAN_LITERAL,
    NEG_INFINITY_LITERAL,
    TRUE_LITERAL,
    UINT_MAX,
)
from .types import HiPackPrimitive


def encode_bool(value: bool) -> str:
    return TRUE_LITERAL if value else FALSE_LITERAL


def is_encodable_int(value: int) -> bool:
    """Check that an integer fits a signed or unsigned 64-bit slot."""
    return INT_MIN <= value <= UINT_MAX


def encode_int(value: int) -> str:
    """Encode an integer as plain decimal.

    Raises:
        OverflowError: If the value does not fit in 64 bits
    """
    if not is_encodable_int(value):
        raise OverflowError(f"integer out of 64-bit range: {value}")
    return str(int(value))


def encode_float(value: float) -> str:
    """Encode a float as its shortest round-tripping decimal text.

    Finite values always contain a ``.``; ``1.0`` stays ``1.0`` and exponent
    forms are expanded to positional notation. NaN and the infinities are
    written as ``NaN``, ``inf`` and ``-inf`` without a decimal suffix.

    Args:
        value: Float to encode

    Returns:
        Encoded float text
    """
    if math.isnan(value):
        return NAN_LITERAL
    if math.isinf(value):
        return INFINITY_LITERAL if value > 0 else NEG_INFINITY_LITERAL

    text = repr(float(value))
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if "." not in text:
        text += ".0"
    return text


def escape_string(value: str) -> str:
    """Escape special characters in a string.

    Tab, newline, carriage return, double quote and backslash get their
    backslash escapes; any other character below 0x20 becomes a backslash
    followed by two uppercase hex digits. Everything else passes through.

    Args:
        value: String to escape

    Returns:
        Escaped string
    """
    out = []
    for ch in value:
        escaped = ESCAPES.get(ch)
        if escaped is not None:
            out.append(escaped)
        elif ord(ch) < CONTROL_LIMIT:
            out.append(f"\\{ord(ch):02X}")
        else:
            out.append(ch)
    return "".join(out)


def encode_string(value: str) -> str:
    return f"{DOUBLE_QUOTE}{escape_string(value)}{DOUBLE_QUOTE}"


def is_valid_key(key: str) -> bool:
    """Check if a key can be written as a bare token.

    Args:
        key: Key to check

    Returns:
        True if key is non-empty and has no whitespace or delimiter characters
    """
    if not key:
        return False
    for ch in key:
        if ch.isspace() or ch in KEY_FORBIDDEN_CHARS:
            return False
    return True


def encode_key(key: str) -> str:
    """Encode a mapping key as a bare token.

    Raises:
        ValueError: If the key cannot be written unquoted
    """
    if not is_valid_key(key):
        raise ValueError(f"key cannot be written as a bare token: {key!r}")
    return key


def encode_primitive(value: HiPackPrimitive) -> str:
    """Encode a primitive value.

    Args:
        value: Primitive value (bool, int, float or str)

    Returns:
        Encoded string
    """
    if isinstance(value, bool):
        return encode_bool(value)
    if isinstance(value, int):
        return encode_int(value)
    if isinstance(value, float):
        return encode_float(value)
    if isinstance(value, str):
        return encode_string(value)
    raise TypeError(f"not a primitive: {type(value)!r}")
