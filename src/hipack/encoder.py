"""Core HiPack encoding functionality."""

import io
import logging
from typing import Any, Optional

from .constants import DEFAULT_INDENT
from .encoders import Serializer
from .errors import HiPackError
from .formatters import CompactFormatter, Formatter, PrettyFormatter
from .types import EncodeOptions, ResolvedEncodeOptions
from .writer import SinkWriter

logger = logging.getLogger(__name__)


def resolve_options(options: Optional[EncodeOptions]) -> ResolvedEncodeOptions:
    """Fill in ``pretty`` (off) and ``indent`` (two spaces) where not given.

    Raises:
        ValueError: If ``indent`` is not a non-negative integer
    """
    if options is None:
        return ResolvedEncodeOptions()

    pretty = bool(options.get("pretty", False))
    indent = options.get("indent", DEFAULT_INDENT)
    if not isinstance(indent, int) or isinstance(indent, bool) or indent < 0:
        raise ValueError(f"indent must be a non-negative integer, got {indent!r}")

    return ResolvedEncodeOptions(pretty=pretty, indent=indent)


def make_formatter(options: ResolvedEncodeOptions) -> Formatter:
    """Build a fresh formatter for one document."""
    if options.pretty:
        return PrettyFormatter(options.indent)
    return CompactFormatter()


def _encode(sink: Any, value: Any, options: ResolvedEncodeOptions) -> None:
    logger.debug("encoding %s value (pretty=%s)", type(value).__name__, options.pretty)
    serializer = Serializer(SinkWriter(sink), make_formatter(options))
    try:
        serializer.serialize(value)
    except HiPackError as exc:
        logger.debug("encoding failed after %d bytes: %s", serializer.writer.offset, exc)
        raise


def to_writer(sink: Any, value: Any, options: Optional[EncodeOptions] = None) -> None:
    """Write a value onto a sink.

    Bytes already written are not rolled back when encoding fails; encode
    into memory first when the destination must stay untouched on error.

    Args:
        sink: Binary file-like object, or an ``io.TextIOBase``
        value: The value to encode
        options: Optional encoding options (compact unless ``pretty`` is set)

    Raises:
        HiPackSyntaxError: If the value graph cannot be represented
        HiPackIOError: If the sink fails
        HiPackEncodingError: If a string cannot be encoded as UTF-8
    """
    _encode(sink, value, resolve_options(options))


def to_writer_pretty(sink: Any, value: Any, indent: int = DEFAULT_INDENT) -> None:
    to_writer(sink, value, {"pretty": True, "indent": indent})


def to_bytes(value: Any, options: Optional[EncodeOptions] = None) -> bytes:
    """Encode a value into HiPack bytes (compact unless ``pretty`` is set)."""
    buffer = io.BytesIO()
    to_writer(buffer, value, options)
    return buffer.getvalue()


def to_bytes_pretty(value: Any, indent: int = DEFAULT_INDENT) -> bytes:
    return to_bytes(value, {"pretty": True, "indent": indent})


def encode(value: Any, options: Optional[EncodeOptions] = None) -> str:
    """Encode a value into HiPack format.

    Args:
        value: The value to encode
        options: Optional encoding options

    Returns:
        HiPack-formatted string
    """
    return to_bytes(value, options).decode("utf-8")
