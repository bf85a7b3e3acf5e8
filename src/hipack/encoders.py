"""Encoders for different value types."""

from typing import Any, Iterable, Optional, Tuple

from .constants import CLOSE_DICT, CLOSE_LIST, EMPTY_DICT, EMPTY_LIST, OPEN_DICT, OPEN_LIST
from .errors import ErrorCode, HiPackSyntaxError
from .formatters import Formatter
from .normalize import (
    is_iterator,
    is_mapping,
    is_self_describing,
    is_sized_sequence,
    normalize_value,
)
from .primitives import encode_bool, encode_float, encode_int, encode_key, encode_string
from .writer import SinkWriter


class Serializer:
    """Streams a value graph onto a sink.

    The formatter supplies container and separator punctuation, scalars are
    written in the same way in every mode. A serializer holds the formatter's
    indentation state, so use a fresh one for every document.

    Args:
        writer: Checked writer wrapping the output sink
        formatter: Punctuation strategy (compact or pretty)
    """

    def __init__(self, writer: SinkWriter, formatter: Formatter) -> None:
        self.writer = writer
        self.formatter = formatter

    def _error(self, code: ErrorCode) -> HiPackSyntaxError:
        return HiPackSyntaxError(code, *self.writer.position())

    def serialize(self, value: Any) -> None:
        """Encode any supported value.

        Args:
            value: Value to encode
        """
        if is_self_describing(value):
            value.__hipack_serialize__(self)
            return

        value = normalize_value(value)
        if value is None:
            self.serialize_none()
        elif isinstance(value, bool):
            self.serialize_bool(value)
        elif isinstance(value, int):
            self.serialize_int(value)
        elif isinstance(value, float):
            self.serialize_float(value)
        elif isinstance(value, str):
            self.serialize_str(value)
        elif is_sized_sequence(value):
            self.serialize_seq(value, len(value))
        elif is_mapping(value):
            self.serialize_map(value.items(), len(value))
        elif is_iterator(value):
            self.serialize_seq(value)
        else:
            raise self._error(ErrorCode.UNREPRESENTABLE_VALUE)

    def serialize_bool(self, value: bool) -> None:
        self.writer.write(encode_bool(value))

    def serialize_int(self, value: int) -> None:
        try:
            text = encode_int(value)
        except OverflowError as exc:
            raise self._error(ErrorCode.UNREPRESENTABLE_VALUE) from exc
        self.writer.write(text)

    def serialize_float(self, value: float) -> None:
        self.writer.write(encode_float(value))

    def serialize_str(self, value: str) -> None:
        self.writer.write(encode_string(value))

    def serialize_none(self) -> None:
        """Absent values have no spelling in the format."""
        raise self._error(ErrorCode.UNREPRESENTABLE_VALUE)

    def serialize_seq(self, items: Iterable[Any], length: Optional[int] = None) -> None:
        """Encode a sequence.

        Args:
            items: Elements in output order
            length: Number of elements if known; zero writes ``[]`` directly
        """
        if length == 0:
            self.writer.write(EMPTY_LIST)
            return

        self.formatter.begin_container(self.writer, OPEN_LIST)
        first = True
        for item in items:
            self.formatter.item_separator(self.writer, first)
            self.serialize(item)
            first = False
        self.formatter.end_container(self.writer, CLOSE_LIST)

    def serialize_map(self, pairs: Iterable[Tuple[Any, Any]], length: Optional[int] = None) -> None:
        """Encode a mapping, keeping the order in which pairs arrive.

        Each key goes through ``KeySerializer`` before anything of its entry
        is written, so a rejected key leaves no separator or partial text.

        Args:
            pairs: (key, value) pairs in output order
            length: Number of pairs if known; zero writes ``{}`` directly
        """
        if length == 0:
            self.writer.write(EMPTY_DICT)
            return

        self.formatter.begin_container(self.writer, OPEN_DICT)
        first = True
        for key, value in pairs:
            token = KeySerializer(self).encode(key)
            self.formatter.item_separator(self.writer, first)
            self.writer.write(token)
            self.formatter.key_value_separator(self.writer)
            self.serialize(value)
            first = False
        self.formatter.end_container(self.writer, CLOSE_DICT)


class KeySerializer:
    """Restricted serializer used for mapping keys.

    Only strings are accepted, and only those that form a valid bare token.
    Every other kind fails with ``ErrorCode.INVALID_KEY``. Keys are
    collected rather than written so the caller decides when to emit them.

    Args:
        parent: Serializer encoding the enclosing mapping
    """

    def __init__(self, parent: Serializer) -> None:
        self.parent = parent
        self.token: Optional[str] = None

    def _invalid(self, *args: Any, **kwargs: Any) -> None:
        raise self.parent._error(ErrorCode.INVALID_KEY)

    serialize_bool = _invalid
    serialize_int = _invalid
    serialize_float = _invalid
    serialize_none = _invalid
    serialize_seq = _invalid
    serialize_map = _invalid

    def serialize_str(self, value: str) -> None:
        try:
            self.token = encode_key(value)
        except ValueError as exc:
            raise self.parent._error(ErrorCode.INVALID_KEY) from exc

    def serialize(self, value: Any) -> None:
        if is_self_describing(value):
            value.__hipack_serialize__(self)
        elif isinstance(value, str):
            self.serialize_str(value)
        else:
            self._invalid()

    def encode(self, key: Any) -> str:
        """Return the bare token for a key.

        Raises:
            HiPackSyntaxError: If the key is not a valid string key
        """
        self.serialize(key)
        if self.token is None:
            self._invalid()
        return self.token
