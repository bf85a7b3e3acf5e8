"""Normalization of Python values into HiPack value kinds."""

import dataclasses
from collections.abc import Iterable, Iterator, Mapping, MappingView, Set, Sized
from typing import Any

from .types import HiPackSerializable


def _dump_model(value: Any) -> Any:
    # pydantic v2 first, then v1
    if callable(getattr(value, "model_dump", None)) and isinstance(getattr(type(value), "model_fields", None), dict):
        return value.model_dump()
    if isinstance(getattr(type(value), "__fields__", None), dict) and callable(getattr(value, "dict", None)):
        return value.dict()
    return value


def normalize_value(value: Any) -> Any:
    """Normalize one level of a value for encoding.

    Dataclass instances become a dict of their fields in declaration order
    and pydantic models become the dict of their dumped fields. Nested values
    are left alone; the serializer normalizes them as it reaches them.

    Args:
        value: Value to normalize

    Returns:
        Normalized value
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {field.name: getattr(value, field.name) for field in dataclasses.fields(value)}
    return _dump_model(value)


def is_primitive(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


def is_sized_sequence(value: Any) -> bool:
    """Check if a value is an ordered collection with a known length.

    Lists, tuples, ranges, deques, dict views and any other sized iterable
    qualify. Text and binary types, mappings and sets do not; dict key and
    item views are accepted even though they are sets, since they follow the
    order of their mapping.
    """
    if isinstance(value, (str, bytes, bytearray, memoryview)) or isinstance(value, Mapping):
        return False
    if isinstance(value, MappingView):
        return True
    return isinstance(value, Sized) and isinstance(value, Iterable) and not isinstance(value, Set)


def is_iterator(value: Any) -> bool:
    return isinstance(value, Iterator)


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_self_describing(value: Any) -> bool:
    """Check if a value implements ``__hipack_serialize__``."""
    return not isinstance(value, type) and isinstance(value, HiPackSerializable)
