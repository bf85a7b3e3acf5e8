"""Type definitions for hipack."""

from typing import TYPE_CHECKING, Protocol, TypedDict, Union, runtime_checkable

if TYPE_CHECKING:
    from .encoders import Serializer

# Scalars with a direct spelling in the format
HiPackPrimitive = Union[str, int, float, bool]


class EncodeOptions(TypedDict, total=False):
    """Options for HiPack encoding.

    Attributes:
        pretty: Use the indented, one-item-per-line rendering (default: False)
        indent: Number of spaces per indentation level in pretty mode (default: 2)
    """

    pretty: bool
    indent: int


class ResolvedEncodeOptions:
    """Output mode for one encode call: compact or pretty, and the pretty indent width."""

    def __init__(self, pretty: bool = False, indent: int = 2) -> None:
        self.pretty = pretty
        self.indent = indent


@runtime_checkable
class HiPackSerializable(Protocol):
    """An object that knows how to describe itself to a serializer.

    Implementations call exactly one of the serializer's ``serialize_*``
    methods (or ``serialize``) with their content.
    """

    def __hipack_serialize__(self, serializer: "Serializer") -> None: ...


# Depth type for tracking indentation level
Depth = int
