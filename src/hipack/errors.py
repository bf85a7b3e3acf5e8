"""Exceptions raised while encoding HiPack."""

from enum import Enum
from typing import Optional, Union


class ErrorCode(Enum):
    """Reasons a value graph cannot be written as HiPack."""

    INVALID_KEY = "Invalid key"
    UNREPRESENTABLE_VALUE = "Value cannot be represented"

    def __str__(self) -> str:
        return self.value


class HiPackError(Exception):
    """Base class for every error raised by the encoder."""


class HiPackSyntaxError(HiPackError, ValueError):
    """The value graph cannot be expressed in the format.

    Attributes:
        code: Which representability rule was violated
        offset: Byte offset in the output where the offending value starts
        line: 1-based output line of that position
        column: 1-based output column (in bytes) of that position
    """

    def __init__(self, code: ErrorCode, offset: int = 0, line: int = 0, column: int = 0) -> None:
        self.code = code
        self.offset = offset
        self.line = line
        self.column = column
        super().__init__(f"{code} at line {line} column {column}")


class HiPackIOError(HiPackError):
    """Writing to the output sink failed."""

    def __init__(self, error: Union[OSError, ValueError]) -> None:
        self.error = error
        super().__init__(str(error))


class HiPackEncodingError(HiPackError, ValueError):
    """Text could not be converted to UTF-8 bytes."""

    def __init__(self, error: UnicodeError, text: Optional[str] = None) -> None:
        self.error = error
        self.text = text
        super().__init__(str(error))
