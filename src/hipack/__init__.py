"""
hipack - HiPack encoding for Python

Writes booleans, numbers, strings, lists and mappings in the HiPack text
format, either compact on a single line or indented for humans.
"""

import logging

from .encoder import encode, to_bytes, to_bytes_pretty, to_writer, to_writer_pretty
from .encoders import KeySerializer, Serializer
from .errors import ErrorCode, HiPackEncodingError, HiPackError, HiPackIOError, HiPackSyntaxError
from .formatters import CompactFormatter, Formatter, PrettyFormatter
from .types import EncodeOptions, HiPackSerializable
from .writer import SinkWriter

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "encode",
    "to_bytes",
    "to_bytes_pretty",
    "to_writer",
    "to_writer_pretty",
    "Serializer",
    "KeySerializer",
    "SinkWriter",
    "Formatter",
    "CompactFormatter",
    "PrettyFormatter",
    "EncodeOptions",
    "HiPackSerializable",
    "ErrorCode",
    "HiPackError",
    "HiPackSyntaxError",
    "HiPackIOError",
    "HiPackEncodingError",
]
