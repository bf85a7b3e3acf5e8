"""Constants for the HiPack encoder."""

# Container delimiters
OPEN_LIST = "["
CLOSE_LIST = "]"
OPEN_DICT = "{"
CLOSE_DICT = "}"
EMPTY_LIST = "[]"
EMPTY_DICT = "{}"

# Separators
COMMA = ","
COLON = ":"
COLON_SPACE = ": "
NEWLINE = "\n"
SPACE = " "
DOUBLE_QUOTE = '"'

DEFAULT_INDENT = 2

# Literals
TRUE_LITERAL = "True"
FALSE_LITERAL = "False"
NAN_LITERAL = "NaN"
INFINITY_LITERAL = "inf"
NEG_INFINITY_LITERAL = "-inf"

# Named string escapes; other control characters use two hex digits.
ESCAPES = {
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
    '"': '\\"',
    "\\": "\\\\",
}
CONTROL_LIMIT = 0x20

# Integer range (signed 64-bit minimum up to unsigned 64-bit maximum)
INT_MIN = -(2**63)
UINT_MAX = 2**64 - 1

# Characters that cannot appear in a bare key
KEY_FORBIDDEN_CHARS = frozenset(':,[]{}"#')
