from enum import Enum
from typing import Dict, Set


class ErrorKind(Enum):
    INVALID_ESCAPE = "InvalidEscape"
    INVALID_HEX_CHAR = "InvalidHexChar"
    INVALID_UNICODE = "InvalidUnicode"


ESCAPE_TABLE: Dict[str, str] = {
    "t": "\t",
    "n": "\n",
    "r": "\r",
    "0": "\0",
    "\\": "\\",
    '"': '"',
    "'": "'",
}

HEX_ESCAPE_TAG = "x"
UNICODE_ESCAPE_TAG = "u"

HEX_DIGITS: Set[str] = set("0123456789abcdefABCDEF")

HEX_ESCAPE_WIDTH = 2
UNICODE_OPEN = "{"
UNICODE_CLOSE = "}"

MAX_U32 = 0xFFFFFFFF
MAX_CODE_POINT = 0x10FFFF
SURROGATE_RANGE = range(0xD800, 0xE000)
