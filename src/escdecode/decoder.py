from typing import List

from escdecode.cursor import Cursor
from escdecode.error import InvalidEscapeError, InvalidHexCharError, InvalidUnicodeError
from escdecode.helpers import is_hex_digit, is_hex_string, is_scalar_value
from escdecode.types import (
    ESCAPE_TABLE,
    HEX_ESCAPE_TAG,
    HEX_ESCAPE_WIDTH,
    MAX_U32,
    UNICODE_CLOSE,
    UNICODE_ESCAPE_TAG,
    UNICODE_OPEN,
)


def decode(text: str) -> str:
    r"""
    Decode the backslash escape sequences in `text` and return the literal
    string they denote.

    Recognised escapes are \t, \n, \r, \0, \\, \", \', two-digit byte
    escapes such as \x41 and braced codepoint escapes such as \u{21B5}.
    The first malformed escape raises a `DecodeError` subclass and nothing
    of the partial output is returned.
    """
    cursor = Cursor(text)
    output: List[str] = []

    for ch in cursor:
        if ch != "\\":
            output.append(ch)
            continue

        tag = cursor.next()
        if tag is None:
            raise InvalidEscapeError("input ends with a lone backslash")
        if tag in ESCAPE_TABLE:
            output.append(ESCAPE_TABLE[tag])
        elif tag == HEX_ESCAPE_TAG:
            output.append(decode_hex_escape(cursor))
        elif tag == UNICODE_ESCAPE_TAG:
            output.append(decode_unicode_escape(cursor))
        else:
            raise InvalidEscapeError(f"unknown escape tag {tag!r}")

    return "".join(output)


def decode_hex_escape(cursor: Cursor) -> str:
    r"""
    Decode the two hex digits following `\x`. Both characters are consumed
    before any error is reported.
    """
    digits = cursor.take(HEX_ESCAPE_WIDTH)
    if len(digits) < HEX_ESCAPE_WIDTH:
        raise InvalidHexCharError(f"expected {HEX_ESCAPE_WIDTH} hex digits")
    if not is_hex_string(digits):
        raise InvalidHexCharError(f"{digits!r} is not a hex byte")
    return chr(int(digits, 16))


def decode_unicode_escape(cursor: Cursor) -> str:
    r"""
    Decode a braced codepoint escape following `\u`, e.g. `{1F600}`.
    """
    if cursor.next() != UNICODE_OPEN:
        raise InvalidUnicodeError(f"expected {UNICODE_OPEN!r}")

    digits: List[str] = []
    while is_hex_digit(cursor.peek()):
        digits.append(cursor.next())

    if cursor.next() != UNICODE_CLOSE:
        raise InvalidUnicodeError(f"expected {UNICODE_CLOSE!r}")
    if not digits:
        raise InvalidUnicodeError("empty codepoint")

    code_point = int("".join(digits), 16)
    if code_point > MAX_U32:
        raise InvalidUnicodeError("codepoint does not fit in 32 bits")
    if not is_scalar_value(code_point):
        raise InvalidUnicodeError(f"{code_point:#x} is not a unicode scalar value")
    return chr(code_point)
