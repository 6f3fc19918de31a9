from escdecode.cursor import Cursor
from escdecode.decoder import decode
from escdecode.error import (
    DecodeError,
    InvalidEscapeError,
    InvalidHexCharError,
    InvalidUnicodeError,
)
from escdecode.result import DecodeResult
from escdecode.types import ErrorKind

__all__ = [
    "Cursor",
    "DecodeError",
    "DecodeResult",
    "ErrorKind",
    "InvalidEscapeError",
    "InvalidHexCharError",
    "InvalidUnicodeError",
    "decode",
]
