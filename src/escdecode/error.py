from typing import ClassVar

from escdecode.types import ErrorKind


class DecodeError(ValueError):
    kind: ClassVar[ErrorKind]

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.kind.value + (f": {message}" if message else ""))
        self.message = message


class InvalidEscapeError(DecodeError):
    kind = ErrorKind.INVALID_ESCAPE


class InvalidHexCharError(DecodeError):
    kind = ErrorKind.INVALID_HEX_CHAR


class InvalidUnicodeError(DecodeError):
    kind = ErrorKind.INVALID_UNICODE
