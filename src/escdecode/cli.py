from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from escdecode.decoder import decode
from escdecode.error import DecodeError
from escdecode.result import DecodeResult

if TYPE_CHECKING:
    from typing import Final, Sequence


_LOGGER: Final = logging.getLogger(__name__)

LOG_FORMAT: Final = "%(levelname)s %(asctime)s %(name)s - %(message)s"


def loglevel(level: str) -> int:
    res = getattr(logging, level.upper(), None)

    if isinstance(res, int):
        return res

    try:
        return int(level)
    except ValueError:
        raise ValueError(f"Invalid log level: {level}") from None


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="escdecode",
        description="Decode backslash escape sequences (\\n, \\x41, \\u{21B5}, ...) into literal text",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Escaped text to decode. Reads stdin when omitted.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON result document per input",
    )
    parser.add_argument(
        "--log-level",
        type=loglevel,
        default=logging.WARNING,
        help="Logging level name or number",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    inputs: list[str] = args.text or [read_stdin()]
    as_json: bool = args.json

    failed = False
    for text in inputs:
        if not decode_command(text, as_json):
            failed = True

    if failed:
        sys.exit(1)


def read_stdin() -> str:
    data = sys.stdin.read()
    if data.endswith("\n"):
        data = data[:-1]
    return data


def decode_command(text: str, as_json: bool) -> bool:
    _LOGGER.debug(f"Decoding input: {text!r}")

    if as_json:
        result = DecodeResult.from_text(text)
        print(result.model_dump_json())
        if not result.ok:
            _LOGGER.info(f"Failed to decode {text!r}: {result.error}")
        return result.ok

    try:
        decoded = decode(text)
    except DecodeError as e:
        _LOGGER.info(f"Failed to decode {text!r}: {e}")
        print(f"error: {e.kind.value}", file=sys.stderr)
        return False

    print(decoded)
    return True


if __name__ == "__main__":
    main()
