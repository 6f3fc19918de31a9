from escdecode.types import HEX_DIGITS, MAX_CODE_POINT, SURROGATE_RANGE


def is_hex_digit(ch: str | None) -> bool:
    return ch is not None and ch in HEX_DIGITS


def is_hex_string(text: str) -> bool:
    return bool(text) and all(is_hex_digit(ch) for ch in text)


def is_scalar_value(code_point: int) -> bool:
    if code_point < 0 or code_point > MAX_CODE_POINT:
        return False
    return code_point not in SURROGATE_RANGE
