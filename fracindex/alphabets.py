from functools import lru_cache
from typing import Dict

BASE_10_DIGITS = "0123456789"
BASE_36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
BASE_62_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE_95_DIGITS = "".join(chr(c) for c in range(ord(" "), ord("~") + 1))

DEFAULT_DIGITS = BASE_62_DIGITS

ALPHABETS: Dict[str, str] = {
    "base10": BASE_10_DIGITS,
    "base36": BASE_36_DIGITS,
    "base62": BASE_62_DIGITS,
    "base95": BASE_95_DIGITS,
}


@lru_cache(maxsize=32)
def digit_index(digits: str) -> Dict[str, int]:
    """Map each character of ``digits`` to its digit value."""
    return {ch: i for i, ch in enumerate(digits)}


def check_digits(digits: str) -> str:
    """Return ``digits`` unchanged if it is a usable alphabet.

    An alphabet needs at least two characters, no repeats, and characters in
    strictly increasing ordinal order so that string comparison of keys
    agrees with digit values.
    """
    if len(digits) < 2:
        raise ValueError("alphabet needs at least 2 digits")
    for i in range(1, len(digits)):
        if digits[i] in digits[:i]:
            raise ValueError(f"duplicate digit {digits[i]!r} in alphabet")
        if digits[i - 1] > digits[i]:
            raise ValueError(
                f"alphabet is not in ordinal order at {digits[i - 1]!r}, {digits[i]!r}"
            )
    return digits
