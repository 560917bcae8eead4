"""Fractional order keys.

A key is an integer part followed by an optional fractional part. The first
character of the integer part (the head) encodes how long the integer part
is: ``a``..``z`` give lengths 2..27 and ``A``..``Z`` give lengths 27..2, so
integers grow without bound in both directions while keys still compare
correctly as plain strings. The fractional part is a run of digits that
never ends in the zero digit.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .alphabets import DEFAULT_DIGITS, digit_index
from .errors import Exhausted, InvalidHead, InvalidKey, OrderViolation

logger = logging.getLogger(__name__)

INTEGER_ZERO_HEAD = "a"
SENTINEL_HEAD = "A"
SENTINEL_WIDTH = 26


def smallest_integer(digits: str = DEFAULT_DIGITS) -> str:
    """The reserved lower sentinel: no key may equal it."""
    return SENTINEL_HEAD + digits[0] * SENTINEL_WIDTH


def get_integer_length(head: str) -> int:
    if "a" <= head <= "z":
        return ord(head) - ord("a") + 2
    if "A" <= head <= "Z":
        return ord("Z") - ord(head) + 2
    raise InvalidHead(head)


def get_integer_part(key: str) -> str:
    if not key:
        raise InvalidKey(key)
    length = get_integer_length(key[0])
    if length > len(key):
        raise InvalidKey(key)
    return key[:length]


def validate_integer(x: str) -> None:
    if len(x) != get_integer_length(x[0]):
        raise InvalidKey(x, f"invalid integer part of order key: {x}")


def validate_order_key(key: str, digits: str = DEFAULT_DIGITS) -> None:
    """Raise :class:`InvalidKey` (or :class:`InvalidHead`) unless ``key`` is usable."""
    if key == smallest_integer(digits):
        raise InvalidKey(key)
    integer = get_integer_part(key)
    fraction = key[len(integer):]
    if fraction[-1:] == digits[0]:
        raise InvalidKey(key)
    index = digit_index(digits)
    if any(ch not in index for ch in key[1:]):
        raise InvalidKey(key)


def is_valid_order_key(key: str, digits: str = DEFAULT_DIGITS) -> bool:
    try:
        validate_order_key(key, digits)
    except InvalidKey:
        return False
    return True


def increment_integer(x: str, digits: str = DEFAULT_DIGITS) -> Optional[str]:
    """Return the integer part one step above ``x``, or None past the top."""
    validate_integer(x)
    index = digit_index(digits)
    head, digs = x[0], list(x[1:])
    carry = True
    for i in range(len(digs) - 1, -1, -1):
        d = index[digs[i]] + 1
        if d == len(digits):
            digs[i] = digits[0]
        else:
            digs[i] = digits[d]
            carry = False
            break
    if not carry:
        return head + "".join(digs)
    if head == "Z":
        return INTEGER_ZERO_HEAD + digits[0]
    if head == "z":
        return None
    h = chr(ord(head) + 1)
    if h > "a":
        digs.append(digits[0])
    else:
        digs.pop()
    return h + "".join(digs)


def decrement_integer(x: str, digits: str = DEFAULT_DIGITS) -> Optional[str]:
    """Return the integer part one step below ``x``, or None past the bottom."""
    validate_integer(x)
    index = digit_index(digits)
    head, digs = x[0], list(x[1:])
    borrow = True
    for i in range(len(digs) - 1, -1, -1):
        d = index[digs[i]] - 1
        if d == -1:
            digs[i] = digits[-1]
        else:
            digs[i] = digits[d]
            borrow = False
            break
    if not borrow:
        return head + "".join(digs)
    if head == "a":
        return "Z" + digits[-1]
    if head == "A":
        return None
    h = chr(ord(head) - 1)
    if h < "Z":
        digs.append(digits[-1])
    else:
        digs.pop()
    return h + "".join(digs)


def midpoint(a: str, b: Optional[str], digits: str = DEFAULT_DIGITS) -> str:
    """Return the shortest fraction strictly between fractions ``a`` and ``b``.

    ``b`` may be None for "no upper bound". Neither input may end in the zero
    digit.
    """
    zero = digits[0]
    if b is not None and a >= b:
        raise OrderViolation(a, b)
    if a[-1:] == zero:
        raise InvalidKey(a, "trailing zero")
    if b is not None and b[-1:] == zero:
        raise InvalidKey(b, "trailing zero")
    if b is not None:
        # Strip the common prefix, reading `a` as zero-padded. `b` cannot run
        # out first: that would make a >= b or leave b ending in zero.
        n = 0
        while (a[n] if n < len(a) else zero) == b[n]:
            n += 1
        if n > 0:
            return b[:n] + midpoint(a[n:], b[n:], digits)

    index = digit_index(digits)
    digit_a = index[a[0]] if a else 0
    digit_b = index[b[0]] if b is not None else len(digits)
    if digit_b - digit_a > 1:
        return digits[(digit_a + digit_b + 1) // 2]

    # First digits are consecutive.
    if b is not None and len(b) > 1:
        return b[0]
    # e.g. midpoint("49", "5") -> "4" + midpoint("9", None) -> "495"
    return digits[digit_a] + midpoint(a[1:], None, digits)


def generate_key_between(
    a: Optional[str], b: Optional[str], digits: str = DEFAULT_DIGITS
) -> str:
    """Return a key that sorts strictly between ``a`` and ``b``.

    ``a`` is None when inserting at the start, ``b`` is None when inserting
    at the end. Both None gives the first key of an empty sequence.
    """
    if a is not None:
        validate_order_key(a, digits)
    if b is not None:
        validate_order_key(b, digits)
    if a is not None and b is not None and a >= b:
        raise OrderViolation(a, b)

    if a is None:
        if b is None:
            return INTEGER_ZERO_HEAD + digits[0]
        ib = get_integer_part(b)
        fb = b[len(ib):]
        if ib == smallest_integer(digits):
            logger.debug("key %s sits on the lower sentinel, extending fraction", b)
            return ib + midpoint("", fb, digits)
        if ib < b:
            return ib
        res = decrement_integer(ib, digits)
        if res is None:
            logger.warning("integer part %s cannot be decremented", ib)
            raise Exhausted("decrement")
        if res == smallest_integer(digits):
            return res + midpoint("", None, digits)
        return res

    if b is None:
        ia = get_integer_part(a)
        fa = a[len(ia):]
        i = increment_integer(ia, digits)
        if i is None:
            logger.debug("key %s is at the largest integer, extending fraction", a)
            return ia + midpoint(fa, None, digits)
        return i

    ia = get_integer_part(a)
    fa = a[len(ia):]
    ib = get_integer_part(b)
    fb = b[len(ib):]
    if ia == ib:
        return ia + midpoint(fa, fb, digits)
    i = increment_integer(ia, digits)
    if i is None:
        logger.warning("integer part %s cannot be incremented", ia)
        raise Exhausted("increment")
    if i < b:
        return i
    return ia + midpoint(fa, None, digits)


def generate_n_keys_between(
    a: Optional[str], b: Optional[str], n: int, digits: str = DEFAULT_DIGITS
) -> List[str]:
    """Return ``n`` ascending keys strictly between ``a`` and ``b``.

    With both bounds present the range is split around a pivot key, so key
    length grows with log(n) rather than n.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    if n == 0:
        return []
    if n == 1:
        return [generate_key_between(a, b, digits)]

    if b is None:
        c = generate_key_between(a, b, digits)
        result = [c]
        for _ in range(n - 1):
            c = generate_key_between(c, b, digits)
            result.append(c)
        return result

    if a is None:
        c = generate_key_between(a, b, digits)
        result = [c]
        for _ in range(n - 1):
            c = generate_key_between(a, c, digits)
            result.append(c)
        result.reverse()
        return result

    mid = n // 2
    c = generate_key_between(a, b, digits)
    logger.debug("splitting %d keys between %s and %s around %s", n, a, b, c)
    return [
        *generate_n_keys_between(a, c, mid, digits),
        c,
        *generate_n_keys_between(c, b, n - mid - 1, digits),
    ]
