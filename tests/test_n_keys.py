import pytest

from fracindex.alphabets import BASE_10_DIGITS
from fracindex.errors import InvalidKey, OrderViolation
from fracindex.keys import generate_n_keys_between, is_valid_order_key


@pytest.mark.parametrize(
    "a,b,n,expected",
    [
        (None, None, 5, "a0 a1 a2 a3 a4"),
        ("a4", None, 10, "a5 a6 a7 a8 a9 b00 b01 b02 b03 b04"),
        (None, "a0", 5, "Z5 Z6 Z7 Z8 Z9"),
        (
            "a0",
            "a2",
            20,
            "a01 a02 a03 a035 a04 a05 a06 a07 a08 a09 a1 a11 a12 a13 a14 a15 a16 a17 a18 a19",
        ),
    ],
)
def test_generate_n_keys_between_base10(a, b, n, expected):
    assert " ".join(generate_n_keys_between(a, b, n, BASE_10_DIGITS)) == expected


def test_zero_and_one_key():
    assert generate_n_keys_between("a0", "a1", 0) == []
    assert generate_n_keys_between("a0", "a1", 1) == ["a0V"]


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        generate_n_keys_between(None, None, -1)


def test_bounds_are_checked():
    with pytest.raises(OrderViolation):
        generate_n_keys_between("a1", "a0", 3)
    with pytest.raises(InvalidKey):
        generate_n_keys_between("a00", None, 3)


@pytest.mark.parametrize(
    "a,b",
    [(None, None), ("a0", None), (None, "a0"), ("a0", "a1"), ("Zz", "a0V"), ("a0", "a00V")],
)
@pytest.mark.parametrize("n", [2, 3, 17, 100])
def test_keys_are_distinct_sorted_and_inside_bounds(a, b, n):
    keys = generate_n_keys_between(a, b, n)
    assert len(keys) == n
    assert len(set(keys)) == n
    assert keys == sorted(keys)
    for key in keys:
        assert is_valid_order_key(key)
        if a is not None:
            assert a < key
        if b is not None:
            assert key < b


def test_split_keeps_keys_short():
    keys = generate_n_keys_between("a0", "a1", 1000)
    # one-at-a-time bisection would grow by a digit every few keys
    assert max(len(k) for k in keys) <= 6
