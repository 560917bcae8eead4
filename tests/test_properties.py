"""Randomised ordering checks with fixed seeds."""

import random

import pytest

from fracindex.alphabets import ALPHABETS
from fracindex.keys import generate_key_between, generate_n_keys_between, is_valid_order_key


@pytest.mark.parametrize("name", sorted(ALPHABETS))
def test_random_insertions_stay_sorted(name):
    digits = ALPHABETS[name]
    rng = random.Random(1234)
    keys = [generate_key_between(None, None, digits)]
    for _ in range(500):
        pos = rng.randint(0, len(keys))
        a = keys[pos - 1] if pos > 0 else None
        b = keys[pos] if pos < len(keys) else None
        key = generate_key_between(a, b, digits)
        assert is_valid_order_key(key, digits)
        if a is not None:
            assert a < key
        if b is not None:
            assert key < b
        keys.insert(pos, key)
    assert keys == sorted(keys)
    assert len(set(keys)) == len(keys)


def test_random_bulk_insertions_stay_sorted():
    rng = random.Random(42)
    keys = generate_n_keys_between(None, None, 10)
    for _ in range(50):
        pos = rng.randint(0, len(keys))
        a = keys[pos - 1] if pos > 0 else None
        b = keys[pos] if pos < len(keys) else None
        batch = generate_n_keys_between(a, b, rng.randint(0, 40))
        keys[pos:pos] = batch
    assert keys == sorted(keys)
    assert len(set(keys)) == len(keys)
    assert all(is_valid_order_key(k) for k in keys)


def test_repeated_front_insertions_cross_head_classes():
    key = "a0"
    for _ in range(5000):
        new = generate_key_between(None, key)
        assert new < key
        assert is_valid_order_key(new)
        key = new
    assert key[0] < "Z"
