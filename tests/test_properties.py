"""Randomized checks of IntegerSet against plain Python sets."""
from __future__ import annotations

import random
from typing import Callable

import numpy as np
import pytest

from wordset import IntegerSet
from wordset.engine.bitset import WORD_BITS

SEEDS = range(25)


def ascending_ints(rng: random.Random, size: int = 60) -> list[int]:
    values = []
    x = 0
    for _ in range(rng.randrange(size)):
        x += rng.randint(1, WORD_BITS + 1)
        values.append(x)
    return values


def random_bytes(rng: random.Random, size: int = 40) -> bytes:
    return bytes(rng.randrange(256) for _ in range(rng.randrange(size)))


def render(values) -> str:
    return "[" + " ".join(str(v) for v in sorted(values)) + "]"


def build(values) -> IntegerSet:
    s = IntegerSet()
    for v in values:
        s.add(v)
    return s


@pytest.mark.parametrize("seed", SEEDS)
def test_add_and_test(seed: int) -> None:
    values = ascending_ints(random.Random(seed))
    s = build(values)
    members = set(values)
    hi = 10 + (values[-1] if values else 0)
    for i in range(-10, hi):
        assert s.test(i) == (i in members)


@pytest.mark.parametrize("seed", SEEDS)
def test_remove_subset(seed: int) -> None:
    rng = random.Random(seed)
    values = ascending_ints(rng)
    removed = set(ascending_ints(rng)) & set(values)
    s = build(values)
    for i in removed:
        s.remove(i)
    expected = set(values) - removed
    hi = 10 + max(expected, default=0)
    for i in range(-10, hi):
        assert s.test(i) == (i in expected)


@pytest.mark.parametrize("seed", SEEDS)
def test_copy_renders_the_same(seed: int) -> None:
    values = ascending_ints(random.Random(seed))
    s = build(values)
    for i in values[len(values) // 2 :]:
        s.remove(i)
    assert str(s.copy()) == str(s)


@pytest.mark.parametrize("seed", SEEDS)
def test_max_after_removals(seed: int) -> None:
    values = ascending_ints(random.Random(seed))
    s = build(values)
    kept, dropped = values[: len(values) // 2], values[len(values) // 2 :]
    for i in dropped:
        s.remove(i)
    assert s.max() == (kept[-1] if kept else -1)


@pytest.mark.parametrize("seed", SEEDS)
def test_cardinality(seed: int) -> None:
    values = ascending_ints(random.Random(seed))
    assert build(values).cardinality() == len(values)


@pytest.mark.parametrize("seed", SEEDS)
def test_next_after_enumerates_members(seed: int) -> None:
    values = ascending_ints(random.Random(seed))
    s = build(values)
    got = []
    i = s.next_after(-1)
    while i >= 0:
        got.append(i)
        i = s.next_after(i + 1)
    assert got == values


@pytest.mark.parametrize("seed", SEEDS)
def test_iter_from(seed: int) -> None:
    rng = random.Random(seed)
    values = ascending_ints(rng)
    start = int(rng.random() * len(values)) - 1
    s = build(values)
    assert list(s.iter_from(start)) == [v for v in values if v >= start]


@pytest.mark.parametrize("seed", SEEDS)
def test_string(seed: int) -> None:
    values = ascending_ints(random.Random(seed))
    assert str(build(values)) == render(values)


@pytest.mark.parametrize("seed", SEEDS)
def test_bytes_round_trip(seed: int) -> None:
    data = random_bytes(random.Random(seed)).rstrip(b"\x00")
    assert IntegerSet.from_bytes(data).to_bytes() == data


@pytest.mark.parametrize("seed", SEEDS)
def test_bytes_match_big_endian_bit_array(seed: int) -> None:
    values = ascending_ints(random.Random(seed))
    bits = np.zeros(max(values, default=0) + 1, dtype=np.uint8)
    bits[values] = 1
    expected = np.packbits(bits, bitorder="big").tobytes().rstrip(b"\x00")
    assert build(values).to_bytes() == expected


@pytest.mark.parametrize("seed", SEEDS)
def test_add_range_matches_single_adds(seed: int) -> None:
    rng = random.Random(seed)
    data = random_bytes(rng)
    low, hi = rng.randrange(256), rng.randrange(256)
    expected = IntegerSet.from_bytes(data)
    for i in range(low, hi):
        expected.add(i)
    got = IntegerSet.from_bytes(data)
    got.add_range(low, hi)
    assert str(got) == str(expected)


@pytest.mark.parametrize("seed", SEEDS)
def test_add_range_large(seed: int) -> None:
    rng = random.Random(seed)
    low = rng.randrange(4 * WORD_BITS)
    hi = low + rng.randrange(1, 20 * WORD_BITS)
    s = IntegerSet.from_bytes(random_bytes(rng))
    before = set(s)
    s.add_range(low, hi)
    assert set(s) == before | set(range(low, hi))


@pytest.mark.parametrize("seed", SEEDS)
def test_remove_range_matches_single_removes(seed: int) -> None:
    rng = random.Random(seed)
    data = random_bytes(rng)
    low, hi = rng.randrange(256), rng.randrange(256)
    expected = IntegerSet.from_bytes(data)
    for i in range(low, hi):
        expected.remove(i)
    got = IntegerSet.from_bytes(data)
    got.remove_range(low, hi)
    assert str(got) == str(expected)


OPERATIONS: list[tuple[str, Callable[[IntegerSet, IntegerSet], None], Callable[[bool, bool], bool]]] = [
    ("intersect", IntegerSet.intersect, lambda p, q: p and q),
    ("subtract", IntegerSet.subtract, lambda p, q: p and not q),
    ("union", IntegerSet.union, lambda p, q: p or q),
    ("symmetric difference", IntegerSet.symmetric_difference, lambda p, q: p != q),
]


@pytest.mark.parametrize("name, op, predicate", OPERATIONS, ids=[o[0] for o in OPERATIONS])
@pytest.mark.parametrize("seed", SEEDS)
def test_bitwise(seed: int, name: str, op, predicate) -> None:
    rng = random.Random(seed)
    l0, l1 = ascending_ints(rng), ascending_ints(rng)
    s0, s1 = build(l0), build(l1)
    op(s0, s1)
    m0, m1 = set(l0), set(l1)
    lim = max(l0[-1:] + l1[-1:], default=0)
    expected = [i for i in range(lim + 1) if predicate(i in m0, i in m1)]
    assert str(s0) == render(expected)
    assert str(s1) == render(l1)


@pytest.mark.parametrize("seed", SEEDS)
def test_equal_matches_canonical_bytes(seed: int) -> None:
    rng = random.Random(seed)
    b0 = random_bytes(rng)
    b1 = b0 if b0 and b0[0] >= 127 else random_bytes(rng)
    s0, s1 = IntegerSet.from_bytes(b0), IntegerSet.from_bytes(b1)
    expected = s0.to_bytes() == s1.to_bytes()
    s0._words.extend([0] * len(s0._words))
    s1._words.extend([0] * len(s1._words))
    assert s0.equal(s1) == expected
