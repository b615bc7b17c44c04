from dataclasses import dataclass, field

import pytest

from ekit.hashmap import Hashable, HashMap


@dataclass(frozen=True)
class IdKey(Hashable):
    id: int

    def code(self):
        return self.id % 10

    def equals(self, other):
        return isinstance(other, IdKey) and other.id == self.id


@dataclass(frozen=True)
class MockKey(Hashable):
    values: tuple = field(default_factory=tuple)

    def code(self):
        return 3 + sum(v * 7 for v in self.values)

    def equals(self, other):
        return isinstance(other, MockKey) and list(other.values) == list(self.values)


FILLED = [(1, 1), (2, 2), (3, 3), (11, 11), (1, 101)]
CHAIN = [(1, 1), (11, 11), (21, 21)]


def _build(pairs, size=10):
    m = HashMap(size)
    for key, val in pairs:
        m.put(IdKey(key), val)
    return m


def _bucket_ids(m):
    return {h: [(k.id, v) for k, v in chain] for h, chain in m.buckets().items()}


def test_put_builds_buckets():
    m = _build(FILLED)
    assert m.buckets() == {
        1: [(IdKey(1), 101), (IdKey(11), 11)],
        2: [(IdKey(2), 2)],
        3: [(IdKey(3), 3)],
    }
    assert len(m) == 4


@pytest.mark.parametrize(
    "key, want, found",
    [(1, 101, True), (11, 11, True), (8, None, False), (21, None, False)],
)
def test_get(key, want, found):
    m = _build(FILLED)
    assert m.get(IdKey(key)) == want
    assert (IdKey(key) in m) is found


def test_get_default():
    assert HashMap(1).get(IdKey(5), "none") == "none"


@pytest.mark.parametrize(
    "pairs, key, want_buckets",
    [([], 1, {}), ([(1, 1)], 11, {1: [(1, 1)]})],
)
def test_delete_missing(pairs, key, want_buckets):
    m = _build(pairs)
    with pytest.raises(KeyError):
        m.delete(IdKey(key))
    assert _bucket_ids(m) == want_buckets


@pytest.mark.parametrize(
    "pairs, key, want_buckets",
    [
        (CHAIN, 1, {1: [(11, 11), (21, 21)]}),
        ([(1, 1)], 1, {}),
        (CHAIN, 11, {1: [(1, 1), (21, 21)]}),
        (CHAIN, 21, {1: [(1, 1), (11, 11)]}),
    ],
)
def test_delete_found(pairs, key, want_buckets):
    m = _build(pairs)
    assert m.delete(IdKey(key)) == key
    assert _bucket_ids(m) == want_buckets
    assert len(m) == len(pairs) - 1


@pytest.mark.parametrize(
    "pairs, size, want_keys, want_values",
    [
        ([], 0, [], []),
        ([], 10, [], []),
        ([(1, 1)], 10, [1], [1]),
        ([(1, 1), (2, 2)], 10, [1, 2], [1, 2]),
        ([(1, 1), (1, 11)], 10, [1], [11]),
        ([(1, 10), (2, 20), (1, 11)], 10, [1, 2], [11, 20]),
        ([(1, 11), (11, 111), (111, 1111)], 10, [1, 11, 111], [11, 111, 1111]),
        ([(1, 1), (11, 10), (2, 2), (22, 20)], 10, [1, 2, 11, 22], [1, 2, 10, 20]),
    ],
)
def test_keys_values(pairs, size, want_keys, want_values):
    m = _build(pairs, size)
    assert sorted(k.id for k in m.keys()) == want_keys
    assert sorted(m.values()) == want_values
    assert len(m) == len(want_keys)


def test_mock_key_example():
    m = HashMap(10)
    m.put(MockKey(), 123)
    assert m.get(MockKey()) == 123


def test_mock_key_distinguishes_values():
    m = HashMap(10)
    m.put(MockKey((1, 2)), "a")
    m.put(MockKey((2, 1)), "b")
    assert m.get(MockKey((1, 2))) == "a"
    assert m.get(MockKey((2, 1))) == "b"
    assert len(m.buckets()) == 1