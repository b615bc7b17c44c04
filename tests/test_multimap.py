import operator
from dataclasses import dataclass

import pytest

from ekit.hashmap import Hashable
from ekit.multimap import multi_builtin_map, multi_hash_map, multi_tree_map
from ekit.treemap import ComparatorMissingError

COMPARE = operator.sub


@dataclass(frozen=True)
class IdKey(Hashable):
    id: int

    def code(self):
        return self.id % 10

    def equals(self, other):
        return isinstance(other, IdKey) and other.id == self.id


BACKINGS = {
    "tree": (lambda: multi_tree_map(COMPARE), lambda k: k),
    "hash": (lambda: multi_hash_map(10), IdKey),
    "builtin": (lambda: multi_builtin_map(10), lambda k: k),
}


@pytest.fixture(params=list(BACKINGS))
def kit(request):
    factory, make_key = BACKINGS[request.param]

    def build(keys, vals=None):
        m = factory()
        for k, v in zip(keys, keys if vals is None else vals):
            m.put(make_key(k), v)
        return m

    return build, make_key


def key_ids(m):
    return sorted(getattr(k, "id", k) for k in m.keys())


@pytest.mark.parametrize(
    "factory", [multi_hash_map, multi_builtin_map], ids=["hash", "builtin"]
)
@pytest.mark.parametrize("size", [-1, 0, 1])
def test_new_with_size(factory, size):
    m = factory(size)
    m.put(IdKey(1), 1)
    assert m.get(IdKey(1)) == [1]


def test_new_multi_tree_map_without_comparator():
    with pytest.raises(ComparatorMissingError):
        multi_tree_map(None)


def test_new_multi_tree_map():
    assert multi_tree_map(COMPARE).keys() == []


@pytest.mark.parametrize("keys", [[], [1], [1, 2, 3, 4]])
def test_keys(kit, keys):
    build, _ = kit
    assert key_ids(build(keys)) == keys


@pytest.mark.parametrize(
    "keys, want",
    [([], []), ([1], [[1]]), ([1, 2, 3], [[1], [2], [3]])],
)
def test_values(kit, keys, want):
    build, _ = kit
    assert sorted(build(keys).values()) == want


@pytest.mark.parametrize(
    "keys, vals, want",
    [
        ([1], [1], {1: [1]}),
        ([1, 2, 3, 4], [1, 2, 3, 4], {1: [1], 2: [2], 3: [3], 4: [4]}),
        ([1, 2, 1, 4], [1, 2, 3, 4], {1: [1, 3], 2: [2], 4: [4]}),
    ],
)
def test_put(kit, keys, vals, want):
    build, key = kit
    m = build(keys, vals)
    assert all(key(k) in m for k in want)
    assert {k: m.get(key(k)) for k in want} == want


@pytest.mark.parametrize(
    "keys, wanted, want",
    [([], 1, None), ([1, 2], 3, None), ([1], 1, [1])],
)
def test_get(kit, keys, wanted, want):
    build, key = kit
    m = build(keys)
    assert m.get(key(wanted)) == want
    assert (key(wanted) in m) is (want is not None)


def test_get_returns_copy(kit):
    build, key = kit
    m = build([1])
    m.get(key(1)).append(99)
    assert m.get(key(1)) == [1]
    m.values()[0].append(42)
    assert m.values() == [[1]]


@pytest.mark.parametrize("keys, missing", [([], 1), ([1], 2)])
def test_delete_missing(kit, keys, missing):
    build, key = kit
    m = build(keys)
    with pytest.raises(KeyError):
        m.delete(key(missing))
    assert key_ids(m) == keys


def test_delete_found(kit):
    build, key = kit
    m = build([1, 2])
    assert m.delete(key(1)) == [1]
    assert m.get(key(1)) is None
    assert key_ids(m) == [2]


@pytest.mark.parametrize(
    "calls, want",
    [
        ([(1, [1])], {1: [1]}),
        ([(1, [1]), (2, [2]), (3, [3])], {1: [1], 2: [2], 3: [3]}),
        ([(1, [1, 2, 3])], {1: [1, 2, 3]}),
        (
            [(1, [1, 2, 3]), (2, [1, 2, 3]), (3, [1, 2, 3])],
            {1: [1, 2, 3], 2: [1, 2, 3], 3: [1, 2, 3]},
        ),
        ([(1, [1, 2, 3, 4, 5]), (1, [6])], {1: [1, 2, 3, 4, 5, 6]}),
        ([(1, [1]), (1, [2, 3, 4, 5, 6])], {1: [1, 2, 3, 4, 5, 6]}),
    ],
)
def test_put_many(kit, calls, want):
    build, key = kit
    m = build([])
    for k, vs in calls:
        m.put_many(key(k), *vs)
    assert {k: m.get(key(k)) for k in want} == want


def test_put_many_without_values_creates_empty_entry(kit):
    build, key = kit
    m = build([])
    m.put_many(key(7))
    assert m.get(key(7)) == []
    assert key(7) in m


def test_tree_keys_sorted():
    m = multi_tree_map(COMPARE)
    for k in (3, 1, 2):
        m.put(k, k)
    assert m.keys() == [1, 2, 3]