# ekit

Small, dependency-free building blocks for Python programs:

- **Lists** sharing one interface, `ekit.listtypes.List`:
  `ArrayList` (tracks a capacity and shrinks it after deletions),
  `LinkedList` (doubly linked, circular, with sentinels) and
  `ConcurrentList` (wraps any other list and guards every call with a lock).
- **Maps** sharing one interface, `ekit.mapx.MapLike`:
  `BuiltinMap` (wraps a dict), `HashMap` (keys supply their own `code()`
  and `equals()`), `TreeMap` (kept sorted by a comparator), `LinkedMap`
  (remembers insertion order) and `MultiMap` (one key, a list of values).
- **A task pool**, `OnDemandBlockTaskPool`, which runs tasks on worker
  threads, grows the number of workers as the queue backs up and lets
  extra workers retire when they have nothing to do.

The package has no command-line program; it is a library only.

## Installation

```
pip install ekit
```

## Lists

```python
from ekit.arraylist import ArrayList
from ekit.linkedlist import LinkedList
from ekit.concurrentlist import ConcurrentList
from ekit.listtypes import IndexOutOfRangeError

items = ArrayList.of([1, 2, 3])
items.add(0, 100)          # [100, 1, 2, 3]
items.set(1, 5)            # [100, 5, 2, 3]
removed = items.delete(0)  # 100
print(items.to_list(), len(items), items.cap())

try:
    items.get(10)
except IndexOutOfRangeError as exc:
    print(exc.length, exc.index)

linked = LinkedList.of([1, 2, 3])
linked.append(4, 5)
print(list(linked))        # [1, 2, 3, 4, 5]

shared = ConcurrentList(ArrayList.of([1, 2, 3]))
shared.append(4)
```

Every list supports `get`, `append(*values)`, `add(index, value)`
(`index == len(list)` appends), `set`, `delete` (returns the removed
value), `len()`, `cap()`, `to_list()` (always a new list) and iteration.
Negative indices are not wrapped: any index outside the list raises
`IndexOutOfRangeError`, a subclass of `IndexError`.

`range(fn)` calls `fn(index, value)` for each element in order; if `fn`
raises, the walk stops and the exception propagates.

`ArrayList(capacity)` starts empty with the given capacity. After a
`delete`, a capacity above 2048 shrinks to 5/8 when at most half of it is
used, a capacity in (64, 2048] halves when at most a quarter is used, and a
capacity of 64 or less is left alone. A `LinkedList`'s capacity is its
length.

## Maps

```python
from ekit.mapx import BuiltinMap, keys, values, keys_values
from ekit.hashmap import HashMap, Hashable
from ekit.treemap import TreeMap
from ekit.linkedmap import linked_hash_map, linked_tree_map
from ekit.multimap import multi_builtin_map, multi_hash_map, multi_tree_map


def compare(a, b):
    return (a > b) - (a < b)


tree = TreeMap(compare)
tree.put(2, "two")
tree.put(1, "one")
print(tree.keys())              # [1, 2]
print(tree.get(3, "missing"))   # "missing"

tree = TreeMap.from_mapping(compare, {3: "c", 1: "a"})


class Key(Hashable):
    def __init__(self, ident):
        self.ident = ident

    def code(self):
        return self.ident % 10

    def equals(self, other):
        return isinstance(other, Key) and other.ident == self.ident


hashed = HashMap(10)
hashed.put(Key(1), 1)
hashed.put(Key(11), 11)   # same hash code, chained in one bucket
print(hashed.get(Key(11)))   # 11
print(hashed.buckets())      # {1: [(Key(1), 1), (Key(11), 11)]}

ordered = linked_tree_map(compare)
ordered.put(3, "c")
ordered.put(1, "a")
print(ordered.keys())     # [3, 1] — insertion order

multi = multi_tree_map(compare)
multi.put(1, "a")
multi.put_many(1, "b", "c")
print(multi.get(1))       # ["a", "b", "c"]

print(keys({1: 11}), values({1: 11}), keys_values({1: 11}))
```

All `MapLike` maps share these rules:

- `put(key, value)` stores a value or replaces the existing one.
- `get(key, default=None)` returns `default` for a missing key.
- `delete(key)` removes the key and returns its value; it raises
  `KeyError` when the key is absent.
- `keys()` and `values()` return new lists. `TreeMap` gives them in
  comparator order, `LinkedMap` in insertion order, `HashMap` and
  `BuiltinMap` in an order you should not rely on.
- `key in m` and `len(m)` work as expected.

`HashMap(size)` treats `size` as a hint only. Creating a `TreeMap` (or
`linked_tree_map` / `multi_tree_map`) with `None` as the comparator raises
`ComparatorMissingError`.

`LinkedMap(backing)` keeps its entries in any `MapLike` you give it;
`linked_hash_map(size)` and `linked_tree_map(comparator)` build one on a
`HashMap` or `TreeMap`. Replacing a value keeps the key's position.

`MultiMap(backing)` keeps a list per key; `multi_tree_map`,
`multi_hash_map` and `multi_builtin_map` build one on each kind of map.
`get` returns a copy of the list, or `None` for a missing key; `delete`
returns the removed list and raises `KeyError` for a missing key;
`values()` returns copies of every list.

## Task pool

```python
from ekit.taskpool import OnDemandBlockTaskPool

pool = OnDemandBlockTaskPool(2, 16, core_workers=4, max_workers=8,
                             max_idle_time=5.0, queue_backlog_rate=0.5)
pool.start()
pool.submit(lambda stop: print("hello, world"))

done = pool.shutdown()   # finish queued work, then set the event
done.wait()
```

A task is a callable taking one argument, a `threading.Event` that is set
when the pool stops, so long tasks can give up early. An exception raised
by a task does not reach the caller or stop the worker; it is logged at
debug level on the `ekit.taskpool` logger.

Construction:

- `init_workers` must be at least 1 and `queue_size` at least 0;
  `queue_size=0` hands tasks straight to an idle worker.
- `core_workers` and `max_workers` default to `init_workers`. Setting only
  one of them raises the other to match. `init_workers <= core_workers <=
  max_workers` must hold.
- `queue_backlog_rate` must lie in `[0, 1]`; a new worker is started on
  submit only when the queue is at least that full and fewer than
  `max_workers` are alive.
- `max_idle_time` (seconds, default 10) is how long a worker beyond
  `init_workers` waits for work before retiring. Workers beyond
  `core_workers` retire as soon as the queue has nothing for them.

Invalid arguments raise `ValueError`.

Lifecycle (`pool.state()` returns a `PoolState`: `CREATED`, `RUNNING`,
`CLOSING`, `STOPPED`):

- `submit(task, timeout=None)` works before and after `start()`, blocks
  while the queue is full, and raises `SubmitTimeoutError` when `timeout`
  seconds pass. A non-callable task raises `InvalidTaskError`.
- `start()` launches `init_workers` workers, plus more (up to
  `max_workers`) if tasks are already queued.
- `shutdown()` refuses new tasks, lets queued ones run, and returns an
  event that is set once every worker has exited.
- `shutdown_now()` stops at once, sets the tasks' stop event and returns
  the tasks that never started.
- `num_workers()` reports how many worker threads are alive.

Calling these in the wrong state raises a subclass of `TaskPoolError`:
`TaskPoolNotRunningError`, `TaskPoolClosingError`, `TaskPoolStoppedError`
or `TaskPoolStartedError`.

`states(interval, stop=None)` returns an iterator yielding a `State`
snapshot (`pool_state`, `workers`, `waiting_tasks`, `queue_size`,
`running_tasks`, `timestamp` in nanoseconds) every `interval` seconds, and
one last snapshot when `stop` is set or the pool stops. It raises
`TaskPoolError` if `stop` is already set and `TaskPoolStoppedError` if the
pool has already stopped.

## Running the tests

```
pip install -e ".[test]"
pytest
```