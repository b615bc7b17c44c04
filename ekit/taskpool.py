"""A blocking task pool that starts worker threads on demand."""

from __future__ import annotations

import logging
import threading
import time
from collections import deque
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

Task = Callable[[threading.Event], Any]

DEFAULT_MAX_IDLE_TIME = 10.0
_POLL_INTERVAL = 0.005

_log = logging.getLogger(__name__)


class PoolState(IntEnum):
    """Lifecycle states of a task pool."""

    CREATED = 1
    RUNNING = 2
    CLOSING = 3
    STOPPED = 4


@dataclass(frozen=True)
class State:
    """A snapshot of a pool's internals taken at ``timestamp`` (ns since epoch)."""

    pool_state: PoolState
    workers: int
    waiting_tasks: int
    queue_size: int
    running_tasks: int
    timestamp: int


class TaskPoolError(Exception):
    """Base class of the errors a task pool raises."""

    default_message = "ekit: TaskPool错误"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class TaskPoolNotRunningError(TaskPoolError):
    default_message = "ekit: TaskPool未运行"


class TaskPoolClosingError(TaskPoolError):
    default_message = "ekit：TaskPool关闭中"


class TaskPoolStoppedError(TaskPoolError):
    default_message = "ekit: TaskPool已停止"


class TaskPoolStartedError(TaskPoolError):
    default_message = "ekit：TaskPool已运行"


class InvalidTaskError(TaskPoolError):
    default_message = "ekit: Task非法"


class TaskPanicError(TaskPoolError):
    default_message = "ekit: Task运行时异常"


class SubmitTimeoutError(TaskPoolError, TimeoutError):
    default_message = "ekit: 提交任务超时"


class OnDemandBlockTaskPool:
    """A pool whose workers grow from ``init_workers`` towards ``max_workers``.

    A task is a callable taking one argument: an event that is set when the
    pool is stopped, so long tasks can give up early. Submitting blocks while
    the queue is full. Workers beyond ``init_workers`` retire after
    ``max_idle_time`` seconds without work; workers beyond ``core_workers``
    retire as soon as the queue has nothing for them.
    """

    def __init__(
        self,
        init_workers: int,
        queue_size: int,
        *,
        core_workers: int | None = None,
        max_workers: int | None = None,
        max_idle_time: float = DEFAULT_MAX_IDLE_TIME,
        queue_backlog_rate: float = 0.0,
    ) -> None:
        if init_workers < 1:
            raise ValueError("ekit: 参数非法：init_workers应该大于0")
        if queue_size < 0:
            raise ValueError("ekit: 参数非法：queue_size应该大于等于0")
        core = init_workers if core_workers is None else core_workers
        maximum = init_workers if max_workers is None else max_workers
        if core != init_workers and maximum == init_workers:
            maximum = core
        elif core == init_workers and maximum != init_workers:
            core = maximum
        if not init_workers <= core <= maximum:
            raise ValueError(
                "ekit: 参数非法：需要满足init_workers <= core_workers <= max_workers条件"
            )
        if not 0.0 <= queue_backlog_rate <= 1.0:
            raise ValueError("ekit: 参数非法：queue_backlog_rate合法范围为[0,1.0]")

        self.init_workers = init_workers
        self.core_workers = core
        self.max_workers = maximum
        self.queue_size = queue_size
        self.max_idle_time = max_idle_time
        self.queue_backlog_rate = queue_backlog_rate

        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)
        self._state = PoolState.CREATED
        self._queue: deque[Task] = deque()
        self._closed = False
        self._total = 0
        self._running = 0
        self._idle = 0
        self._idle_timers: set[int] = set()
        self._next_id = 0
        self._interrupt = threading.Event()

    # submission -----------------------------------------------------------

    def submit(self, task: Task, timeout: float | None = None) -> None:
        """Queue ``task``, blocking up to ``timeout`` seconds while the queue is full."""
        if task is None or not callable(task):
            raise InvalidTaskError()
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._lock:
            while True:
                if self._state is PoolState.CLOSING:
                    raise TaskPoolClosingError()
                if self._state is PoolState.STOPPED:
                    raise TaskPoolStoppedError()
                if self._has_room():
                    self._queue.append(task)
                    self._not_empty.notify()
                    if self._state is PoolState.RUNNING and self._may_grow():
                        self._spawn(1)
                    return
                if deadline is None:
                    self._not_full.wait()
                    continue
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise SubmitTimeoutError()
                self._not_full.wait(remaining)

    def _has_room(self) -> bool:
        if self.queue_size == 0:
            return len(self._queue) < self._idle
        return len(self._queue) < self.queue_size

    def _may_grow(self) -> bool:
        if self.queue_size == 0:
            return False
        rate = len(self._queue) / self.queue_size
        return (
            self._total < self.max_workers
            and rate != 0
            and rate >= self.queue_backlog_rate
        )

    # lifecycle ------------------------------------------------------------

    def start(self) -> None:
        """Start the workers; tasks queued before now begin to run."""
        with self._lock:
            if self._state is PoolState.CLOSING:
                raise TaskPoolClosingError()
            if self._state is PoolState.STOPPED:
                raise TaskPoolStoppedError()
            if self._state is PoolState.RUNNING:
                raise TaskPoolStartedError()
            self._spawn(self._initial_workers())
            self._state = PoolState.RUNNING

    def _initial_workers(self) -> int:
        allowed = self.max_workers - self.init_workers
        needed = len(self._queue) - self.init_workers
        return self.init_workers + (min(needed, allowed) if needed > 0 else 0)

    def shutdown(self) -> threading.Event:
        """Refuse new tasks, finish queued ones, and return an event set when done."""
        with self._lock:
            if self._state is PoolState.CREATED:
                raise TaskPoolNotRunningError()
            if self._state is PoolState.STOPPED:
                raise TaskPoolStoppedError()
            if self._state is PoolState.CLOSING:
                raise TaskPoolClosingError()
            self._state = PoolState.CLOSING
            self._closed = True
            if self._total == 0:
                self._state = PoolState.STOPPED
                self._interrupt.set()
            self._not_empty.notify_all()
            self._not_full.notify_all()
            return self._interrupt

    def shutdown_now(self) -> list[Task]:
        """Stop at once and return the tasks that never started."""
        with self._lock:
            if self._state is PoolState.CREATED:
                raise TaskPoolNotRunningError()
            if self._state is PoolState.CLOSING:
                raise TaskPoolClosingError()
            if self._state is PoolState.STOPPED:
                raise TaskPoolStoppedError()
            self._state = PoolState.STOPPED
            self._closed = True
            self._interrupt.set()
            remaining = list(self._queue)
            self._queue.clear()
            self._not_empty.notify_all()
            self._not_full.notify_all()
            return remaining

    # workers --------------------------------------------------------------

    def _spawn(self, count: int) -> None:
        for _ in range(count):
            self._total += 1
            self._next_id += 1
            worker_id = self._next_id
            threading.Thread(
                target=self._work,
                args=(worker_id,),
                name=f"ekit-worker-{worker_id}",
                daemon=True,
            ).start()

    def _work(self, worker_id: int) -> None:
        idle_deadline: float | None = None
        while True:
            with self._lock:
                task = self._take(worker_id, idle_deadline)
                if task is None:
                    return
                self._running += 1
            self._run(task)
            with self._lock:
                self._running -= 1
                keep, idle_deadline = self._settle(worker_id)
            if not keep:
                return

    def _retire(self, worker_id: int) -> None:
        self._total -= 1
        self._idle_timers.discard(worker_id)

    def _take(self, worker_id: int, idle_deadline: float | None) -> Task | None:
        while True:
            if self._interrupt.is_set():
                self._retire(worker_id)
                return None
            if self._queue:
                self._idle_timers.discard(worker_id)
                task = self._queue.popleft()
                self._not_full.notify()
                return task
            if self._closed:
                self._retire(worker_id)
                if self._total == 0 and self._state is PoolState.CLOSING:
                    self._state = PoolState.STOPPED
                    self._interrupt.set()
                return None
            remaining = None
            if idle_deadline is not None:
                remaining = idle_deadline - time.monotonic()
                if remaining <= 0:
                    self._retire(worker_id)
                    return None
            self._idle += 1
            if self.queue_size == 0:
                self._not_full.notify()
            try:
                self._not_empty.wait(remaining)
            finally:
                self._idle -= 1

    def _settle(self, worker_id: int) -> tuple[bool, float | None]:
        waiting = len(self._queue)
        nothing_to_do = waiting == 0 or waiting < self._total
        if self.core_workers < self._total <= self.max_workers and nothing_to_do:
            self._total -= 1
            return False, None
        if self.init_workers < self._total - len(self._idle_timers):
            self._idle_timers.add(worker_id)
            return True, time.monotonic() + self.max_idle_time
        return True, None

    def _run(self, task: Task) -> None:
        try:
            task(self._interrupt)
        except Exception as exc:
            error = TaskPanicError(f"{TaskPanicError.default_message}：{exc!r}")
            error.__cause__ = exc
            _log.debug("%s", error, exc_info=exc)

    # observation ----------------------------------------------------------

    def states(
        self, interval: float, stop: threading.Event | None = None
    ) -> Iterator[State]:
        """Yield a snapshot every ``interval`` seconds until ``stop`` is set or the pool stops.

        A final snapshot is yielded when sampling ends.
        """
        if interval <= 0:
            raise ValueError("ekit: 参数非法：interval应该大于0")
        if stop is not None and stop.is_set():
            raise TaskPoolError("ekit: 采样已取消")
        if self._interrupt.is_set():
            raise TaskPoolStoppedError()
        return self._sample(interval, stop)

    def _sample(self, interval: float, stop: threading.Event | None) -> Iterator[State]:
        while True:
            ended = self._wait_for_end(interval, stop)
            yield self._snapshot()
            if ended:
                return

    def _wait_for_end(self, interval: float, stop: threading.Event | None) -> bool:
        if stop is None:
            return self._interrupt.wait(interval)
        deadline = time.monotonic() + interval
        while True:
            if self._interrupt.is_set() or stop.is_set():
                return True
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return False
            self._interrupt.wait(min(remaining, _POLL_INTERVAL))

    def _snapshot(self) -> State:
        with self._lock:
            return State(
                pool_state=self._state,
                workers=self._total,
                waiting_tasks=len(self._queue),
                queue_size=self.queue_size,
                running_tasks=self._running,
                timestamp=time.time_ns(),
            )

    def state(self) -> PoolState:
        """Return the current lifecycle state."""
        with self._lock:
            return self._state

    def num_workers(self) -> int:
        """Return the number of live worker threads."""
        with self._lock:
            return self._total