"""Database connection interface and a bounded pool of connections."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections import deque
from contextlib import contextmanager
from typing import Callable, Deque, Iterator, Optional

from wintergen.statement import Statement


class DbConnection(ABC):
    """A connection that can create statements and control transactions."""

    @abstractmethod
    def create_statement(self, query: Optional[str] = None) -> Statement:
        """A statement bound to this connection, optionally with a query."""

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...

    @abstractmethod
    def close(self) -> None: ...


class PoolExhaustedError(RuntimeError):
    """The pool already holds the maximum number of connections."""


class DbConnectionPool:
    """Hands out connections first in, first out, growing up to ``max_size``."""

    def __init__(
        self,
        initial_size: int,
        max_size: int,
        allocator: Callable[[], DbConnection],
    ) -> None:
        self._allocator = allocator
        self._max_size = max_size
        self._current_size = initial_size
        self._pool: Deque[DbConnection] = deque(allocator() for _ in range(initial_size))
        self._lock = threading.Lock()

    @property
    def size(self) -> int:
        """Number of connections created so far."""
        return self._current_size

    @property
    def available(self) -> int:
        """Number of idle connections in the pool."""
        with self._lock:
            return len(self._pool)

    def acquire(self) -> DbConnection:
        with self._lock:
            if not self._pool:
                if self._current_size >= self._max_size:
                    raise PoolExhaustedError("Maximum number of db connections reached!")
                self._pool.append(self._allocator())
                self._current_size += 1
            return self._pool.popleft()

    def release(self, connection: DbConnection) -> None:
        with self._lock:
            self._pool.append(connection)

    @contextmanager
    def connection(self) -> Iterator[DbConnection]:
        """Borrow a connection for the duration of a ``with`` block."""
        conn = self.acquire()
        try:
            yield conn
        finally:
            self.release(conn)