"""Leveled logger that formats ``{}`` placeholders and writes through a queue."""

from __future__ import annotations

import inspect
import os
import threading
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar, Optional, TextIO

from wintergen.tsqueue import TsQueue


class LogLevel(IntEnum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4

    @property
    def label(self) -> str:
        """Fixed-width prefix written in front of each message."""
        return _LABELS[self]


_LABELS = {
    LogLevel.TRACE: "TRACE: ",
    LogLevel.DEBUG: "DEBUG: ",
    LogLevel.INFO: "INFO:  ",
    LogLevel.WARN: "WARN:  ",
    LogLevel.ERROR: "ERROR: ",
}


@dataclass(frozen=True)
class LogCommand:
    """One formatted message waiting to be written."""

    level_string: str
    output: str
    file: str
    line: int


def _render(arg: Any) -> str:
    if isinstance(arg, (list, tuple)):
        return "{ " + ", ".join(str(item) for item in arg) + " }"
    to_string = getattr(arg, "to_string", None)
    if callable(to_string):
        return str(to_string())
    return str(arg)


def format_message(format_string: str, *args: Any) -> str:
    """Substitute each ``{}`` in turn with the next argument.

    Lists and tuples are rendered as ``{ a, b }``; objects with a
    ``to_string`` method are rendered through it. Placeholders without an
    argument stay as they are and surplus arguments are ignored.
    """
    pieces: list[str] = []
    rest = format_string
    for arg in args:
        head, found, tail = rest.partition("{}")
        if not found:
            break
        pieces.append(head)
        pieces.append(_render(arg))
        rest = tail
    pieces.append(rest)
    return "".join(pieces)


class Loggy:
    """Logger writing every accepted message to all registered streams."""

    _instance: ClassVar[Optional["Loggy"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, level: LogLevel = LogLevel.TRACE, background: bool = True) -> None:
        self.level = LogLevel(level)
        self._appenders: list[TextIO] = []
        self._queue: TsQueue[LogCommand] = TsQueue()
        self._write_lock = threading.Lock()
        self._cwd_prefix = os.getcwd() + os.sep
        self._running = background
        self._worker: Optional[threading.Thread] = None
        if background:
            self._worker = threading.Thread(
                target=self._drain_forever, name="loggy", daemon=True
            )
            self._worker.start()

    @classmethod
    def get_instance(cls) -> "Loggy":
        """The process-wide logger, created on first use."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def add_appender(self, stream: TextIO) -> None:
        with self._write_lock:
            self._appenders.append(stream)

    def trace(self, format_string: str, *args: Any) -> None:
        if self.level <= LogLevel.TRACE:
            self._enqueue(LogLevel.TRACE, format_string, args)

    def debug(self, format_string: str, *args: Any) -> None:
        if self.level <= LogLevel.DEBUG:
            self._enqueue(LogLevel.DEBUG, format_string, args)

    def info(self, format_string: str, *args: Any) -> None:
        if self.level <= LogLevel.INFO:
            self._enqueue(LogLevel.INFO, format_string, args)

    def warn(self, format_string: str, *args: Any) -> None:
        if self.level <= LogLevel.WARN:
            self._enqueue(LogLevel.WARN, format_string, args)

    def error(self, format_string: str, *args: Any) -> None:
        if self.level <= LogLevel.ERROR:
            self._enqueue(LogLevel.ERROR, format_string, args)

    def log(self, level: LogLevel, format_string: str, *args: Any) -> None:
        """Queue a message at ``level`` regardless of the configured threshold."""
        self._enqueue(LogLevel(level), format_string, args)

    def flush(self) -> None:
        """Write every queued message before returning."""
        with self._write_lock:
            self._drain()

    def _enqueue(self, level: LogLevel, format_string: str, args: tuple) -> None:
        file, line = self._caller_location()
        output = format_message(format_string, *args) + "\n"
        self._queue.push_back(LogCommand(level.label, output, file, line))

    def _caller_location(self) -> tuple[str, int]:
        frame = inspect.currentframe()
        # this helper, _enqueue, the public method, then the caller
        for _ in range(3):
            frame = frame.f_back if frame is not None else None
        if frame is None:
            return "<unknown>", 0
        file_name = frame.f_code.co_filename
        if file_name.startswith(self._cwd_prefix):
            file_name = file_name[len(self._cwd_prefix):]
        return file_name, frame.f_lineno

    def _drain(self) -> None:
        while not self._queue.empty():
            command = self._queue.pop_front()
            text = f"{command.level_string}{command.file}:{command.line}\t{command.output}"
            for stream in self._appenders:
                stream.write(text)
                flush = getattr(stream, "flush", None)
                if callable(flush):
                    flush()

    def _drain_forever(self) -> None:
        while self._running:
            if self._queue.wait_for_event(0.1):
                with self._write_lock:
                    self._drain()