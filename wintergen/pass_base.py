"""Common interface of the header pre-processing passes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Protocol, TextIO

from wintergen.string_utils import ends_with


class _HasFilePath(Protocol):
    file_path: str


class Pass(ABC):
    """One transformation applied line by line to every processed file.

    ``begin`` is called before the first line of a file, ``process`` for each
    line, ``end`` after the last line and ``processing_finished`` once after
    all files. ``process`` returns True when it consumed the line, so that it
    is not copied to the output.
    """

    @abstractmethod
    def begin(self, file_name: str) -> None:
        """Reset the per-file state before ``file_name`` is read."""

    @abstractmethod
    def process(self, output: TextIO, line: str, previous_line: str) -> bool:
        """Handle one line; return True if the line was consumed."""

    @abstractmethod
    def end(self, output: TextIO, file_name: str) -> None:
        """Finish the file ``file_name``."""

    @abstractmethod
    def processing_finished(self) -> None:
        """Write whatever is generated from all processed files."""

    def should_process(self, file_name: str) -> bool:
        """Passes run on header files only."""
        return ends_with(file_name, ".h") or ends_with(file_name, ".hpp")

    @staticmethod
    def _parse_class_line(line: str) -> Optional[tuple[str, str]]:
        """Class name and base-list text of a line containing ``class``.

        The name runs from one character after ``class`` up to the next
        space; the base-list text starts at the first colon of the line and
        is empty when there is none.
        """
        index = line.find("class")
        if index < 0:
            return None
        start = index + 6
        stop = line.find(" ", start)
        name = line[start:] if stop < 0 else line[start:stop]
        colon = line.find(":")
        bases = line[colon:] if colon >= 0 else ""
        return name, bases

    @staticmethod
    def _assign_file_path(records: Iterable[_HasFilePath], file_name: str) -> None:
        """Give the trailing records that have no file yet ``file_name``."""
        for record in reversed(list(records)):
            if record.file_path:
                break
            record.file_path = file_name