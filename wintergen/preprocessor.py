"""Runs the registered passes over files line by line."""

from __future__ import annotations

from typing import Iterable, TextIO

from wintergen.pass_base import Pass


class PreProcessor:
    """Feeds each line to the applicable passes and copies unconsumed lines.

    Every copied line is preceded by a ``#line`` directive naming the input
    file, so that compiler messages point at the original source.
    """

    def __init__(self) -> None:
        self._passes: list[Pass] = []
        self._last_line = ""

    def add_pass(self, pass_: Pass) -> None:
        self._passes.append(pass_)

    def process(
        self,
        input_file: Iterable[str],
        output_file: TextIO,
        input_file_name: str,
        output_file_name: str,
    ) -> None:
        formatted_name = input_file_name.replace("\\", "/")
        required = [p for p in self._passes if p.should_process(output_file_name)]

        for p in required:
            p.begin(output_file_name)

        for line_number, raw in enumerate(input_file, start=1):
            line = raw[:-1] if raw.endswith("\n") else raw
            consumed = any(p.process(output_file, line, self._last_line) for p in required)
            if not consumed and line:
                output_file.write(f'#line {line_number} "{formatted_name}"\n')
                output_file.write(line + "\n")
            self._last_line = line

        for p in required:
            p.end(output_file, output_file_name)

    def finish(self) -> None:
        """Let every pass write what it generates from all processed files."""
        for p in self._passes:
            p.processing_finished()