"""Command line entry point of the header pre-processor."""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

from wintergen.annotation_pass import AnnotationPass
from wintergen.component_pass import ComponentPass
from wintergen.preprocessor import PreProcessor
from wintergen.reflection_pass import ReflectionPass

_USAGE = "Please use 'clean [dir]' or provide source and target directory"


def _walk(directory: str) -> Iterator[str]:
    """Every entry below ``directory``, each directory before its contents."""
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda e: e.name)
    for entry in entries:
        yield entry.path
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(entry.path)


def process_file(
    preprocessor: PreProcessor,
    path: Union[str, Path],
    input_directory: str,
    output_directory: str,
) -> int:
    """Mirror one entry of the input tree into the output tree; 0 on success."""
    input_file_name = str(path)
    print(f"Processing File: {input_file_name}")
    output_file_name = output_directory + input_file_name[len(input_directory):]

    if os.path.isdir(input_file_name):
        os.makedirs(output_file_name, exist_ok=True)
    elif os.path.isfile(input_file_name):
        try:
            input_file = open(input_file_name, encoding="utf-8", newline="")
        except OSError:
            print(f"Error: Unable to open input file {input_file_name}", file=sys.stderr)
            return 1
        with input_file:
            try:
                output_file = open(output_file_name, "w", encoding="utf-8", newline="")
            except OSError:
                print(f"Error: Unable to open output file {output_file_name}", file=sys.stderr)
                return 1
            with output_file:
                preprocessor.process(input_file, output_file, input_file_name, output_file_name)
    return 0


def _clean(target: str) -> int:
    path = Path(target).absolute()
    print(f'Are you sure you want to delete: "{path}" (y/n)')
    answer = sys.stdin.read(1)
    if answer in ("y", "Y"):
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        elif path.exists() or path.is_symlink():
            path.unlink()
        print(f'Deleted "{path}"')
        return 0
    print("Cancelling cleaning")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run every pass over the source tree, writing into the target tree."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(_USAGE)
        return -1

    if args[0] == "clean":
        return _clean(args[1])

    input_directory, output_directory = args
    print(f"source is: {input_directory}")
    print(f"target is: {output_directory}")

    if not os.path.exists(output_directory):
        os.mkdir(output_directory)

    preprocessor = PreProcessor()
    preprocessor.add_pass(ReflectionPass(input_directory, output_directory))
    preprocessor.add_pass(AnnotationPass(input_directory, output_directory))
    preprocessor.add_pass(ComponentPass(input_directory, output_directory))

    for entry in _walk(input_directory):
        if process_file(preprocessor, entry, input_directory, output_directory) != 0:
            print(f"Error while parsing file: {entry}", file=sys.stderr)
            return -1

    preprocessor.finish()
    return 0


if __name__ == "__main__":
    sys.exit(main())