"""Pass that registers component classes for autowiring."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TextIO, Union

from wintergen.pass_base import Pass
from wintergen.string_utils import replace_char

_COMPONENT_ID = "public:\n\tstatic inline int _componentId_ = 0;\n"


@dataclass
class _ComponentClass:
    file_path: str
    class_name: str
    alternative_name: str


class ComponentPass(Pass):
    """Gives each Component or Repository class an id slot.

    After all files, writes ``Component.cpp`` into the target directory with
    the code creating one instance of every component.
    """

    def __init__(self, source_dir: Union[str, Path], target_dir: Union[str, Path]) -> None:
        self.component_cpp_file = Path(target_dir) / "Component.cpp"
        self.bracket_counter = 0
        self.is_class_component = False
        self.class_name = ""
        self.component_classes: list[_ComponentClass] = []

    def begin(self, file_name: str) -> None:
        self.bracket_counter = 0
        self.class_name = ""
        self.is_class_component = False

    def process(self, output: TextIO, line: str, previous_line: str) -> bool:
        if self.bracket_counter == 0:
            parsed = self._parse_class_line(line)
            if parsed is not None:
                self.class_name, bases = parsed
                if "Component" in bases or "Repository" in bases:
                    self.component_classes.append(
                        _ComponentClass("", self.class_name, f"_{self.class_name}_")
                    )
                    self.is_class_component = True

        for ch in line:
            if ch == "{":
                self.bracket_counter += 1
            elif ch == "}":
                if self.bracket_counter == 1 and self.is_class_component:
                    output.write(_COMPONENT_ID)
                    self.is_class_component = False
                self.bracket_counter -= 1
        return False

    def end(self, output: TextIO, file_name: str) -> None:
        self._assign_file_path(self.component_classes, file_name)

    def processing_finished(self) -> None:
        parts = ["\n"]
        parts.extend(
            f'#include "{replace_char(entry.file_path, chr(92), "/")}"\n'
            for entry in self.component_classes
        )
        parts.append("\n")
        parts.append("void Component::initializeComponents() {\n")
        parts.append('\twtLogTrace("Initializing components");\n')
        parts.append(f"\tcomponents.resize({len(self.component_classes)});\n")
        parts.append("\tint i=0;\n\n")
        for entry in self.component_classes:
            parts.append(f"\tauto* {entry.alternative_name} = new {entry.class_name}();\n")
            parts.append(f"\tcomponents[i] = ((Component*){entry.alternative_name});\n\n")
            parts.append(f"\t{entry.class_name}::_componentId_ = i++;\n")
        parts.append("}")
        self.component_cpp_file.write_text("".join(parts))

    def should_process(self, file_name: str) -> bool:
        return super().should_process(file_name)