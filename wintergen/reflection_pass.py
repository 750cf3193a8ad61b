"""Pass that records the fields of reflected classes and generates their metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO, Union

from wintergen.field_types import FieldType, convert_to_field_type
from wintergen.pass_base import Pass
from wintergen.string_utils import (
    replace_char,
    starts_with,
    strip_blank_characters,
    strip_special_characters,
    trim,
    uncapitalize,
)


@dataclass
class FieldInfo:
    """A member declared in a reflected class."""

    name: str
    type_str: str
    type: FieldType
    class_name: str
    offset: int = 0
    is_ptr: bool = False
    is_vec: bool = False


@dataclass
class _ReflectedClass:
    file_path: str
    class_name: str
    alternative_name: str


@dataclass
class _LineState:
    declaring_method: bool = False
    declaring_class: bool = False
    has_space: bool = False


class ReflectionPass(Pass):
    """Adds reflection overrides to classes deriving from Reflect or Entity.

    After all files, writes ``Reflect.cpp`` into the target directory with the
    class map and the reflection initialiser.
    """

    def __init__(self, source_dir: Union[str, Path], target_dir: Union[str, Path]) -> None:
        self.reflection_cpp_file = Path(target_dir) / "Reflect.cpp"
        self.should_add_reflection = False
        self.bracket_counter = 0
        self.small_bracket_counter = 0
        self.fields: list[FieldInfo] = []
        self.class_name = ""
        self.reflect_classes: list[_ReflectedClass] = field(default_factory=list) if False else []

    def begin(self, file_name: str) -> None:
        self.should_add_reflection = False
        self.bracket_counter = 0
        self.small_bracket_counter = 0
        self.fields = []
        self.class_name = ""

    def end(self, output: TextIO, file_name: str) -> None:
        self._assign_file_path(self.reflect_classes, file_name)

    def process(self, output: TextIO, line: str, previous_line: str) -> bool:
        if self.bracket_counter == 0:
            self._check_class_declaration(line)

        state = self._count_brackets(output, line)

        if not self.should_add_reflection:
            return False

        if (
            self.bracket_counter == 1
            and not state.declaring_class
            and state.has_space
            and len(trim(line)) > 2
            and not state.declaring_method
            and "," not in line
        ):
            self._record_field(line)
        return False

    def _check_class_declaration(self, line: str) -> None:
        parsed = self._parse_class_line(line)
        if parsed is None:
            return
        self.class_name, bases = parsed
        if self.class_name == "Entity":
            return
        if "Reflect" in bases or "Entity" in bases:
            self.should_add_reflection = True

    def _count_brackets(self, output: TextIO, line: str) -> _LineState:
        state = _LineState()
        for ch in line:
            if ch == "{":
                if self.bracket_counter == 0:
                    state.declaring_class = True
                self.bracket_counter += 1
            elif ch == "}":
                if self.bracket_counter == 1:
                    if self.should_add_reflection:
                        self.reflect_classes.append(
                            _ReflectedClass("", self.class_name, f"_{self.class_name}_")
                        )
                        output.write(self._reflect_overrides())
                    self.should_add_reflection = False
                    self.fields = []
                self.bracket_counter -= 1
            elif ch == "(":
                self.small_bracket_counter += 1
                state.declaring_method = True
            elif ch == ")":
                self.small_bracket_counter -= 1
            elif ch == " ":
                state.has_space = True
        return state

    def _record_field(self, line: str) -> None:
        blank = line.rfind(" ")
        if blank < 0:
            return
        while blank + 1 < len(line) and line[blank + 1] in "*&":
            blank += 1
        blank += 1
        name = trim(line[blank : len(line) - 1])
        type_str = strip_blank_characters(line[:blank])
        if starts_with(type_str, "std::"):
            type_str = type_str[5:]
        field_type = convert_to_field_type(strip_special_characters(type_str))
        self.fields.append(
            FieldInfo(
                name=name,
                type_str=type_str,
                type=field_type,
                class_name=self.class_name,
                offset=0,
                is_ptr=type_str.endswith("*"),
                is_vec=field_type in (FieldType.ARRAY, FieldType.VECTOR),
            )
        )

    def _reflect_overrides(self) -> str:
        cls = self.class_name
        var = f"_{uncapitalize(cls)}_"
        parts = [
            "\n\tstatic inline std::vector<Field> declaredFields = {};\n",
            "\tstatic inline std::vector<Method> declaredMethods = {};\n",
            "\tField *getField(const char *fieldName) const override {\n"
            "        for (Field& f : declaredFields){\n"
            "            if (f.name == fieldName)\n"
            "                return &f;\n"
            "        }\n"
            "        return &Field::INVALID;\n"
            "    }\n"
            "\n"
            "    std::vector<Field> &getDeclaredFields() override {\n"
            "        return declaredFields;\n"
            "    }\n\n"
            "    int getClassSize() const override{\n"
            f"        return sizeof({cls});\n"
            "\t}\n\n"
            "\tstatic Reflect* getInstance(){\n"
            f"    \treturn new {cls}();\n"
            "\t}\n\n",
            "\n",
            "\t[[nodiscard]] Reflect* clone(CopyType copyType) const override{\n",
            f"\t\t{cls}* copy = new {cls}();\n",
        ]
        parts.extend(f"\t\tcopy->{f.name} = this->{f.name};\n" for f in self.fields)
        parts.append("\treturn copy;\n\t}\n")
        parts.append("\n\tstatic void initializeReflection(){\n")
        parts.append(f"\t\t{cls}* {var} = ({cls}*) malloc(sizeof({cls}));\n")
        parts.extend(
            f'\t\t{cls}::declaredFields.emplace_back("{f.name}","{f.type_str}",{int(f.type)},'
            f'"{f.class_name}",(int*)(&{var}->{f.name}) - (int*){var},'
            f"{int(f.is_ptr)},{int(f.is_vec)});\n"
            for f in self.fields
        )
        parts.append(f"\t\tfree({var});\n\t}}\n")
        return "".join(parts)

    def processing_finished(self) -> None:
        parts = [
            f'#include "{replace_char(entry.file_path, chr(92), "/")}"\n'
            for entry in self.reflect_classes
        ]
        parts.append("\n")
        parts.append("void Reflect::initializeClassMap(){\n")
        parts.extend(
            f'\tReflect::classMap["{entry.class_name}"] = &{entry.class_name}::getInstance;\n'
            for entry in self.reflect_classes
        )
        parts.append("}\n")
        parts.append("void Reflect::initializeReflection() {\n")
        parts.extend(
            f"\t{entry.class_name}::initializeReflection();\n" for entry in self.reflect_classes
        )
        parts.append("\tinitializeClassMap();\n}")
        self.reflection_cpp_file.write_text("".join(parts))

    def should_process(self, file_name: str) -> bool:
        return super().should_process(file_name)