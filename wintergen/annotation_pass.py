"""Pass that acts on ``$Annotation`` markers inside class bodies."""

from __future__ import annotations

import string
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO, Union

from wintergen.pass_base import Pass
from wintergen.string_utils import get_field_name, starts_with, trim

_ALNUM = frozenset(string.ascii_letters + string.digits)


def _is_alnum(ch: str) -> bool:
    return ch in _ALNUM


@dataclass
class EndpointData:
    """An endpoint declared by a ``$GET("...")``-style annotation."""

    method: str
    uri: str
    function_name: str
    body_type: str


class AnnotationPass(Pass):
    """Recognises ``$RestController``, endpoint mappings, ``$PostConstruct``,
    ``$Autowired`` and ``$Column`` and generates the code they stand for.

    The generated code is written just before the closing brace of the class.
    """

    def __init__(self, source_dir: Union[str, Path], target_dir: Union[str, Path]) -> None:
        self.router_cpp_file = Path(target_dir) / "Router.cpp"
        self.bracket_counter = 0
        self.endpoint_data: list[EndpointData] = []
        self.rest_controllers: list[str] = []
        self.post_construct_method_name = ""
        self.column_mappings: dict[str, str] = {}

    def begin(self, file_name: str) -> None:
        self.bracket_counter = 0

    def process(self, output: TextIO, line: str, previous_line: str) -> bool:
        previous = trim(previous_line)

        if self.bracket_counter == 0 and previous == "$RestController":
            self._handle_rest_controller(line)

        if self.bracket_counter == 1:
            if previous == "$PostConstruct":
                self._handle_post_construct(line)
            elif previous == "$Autowired":
                return self._handle_autowire(line, output)
            elif starts_with(previous, "$Column"):
                self._handle_entity_column(line, previous_line)

        for ch in line:
            if ch == "{":
                self.bracket_counter += 1
            elif ch == "}":
                if self.bracket_counter == 1:
                    self._finish_class(output)
                self.bracket_counter -= 1

        if self.bracket_counter != 1:
            return False

        endpoint = self._parse_endpoint(line, previous_line)
        if endpoint is not None:
            self.endpoint_data.append(endpoint)
        return False

    def end(self, output: TextIO, file_name: str) -> None:
        """Nothing is generated at the end of a file."""

    def processing_finished(self) -> None:
        """Truncate ``Router.cpp``; endpoints are registered inside each class."""
        self.endpoint_data.clear()
        self.router_cpp_file.write_text("")

    def should_process(self, file_name: str) -> bool:
        return super().should_process(file_name)

    def _finish_class(self, output: TextIO) -> None:
        output.write(self._register_endpoints())
        output.write(self._post_construct())
        self.endpoint_data.clear()
        self.post_construct_method_name = ""
        output.write(self._column_mappings())
        self.column_mappings.clear()

    @staticmethod
    def _parse_endpoint(line: str, previous_line: str) -> EndpointData | None:
        begin = previous_line.find("$")
        if begin < 0:
            return None
        end = previous_line.find("(", begin)
        if end < 0:
            return None
        method = previous_line[begin + 1 : end]

        begin = previous_line.find('"', end)
        end = previous_line.rfind('"')
        if begin < 0 or end < 0 or begin == end:
            return None
        uri = previous_line[begin + 1 : end]

        open_paren = line.find("(")
        if open_paren < 0:
            return None
        begin = line.rfind(" ", 0, open_paren)
        if begin < 0:
            return None
        function_name = line[begin + 1 : open_paren]

        star = line.find("*", open_paren)
        if star < 0:
            return None
        body_type = trim(line[open_paren + 1 : star])
        return EndpointData(method, uri, function_name, body_type)

    def _handle_rest_controller(self, line: str) -> None:
        begin = line.find("class")
        if begin < 0:
            return
        begin += 5
        while begin < len(line) and line[begin] == " ":
            begin += 1
        rest = line[begin:]
        if rest.startswith("["):
            return
        if starts_with(rest, "alignas"):
            close = line.find(")", begin + 8)
            if close < 0:
                return
            begin = close + 1
            while begin < len(line) and line[begin] == " ":
                begin += 1
        end = line.find(" ", begin)
        if end < 0:
            return
        self.rest_controllers.append(line[begin:end])

    def _handle_post_construct(self, line: str) -> None:
        end = line.find("(")
        if end < 0:
            return
        begin = line.rfind(" ", 0, end)
        if begin < 0:
            return
        self.post_construct_method_name = line[begin + 1 : end]

    def _handle_autowire(self, line: str, output: TextIO) -> bool:
        start = 0
        while start < len(line) and line[start].isspace():
            start += 1
        end = line.find("*", start + 1)
        if end < 0:
            return False

        class_name_ptr = line[start : end + 1]
        while end > start and not _is_alnum(line[end]):
            end -= 1
        if end == start:
            return False
        class_name = line[start : end + 1]

        end = line.rfind(";")
        if end < 0:
            return False
        end -= 1
        begin = end - 1
        if begin < 0:
            return False
        while begin > 0 and _is_alnum(line[begin]):
            begin -= 1
        var_name = line[begin : end + 1]

        output.write(
            f"\t{class_name_ptr} {var_name} = ({class_name_ptr})"
            f"(Component::getById({class_name}::_componentId_));\n"
        )
        return True

    def _handle_entity_column(self, line: str, previous_line: str) -> None:
        begin = previous_line.find('"')
        end = previous_line.rfind('"')
        if begin < 0 or end < 0 or begin == end:
            return
        column_name = previous_line[begin + 1 : end]
        self.column_mappings[get_field_name(line)] = column_name

    def _register_endpoints(self) -> str:
        if not self.endpoint_data:
            return ""
        parts = [
            "\n",
            "\tint _endpoint_data__helper_ = ([this]() {\n\n",
            "\t\tURI uri;\n",
            "\t\tHttpMethod* method;\n",
            "\t\tEndpoint* endpoint;\n\n",
        ]
        for endpoint in self.endpoint_data:
            parts.append(f'\t\turi = URI{{"{endpoint.uri}"}};\n')
            parts.append(f'\t\tmethod = HttpMethod::fromString("{endpoint.method}");\n')
            parts.append("\t\tendpoint = new Endpoint();\n")
            parts.append(
                "\t\tendpoint->func = std::function([this](HttpRequest* req){ return "
                f"{endpoint.function_name}(req);}});\n"
            )
            parts.append("\t\tendpoint->method = method;\n")
            parts.append("\t\tendpoint->uri = uri;\n")
            parts.append("\t\tRouter::getInstance()->registerEndpoint(endpoint);\n\n")
        parts.append("\t\treturn 0;\n\t})();\n")
        return "".join(parts)

    def _post_construct(self) -> str:
        if not self.post_construct_method_name:
            return ""
        return (
            "\n"
            "\tint _post_construct_helper_ = ([this]() {\n"
            f"\t\t{self.post_construct_method_name}();\n"
            "\t\treturn 0;\n\t})();\n"
        )

    def _column_mappings(self) -> str:
        if not self.column_mappings:
            return ""
        parts = [
            "\npublic:\n",
            "\tstd::unordered_map<std::string, std::string>& getColumnMappings() const override{\n"
            "        return columnMappings;\n"
            "    }\n\n"
            "\tstatic std::unordered_map<std::string, std::string> generateMappings(){\n"
            "\t\tstd::unordered_map<std::string, std::string> columnMappings = {};\n",
        ]
        parts.extend(
            f'\t\tcolumnMappings["{field_name}"] = "{column}";\n'
            for field_name, column in self.column_mappings.items()
        )
        parts.append("\t\treturn columnMappings;\n")
        parts.append("\t}\n\n")
        parts.append(
            "\tstatic inline std::unordered_map<std::string, std::string> columnMappings"
            " = generateMappings();\n\n"
        )
        return "".join(parts)