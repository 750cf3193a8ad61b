"""SQL statements with ``:name`` parameters bound by value."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any

from wintergen.string_utils import format_boolean, to_upper_case

_PARAMETER = re.compile(r":([^ ]*)")


class UnboundParameterError(LookupError):
    """A ``:name`` parameter in the query has no value."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Parameter {name} is unbound!")
        self.name = name


class Statement(ABC):
    """A query whose ``:name`` parameters are replaced by bound literals.

    A parameter name runs from the colon up to the next space or the end.
    """

    def __init__(self, query: str = "") -> None:
        self.query = query
        self.params: dict[str, str] = {}
        self.total_params_length = 0

    def _bind(self, name: str, literal: str) -> "Statement":
        self.params[name] = literal
        self.total_params_length += len(literal)
        return self

    def set_int(self, value: int, name: str) -> "Statement":
        return self._bind(name, str(int(value)))

    def set_long(self, value: int, name: str) -> "Statement":
        return self._bind(name, str(int(value)))

    def set_float(self, value: float, name: str) -> "Statement":
        return self._bind(name, f"{float(value):f}")

    def set_double(self, value: float, name: str) -> "Statement":
        return self._bind(name, f"{float(value):f}")

    def set_string(self, value: str, name: str) -> "Statement":
        return self._bind(name, f"'{value}'")

    def set_null(self, name: str) -> "Statement":
        return self._bind(name, "NULL")

    def set_bool(self, value: bool, name: str) -> "Statement":
        return self._bind(name, to_upper_case(format_boolean(bool(value))))

    def set_short(self, value: int, name: str) -> "Statement":
        return self._bind(name, str(int(value)))

    def generate_parameter_map(self) -> None:
        """Register every parameter of the query, bound to an empty string if unset."""
        for name in _PARAMETER.findall(self.query):
            self.params.setdefault(name, "")

    def build_query(self) -> str:
        """The query with every parameter replaced by its bound literal."""

        def substitute(match: re.Match) -> str:
            name = match.group(1)
            if name not in self.params:
                raise UnboundParameterError(name)
            return self.params[name]

        return _PARAMETER.sub(substitute, self.query)

    def execute(self) -> Any:
        return self.execute_query(self.build_query())

    @abstractmethod
    def execute_query(self, query: str) -> Any:
        """Run a query and return its result set."""

    @abstractmethod
    def execute_update(self, query: str) -> int:
        """Run a statement and return the number of affected rows."""