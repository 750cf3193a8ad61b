import pytest

from wintergen.statement import Statement, UnboundParameterError


class RecordingStatement(Statement):
    def __init__(self, query=""):
        super().__init__(query)
        self.executed = []

    def execute_query(self, query):
        self.executed.append(query)
        return ["row"]

    def execute_update(self, query):
        self.executed.append(query)
        return 1


def test_int_parameter_substituted():
    st = RecordingStatement("select * from users where id = :id")
    Statement.set_int(st, 5, "id")
    assert Statement.build_query(st) == "select * from users where id = 5"


def test_multiple_parameters_keep_following_text():
    st = RecordingStatement("update t set name = :name where id = :id and x = 1")
    Statement.set_long(Statement.set_string(st, "bob", "name"), 12, "id")
    assert Statement.build_query(st) == "update t set name = 'bob' where id = 12 and x = 1"


def test_setters_return_statement():
    st = RecordingStatement("select :a")
    assert Statement.set_short(st, 3, "a") is st
    assert Statement.build_query(st) == "select 3"


def test_bool_and_null_literals():
    st = RecordingStatement("values (:flag :missing)")
    Statement.set_null(Statement.set_bool(st, True, "flag"), "missing)")
    assert Statement.build_query(st) == "values (TRUE NULL"


def test_float_uses_six_decimals():
    st = RecordingStatement("select :f")
    Statement.set_float(st, 1.5, "f")
    assert Statement.build_query(st) == "select 1.500000"
    Statement.set_double(st, 2, "f")
    assert st.params["f"] == "2.000000"


def test_unbound_parameter_raises():
    st = RecordingStatement("select * from t where id = :id")
    with pytest.raises(UnboundParameterError) as info:
        Statement.build_query(st)
    assert info.value.name == "id"


def test_generate_parameter_map_binds_empty():
    st = RecordingStatement("select :a from t where b = :b")
    Statement.generate_parameter_map(st)
    assert st.params == {"a": "", "b": ""}
    assert Statement.build_query(st) == "select  from t where b = "


def test_generate_parameter_map_keeps_existing_values():
    st = RecordingStatement("select :a")
    Statement.set_int(st, 9, "a")
    Statement.generate_parameter_map(st)
    assert Statement.build_query(st) == "select 9"


def test_total_params_length_accumulates():
    st = RecordingStatement("select :a, :b")
    Statement.set_null(Statement.set_string(st, "xy", "a"), "b")
    assert st.total_params_length == len("'xy'") + len("NULL")


def test_execute_runs_built_query():
    st = RecordingStatement("select :x")
    Statement.set_int(st, 1, "x")
    assert Statement.execute(st) == ["row"]
    assert st.executed == ["select 1"]


def test_statement_is_abstract():
    with pytest.raises(TypeError):
        Statement("select 1")