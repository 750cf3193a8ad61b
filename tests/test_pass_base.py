import io

import pytest

from wintergen.pass_base import Pass


class _Recorder(Pass):
    def __init__(self):
        self.events = []

    def begin(self, file_name):
        self.events.append(("begin", file_name))

    def process(self, output, line, previous_line):
        self.events.append(("line", line))
        return False

    def end(self, output, file_name):
        self.events.append(("end", file_name))

    def processing_finished(self):
        self.events.append(("finished",))


def test_pass_is_abstract():
    with pytest.raises(TypeError):
        Pass()


@pytest.mark.parametrize(
    "file_name, expected",
    [
        ("include/User.h", True),
        ("include/User.hpp", True),
        ("source/User.cpp", False),
        ("notes.txt", False),
    ],
)
def test_should_process_only_headers(file_name, expected):
    assert Pass.should_process(_Recorder(), file_name) is expected


def test_parse_class_line_splits_name_and_bases():
    parsed = Pass._parse_class_line("class User : public Reflect {")
    assert parsed == ("User", ": public Reflect {")


def test_parse_class_line_without_class_keyword():
    assert Pass._parse_class_line("int x;") is None


def test_assign_file_path_fills_only_trailing_records():
    class Record:
        def __init__(self, file_path):
            self.file_path = file_path

    records = [Record("a.h"), Record(""), Record("")]
    Pass._assign_file_path(records, "b.h")
    assert [r.file_path for r in records] == ["a.h", "b.h", "b.h"]


def test_subclass_inherits_header_check():
    recorder = _Recorder()
    recorder.begin("x.h")
    assert recorder.process(io.StringIO(), "int a;", "") is False
    assert Pass.should_process(recorder, "x.h") is True
    assert recorder.events == [("begin", "x.h"), ("line", "int a;")]