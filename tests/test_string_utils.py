from datetime import datetime, timedelta

import pytest

from wintergen import string_utils as su


def test_trim_removes_surrounding_whitespace():
    assert su.trim("  hello \t\n") == "hello"
    assert su.trim("   ") == ""
    assert su.trim("") == ""


def test_trim_keeps_inner_whitespace():
    text = "  a b  "
    assert su.trim(text) == text.strip()
    assert " " in su.trim(text)


def test_strip_blank_characters_removes_all_whitespace():
    result = su.strip_blank_characters(" std:: vector < int >\t* ")
    assert not any(ch.isspace() for ch in result)
    assert result == "std::vector<int>*"


def test_strip_special_characters_keeps_alnum():
    result = su.strip_special_characters("vector<Foo*>_1")
    assert result.isalnum()
    assert result == "vectorFoo1"


def test_ends_with():
    assert su.ends_with("Model.h", ".h")
    assert su.ends_with("Model.hpp", ".hpp")
    assert not su.ends_with("Model.cpp", ".h")


def test_starts_with_accepts_shorter_either_way():
    assert su.starts_with("vector<int>", "vector")
    assert not su.starts_with("string", "vector")
    assert su.starts_with("vec", "vector")
    assert su.starts_with("", "anything")


def test_split_basic_and_trailing_separator():
    assert su.split("a,b,c", ",") == ["a", "b", "c"]
    assert su.split("a,b,", ",") == ["a", "b"]
    assert su.split("a,,b", ",") == ["a", "", "b"]
    assert su.split("", ",") == []


def test_split_join_round_trip():
    text = "one two three"
    assert " ".join(su.split(text, " ")) == text


def test_split_array_flat():
    assert su.split_array("[1,2,3]") == ["1", "2", "3"]


def test_split_array_without_brackets():
    assert su.split_array("1,2") == ["1", "2"]


def test_split_array_ignores_separators_in_strings():
    assert su.split_array('["a,b","c"]') == ['"a,b"', '"c"']


def test_split_array_respects_nesting():
    assert su.split_array("[[1,2],[3]]") == ["[1,2]", "[3]"]


def test_split_array_empty_input():
    assert su.split_array("") == []


def test_split_object_array():
    parts = su.split_object_array('[{"a":1},{"b":2}]')
    assert parts[0] == '{"a":1}'
    assert len(parts) == 2
    assert parts[1].startswith('{"b":2}')


def test_split_object_array_without_objects():
    assert su.split_object_array("[1,2]") == []


def test_uncapitalize_lowercases_letters():
    assert su.uncapitalize("HelloWorld") == "HelloWorld".lower()


def test_rtrim():
    assert su.rtrim("abc  \n") == "abc"
    assert su.rtrim("  abc") == "  abc"


def test_replace_char():
    assert su.replace_char("a\\b\\c", "\\", "/") == "a/b/c"
    assert su.replace_char("", "a", "b") == ""


def test_replace_pattern():
    assert su.replace_pattern("a::b::c", "::", ".") == "a.b.c"
    with pytest.raises(ValueError):
        su.replace_pattern("abc", "", "x")


def test_case_conversion_round_trip():
    text = "Mixed Case 123"
    upper = su.to_upper_case(text)
    assert upper == text.upper()
    assert su.to_lower_case(upper) == text.lower()


def test_case_conversion_ascii_only():
    assert su.to_upper_case("é") == "é"


@pytest.mark.parametrize("value", [True, False])
def test_boolean_round_trip(value):
    assert su.parse_boolean(su.format_boolean(value)) is value


def test_parse_boolean_ignores_case():
    assert su.parse_boolean("TRUE") is True
    assert su.parse_boolean("False") is False


def test_parse_boolean_rejects_other_values():
    with pytest.raises(ValueError):
        su.parse_boolean("yes")


def test_to_camel_case():
    assert su.to_camel_case("user_name") == "userName"
    assert su.to_camel_case("created on") == "createdOn"
    assert su.to_camel_case("a__b") == "a_B"
    assert su.to_camel_case("trailing_") == "trailing_"


def test_url_decode():
    assert su.url_decode("hello+world%21") == "hello world!"
    assert su.url_decode("%C3%A9") == "é"
    assert su.url_decode("100%") == "100"


def test_url_decode_plain_text_unchanged():
    assert su.url_decode("plain") == "plain"


def test_current_datetime_format():
    value = su.current_datetime()
    assert len(value) == 24
    parsed = datetime.strptime(value, "%a %b %d %H:%M:%S %Y")
    assert abs(parsed - datetime.now()) < timedelta(minutes=1)


@pytest.mark.parametrize(
    "line, name",
    [
        ("    int age;", "age"),
        ('    std::string name = "x";', "name"),
        ("    Foo* bar;", "bar"),
        ("    std::vector<int> items;", "items"),
    ],
)
def test_get_field_name(line, name):
    assert su.get_field_name(line) == name


def test_get_field_name_without_declaration():
    assert su.get_field_name("return;") == ""