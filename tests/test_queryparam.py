import pytest

from oasgen.queryparam import get

PARSE_TESTS = [
    ("a=1", {"a": "1"}, True),
    ("a=1&b=2", {"a": "1", "b": "2"}, True),
    ("a=1&a=2&a=banana", {"a": "1"}, True),
    ("ascii=%3Ckey%3A+0x90%3E", {"ascii": "<key: 0x90>"}, True),
    ("a=1;b=2", {}, False),
    ("a;b=1", {}, False),
    ("a=%3B", {"a": ";"}, True),
    ("a%3Bb=1", {"a;b": "1"}, True),
    ("a=1&a=2;a=banana", {"a": "1"}, False),
    ("a;b&c=1", {"c": "1"}, False),
    ("a=1&b=2;a=3&c=4", {"a": "1", "c": "4"}, False),
    ("a=1&b=2;c=3", {"a": "1"}, False),
    (";", {}, False),
    ("a=1;", {}, False),
    ("a=1&;", {"a": "1"}, False),
    (";a=1&b=2", {"b": "2"}, False),
    ("a=1&b=2;", {"a": "1"}, False),
]


@pytest.mark.parametrize("query,out,ok", PARSE_TESTS)
def test_parse_query(query, out, ok):
    if ok:
        for key, value in out.items():
            assert get(query, key) == value
    else:
        assert get(query, "missingvalue") == ""


@pytest.mark.parametrize(
    "query,name,expected",
    [
        ("foo=bar", "foo", "bar"),
        ("foo=bar&baz=123", "foo", "bar"),
        ("foo=bar&baz=123", "baz", "123"),
        ("foo=bar&baz=123", "missing", ""),
        ("foo=bar&baz=123&bool&another", "bool", "true"),
    ],
)
def test_query(query, name, expected):
    assert get(query, name) == expected


def test_empty_query():
    assert get("", "foo") == ""


def test_flag_at_end_is_true():
    assert get("foo=bar&flag", "flag") == "true"


def test_malformed_escape_in_value():
    assert get("a=%zz", "a") == ""