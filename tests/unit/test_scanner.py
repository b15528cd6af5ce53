import pytest

from mediatype import scanner
from mediatype.errors import InvalidMediaType


def test_empty_parameter_list():
    assert scanner.scan_parameters('') == []


@pytest.mark.parametrize('tail,expected', [
    ('; charset=utf-8', [('charset', 'utf-8')]),
    (';charset=utf-8', [('charset', 'utf-8')]),
    (';a=1;b=2', [('a', '1'), ('b', '2')]),
    ('; a=1; b=2', [('a', '1'), ('b', '2')]),
    (';\t  Attr=Value', [('Attr', 'Value')]),
    ('; name=""', [('name', '')]),
    ('; name="two words"', [('name', 'two words')]),
    ('; name="a;b"; x=y', [('name', 'a;b'), ('x', 'y')]),
    ('; name="a=b"', [('name', 'a=b')]),
    ('; name="a\\"b"', [('name', 'a"b')]),
    ('; name="a\\\\b"', [('name', 'a\\b')]),
    ('; name="\\a\\b\\c"', [('name', 'abc')]),
    ('; name="trailing\\\\"', [('name', 'trailing\\')]),
    # Duplicates are left for the normalizer to deal with.
    ('; A=x; a=y', [('A', 'x'), ('a', 'y')]),
])
def test_scan_parameters(tail, expected):
    assert scanner.scan_parameters(tail) == expected


@pytest.mark.parametrize('tail', [
    'a=b',
    '; a',
    '; a=',
    '; a=1;',
    '; a="unterminated',
    '; a="ends with escape\\',
    '; a="b"c',
    '; a="b" ; c=d',
])
def test_scan_parameters_rejects_malformed_lists(tail):
    with pytest.raises(InvalidMediaType):
        scanner.scan_parameters(tail)


def test_read_attribute_returns_position_after_equals():
    tail = '; charset=utf-8'
    assert scanner.read_attribute(tail, 1) == ('charset', 10)


def test_read_bare_value_stops_at_semicolon():
    tail = '; a=1; b=2'
    assert scanner.read_value(tail, 4) == ('1', 5)


def test_read_bare_value_stops_at_end():
    tail = '; charset=utf-8'
    assert scanner.read_value(tail, 10) == ('utf-8', len(tail))


def test_read_quoted_string_returns_position_after_quote():
    assert scanner.read_quoted_string('"abc";x=y', 1) == ('abc', 5)


def test_scanning_is_reentrant():
    tail = '; a="1"; b=2'
    first = scanner.scan_parameters(tail)
    second = scanner.scan_parameters(tail)
    assert first == second == [('a', '1'), ('b', '2')]
