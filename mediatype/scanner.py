"""Scanner for the parameter list of a media type.

The scanner works on the tail returned by
:func:`mediatype.grammar.split_media_type`, e.g. ``; charset=utf-8``.
Each step takes the text and a cursor position and returns what it read
along with the position to continue from, so there is no scanner state
to share between calls.

"""
from typing import List, Tuple  # noqa

from mediatype.errors import InvalidMediaType


def scan_parameters(tail: str) -> List[Tuple[str, str]]:
    """Return the ``(attribute, value)`` pairs of a parameter list.

    Attributes are returned with surrounding whitespace removed but
    otherwise untouched.  Quoted values are returned unquoted and
    unescaped.  Duplicate attributes are all returned, in order.

    """
    params: List[Tuple[str, str]] = []
    pos = 0
    while pos < len(tail):
        if tail[pos] != ';':
            raise InvalidMediaType(
                "Expected ';' at position %s of parameters: %r"
                % (pos, tail), value=tail)
        attribute, pos = read_attribute(tail, pos + 1)
        value, pos = read_value(tail, pos)
        params.append((attribute, value))
    return params


def read_attribute(tail: str, pos: int) -> Tuple[str, int]:
    end = tail.find('=', pos)
    if end == -1:
        raise InvalidMediaType(
            "Missing '=' in parameter: %r" % tail[pos:], value=tail)
    return tail[pos:end].strip(), end + 1


def read_value(tail: str, pos: int) -> Tuple[str, int]:
    if pos < len(tail) and tail[pos] == '"':
        return read_quoted_string(tail, pos + 1)
    end = tail.find(';', pos)
    if end == -1:
        end = len(tail)
    if end == pos:
        raise InvalidMediaType(
            "Missing parameter value at position %s: %r" % (pos, tail),
            value=tail)
    return tail[pos:end], end


def read_quoted_string(tail: str, pos: int) -> Tuple[str, int]:
    # ``pos`` is just past the opening quote.  The returned position is
    # just past the closing quote.
    start = pos - 1
    chars = []
    while pos < len(tail):
        char = tail[pos]
        if char == '\\':
            if pos + 1 == len(tail):
                break
            chars.append(tail[pos + 1])
            pos += 2
        elif char == '"':
            return ''.join(chars), pos + 1
        else:
            chars.append(char)
            pos += 1
    raise InvalidMediaType(
        "Unterminated quoted string: %r" % tail[start:], value=tail)
