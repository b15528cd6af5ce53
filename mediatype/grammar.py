"""Media type grammar from RFC 2045 (section 5.1) and RFC 2616 (14.1).

::

    media-type = type "/" subtype *(";" parameter)
    parameter  = attribute "=" value
    value      = token / quoted-string

Only the overall shape is checked here.  Splitting the parameter list into
attribute/value pairs is left to :mod:`mediatype.scanner` since quoted
strings may contain escaped quotes and semicolons.

"""
import re

from typing import Tuple  # noqa

from mediatype.errors import InvalidMediaType, check_not_none


# Visible ASCII minus the tspecials: ()<>@,;:\"/[]?=
_TOKEN = r"[!#$%&'*+\-.^_`{|}~0-9A-Za-z]+"
# Any ASCII character except '"' and '\', or a backslash escaped ASCII char.
_QUOTED_STRING = r'"(?:[\x00-\x21\x23-\x5b\x5d-\x7f]|\\[\x00-\x7f])*"'
_PARAMETER = r';[ \t\r\n]*%s=(?:%s|%s)' % (_TOKEN, _TOKEN, _QUOTED_STRING)

TOKEN_PATTERN = re.compile(_TOKEN)
MEDIA_TYPE_PATTERN = re.compile(
    r'(%s)/(%s)((?:%s)*)' % (_TOKEN, _TOKEN, _PARAMETER))


def is_token(value: str) -> bool:
    return TOKEN_PATTERN.fullmatch(value) is not None


def split_media_type(text: str) -> Tuple[str, str, str]:
    """Split ``text`` into its type, subtype and raw parameter list.

    The returned parameter list is either empty or starts with the first
    ``;`` of the input.

    """
    check_not_none(text, 'text')
    if not isinstance(text, str):
        raise InvalidMediaType(
            "Media type must be a string, got %r" % type(text).__name__,
            value=text)
    match = MEDIA_TYPE_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidMediaType("Invalid media type: %r" % text, value=text)
    return match.group(1), match.group(2), match.group(3)
