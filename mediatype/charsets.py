"""Charset lookups backed by the ``codecs`` registry."""
import codecs
import logging
import re

from typing import Union  # noqa

from mediatype.errors import InvalidCharsetName, UnsupportedCharset
from mediatype.errors import check_not_none


LOGGER = logging.getLogger(__name__)

# Names must start with a letter or digit and may then contain letters,
# digits, '-', '+', ':', '_' and '.'.
_CHARSET_NAME = re.compile(r'[A-Za-z0-9][A-Za-z0-9\-+:_.]*')


def is_charset_name(name: str) -> bool:
    return _CHARSET_NAME.fullmatch(name) is not None


def lookup_charset(name: str) -> codecs.CodecInfo:
    check_not_none(name, 'charset')
    if not is_charset_name(name):
        raise InvalidCharsetName("Illegal charset name: %r" % name,
                                 value=name)
    try:
        info = codecs.lookup(name)
    except LookupError:
        LOGGER.debug("No codec registered for charset %r", name)
        raise UnsupportedCharset("Unsupported charset: %r" % name,
                                 value=name)
    # Codecs such as base64 or rot13 are registered alongside the text
    # encodings but can't be used to decode text.
    if not getattr(info, '_is_text_encoding', True):
        LOGGER.debug("Codec %r is not a text encoding", info.name)
        raise UnsupportedCharset("Not a text encoding: %r" % name,
                                 value=name)
    return info


def canonical_charset_name(
        charset: Union[str, codecs.CodecInfo]) -> str:
    check_not_none(charset, 'charset')
    if isinstance(charset, codecs.CodecInfo):
        return charset.name.upper()
    return lookup_charset(charset).name.upper()
