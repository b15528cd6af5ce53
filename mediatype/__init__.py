from mediatype.core import MediaType, __version__ as mediatype_version
from mediatype.core import (
    ANY_TYPE, ANY_TEXT_TYPE, ANY_IMAGE_TYPE, ANY_AUDIO_TYPE, ANY_VIDEO_TYPE,
    ANY_APPLICATION_TYPE, JPEG, PNG, GIF, CSS, HTML, PLAIN_TEXT, JSON, XML,
    OCTET_STREAM
)
from mediatype.errors import (
    MediaTypeError, NullInput, InvalidMediaType, InvalidToken,
    WildcardMismatch, InvalidCharsetName, UnsupportedCharset, InvalidURL
)
from mediatype.charsets import lookup_charset
from mediatype.structures import FrozenMap
# We're reassigning version here to keep mypy happy.
__version__ = mediatype_version
__all__ = [
    "MediaType",
    "FrozenMap",
    "lookup_charset",
    "MediaTypeError",
    "NullInput",
    "InvalidMediaType",
    "InvalidToken",
    "WildcardMismatch",
    "InvalidCharsetName",
    "UnsupportedCharset",
    "InvalidURL",
    "ANY_TYPE",
    "ANY_TEXT_TYPE",
    "ANY_IMAGE_TYPE",
    "ANY_AUDIO_TYPE",
    "ANY_VIDEO_TYPE",
    "ANY_APPLICATION_TYPE",
    "JPEG",
    "PNG",
    "GIF",
    "CSS",
    "HTML",
    "PLAIN_TEXT",
    "JSON",
    "XML",
    "OCTET_STREAM",
]
