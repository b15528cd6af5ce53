"""Internet media types and HTTP media ranges.

A :class:`MediaType` is an immutable ``(type, subtype, parameters)``
triple.  The case-insensitive parts (type, subtype and parameter
attributes) are normalized to lowercase.  Parameter values are kept as
given, except for the ``charset`` parameter whose value is upper-cased.
The ``*`` wildcard may be used for the subtype, or for both the type and
the subtype, to describe a media range.

"""
import codecs
import logging
import string
from collections.abc import Mapping
from dataclasses import dataclass, field

from typing import Any, Dict, Iterable, Optional, Tuple, Union  # noqa

from mediatype.charsets import canonical_charset_name, lookup_charset
from mediatype.constants import CHARSET, WILDCARD
from mediatype.errors import InvalidMediaType, InvalidToken
from mediatype.errors import WildcardMismatch, check_not_none
from mediatype.grammar import is_token, split_media_type
from mediatype.scanner import scan_parameters
from mediatype.structures import FrozenMap


__version__: str = '1.0.0'

LOGGER = logging.getLogger(__name__)

ParametersType = Union[Mapping, Iterable[Tuple[str, str]]]

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def normalize_token(token: str, name: str) -> str:
    check_not_none(token, name)
    if not isinstance(token, str) or not is_token(token):
        raise InvalidToken("Invalid %s: %r" % (name, token), value=token)
    # Tokens are ASCII only, so lower() can't touch anything else.
    return token.lower()


def normalize_parameters(parameters: ParametersType) -> FrozenMap:
    check_not_none(parameters, 'parameters')
    if isinstance(parameters, Mapping):
        parameters = parameters.items()
    normalized: Dict[str, str] = {}
    for attribute, value in parameters:
        attribute = normalize_token(attribute, 'parameter attribute')
        check_not_none(value, 'value of parameter %s' % attribute)
        if not isinstance(value, str):
            raise InvalidMediaType(
                "Value of parameter %s must be a string: %r"
                % (attribute, value), value=value)
        if attribute == CHARSET:
            value = value.translate(_ASCII_UPPER)
        normalized[attribute] = value
    return FrozenMap(normalized)


def _quote(value: str) -> str:
    escaped = value.replace('\\', '\\\\').replace('"', '\\"')
    return '"%s"' % escaped


@dataclass(frozen=True, repr=False)
class MediaType:
    type: str
    subtype: str
    parameters: FrozenMap = field(default_factory=FrozenMap)

    def __post_init__(self) -> None:
        type_ = normalize_token(self.type, 'type')
        subtype = normalize_token(self.subtype, 'subtype')
        if type_ == WILDCARD and subtype != WILDCARD:
            raise WildcardMismatch(
                "A wildcard type requires a wildcard subtype: %s/%s"
                % (type_, subtype), value=subtype)
        # The instance is frozen, so normalized values have to be set
        # through object.__setattr__.
        object.__setattr__(self, 'type', type_)
        object.__setattr__(self, 'subtype', subtype)
        object.__setattr__(
            self, 'parameters', normalize_parameters(self.parameters))

    @classmethod
    def parse(cls, text: str) -> 'MediaType':
        """Parse a media type, or media range, from its string form.

        >>> str(MediaType.parse('Text/HTML;Charset="utf-8"'))
        'text/html; charset=UTF-8'

        """
        try:
            type_, subtype, tail = split_media_type(text)
            return cls(type_, subtype, scan_parameters(tail))
        except InvalidMediaType:
            LOGGER.debug("Rejected media type: %r", text)
            raise

    @classmethod
    def create(cls, type: str, subtype: str,
               parameters: Optional[ParametersType] = None) -> 'MediaType':
        if parameters is None:
            parameters = FrozenMap()
        return cls(type, subtype, parameters)

    def has_wildcard(self) -> bool:
        return WILDCARD in (self.type, self.subtype)

    def charset(self) -> Optional[codecs.CodecInfo]:
        """Return the codec named by the charset parameter.

        ``None`` is returned when the parameter is not set.  An
        ``InvalidCharsetName`` or ``UnsupportedCharset`` error is raised
        if the value can't be resolved.

        """
        name = self.parameters.get(CHARSET)
        if name is None:
            return None
        return lookup_charset(name)

    def with_charset(
            self, charset: Union[str, codecs.CodecInfo]) -> 'MediaType':
        return self.with_parameter(CHARSET, canonical_charset_name(charset))

    def with_parameter(self, attribute: str, value: str) -> 'MediaType':
        return self.with_parameters([(attribute, value)])

    def with_parameters(self, parameters: ParametersType) -> 'MediaType':
        """Return a copy with ``parameters`` laid over this one's.

        Incoming values win.  Attributes already present keep their
        position, new ones are appended.

        """
        merged = self.parameters.union(normalize_parameters(parameters))
        return MediaType(self.type, self.subtype, merged)

    def without_parameter(self, attribute: str) -> 'MediaType':
        check_not_none(attribute, 'attribute')
        params = self.parameters.discard(attribute.translate(_ASCII_LOWER))
        return MediaType(self.type, self.subtype, params)

    def without_parameters(self) -> 'MediaType':
        return MediaType(self.type, self.subtype)

    def is_within(self, media_range: Union['MediaType', str]) -> bool:
        """Return whether this media type is within ``media_range``.

        The type and subtype of the range must either be the wildcard or
        equal this instance's, and every parameter of the range must be
        present with the same value here.  Parameters present here but
        absent from the range don't matter, so this is not symmetric:
        ``text/html`` is within ``text/*`` but not the other way around.

        """
        check_not_none(media_range, 'media_range')
        if isinstance(media_range, str):
            media_range = MediaType.parse(media_range)
        return (
            media_range.type in (WILDCARD, self.type) and
            media_range.subtype in (WILDCARD, self.subtype) and
            media_range.parameters.items() <= self.parameters.items()
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type,
            'subtype': self.subtype,
            'parameters': dict(self.parameters),
        }

    def __str__(self) -> str:
        rendered = ['%s/%s' % (self.type, self.subtype)]
        for attribute, value in self.parameters.items():
            if not is_token(value):
                value = _quote(value)
            rendered.append('%s=%s' % (attribute, value))
        return '; '.join(rendered)

    def __repr__(self) -> str:
        return '<MediaType {0}>'.format(self)


ANY_TYPE = MediaType.create(WILDCARD, WILDCARD)
ANY_TEXT_TYPE = MediaType.create('text', WILDCARD)
ANY_IMAGE_TYPE = MediaType.create('image', WILDCARD)
ANY_AUDIO_TYPE = MediaType.create('audio', WILDCARD)
ANY_VIDEO_TYPE = MediaType.create('video', WILDCARD)
ANY_APPLICATION_TYPE = MediaType.create('application', WILDCARD)
JPEG = MediaType.create('image', 'jpeg')
PNG = MediaType.create('image', 'png')
GIF = MediaType.create('image', 'gif')
CSS = MediaType.create('text', 'css')
HTML = MediaType.create('text', 'html')
PLAIN_TEXT = MediaType.create('text', 'plain')
JSON = MediaType.create('application', 'json')
XML = MediaType.create('application', 'xml')
OCTET_STREAM = MediaType.create('application', 'octet-stream')
