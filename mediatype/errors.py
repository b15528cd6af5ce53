from typing import Any, Optional  # noqa


class MediaTypeError(ValueError):
    """Base class for every error raised by the mediatype package.

    The offending input, when there is one, is available as ``value``.
    """

    def __init__(self, message: str, value: Optional[Any] = None) -> None:
        super(MediaTypeError, self).__init__(message)
        self.value: Optional[Any] = value


class NullInput(MediaTypeError):
    pass


class InvalidMediaType(MediaTypeError):
    pass


class InvalidToken(InvalidMediaType):
    pass


class WildcardMismatch(InvalidMediaType):
    pass


class InvalidCharsetName(MediaTypeError):
    pass


class UnsupportedCharset(MediaTypeError):
    pass


class InvalidURL(MediaTypeError):
    pass


def check_not_none(value: Any, name: str) -> Any:
    if value is None:
        raise NullInput("Missing required argument: %s" % name)
    return value
