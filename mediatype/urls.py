"""URL helpers built on top of :mod:`urllib.parse`."""
from urllib.parse import urljoin, urlsplit, urlunsplit

from mediatype.constants import SUPPORTED_URL_SCHEMES
from mediatype.errors import InvalidURL, check_not_none


def create(url: str) -> str:
    """Validate ``url`` and return it.

    Use this where the URL is known to be well formed, an ``InvalidURL``
    error is raised if it has no scheme or one that isn't supported.

    """
    check_not_none(url, 'url')
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidURL("Invalid URL %r: %s" % (url, e), value=url)
    if not parts.scheme:
        raise InvalidURL("No scheme in URL: %r" % url, value=url)
    if parts.scheme.lower() not in SUPPORTED_URL_SCHEMES:
        raise InvalidURL("Unsupported URL scheme %r: %r"
                         % (parts.scheme, url), value=url)
    return urlunsplit(parts)


def relativize(base: str, full: str) -> str:
    """Return ``full`` relative to ``base``.

    ``full`` is returned unchanged (apart from dot segment removal) when
    it isn't below ``base``: different scheme or authority, an opaque
    URL such as ``mailto:``, or a path that doesn't start with the base
    path.

    """
    check_not_none(base, 'base')
    check_not_none(full, 'full')
    base_parts = urlsplit(base)
    full_parts = urlsplit(full)
    full_path = remove_dot_segments(full_parts.path)
    unchanged = urlunsplit(full_parts._replace(path=full_path))
    if _is_opaque(base_parts) or _is_opaque(full_parts):
        return full
    if base_parts.scheme.lower() != full_parts.scheme.lower() or \
            base_parts.netloc.lower() != full_parts.netloc.lower():
        return unchanged
    base_path = remove_dot_segments(base_parts.path)
    if base_path != full_path:
        if not base_path.endswith('/'):
            base_path += '/'
        if not full_path.startswith(base_path):
            return unchanged
    return urlunsplit(('', '', full_path[len(base_path):],
                       full_parts.query, full_parts.fragment))


def resolve(base: str, path: str) -> str:
    check_not_none(base, 'base')
    check_not_none(path, 'path')
    return create(urljoin(base, path))


def remove_dot_segments(path: str) -> str:
    # RFC 3986, section 5.2.4.
    segments = path.split('/')
    output = []
    for segment in segments:
        if segment == '..':
            if len(output) > 1 or (output and output[0] != ''):
                output.pop()
        elif segment != '.':
            output.append(segment)
    if segments[-1] in ('.', '..'):
        output.append('')
    return '/'.join(output)


def _is_opaque(parts) -> bool:
    return bool(parts.scheme) and not parts.netloc and \
        not parts.path.startswith('/')
