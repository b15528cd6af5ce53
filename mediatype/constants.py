# The wildcard marker used by media ranges, e.g. ``text/*`` or ``*/*``.
WILDCARD = '*'

# The only parameter whose value is case normalized.
CHARSET = 'charset'


DEFAULT_OUTPUT_FORMAT = 'text'
OUTPUT_FORMATS = ['text', 'json', 'yaml']

DEBUG_LOG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"


# Schemes accepted by mediatype.urls.create().
SUPPORTED_URL_SCHEMES = ['http', 'https', 'ftp', 'file', 'jar']
