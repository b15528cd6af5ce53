"""Command line interface for mediatype.

Contains commands for inspecting and matching media types.

"""
from __future__ import annotations
import logging
import platform
import sys
import traceback

import click
from typing import Any, Dict, Optional  # noqa

from mediatype import __version__ as mediatype_version
from mediatype.constants import DEBUG_LOG_FORMAT, DEFAULT_OUTPUT_FORMAT
from mediatype.constants import OUTPUT_FORMATS
from mediatype.core import MediaType
from mediatype.errors import MediaTypeError
from mediatype.utils import serialize_to_json, serialize_to_yaml


def _configure_logging(level, format_string=None):
    # type: (int, Optional[str]) -> None
    if format_string is None:
        format_string = DEBUG_LOG_FORMAT
    logger = logging.getLogger('')
    logger.setLevel(level)
    handler = logging.StreamHandler()
    handler.setLevel(level)
    formatter = logging.Formatter(format_string)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def get_system_info():
    # type: () -> str
    python_info = "python {}.{}.{}".format(sys.version_info[0],
                                           sys.version_info[1],
                                           sys.version_info[2])
    platform_system = platform.system().lower()
    platform_release = platform.release()
    platform_info = "{} {}".format(platform_system, platform_release)
    return "{}, {}".format(python_info, platform_info)


@click.group()
@click.version_option(version=mediatype_version,
                      message='%(prog)s %(version)s, {}'
                      .format(get_system_info()))
@click.option('--debug/--no-debug',
              default=False,
              help='Print debug logs to stderr.')
@click.pass_context
def cli(ctx, debug=False):
    # type: (click.Context, bool) -> None
    if debug is True:
        _configure_logging(logging.DEBUG)
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug


def _parse_or_exit(text):
    # type: (str) -> MediaType
    try:
        return MediaType.parse(text)
    except MediaTypeError as e:
        click.echo(str(e), err=True)
        sys.exit(2)


@cli.command()
@click.argument('media_type')
@click.option('--format', 'output_format', default=DEFAULT_OUTPUT_FORMAT,
              type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
              help='Output format of the parsed media type.')
def parse(media_type, output_format=DEFAULT_OUTPUT_FORMAT):
    # type: (str, str) -> None
    parsed = _parse_or_exit(media_type)
    output_format = output_format.lower()
    if output_format == 'text':
        click.echo(str(parsed))
        return
    data = parsed.to_dict()  # type: Dict[str, Any]
    data['has_wildcard'] = parsed.has_wildcard()
    if output_format == 'yaml':
        click.echo(serialize_to_yaml(data), nl=False)
    else:
        click.echo(serialize_to_json(data), nl=False)


@cli.command()
@click.argument('media_type')
@click.argument('media_range')
def match(media_type, media_range):
    # type: (str, str) -> None
    """Check whether MEDIA_TYPE is within MEDIA_RANGE.

    Exits with 0 if it is and 1 if it isn't.
    """
    parsed = _parse_or_exit(media_type)
    parsed_range = _parse_or_exit(media_range)
    matches = parsed.is_within(parsed_range)
    click.echo('true' if matches else 'false')
    sys.exit(0 if matches else 1)


@cli.command()
@click.argument('media_type')
def charset(media_type):
    # type: (str) -> None
    parsed = _parse_or_exit(media_type)
    try:
        info = parsed.charset()
    except MediaTypeError as e:
        click.echo(str(e), err=True)
        sys.exit(2)
    if info is not None:
        click.echo(info.name)


def main():
    # type: () -> int
    # click's dynamic attrs will allow us to pass through
    # 'obj' via the context object, so we're ignoring
    # these error messages from pylint because we know it's ok.
    # pylint: disable=unexpected-keyword-arg,no-value-for-parameter
    try:
        return cli(obj={})
    except Exception:
        click.echo(traceback.format_exc(), err=True)
        return 2
