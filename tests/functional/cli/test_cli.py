import json
import logging

import mock
import pytest
import yaml
from click.testing import CliRunner

import mediatype
from mediatype import cli


@pytest.fixture
def runner():
    return CliRunner()


def _run_cli_command(runner, args):
    return runner.invoke(cli.cli, args, obj={})


def test_parse_prints_canonical_form(runner):
    result = _run_cli_command(
        runner, ['parse', 'TEXT/HTML; Charset=utf-8'])
    assert result.exit_code == 0, result.output
    assert result.output == 'text/html; charset=UTF-8\n'


def test_parse_as_json(runner):
    result = _run_cli_command(
        runner, ['parse', '--format', 'json',
                 'multipart/mixed; boundary="a b"'])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {
        'type': 'multipart',
        'subtype': 'mixed',
        'parameters': {'boundary': 'a b'},
        'has_wildcard': False,
    }


def test_parse_as_yaml(runner):
    result = _run_cli_command(
        runner, ['parse', '--format', 'YAML', 'text/*; charset=ascii'])
    assert result.exit_code == 0, result.output
    assert yaml.safe_load(result.output) == {
        'type': 'text',
        'subtype': '*',
        'parameters': {'charset': 'ASCII'},
        'has_wildcard': True,
    }


def test_parse_invalid_media_type(runner):
    result = _run_cli_command(runner, ['parse', 'te xt/html'])
    assert result.exit_code == 2
    assert "Invalid media type: 'te xt/html'" in result.output


def test_parse_wildcard_mismatch(runner):
    result = _run_cli_command(runner, ['parse', '*/html'])
    assert result.exit_code == 2
    assert 'wildcard subtype' in result.output


def test_parse_unknown_format(runner):
    result = _run_cli_command(
        runner, ['parse', '--format', 'xml', 'text/html'])
    assert result.exit_code == 2


def test_match(runner):
    result = _run_cli_command(
        runner, ['match', 'text/html; charset=utf-8', 'text/*'])
    assert result.exit_code == 0
    assert result.output == 'true\n'


def test_no_match(runner):
    result = _run_cli_command(
        runner, ['match', 'text/*', 'text/html'])
    assert result.exit_code == 1
    assert result.output == 'false\n'


def test_match_invalid_range(runner):
    result = _run_cli_command(runner, ['match', 'text/html', 'text'])
    assert result.exit_code == 2
    assert "Invalid media type: 'text'" in result.output


def test_charset(runner):
    result = _run_cli_command(
        runner, ['charset', 'text/html; charset=latin-1'])
    assert result.exit_code == 0
    assert result.output == 'iso8859-1\n'


def test_charset_absent(runner):
    result = _run_cli_command(runner, ['charset', 'text/html'])
    assert result.exit_code == 0
    assert result.output == ''


def test_charset_unsupported(runner):
    result = _run_cli_command(
        runner, ['charset', 'text/html; charset=x-no-such-charset'])
    assert result.exit_code == 2
    assert 'Unsupported charset' in result.output


def test_debug_configures_logging(runner):
    with mock.patch.object(cli, '_configure_logging') as configure:
        result = _run_cli_command(runner, ['--debug', 'parse', 'text/html'])
    assert result.exit_code == 0
    configure.assert_called_once_with(logging.DEBUG)


def test_logging_not_configured_by_default(runner):
    with mock.patch.object(cli, '_configure_logging') as configure:
        result = _run_cli_command(runner, ['parse', 'text/html'])
    assert result.exit_code == 0
    assert not configure.called


def test_version(runner):
    result = _run_cli_command(runner, ['--version'])
    assert result.exit_code == 0
    assert mediatype.__version__ in result.output


def test_main_reports_unexpected_errors(capsys):
    with mock.patch.object(cli, 'cli', side_effect=RuntimeError('boom')):
        assert cli.main() == 2
    assert 'RuntimeError: boom' in capsys.readouterr().err
