import argparse
import json

import pytest
from traitlets import Enum

from deltaupdate.args import (
    ConfigBackedParser, LogLevelAction, add_output_args, modify_config_for_print,
)
from deltaupdate.config import (
    entrypoint_configurables, build_config, Global, Update, _Printing,
)


class FixtureConfig(Global):
    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'WARN',
    ).tag(config=True)


@pytest.fixture
def entrypoint_config():
    entrypoint_configurables['test-prog'] = FixtureConfig
    yield
    del entrypoint_configurables['test-prog']


class PrintingConfig(_Printing):
    pass


@pytest.fixture
def entrypoint_printing_config():
    entrypoint_configurables['test-prog'] = PrintingConfig
    yield
    del entrypoint_configurables['test-prog']


def test_config_parser(entrypoint_config, isolated_config):
    parser = ConfigBackedParser('test-prog')
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="Set the log level by name.",
        action=LogLevelAction,
    )

    # Check that log level default is taken from FixtureConfig
    arguments = parser.parse_args([])
    assert arguments.log_level == 'WARN'

    arguments = parser.parse_args(['--log-level', 'ERROR'])
    assert arguments.log_level == 'ERROR'


def test_config_parser_unknown_entrypoint(isolated_config):
    parser = ConfigBackedParser('not-an-entrypoint')
    parser.add_argument('--foo', default=1)
    assert parser.parse_args([]).foo == 1


def test_build_config_defaults(isolated_config):
    assert build_config('dupdate') == {
        'log_level': 'INFO',
        'color': True,
        'indent': 2,
        'snip_base64': False,
        'show_diff': True,
    }
    assert build_config('dmergediff') == {
        'log_level': 'INFO',
        'color': True,
        'indent': 2,
        'snip_base64': False,
    }


def test_build_config_unknown_entrypoint():
    with pytest.raises(ValueError):
        build_config('dpatch')


def test_build_config_from_disk(isolated_config):
    isolated_config.join('deltaupdate_config.json').write_text(
        json.dumps({
            'Global': {'log_level': 'ERROR'},
            'Update': {'show_diff': False},
        }),
        encoding='utf-8'
    )
    config = build_config('dupdate')
    assert config['log_level'] == 'ERROR'
    assert config['show_diff'] is False
    assert config['color'] is True

    # Settings of other entrypoints do not leak
    assert 'show_diff' not in build_config('dmergediff')
    assert build_config('dmergediff')['log_level'] == 'ERROR'


def test_config_inherit(entrypoint_printing_config, isolated_config):
    isolated_config.join('deltaupdate_config.json').write_text(
        json.dumps({
            '_Printing': {'color': False},
        }),
        encoding='utf-8'
    )

    parser = ConfigBackedParser('test-prog')
    add_output_args(parser, 'output')
    parsed = parser.parse_args([])

    assert parsed.color is False
    assert parsed.indent == 2


def test_config_overridden_by_args(isolated_config):
    isolated_config.join('deltaupdate_config.json').write_text(
        json.dumps({'Update': {'indent': 4}}),
        encoding='utf-8'
    )
    parser = ConfigBackedParser('dupdate')
    add_output_args(parser, 'output')
    assert parser.parse_args([]).indent == 4
    assert parser.parse_args(['--indent', '1']).indent == 1


def test_configured_traits():
    traits = Update().configured_traits(Update)
    assert traits == {'show_diff': True}


def test_modify_config_for_print():
    assert modify_config_for_print({'a': True, 'b': {}, 'c': {'d': 'x'}}) == {
        'a': 'true',
        'b': '{}',
        'c': {'d': '"x"'},
    }


def test_no_color_arg():
    parser = argparse.ArgumentParser()
    add_output_args(parser, 'output')
    assert parser.parse_args([]).color is True
    assert parser.parse_args(['--no-color']).color is False
