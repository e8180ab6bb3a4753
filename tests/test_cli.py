import json

import pytest

from weathertool import cli, plugin_loader
from weathertool.infrastructure.config.settings import reload_settings


@pytest.fixture(autouse=True)
def _fresh_state():
    reload_settings()
    plugin_loader.reload_tools()
    yield


def test_city_prints_weather(capsys):
    assert cli.main(['--city', 'Paris']) == 0
    assert capsys.readouterr().out == 'The weather in Paris is Sunny, 25°C\n'


def test_tool_with_json_args(capsys):
    assert cli.main(['--tool', 'get_weather', '--args', '{"city": "Oslo"}']) == 0
    assert capsys.readouterr().out.strip() == 'The weather in Oslo is Sunny, 25°C'


def test_empty_city_exits_with_usage_error(capsys):
    assert cli.main(['--city', '']) == 2
    out = capsys.readouterr().out
    assert out.startswith('❌ Error:')
    assert 'city' in out


def test_unknown_tool(capsys):
    assert cli.main(['--tool', 'nope']) == 2
    assert "Tool 'nope' is not loaded" in capsys.readouterr().out


def test_bad_json_args(capsys):
    assert cli.main(['--tool', 'get_weather', '--args', '{city']) == 2
    assert 'not valid JSON' in capsys.readouterr().out


def test_args_must_be_object(capsys):
    assert cli.main(['--tool', 'get_weather', '--args', '["Paris"]']) == 2
    assert 'must be a JSON object' in capsys.readouterr().out


def test_list_tools(capsys):
    assert cli.main(['--list-tools']) == 0
    schemas = json.loads(capsys.readouterr().out)
    assert 'get_weather' in [s['function']['name'] for s in schemas]


def test_nothing_requested(capsys):
    assert cli.main([]) == 2
    assert 'one of --city, --tool or --list-tools is required' in capsys.readouterr().out


def test_unexpected_tool_error_returns_one(capsys, monkeypatch):
    def boom(**kwargs):
        raise RuntimeError('backend down')

    monkeypatch.setattr(plugin_loader.get_catalog().get('get_weather'), '_implementation', boom)
    assert cli.main(['--city', 'Paris']) == 1
    assert 'backend down' in capsys.readouterr().out
