import logging
from unittest import mock

import pytest

from weathertool import plugin_loader, tools
from weathertool.domain.models.tool import InvalidArgument
from weathertool.infrastructure.config.settings import reload_settings
from weathertool.plugins.weather import TOOL_SCHEMA, WeatherTool


@pytest.fixture(autouse=True)
def _fresh_settings():
    reload_settings()
    plugin_loader.reload_tools()
    yield


def test_get_weather_paris_exact_sentence():
    fn = tools.tool_functions()['get_weather']
    assert fn(city='Paris') == 'The weather in Paris is Sunny, 25°C'


def test_get_weather_logs_diagnostic_line(caplog):
    caplog.set_level(logging.INFO, logger='weathertool.plugins.weather')
    out = tools.tool_functions()['get_weather'].invoke({'city': 'Tokyo'})
    assert out == 'The weather in Tokyo is Sunny, 25°C'
    messages = [r.getMessage() for r in caplog.records if r.name == 'weathertool.plugins.weather']
    assert messages == ['[Tool] Getting weather for Tokyo...']


def test_injected_logger_receives_line_before_result():
    logger = mock.Mock(spec=logging.Logger)
    tool = WeatherTool(logger=logger)
    assert tool('Lisbon') == 'The weather in Lisbon is Sunny, 25°C'
    logger.info.assert_called_once_with('[Tool] Getting weather for Lisbon...')


def test_empty_city_rejected_by_invoker_schema():
    fn = tools.tool_functions()['get_weather']
    with pytest.raises(InvalidArgument) as exc:
        fn(city='')
    assert 'get_weather' in str(exc.value)
    assert "'city'" in str(exc.value)


def test_missing_city_rejected():
    with pytest.raises(InvalidArgument, match='city'):
        tools.tool_functions()['get_weather'].invoke({})


def test_whitespace_city_rejected_without_logging():
    logger = mock.Mock(spec=logging.Logger)
    tool = WeatherTool(logger=logger)
    with pytest.raises(InvalidArgument):
        tool('   ')
    logger.info.assert_not_called()


def test_non_string_city_rejected():
    with pytest.raises(InvalidArgument):
        tools.tool_functions()['get_weather'].invoke({'city': 42})


def test_placeholders_follow_settings(monkeypatch):
    monkeypatch.setenv('WEATHERTOOL_WEATHER_CONDITION', 'Rainy')
    monkeypatch.setenv('WEATHERTOOL_WEATHER_TEMPERATURE_C', '12')
    reload_settings()
    try:
        assert WeatherTool()('Bergen') == 'The weather in Bergen is Rainy, 12°C'
    finally:
        monkeypatch.delenv('WEATHERTOOL_WEATHER_CONDITION')
        monkeypatch.delenv('WEATHERTOOL_WEATHER_TEMPERATURE_C')
        reload_settings()


def test_explicit_placeholders_override_settings():
    tool = WeatherTool(condition='Foggy', temperature_c=9)
    assert tool('London') == 'The weather in London is Foggy, 9°C'


def test_schema_describes_city_argument():
    params = TOOL_SCHEMA['function']['parameters']
    assert params['type'] == 'object'
    assert params['required'] == ['city']
    city = params['properties']['city']
    assert city['type'] == 'string'
    assert city['description'] == 'The city to get weather for.'
    assert city['minLength'] == 1
