from dataclasses import dataclass

import pytest

from weathertool.domain.models.tool import (
    InvalidArgument,
    ToolArgs,
    WeatherArgs,
    arg_field,
)


def test_weather_args_schema():
    assert WeatherArgs.json_schema() == {
        'type': 'object',
        'properties': {
            'city': {
                'type': 'string',
                'description': 'The city to get weather for.',
                'minLength': 1,
            }
        },
        'required': ['city'],
    }


def test_args_schema_defaults_and_closed_objects():
    @dataclass
    class SearchArgs(ToolArgs):
        additional_properties = False
        query: str = arg_field('What to search for.')
        limit: int = arg_field('Max results.', default=3, minimum=1)

    schema = SearchArgs.json_schema()
    assert schema['required'] == ['query']
    assert schema['properties']['limit'] == {
        'type': 'integer', 'description': 'Max results.', 'minimum': 1, 'default': 3,
    }
    assert schema['additionalProperties'] is False


def test_from_arguments_ignores_unknown_keys():
    args = WeatherArgs.from_arguments({'city': 'Paris', 'unit': 'celsius'})
    assert args == WeatherArgs(city='Paris')
    assert args.to_arguments() == {'city': 'Paris'}


def test_from_arguments_missing_required():
    with pytest.raises(InvalidArgument, match='city'):
        WeatherArgs.from_arguments({})

