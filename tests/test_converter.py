"""Tests for the room report conversion"""
import pytest

from core.converter import convert_entities, parse_float32, room_name
from conftest import make_entity


def test_kitchen_round_trip():
    report = convert_entities([make_entity('sensor.kitchen_temperature')], now=1703690906.7)

    assert report.last_updated == 1703690906
    assert len(report.rooms) == 1
    assert report.rooms[0].name == 'Kitchen'
    assert report.rooms[0].temperature == pytest.approx(21.5)


def test_rooms_sorted_by_name():
    entities = [
        make_entity('sensor.b', state='19', friendly_name='Bedroom Temperature'),
        make_entity('sensor.a', state='17', friendly_name='Attic Temperature'),
        make_entity('sensor.k', state='21', friendly_name='Kitchen Temperature'),
    ]
    report = convert_entities(entities)
    assert [r.name for r in report.rooms] == ['Attic', 'Bedroom', 'Kitchen']


def test_sort_is_stable_for_equal_names():
    entities = [
        make_entity('sensor.x', state='1', friendly_name='Hall'),
        make_entity('sensor.y', state='2', friendly_name='Hall temperature'),
        make_entity('sensor.z', state='3', friendly_name='Attic'),
    ]
    report = convert_entities(entities)
    assert [(r.name, r.temperature) for r in report.rooms] == [('Attic', 3.0), ('Hall', 1.0), ('Hall', 2.0)]


def test_non_numeric_state_skipped():
    entities = [
        make_entity('sensor.kitchen_temperature', state='unknown'),
        make_entity('sensor.attic_temperature', state='unavailable', friendly_name='Attic Temperature'),
        make_entity('sensor.bath_temperature', state='22.25', friendly_name='Bath Temperature'),
    ]
    report = convert_entities(entities)
    assert [r.name for r in report.rooms] == ['Bath']


def test_device_class_case_insensitive():
    entities = [
        make_entity('sensor.a', device_class='Temperature', friendly_name='Attic Temperature'),
        make_entity('sensor.b', device_class='TEMPERATURE', friendly_name='Bath Temperature'),
        make_entity('sensor.c', device_class='humidity', friendly_name='Cellar Humidity'),
        make_entity('sensor.d', device_class='', friendly_name='Den'),
    ]
    report = convert_entities(entities)
    assert [r.name for r in report.rooms] == ['Attic', 'Bath']


def test_empty_input_gives_empty_rooms():
    report = convert_entities([], now=42)
    assert report.to_dict() == {'lastUpdatedSec': 42, 'rooms': []}


def test_to_dict_shape():
    report = convert_entities([make_entity('sensor.kitchen_temperature', state='21.3')], now=100)
    assert report.to_dict() == {'lastUpdatedSec': 100, 'rooms': [{'name': 'Kitchen', 'temp': 21.3}]}


@pytest.mark.parametrize('friendly_name, expected', [
    ('Kitchen Temperature', 'Kitchen'),
    ('Kitchen temperature', 'Kitchen'),
    ('Kitchen TEMPERATURE', 'Kitchen TEMPERATURE'),
    ('KitchenTemperature', 'KitchenTemperature'),
    ('Temperature', 'Temperature'),
    ('Living Room', 'Living Room'),
    ('Kitchen temperature Temperature', 'Kitchen temperature'),
    ('Kitchen Temperature temperature', 'Kitchen Temperature'),
    ('', ''),
])
def test_room_name(friendly_name, expected):
    assert room_name(friendly_name) == expected


@pytest.mark.parametrize('state, expected', [
    ('21.5', 21.5),
    ('-3', -3.0),
    ('1e2', 100.0),
    ('21.3', 21.3),
])
def test_parse_float32_valid(state, expected):
    assert parse_float32(state) == expected


@pytest.mark.parametrize('state', [
    '', 'unknown', 'unavailable', ' 21.5', '21.5 ', '1_000', 'nan', 'inf', '-Infinity', '1e39', '-1e39',
    '\u0662\u0661.\u0665', '\uff12\uff11.\uff15',
])
def test_parse_float32_rejected(state):
    assert parse_float32(state) is None


def test_parse_float32_rounds_to_single_precision():
    value = parse_float32('0.1000000000000000055511151231257827')
    assert value == 0.1
    assert parse_float32('16777217') == 16777216.0


def test_out_of_range_state_not_reported():
    """A state beyond float32 range never reaches the JSON report"""
    entities = [
        make_entity('sensor.k', state='1e39'),
        make_entity('sensor.b', state='19.5', friendly_name='Bath Temperature'),
    ]
    report = convert_entities(entities, now=1)
    assert report.to_dict() == {'lastUpdatedSec': 1, 'rooms': [{'name': 'Bath', 'temp': 19.5}]}


def test_largest_float32_is_kept():
    assert parse_float32('3.4028234e38') == pytest.approx(3.4028234e38)
