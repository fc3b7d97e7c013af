import io
import math

import pytest

from onairlight.lightswitch import LightSwitch
from onairlight.pins import PinBoard, PinMode
from onairlight.sensors import BatteryMeasure, LightSensor


@pytest.fixture
def board():
    return PinBoard()


def test_battery_availability_threshold(board):
    battery = BatteryMeasure(board, 0, 4.2, available_threshold=10)
    board.analog_inputs[0] = 10
    assert battery.is_available() is False
    board.analog_inputs[0] = 11
    assert battery.is_available() is True


def test_battery_full_scale_equals_factor(board):
    battery = BatteryMeasure(board, 0, 4.2)
    board.analog_inputs[0] = 1024
    assert battery.voltage() == 4.2


def test_battery_missing_is_negative_zero(board):
    battery = BatteryMeasure(board, 0, 4.2)
    board.analog_inputs[0] = 0
    value = battery.voltage()
    assert value == 0.0
    assert math.copysign(1.0, value) == -1.0


def test_battery_rounding(board):
    battery = BatteryMeasure(board, 0, 4.256)
    board.analog_inputs[0] = 1024
    assert battery.voltage(2) == 4.26


def test_battery_voltage_grows_with_reading(board):
    battery = BatteryMeasure(board, 0, 5.0)
    readings = []
    for raw in (100, 400, 800):
        board.analog_inputs[0] = raw
        readings.append(battery.voltage())
    assert readings == sorted(readings)


def test_battery_status(board):
    battery = BatteryMeasure(board, 0, 4.2)
    board.analog_inputs[0] = 1024
    status = {}
    battery.write_status_to(status)
    assert status == {"power": 4.2, "available": True, "raw": 1024}


def test_battery_config_roundtrip(board):
    battery = BatteryMeasure(board, 0, 5.0)
    node = {}
    battery.write_config_to(node, False)
    other = BatteryMeasure(board, 0, 1.0)
    other.read_config_from(node)
    assert other.calc_factor == 5.0


def test_battery_config_missing_keeps_value(board):
    battery = BatteryMeasure(board, 0, 4.2)
    battery.read_config_from({})
    assert battery.calc_factor == 4.2


def test_battery_config_takes_whole_part(board):
    battery = BatteryMeasure(board, 0, 1.0)
    battery.read_config_from({"calcFactor": "7.9"})
    assert battery.calc_factor == 7.0


def test_light_sensor_reads_value(board):
    sensor = LightSensor(board, 2)
    board.analog_inputs[2] = 300
    assert sensor.light_value() == 300
    assert sensor.last_value == 300
    assert board.modes[2] is PinMode.INPUT


def test_light_sensor_run_tests(board):
    sensor = LightSensor(board, 2)
    light = LightSwitch(board, 5)
    board.analog_inputs[2] = 123
    out = io.StringIO()
    sensor.run_tests(light, out)
    text = out.getvalue()
    assert text.count(" on=123") == 2
    assert text.count(" off=123") == 2
    assert text.endswith(" ...done\n")
    assert board.now == 2 * (500 + 500)
    assert light.is_on() is False


def test_light_sensor_run_tests_without_switch(board):
    sensor = LightSensor(board, 2)
    out = io.StringIO()
    sensor.run_tests(None, out)
    assert out.getvalue().startswith(" - testing pin : 2  - (Light Sensor)")