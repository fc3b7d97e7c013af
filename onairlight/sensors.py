"""Analog sensors: battery voltage and ambient light."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from onairlight.pins import PinBoard, PinMode
from onairlight.utils import store_float
from onairlight.lightswitch import LightSwitch


class BatteryMeasure:
    """Battery voltage read from an analog pin through a divider."""

    def __init__(
        self,
        board: PinBoard,
        pin: int,
        calc_factor: float = 1.0,
        available_threshold: int = 10,
    ) -> None:
        self.board = board
        self.pin = pin
        self.calc_factor = calc_factor
        self.available_threshold = available_threshold

    def is_available(self) -> bool:
        """Return True if the pin sees enough voltage for a battery to be present."""
        return self.board.analog_read(self.pin) > self.available_threshold

    def raw_value(self) -> int:
        """Return the raw analog reading."""
        return self.board.analog_read(self.pin)

    def voltage(self, digits: int = -1) -> float:
        """Return the voltage, rounded to ``digits`` if not negative; -0.0 without battery."""
        if self.is_available():
            result = self.raw_value() / 1024.0 * self.calc_factor
        else:
            result = -0.0
        if digits > -1:
            result = float(f"{result:.{digits}f}")
        return result

    def write_status_to(self, node: dict[str, Any]) -> None:
        """Report voltage, availability and the raw reading."""
        node["power"] = self.voltage(2)
        node["available"] = self.is_available()
        node["raw"] = self.raw_value()

    def write_config_to(self, node: dict[str, Any], hide_critical: bool = False) -> None:
        """Store the calculation factor."""
        node["calcFactor"] = self.calc_factor

    def read_config_from(self, node: dict[str, Any]) -> None:
        """Load the calculation factor if present."""
        self.calc_factor = store_float(node.get("calcFactor"), self.calc_factor)


class LightSensor:
    """A light-dependent resistor on an analog pin."""

    def __init__(self, board: PinBoard, pin: int) -> None:
        self.board = board
        self.pin = pin
        self.last_value = 0
        board.pin_mode(pin, PinMode.INPUT)

    def light_value(self) -> int:
        """Read and remember the current light value."""
        self.last_value = self.board.analog_read(self.pin)
        return self.last_value

    def run_tests(self, switch: LightSwitch | None = None, out: TextIO | None = None) -> None:
        """Read the sensor twice with ``switch`` on and off, reporting to ``out``."""
        out = out or sys.stdout
        out.write(f" - testing pin : {self.pin}  - (Light Sensor) -> ")
        for _ in range(2):
            if switch is not None:
                switch.switch_on()
            out.write(f" on={self.light_value()}")
            self.board.delay(500)
            if switch is not None:
                switch.switch_off()
            out.write(f" off={self.light_value()}")
            self.board.delay(500)
        out.write(" ...done\n")