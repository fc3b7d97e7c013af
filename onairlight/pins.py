"""Digital and analog pins on a simulated board with a millisecond clock."""

from __future__ import annotations

from enum import Enum
from typing import Any

HIGH = 1
LOW = 0

DEFAULT_MAX_OUTPUT = 1023


class PinMode(Enum):
    """How a pin is configured."""

    INPUT = "input"
    OUTPUT = "output"
    INPUT_PULLUP = "input_pullup"
    INPUT_PULLDOWN_16 = "input_pulldown_16"


def _interrupt_number(pin: int) -> int:
    """Interrupt number of ``pin``; pins 0 to 15 can interrupt, others cannot."""
    return pin if 0 <= pin < 16 else -1


class PinBoard:
    """An in-memory board: pin modes, levels and a simulated clock.

    Inputs are fed through ``inputs`` (digital) and ``analog_inputs``;
    written levels end up in ``outputs`` (digital) and ``pwm`` (analog).
    ``now`` is the current time in milliseconds; ``delay`` advances it.
    """

    def __init__(self, now: int = 0) -> None:
        self.now = now
        self.modes: dict[int, PinMode] = {}
        self.inputs: dict[int, int] = {}
        self.analog_inputs: dict[int, int] = {}
        self.outputs: dict[int, int] = {}
        self.pwm: dict[int, int] = {}

    def pin_mode(self, pin: int, mode: PinMode) -> None:
        """Configure ``pin``."""
        self.modes[pin] = mode

    def digital_read(self, pin: int) -> int:
        """Read the level of ``pin``; an unconnected pull-up input reads HIGH."""
        if pin in self.inputs:
            return self.inputs[pin]
        if pin in self.outputs:
            return self.outputs[pin]
        return HIGH if self.modes.get(pin) is PinMode.INPUT_PULLUP else LOW

    def digital_write(self, pin: int, level: int) -> None:
        """Drive ``pin`` to ``level``; this ends any PWM output on it."""
        self.outputs[pin] = HIGH if level else LOW
        self.pwm.pop(pin, None)

    def analog_read(self, pin: int) -> int:
        """Read the analog value of ``pin`` (0 when nothing is fed)."""
        return self.analog_inputs.get(pin, 0)

    def analog_write(self, pin: int, value: int) -> None:
        """Write a PWM value to ``pin``."""
        self.pwm[pin] = value

    def millis(self) -> int:
        """Milliseconds since the board started."""
        return self.now

    def delay(self, ms: int) -> None:
        """Let ``ms`` milliseconds pass."""
        self.now += ms


class InputPin:
    """A digital input whose logical state honours the wiring polarity."""

    def __init__(
        self,
        board: PinBoard,
        pin: int = -1,
        low_level_is_off: bool = True,
        pull: bool = False,
    ) -> None:
        self.board = board
        self.pin = pin
        self.low_level_is_off = low_level_is_off
        if pin > -1:
            self.setup(pin, low_level_is_off, pull)

    def setup(self, pin: int, low_level_is_off: bool = True, pull: bool = False) -> None:
        """Configure the pin, with a pull resistor matching the polarity if asked."""
        self.pin = pin
        self.low_level_is_off = low_level_is_off
        mode = PinMode.INPUT
        if pull:
            mode = PinMode.INPUT_PULLDOWN_16 if low_level_is_off else PinMode.INPUT_PULLUP
        self.board.pin_mode(pin, mode)

    def can_send_interrupts(self) -> bool:
        """Return True if the pin can raise interrupts."""
        return _interrupt_number(self.pin) > 0

    def is_on(self) -> bool:
        """Return the logical state: HIGH is on unless the polarity is inverted."""
        level = self.board.digital_read(self.pin)
        if self.low_level_is_off:
            return level == HIGH
        return level == LOW

    def is_off(self) -> bool:
        """Return the inverse of ``is_on``."""
        return not self.is_on()


class OutputPin:
    """A digital output with an optional PWM level in percent."""

    def __init__(
        self,
        board: PinBoard,
        pin: int = -1,
        low_level_is_off: bool = True,
        max_output: int = DEFAULT_MAX_OUTPUT,
    ) -> None:
        self.board = board
        self.pin = pin
        self.low_level_is_off = low_level_is_off
        self.max_output = max_output
        self._on = False
        self._level = 100
        self.setup(pin, low_level_is_off)

    def setup(self, pin: int, low_level_is_off: bool = True) -> None:
        """Configure the pin as output and switch it off."""
        self.pin = pin
        self.low_level_is_off = low_level_is_off
        if self.pin > -1:
            self.board.pin_mode(self.pin, PinMode.OUTPUT)
            self.switch_off()

    def switch_off(self) -> None:
        """Drive the pin to its off level."""
        if self.pin > -1:
            self.board.digital_write(self.pin, LOW if self.low_level_is_off else HIGH)
            self._on = False

    def switch_on(self) -> None:
        """Drive the pin on, using PWM unless the level is 100 percent."""
        if self.pin > -1:
            if self._level == 100:
                self.board.digital_write(self.pin, HIGH if self.low_level_is_off else LOW)
            else:
                self.board.analog_write(self.pin, self.pwm_value(self._level))
            self._on = True

    def toggle(self) -> None:
        """Switch off if on, otherwise on."""
        if self.is_on():
            self.switch_off()
        else:
            self.switch_on()

    def is_on(self) -> bool:
        """Return True if the pin was last switched on."""
        return self._on

    def pwm_value(self, percent: int) -> int:
        """Return the PWM value for ``percent``, inverted for active-low wiring."""
        normal = percent * self.max_output // 100
        return normal if self.low_level_is_off else self.max_output - normal

    def set_level(self, percent: int) -> None:
        """Set the output level, clamped to 0..100; applied at once if on."""
        self._level = max(0, min(100, percent))
        if self._on:
            self.switch_on()

    def level(self) -> int:
        """Return the output level in percent."""
        return self._level

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pin={self.pin}, on={self._on}, level={self._level})"

    def _state(self) -> dict[str, Any]:
        return {"pin": self.pin, "on": self._on, "level": self._level}