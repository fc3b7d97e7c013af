"""A light on an output pin that can blink and fade in and out."""

from __future__ import annotations

import sys
from typing import TextIO

from onairlight.pins import DEFAULT_MAX_OUTPUT, HIGH, LOW, OutputPin, PinBoard


class LightSwitch(OutputPin):
    """An output pin driving a light, with blinking and wave effects.

    ``blink`` and ``wave`` are meant to be called repeatedly from a main
    loop; each call updates the light when its next change is due.
    """

    def __init__(
        self,
        board: PinBoard,
        pin: int = -1,
        low_level_is_off: bool = True,
        max_output: int = DEFAULT_MAX_OUTPUT,
    ) -> None:
        self._next_change = 0
        self._blink_on_millis = 0
        self._blink_off_millis = 0
        self._blink_is_on = False
        self._wave_percent = 0
        self._wave_fade_in = True
        super().__init__(board, pin, low_level_is_off, max_output)

    @property
    def brightness(self) -> int:
        """Brightness in percent."""
        return self.level()

    @brightness.setter
    def brightness(self, percent: int) -> None:
        self.set_level(percent)

    def blink(self, on_millis: int, off_millis: int) -> None:
        """Toggle the light when due; a changed rhythm takes effect at once."""
        if (on_millis, off_millis) != (self._blink_on_millis, self._blink_off_millis):
            self._next_change = 0
            self._blink_on_millis = on_millis
            self._blink_off_millis = off_millis
        now = self.board.millis()
        if now > self._next_change:
            if self._blink_is_on:
                self.switch_off()
                self._blink_is_on = False
                self._next_change = now + self._blink_off_millis
            else:
                self.switch_on()
                self._blink_is_on = True
                self._next_change = now + self._blink_on_millis

    def wave(
        self,
        fade_in_millis: int,
        fade_out_millis: int,
        on_millis: int,
        off_millis: int,
        max_level: int = -1,
    ) -> None:
        """Fade in, stay on, fade out and stay off, one step per due call.

        A ``max_level`` below 10 uses the light's own level.
        """
        if max_level < 10:
            max_level = self._level
        now = self.board.millis()
        if now <= self._next_change:
            return
        if self._wave_percent > max_level:
            self._next_change = now + on_millis
            self._wave_percent = max_level
            self._wave_fade_in = False
        elif self._wave_percent < 0:
            self._next_change = now + off_millis
            self._wave_percent = 0
            self._wave_fade_in = True
        else:
            if self._next_change < 100:
                self._next_change = now
            self.board.analog_write(self.pin, self.pwm_value(self._wave_percent))
            fade = fade_in_millis if self._wave_fade_in else fade_out_millis
            step_time = max(1, fade // max(1, max_level))
            delta = 1 if self._wave_fade_in else -1
            # catch up with the time the main loop took
            while self._next_change <= self.board.millis():
                self._next_change += step_time
                self._wave_percent += delta

    def run_tests(self, out: TextIO | None = None) -> None:
        """Switch the light on and off twice, reporting the levels to ``out``."""
        out = out or sys.stdout
        out.write(f" - testing pin : {self.pin:2d}  - (Light Switch) -> ")
        for _ in range(2):
            self.switch_on()
            out.write(str(HIGH if self.low_level_is_off else LOW))
            self.board.delay(1000)
            self.switch_off()
            out.write(str(LOW if self.low_level_is_off else HIGH))
            self.board.delay(500)
        out.write(" ...done\n")