"""A push button on an input pin with software debouncing."""

from __future__ import annotations

from collections.abc import Callable

from onairlight.pins import InputPin, PinBoard

ButtonHandler = Callable[["Button", bool], None]


class Button(InputPin):
    """A button; handlers are told ``(button, pressed)`` on each change."""

    def __init__(
        self,
        board: PinBoard,
        pin: int = -1,
        low_level_is_off: bool = True,
        pull: bool = False,
        debounce_millis: int = 50,
    ) -> None:
        self.debounce_millis = debounce_millis
        self._pressed = False
        self._last_check = 0
        self._handlers: list[ButtonHandler] = []
        super().__init__(board, pin, low_level_is_off, pull)

    def setup(self, pin: int, low_level_is_off: bool = True, pull: bool = False) -> None:
        """Configure the pin and take over its current state."""
        super().setup(pin, low_level_is_off, pull)
        self._pressed = self.is_on()

    def handle_change(self) -> None:
        """React to a level change on the pin and notify every handler."""
        self._pressed = self.is_on()
        for handler in self._handlers:
            handler(self, self._pressed)

    def add_handler(self, handler: ButtonHandler) -> None:
        """Register ``handler`` once."""
        if handler not in self._handlers:
            self._handlers.append(handler)

    def is_pressed(self) -> bool:
        """Return the debounced state; the pin is re-read only after the debounce time."""
        now = self.board.millis()
        if self._last_check + self.debounce_millis < now:
            self._pressed = self.is_on()
            self._last_check = now
        return self._pressed