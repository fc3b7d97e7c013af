import pytest

from onairlight.button import Button
from onairlight.pins import HIGH, LOW, PinBoard


@pytest.fixture
def board():
    return PinBoard()


def test_setup_takes_current_state(board):
    board.inputs[4] = HIGH
    button = Button(board, 4)
    assert button.is_pressed() is True


def test_debounce_holds_state(board):
    board.inputs[4] = HIGH
    button = Button(board, 4, debounce_millis=50)
    board.inputs[4] = LOW
    board.now = 10
    assert button.is_pressed() is True
    board.now = 51
    assert button.is_pressed() is False


def test_debounce_window_restarts_after_check(board):
    board.inputs[4] = LOW
    button = Button(board, 4, debounce_millis=50)
    board.now = 51
    assert button.is_pressed() is False
    board.inputs[4] = HIGH
    board.now = 100
    assert button.is_pressed() is False
    board.now = 102
    assert button.is_pressed() is True


def test_inverted_button(board):
    board.inputs[4] = LOW
    button = Button(board, 4, low_level_is_off=False)
    assert button.is_pressed() is True


def test_handle_change_notifies(board):
    board.inputs[4] = LOW
    button = Button(board, 4)
    calls = []
    button.add_handler(lambda b, pressed: calls.append((b, pressed)))
    board.inputs[4] = HIGH
    button.handle_change()
    board.inputs[4] = LOW
    button.handle_change()
    assert calls == [(button, True), (button, False)]


def test_handler_registered_once(board):
    board.inputs[4] = LOW
    button = Button(board, 4)
    calls = []

    def handler(b, pressed):
        calls.append(pressed)

    button.add_handler(handler)
    button.add_handler(handler)
    button.handle_change()
    assert calls == [False]
    assert button.is_pressed() is False


def test_handle_change_updates_pressed(board):
    board.inputs[4] = LOW
    button = Button(board, 4, debounce_millis=1000)
    board.inputs[4] = HIGH
    button.handle_change()
    assert button.is_pressed() is True