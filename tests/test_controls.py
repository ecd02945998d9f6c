import pytest

from pong.controls import (
    Command,
    InputState,
    KeyEvent,
    KeyKind,
    PaddleState,
    build_input_state,
    command_for,
)


def test_no_event_means_both_stopped():
    state = build_input_state(None)
    assert state == InputState(PaddleState.STOPPED, PaddleState.STOPPED)


@pytest.mark.parametrize(
    "code,expected",
    [
        ("w", InputState(p1_paddle_state=PaddleState.MOVING_DOWN)),
        ("s", InputState(p1_paddle_state=PaddleState.MOVING_UP)),
        ("up", InputState(p2_paddle_state=PaddleState.MOVING_DOWN)),
        ("down", InputState(p2_paddle_state=PaddleState.MOVING_UP)),
    ],
)
def test_paddle_keys_set_one_paddle(code, expected):
    assert build_input_state(KeyEvent(code)) == expected


def test_unbound_key_leaves_paddles_stopped():
    assert build_input_state(KeyEvent("x")) == InputState()
    assert command_for(KeyEvent("x")) is None


@pytest.mark.parametrize("kind", [KeyKind.RELEASE, KeyKind.REPEAT])
def test_only_presses_count(kind):
    event = KeyEvent("w", kind)
    assert command_for(event) is None
    assert build_input_state(event) == InputState()


def test_commands():
    assert command_for(KeyEvent("q")) is Command.QUIT
    assert command_for(KeyEvent("left")) is Command.COUNTER_DOWN
    assert command_for(KeyEvent("right")) is Command.COUNTER_UP


def test_quit_does_not_move_paddles():
    assert build_input_state(KeyEvent("q")) == InputState()


def test_input_state_is_immutable():
    state = InputState()
    with pytest.raises(AttributeError):
        state.p1_paddle_state = PaddleState.MOVING_UP
