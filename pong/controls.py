from __future__ import annotations

"""Key events, bindings and the per-tick input state.

The input state is rebuilt from scratch on every poll. Nothing here remembers
earlier keys: a key held down must be reported again by the event source.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class PaddleState(Enum):
    STOPPED = "stopped"
    # Toward larger normalized y
    MOVING_UP = "up"
    MOVING_DOWN = "down"


class KeyKind(Enum):
    PRESS = "press"
    RELEASE = "release"
    REPEAT = "repeat"


class Command(Enum):
    QUIT = "quit"
    P1_UP = "p1_up"
    P1_DOWN = "p1_down"
    P2_UP = "p2_up"
    P2_DOWN = "p2_down"
    COUNTER_DOWN = "counter_down"
    COUNTER_UP = "counter_up"


@dataclass(frozen=True)
class KeyEvent:
    code: str  # single character or a named key such as "up"
    kind: KeyKind = KeyKind.PRESS


@dataclass(frozen=True)
class InputState:
    p1_paddle_state: PaddleState = PaddleState.STOPPED
    p2_paddle_state: PaddleState = PaddleState.STOPPED


KEY_BINDINGS: Dict[str, Command] = {
    "q": Command.QUIT,
    "w": Command.P1_UP,
    "s": Command.P1_DOWN,
    "up": Command.P2_UP,
    "down": Command.P2_DOWN,
    "left": Command.COUNTER_DOWN,
    "right": Command.COUNTER_UP,
}


def command_for(event: Optional[KeyEvent]) -> Optional[Command]:
    """Return the command bound to a key press, if any.

    Release and repeat events never map to a command.
    """
    if event is None or event.kind is not KeyKind.PRESS:
        return None
    return KEY_BINDINGS.get(event.code)


def build_input_state(event: Optional[KeyEvent]) -> InputState:
    """Return the input state for one poll window.

    Commands are named for their on-screen direction. Field y grows toward
    the bottom row, so a paddle goes up the screen by lowering y.
    """
    cmd = command_for(event)
    if cmd is Command.P1_UP:
        return InputState(p1_paddle_state=PaddleState.MOVING_DOWN)
    if cmd is Command.P1_DOWN:
        return InputState(p1_paddle_state=PaddleState.MOVING_UP)
    if cmd is Command.P2_UP:
        return InputState(p2_paddle_state=PaddleState.MOVING_DOWN)
    if cmd is Command.P2_DOWN:
        return InputState(p2_paddle_state=PaddleState.MOVING_UP)
    return InputState()
