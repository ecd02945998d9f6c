from __future__ import annotations

"""Application driver: mode state machine and the main loop.

One loop iteration steps the game once, polls for at most one key event and
draws one frame. The poll timeout is both the input latency bound and the
tick rate. The exit flag is checked only at the top of an iteration.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Protocol, Tuple
import logging

from . import constants as C
from .controls import Command, InputState, KeyEvent, build_input_state, command_for
from .engine import Game, GameConfig, Referee
from .frame import (
    DrawCall,
    Frame,
    render_game_mode,
    render_game_over,
    render_menu,
    render_stats,
    split_layout,
)


logger = logging.getLogger(__name__)


class Mode(Enum):
    MENU = "menu"
    GAME = "game"
    GAME_OVER = "game_over"


class EventSource(Protocol):
    def poll(self, timeout_s: float) -> Optional[KeyEvent]:
        ...


class Surface(Protocol):
    def size(self) -> Tuple[int, int]:
        ...

    def draw(self, frame: Frame) -> None:
        ...


RENDERERS: Dict[Mode, Callable[..., List[DrawCall]]] = {
    Mode.MENU: render_menu,
    Mode.GAME: render_game_mode,
    Mode.GAME_OVER: render_game_over,
}


@dataclass
class App:
    config: GameConfig = field(default_factory=GameConfig)
    referee: Optional[Referee] = None
    mode: Mode = Mode.MENU
    exit: bool = False
    game: Game = field(default_factory=Game)
    input_state: InputState = field(default_factory=InputState)
    counter: int = 0
    ticks: int = 0

    def run(self, surface: Surface, events: EventSource) -> int:
        """Run the main loop until quit and return the number of ticks.

        Errors from the surface or the event source are not caught here.
        """
        self.set_mode(Mode.GAME)
        self.game = Game.from_config(self.config)
        self.input_state = InputState()
        logger.info("run started, poll timeout %d ms", self.config.poll_timeout_ms)

        while not self.exit:
            self.update()
            self.handle_events(events)
            surface.draw(self.render(*surface.size()))

        logger.info("run finished after %d ticks", self.ticks)
        return self.ticks

    def set_mode(self, mode: Mode) -> None:
        if mode is not self.mode:
            logger.info("mode %s -> %s", self.mode.value, mode.value)
        self.mode = mode

    def update(self) -> None:
        if self.mode is Mode.GAME:
            self.game.update(self.input_state, self.referee)
            self.ticks += 1

    def handle_events(self, events: EventSource) -> None:
        event = events.poll(self.config.poll_timeout_s)
        self.input_state = build_input_state(event)
        self.handle_command(command_for(event))

    def handle_command(self, cmd: Optional[Command]) -> None:
        if cmd is Command.QUIT:
            self.quit()
        elif cmd is Command.COUNTER_UP:
            self.counter = min(C.COUNTER_MAX, self.counter + 1)
        elif cmd is Command.COUNTER_DOWN:
            self.counter = max(0, self.counter - 1)

    def quit(self) -> None:
        logger.info("quit requested")
        self.exit = True

    def render(self, width: int, height: int) -> Frame:
        """Build the frame for the current mode at a given screen size."""
        frame = Frame(width, height)
        game_rect, stats_rect = split_layout(width, height)
        if stats_rect is not None:
            frame.extend(render_stats(self, stats_rect))
        frame.extend(RENDERERS[self.mode](self, game_rect))
        return frame
