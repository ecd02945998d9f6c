from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple
import logging

from .controls import InputState, PaddleState


logger = logging.getLogger(__name__)

Vec2 = Tuple[float, float]

# Impulse applied to a paddle per tick of movement intent (normalized units).
PADDLE_STEP = 0.22

# Left and right paddle columns in normalized space.
LEFT_SIDE_X = 0.0
RIGHT_SIDE_X = 1.0


@dataclass(frozen=True)
class GameConfig:
    ball_start: Vec2 = (0.0, 0.0)
    ball_velocity: Vec2 = (0.055, 0.0275)
    paddle_start: float = 0.5
    paddle_step: float = PADDLE_STEP
    # Input wait window; it also sets the tick rate.
    poll_timeout_ms: int = 82
    # Player two moves with the same intent shape as player one.
    wire_player_two: bool = True
    # Clamp down-motion to the field like up-motion.
    clamp_down: bool = True

    def __post_init__(self):
        vx, vy = self.ball_velocity
        if vx == 0.0 and vy == 0.0:
            raise ValueError("ball velocity must be non-zero on at least one axis")
        if self.paddle_step <= 0.0:
            raise ValueError("paddle step must be positive")
        if self.poll_timeout_ms <= 0:
            raise ValueError("poll timeout must be positive")

    @property
    def poll_timeout_s(self) -> float:
        return self.poll_timeout_ms / 1000.0


@dataclass(frozen=True)
class PointScored:
    """Record emitted when a referee awards a point."""

    player: int
    score: Tuple[int, int]


# A referee inspects the game after a tick and returns the scoring player, if any.
Referee = Callable[["Game"], Optional[int]]


def clamp_unit(value: float) -> float:
    """Clamp a normalized coordinate into zero to one."""
    return max(0.0, min(1.0, value))


@dataclass
class Game:
    score: Tuple[int, int] = (0, 0)
    # Top-left corner of the ball
    ball: Vec2 = (0.0, 0.0)
    ball_v: Vec2 = (0.055, 0.0275)
    # Paddle centers; x is fixed by side
    p1_pos: Vec2 = (LEFT_SIDE_X, 0.5)
    p1_v: float = 0.0
    p2_pos: Vec2 = (RIGHT_SIDE_X, 0.5)
    p2_v: float = 0.0
    config: GameConfig = field(default_factory=GameConfig)

    @classmethod
    def from_config(cls, cfg: GameConfig) -> "Game":
        """Build a fresh game from a configuration."""
        return cls(
            ball=cfg.ball_start,
            ball_v=cfg.ball_velocity,
            p1_pos=(LEFT_SIDE_X, cfg.paddle_start),
            p2_pos=(RIGHT_SIDE_X, cfg.paddle_start),
            config=cfg,
        )

    def update(self, input_state: InputState, referee: Optional[Referee] = None) -> Optional[PointScored]:
        """Advance the game by one tick.

        Ball physics runs before paddle input. If a referee is given it is asked
        after both steps whether someone scored, and the point is recorded.
        """
        self.collide_ball_with_border()
        self.update_player_paddles(input_state)
        if referee is None:
            return None
        player = referee(self)
        if player is None:
            return None
        return self.award_point(player)

    def collide_ball_with_border(self) -> None:
        # Reflection is decided from the would-be position, then the
        # possibly negated velocity is integrated.
        x, y = self.ball
        vx, vy = self.ball_v

        if (x + vx) >= 1.0 or (x + vx) < 0.0:
            vx = -vx
        x += vx

        if (y + vy) >= 1.0 or (y + vy) <= 0.0:
            vy = -vy
        y += vy

        self.ball = (x, y)
        self.ball_v = (vx, vy)

    def update_player_paddles(self, input_state: InputState) -> None:
        self.p1_pos = self._move_paddle(self.p1_pos, input_state.p1_paddle_state)
        if self.config.wire_player_two:
            self.p2_pos = self._move_paddle(self.p2_pos, input_state.p2_paddle_state)

    def _move_paddle(self, pos: Vec2, state: PaddleState) -> Vec2:
        x, y = pos
        step = self.config.paddle_step
        if state is PaddleState.MOVING_UP:
            y += step
            if y > 1.0:
                logger.debug("paddle at x=%s clamped from %.3f", x, y)
            y = clamp_unit(y)
        elif state is PaddleState.MOVING_DOWN:
            y -= step
            if self.config.clamp_down:
                if y < 0.0:
                    logger.debug("paddle at x=%s clamped from %.3f", x, y)
                y = clamp_unit(y)
        return (x, y)

    def award_point(self, player: int) -> PointScored:
        """Add one point to a player and return the new score."""
        if player not in (0, 1):
            raise ValueError(f"player index must be 0 or 1, got {player!r}")
        a, b = self.score
        self.score = (a + 1, b) if player == 0 else (a, b + 1)
        logger.info("point to player %d, score now %d - %d", player + 1, *self.score)
        return PointScored(player=player, score=self.score)
