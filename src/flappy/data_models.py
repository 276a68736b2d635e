"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, BIRD_X, BIRD_WIDTH, BIRD_HEIGHT,
    PIPE_WIDTH, PIPE_GAP, PIPE_SPEED, PIPE_SPAWN_SPACING, PIPE_MIN_HEIGHT,
    GRAVITY, JUMP_IMPULSE, ROTATION_GAIN, ROTATION_MIN, ROTATION_MAX
)


class RunState(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "gameOver"


class GameEvent(Enum):
    """Side effects emitted by the engine; sound and HUD listen to these."""
    JUMP = "jump"
    SCORE = "score"
    GAME_OVER = "game_over"
    NEW_BEST = "new_best"


@dataclass(frozen=True)
class GameConfig:
    """One tunable set of world, bird and pipe parameters."""
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT

    bird_x: float = BIRD_X
    bird_width: float = BIRD_WIDTH
    bird_height: float = BIRD_HEIGHT

    pipe_width: float = PIPE_WIDTH
    pipe_gap: float = PIPE_GAP
    pipe_speed: float = PIPE_SPEED
    spawn_spacing: float = PIPE_SPAWN_SPACING
    pipe_min_height: float = PIPE_MIN_HEIGHT

    gravity: float = GRAVITY
    jump_impulse: float = JUMP_IMPULSE
    rotation_gain: float = ROTATION_GAIN
    rotation_min: float = ROTATION_MIN
    rotation_max: float = ROTATION_MAX

    def __post_init__(self):
        if self.height - self.pipe_gap - 2 * self.pipe_min_height < 0:
            raise ValueError(
                f"pipe gap {self.pipe_gap} with minimum segment {self.pipe_min_height} "
                f"does not fit a playfield of height {self.height}")

    @property
    def respawn_y(self) -> float:
        return self.height / 2


@dataclass
class Bird:
    """The player-controlled bird. x never changes during a run."""
    x: float = BIRD_X
    y: float = SCREEN_HEIGHT / 2
    width: float = BIRD_WIDTH
    height: float = BIRD_HEIGHT
    velocity: float = 0.0
    rotation: float = 0.0

    def to_view(self) -> "BirdView":
        return BirdView(self.x, self.y, self.width, self.height,
                        self.velocity, self.rotation)


@dataclass
class Pipe:
    """A top/bottom pipe pair with a vertical gap between the segments."""
    x: float
    width: float
    top_height: float
    bottom_height: float
    scored: bool = False

    @property
    def right(self) -> float:
        return self.x + self.width

    def to_view(self) -> "PipeView":
        return PipeView(self.x, self.width, self.top_height,
                        self.bottom_height, self.scored)


# -------- Render Feed (read-only) --------

@dataclass(frozen=True)
class BirdView:
    x: float
    y: float
    width: float
    height: float
    velocity: float
    rotation: float


@dataclass(frozen=True)
class PipeView:
    x: float
    width: float
    top_height: float
    bottom_height: float
    scored: bool


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything the renderer needs for one frame."""
    bird: BirdView
    pipes: Tuple[PipeView, ...]
    state: RunState
    score: int
    best: int
    width: int
    height: int
    gap: float = PIPE_GAP
    muted: bool = False
