"""
game_engine.py: The single player simulation and its run state machine.
"""

import logging
import random
from typing import Callable, List, Optional

from .data_models import Bird, FrameSnapshot, GameConfig, GameEvent, Pipe, RunState
from .physics_core import PhysicsCore
from .score_db import BestScore

logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent], None]


class GameEngine:
    """
    Owns the bird, the pipes, the current score and the run state.

    The driver calls `advance()` once per frame. Input goes through `jump()`
    and `confirm_or_start()`; both are silently ignored in the wrong state.
    Everything the renderer needs comes out of `snapshot()`.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 best: Optional[BestScore] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.core = PhysicsCore(self.config)
        self.best = best if best is not None else BestScore()
        self.rng = rng or random.Random()

        self.bird = Bird()
        self.pipes: List[Pipe] = []
        self.score = 0
        self.state = RunState.MENU
        self.frame = 0
        self._listeners: List[Listener] = []

        self.core.respawn(self.bird)

    # -------- Events --------

    def subscribe(self, listener: Listener):
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: GameEvent):
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Listener %r failed on %s", listener, event.name)

    # -------- Commands --------

    def jump(self):
        """Overwrites the bird's velocity with the jump impulse."""
        if self.state is not RunState.PLAYING:
            return
        self.bird.velocity = self.core.flap()
        self._emit(GameEvent.JUMP)

    def start(self):
        """Menu -> Playing, or GameOver -> (reset) -> Playing."""
        if self.state is RunState.PLAYING:
            return
        if self.state is RunState.GAME_OVER:
            self.reset()
        self.state = RunState.PLAYING
        logger.debug("Run started")

    confirm_or_start = start

    def reset(self):
        """Back to the menu with a fresh bird, no pipes and a zero score."""
        self.pipes = []
        self.core.respawn(self.bird)
        self.score = 0
        self.frame = 0
        self.state = RunState.MENU

    # -------- Simulation --------

    def advance(self):
        """
        One fixed simulation step. Frozen unless a run is in progress.
        """
        if self.state is not RunState.PLAYING:
            return
        self.frame += 1

        # 1. Bird physics and ceiling/floor
        self.core.step_bird(self.bird)
        if self.core.hits_boundary(self.bird):
            self._game_over()
            return

        # 2. Spawn
        cfg = self.config
        if not self.pipes or self.pipes[-1].x < cfg.width - cfg.spawn_spacing:
            self.pipes.append(self.core.spawn_pipe(self.rng))

        # 3. Move, score and collide, pipe by pipe
        for pipe in self.pipes:
            pipe.x -= cfg.pipe_speed

            if not pipe.scored and pipe.right < self.bird.x:
                pipe.scored = True
                self.score += 1
                self._emit(GameEvent.SCORE)

            if self.core.hits_pipe(self.bird, pipe):
                self._game_over()
                break

        # 4. Drop pipes that left the playfield (already score-checked above)
        self.pipes = [p for p in self.pipes if p.right >= 0]

    def _game_over(self):
        self.state = RunState.GAME_OVER
        logger.info("Game over after %d frames, score %d", self.frame, self.score)
        if self.best.maybe_update_best(self.score):
            logger.info("New best score: %d", self.score)
            self._emit(GameEvent.NEW_BEST)
        self._emit(GameEvent.GAME_OVER)

    # -------- Render Feed --------

    def snapshot(self) -> FrameSnapshot:
        return FrameSnapshot(
            bird=self.bird.to_view(),
            pipes=tuple(p.to_view() for p in self.pipes),
            state=self.state,
            score=self.score,
            best=self.best.get_best(),
            width=self.config.width,
            height=self.config.height,
            gap=self.config.pipe_gap,
        )
