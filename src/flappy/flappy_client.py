#!/usr/bin/env python3
"""
flappy_client.py

Single player client: pygame window, frame driver, input, sound and rendering
wired around the GameEngine.
"""

import argparse
import dataclasses
import logging
import random
import threading
from typing import Callable, List, Optional

import pygame

from .constants import DB_FILE, FPS
from .data_models import GameConfig, GameEvent
from .game_engine import GameEngine
from .input_adapter import Command, InputAdapter
from .renderer import Renderer
from .score_db import BestScore
from .sound import SoundBoard

logger = logging.getLogger(__name__)


# ----------------- Frame Driver -----------------

class FrameDriver:
    """
    Calls `tick` once per display frame, one tick at a time.

    The next tick is scheduled only after the current one returns. `stop()`
    may be called any number of times, from a tick or from outside.
    """

    def __init__(self, fps: int = FPS, clock: Optional["pygame.time.Clock"] = None):
        self.fps = fps
        self.clock = clock or pygame.time.Clock()
        self.running = threading.Event()
        self.ticks = 0

    def run(self, tick: Callable[[], bool]):
        """Loops until stopped or until `tick` returns False."""
        self.running.set()
        while self.running.is_set():
            if tick() is False:
                self.stop()
                break
            self.ticks += 1
            self.clock.tick(self.fps)

    def stop(self):
        self.running.clear()


# ----------------- Game Client -----------------

class FlappyClient:
    def __init__(self, config: Optional[GameConfig] = None, db_file: str = DB_FILE,
                 fps: int = FPS, muted: bool = False, seed: Optional[int] = None):
        pygame.init()
        self.config = config or GameConfig()
        self.screen = pygame.display.set_mode((self.config.width, self.config.height))
        pygame.display.set_caption("Flappy Bird")

        self.best = BestScore.open(db_file)
        self.engine = GameEngine(self.config, self.best, random.Random(seed))
        self.sounds = SoundBoard(enabled=not muted)
        # Tones are built before the first tick, never inside one
        self.sounds.ensure_init()
        self.engine.subscribe(self.sounds.on_event)
        self.engine.subscribe(self._log_event)

        self.input = InputAdapter()
        self.renderer = Renderer(self.screen)
        self.driver = FrameDriver(fps)

    @staticmethod
    def _log_event(event: GameEvent):
        logger.debug("Event: %s", event.name)

    def run(self):
        """The main client execution loop."""
        logger.info("Best score so far: %d", self.best.get_best())
        try:
            self.driver.run(self.tick)
        finally:
            self.close()

    def tick(self) -> bool:
        """One frame: input, then simulation, then render."""
        # 1. Commands apply between frames, never mid-step
        for command in self._poll_commands(pygame.event.get()):
            if command is Command.QUIT:
                return False
            self.apply(command)

        # 2. Simulation
        self.engine.advance()

        # 3. Render
        snap = dataclasses.replace(self.engine.snapshot(), muted=not self.sounds.enabled)
        self.renderer.draw(snap)
        pygame.display.flip()
        return True

    def _poll_commands(self, events) -> List[Command]:
        commands = []
        for event in events:
            if event.type == pygame.WINDOWFOCUSLOST:
                # releases during the switch are never delivered
                self.input.reset()
                continue
            command = self.input.handle(event, self.engine.state)
            if command is not None:
                commands.append(command)
        return commands

    def apply(self, command: Command):
        if command is Command.JUMP:
            self.engine.jump()
        elif command is Command.CONFIRM:
            self.engine.confirm_or_start()
        elif command is Command.TOGGLE_MUTE:
            enabled = self.sounds.toggle()
            logger.info("Sound %s", "on" if enabled else "off")
        elif command is Command.QUIT:
            self.driver.stop()

    def close(self):
        self.driver.stop()
        self.best.close()
        pygame.quit()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Single player Flappy Bird.")
    parser.add_argument("--db", default=DB_FILE, help="SQLite file holding the best score")
    parser.add_argument("--fps", type=int, default=FPS, help="Frames (and simulation steps) per second")
    parser.add_argument("--mute", action="store_true", help="Start with sound off")
    parser.add_argument("--seed", type=int, default=None, help="Seed for pipe gap positions")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    client = FlappyClient(db_file=args.db, fps=args.fps, muted=args.mute, seed=args.seed)
    try:
        client.run()
    except KeyboardInterrupt:
        client.driver.stop()


if __name__ == "__main__":
    main()
