from __future__ import annotations

import os
import random

# Headless pygame for every test module; must be set before pygame is imported.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from flappy.data_models import GameConfig
from flappy.game_engine import GameEngine
from flappy.score_db import BestScore, Database


@pytest.fixture()
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture()
def best() -> BestScore:
    return BestScore(Database(":memory:"))


@pytest.fixture()
def engine(config: GameConfig, best: BestScore) -> GameEngine:
    return GameEngine(config, best, random.Random(1234))
