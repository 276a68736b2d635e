"""
input_adapter.py: Maps pygame key/mouse events onto logical game commands.
"""

from enum import Enum
from typing import Optional, Set, Tuple

import pygame

from .data_models import RunState


class Command(Enum):
    JUMP = "jump"
    CONFIRM = "confirm"
    TOGGLE_MUTE = "toggle_mute"
    QUIT = "quit"


# Space doubles as start/retry outside of a run, like the start button
ACTION_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)
CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)
MUTE_KEYS = (pygame.K_m,)
QUIT_KEYS = (pygame.K_ESCAPE,)
JUMP_BUTTONS = (1,)  # left mouse button / touch tap


class InputAdapter:
    """
    Turns raw events into at most one command per physical press.

    A key or mouse button counts once between its down and up events, so
    auto-repeat (pygame.key.set_repeat) never fires a second jump.
    """

    def __init__(self):
        self._held: Set[Tuple[str, int]] = set()

    def reset(self):
        self._held.clear()

    def handle(self, event: "pygame.event.Event", state: RunState) -> Optional[Command]:
        if event.type == pygame.QUIT:
            return Command.QUIT

        if event.type == pygame.KEYUP:
            self._held.discard(("key", event.key))
            return None
        if event.type == pygame.MOUSEBUTTONUP:
            self._held.discard(("mouse", event.button))
            return None

        if event.type == pygame.KEYDOWN:
            held = ("key", event.key)
            if held in self._held:
                return None
            self._held.add(held)
            return self._map_key(event.key, state)

        if event.type == pygame.MOUSEBUTTONDOWN and event.button in JUMP_BUTTONS:
            held = ("mouse", event.button)
            if held in self._held:
                return None
            self._held.add(held)
            return Command.JUMP

        return None

    @staticmethod
    def _map_key(key: int, state: RunState) -> Optional[Command]:
        if key in ACTION_KEYS:
            return Command.JUMP if state is RunState.PLAYING else Command.CONFIRM
        if key in CONFIRM_KEYS:
            return Command.CONFIRM
        if key in MUTE_KEYS:
            return Command.TOGGLE_MUTE
        if key in QUIT_KEYS:
            return Command.QUIT
        return None
