from __future__ import annotations

import pygame
import pytest

from flappy.data_models import RunState
from flappy.input_adapter import Command, InputAdapter


def _key(kind: int, key: int) -> pygame.event.Event:
    return pygame.event.Event(kind, key=key)


def _click(kind: int, button: int = 1) -> pygame.event.Event:
    return pygame.event.Event(kind, button=button, pos=(10, 10))


@pytest.mark.parametrize(
    "state, expected",
    [
        (RunState.MENU, Command.CONFIRM),
        (RunState.PLAYING, Command.JUMP),
        (RunState.GAME_OVER, Command.CONFIRM),
    ],
)
def test_space_depends_on_state(state: RunState, expected: Command) -> None:
    assert InputAdapter().handle(_key(pygame.KEYDOWN, pygame.K_SPACE), state) is expected


def test_enter_always_confirms() -> None:
    adapter = InputAdapter()
    assert adapter.handle(_key(pygame.KEYDOWN, pygame.K_RETURN), RunState.PLAYING) is Command.CONFIRM


def test_click_jumps() -> None:
    adapter = InputAdapter()
    assert adapter.handle(_click(pygame.MOUSEBUTTONDOWN), RunState.PLAYING) is Command.JUMP
    assert adapter.handle(_click(pygame.MOUSEBUTTONDOWN, button=3), RunState.PLAYING) is None


def test_held_key_fires_once() -> None:
    adapter = InputAdapter()
    down = _key(pygame.KEYDOWN, pygame.K_SPACE)
    assert adapter.handle(down, RunState.PLAYING) is Command.JUMP
    # auto-repeat
    assert adapter.handle(down, RunState.PLAYING) is None
    assert adapter.handle(down, RunState.PLAYING) is None
    assert adapter.handle(_key(pygame.KEYUP, pygame.K_SPACE), RunState.PLAYING) is None
    assert adapter.handle(down, RunState.PLAYING) is Command.JUMP


def test_held_button_fires_once() -> None:
    adapter = InputAdapter()
    assert adapter.handle(_click(pygame.MOUSEBUTTONDOWN), RunState.PLAYING) is Command.JUMP
    assert adapter.handle(_click(pygame.MOUSEBUTTONDOWN), RunState.PLAYING) is None
    adapter.handle(_click(pygame.MOUSEBUTTONUP), RunState.PLAYING)
    assert adapter.handle(_click(pygame.MOUSEBUTTONDOWN), RunState.PLAYING) is Command.JUMP


def test_mute_quit_and_unmapped() -> None:
    adapter = InputAdapter()
    assert adapter.handle(_key(pygame.KEYDOWN, pygame.K_m), RunState.MENU) is Command.TOGGLE_MUTE
    assert adapter.handle(_key(pygame.KEYDOWN, pygame.K_ESCAPE), RunState.MENU) is Command.QUIT
    assert adapter.handle(pygame.event.Event(pygame.QUIT), RunState.PLAYING) is Command.QUIT
    assert adapter.handle(_key(pygame.KEYDOWN, pygame.K_z), RunState.PLAYING) is None


def test_reset_forgets_held_presses() -> None:
    adapter = InputAdapter()
    down = _key(pygame.KEYDOWN, pygame.K_SPACE)
    assert adapter.handle(down, RunState.PLAYING) is Command.JUMP
    assert adapter.handle(_click(pygame.MOUSEBUTTONDOWN), RunState.PLAYING) is Command.JUMP
    # the matching KEYUP / MOUSEBUTTONUP never arrive
    adapter.reset()
    assert adapter.handle(down, RunState.PLAYING) is Command.JUMP
    assert adapter.handle(_click(pygame.MOUSEBUTTONDOWN), RunState.PLAYING) is Command.JUMP
