"""Keyboard and mouse handling for every window of the game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Sequence

from .nameentry import NameField
from .state import WHITE, WINDOW_WIDTH, GameState, Screen, Sprite

HOVER_TINT = (255, 78, 255)
LEVEL_ONE_MUSIC_VOLUME = 30
LEVEL_ONE_JUMP = 400
LEVEL_TWO_JUMP = 70
LEVEL_TWO_BORDER_PUSH = 5
LEVEL_TWO_JUMP_LIMIT = 250
LEVEL_TWO_RIGHT_LIMIT = WINDOW_WIDTH - 300

_PLAYING_SCREENS = frozenset(
    {
        Screen.LEVEL_ONE_COMPLETED,
        Screen.LEVEL_TWO_COMPLETED,
        Screen.LEVEL_ONE,
        Screen.LEVEL_TWO,
        Screen.LEVEL_TWO_GAME_OVER,
        Screen.LEVEL_ONE_GAME_OVER,
    }
)


class EventKind(Enum):
    """The kinds of input event the game reacts to."""

    QUIT = auto()
    KEY_DOWN = auto()
    TEXT_INPUT = auto()


class Key(Enum):
    """Keys with a meaning in the game."""

    BACKSPACE = auto()
    SPACE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    W = auto()
    A = auto()
    S = auto()
    D = auto()
    OTHER = auto()


_UP = frozenset({Key.UP, Key.W})
_DOWN = frozenset({Key.DOWN, Key.S})
_LEFT = frozenset({Key.LEFT, Key.A})
_RIGHT = frozenset({Key.RIGHT, Key.D})


@dataclass(frozen=True)
class InputEvent:
    """One event from the window: a quit request, a key press or typed text."""

    kind: EventKind
    key: Key | None = None
    text: str = ""
    ctrl: bool = False


class Sound(Enum):
    """Sounds and music started in answer to input."""

    CLICK = auto()
    BACKGROUND_MUSIC = auto()
    LEVEL_ONE_MUSIC = auto()
    LEVEL_TWO_MUSIC = auto()


class QuitGame(Exception):
    """Raised when the player closes the window or presses the exit button."""


@dataclass
class Buttons:
    """Every clickable button of the game."""

    new_game: Sprite
    legends: Sprite
    controls: Sprite
    exit: Sprite
    level_one: Sprite
    level_two: Sprite
    level_one_legends: Sprite
    level_two_legends: Sprite
    enter: Sprite
    level_two_enter: Sprite
    back: Sprite


@dataclass
class InputHandler:
    """Applies input events and mouse clicks to the game state."""

    state: GameState
    buttons: Buttons
    borders: Sequence[Sprite] = field(default_factory=list)
    character: Sprite = field(default_factory=lambda: Sprite(None))

    def handle_event(self, event: InputEvent) -> bool:
        """Apply one event; returns whether a player name changed."""
        if event.kind is EventKind.QUIT:
            raise QuitGame
        screen = self.state.screen
        changed = False
        if screen in (Screen.LEVEL_ONE_NAME, Screen.LEVEL_ONE):
            changed = self._level_one_event(event) or changed
        if screen is Screen.LEVEL_TWO_NAME:
            changed = self._level_two_name_event(event) or changed
        if screen is Screen.LEVEL_TWO and event.kind is EventKind.KEY_DOWN:
            self._level_two_key(event.key)
        return changed

    def _edit_name(self, level, event: InputEvent) -> bool:
        name = NameField(level.player_name)
        if event.kind is EventKind.KEY_DOWN:
            edited = event.key is Key.BACKSPACE and name.backspace()
        else:
            edited = name.type_text(event.text, event.ctrl)
        if edited:
            level.player_name = name.value
        return edited

    def _level_one_event(self, event: InputEvent) -> bool:
        level = self.state.level_one
        if event.kind is EventKind.KEY_DOWN:
            if event.key is Key.BACKSPACE and len(level.player_name) > 1:
                return self._edit_name(level, event)
            if event.key is Key.SPACE and self.state.screen is Screen.LEVEL_ONE:
                level.space = True
            elif event.key in _UP:
                level.character_y -= level.move_speed * level.character_delta_time + LEVEL_ONE_JUMP
                level.character_tint = WHITE
            elif event.key in _DOWN:
                level.character_y += level.move_speed * level.character_delta_time + LEVEL_ONE_JUMP
                level.character_tint = WHITE
            return False
        if event.kind is EventKind.TEXT_INPUT and self.state.screen is Screen.LEVEL_ONE_NAME:
            return self._edit_name(level, event)
        return False

    def _level_two_name_event(self, event: InputEvent) -> bool:
        if event.kind in (EventKind.KEY_DOWN, EventKind.TEXT_INPUT):
            return self._edit_name(self.state.level_two, event)
        return False

    def _level_two_key(self, key: Key | None) -> None:
        level = self.state.level_two
        step = level.move_speed * level.character_delta_time
        if key is Key.SPACE:
            level.space_clicked = True
        if key in _RIGHT:
            level.left_clicked = False
            level.right_clicked = True
            if level.character_x < LEVEL_TWO_RIGHT_LIMIT:
                level.character_x += step
        if key in _LEFT:
            level.left_clicked = True
            level.right_clicked = False
            level.character_x -= step
        if key in _UP:
            if any(border.rect.intersects(self.character.rect) for border in self.borders[:2]):
                level.character_y += LEVEL_TWO_BORDER_PUSH
            elif level.character_y > LEVEL_TWO_JUMP_LIMIT:
                level.up_pressed = True
                level.character_y -= LEVEL_TWO_JUMP
        if key in _DOWN:
            level.down_pressed = True

    def handle_mouse(self, x: int, y: int, left_pressed: bool) -> list[Sound]:
        """Apply the mouse state; returns the sounds to play, in order."""
        if not left_pressed:
            return []
        state = self.state
        b = self.buttons
        sounds: list[Sound] = []

        def click(screen: Screen, *extra: Sound) -> None:
            state.enter(screen)
            sounds.extend(extra)
            sounds.append(Sound.CLICK)

        if state.screen is Screen.WELCOME and b.new_game.rect.contains(x, y):
            click(Screen.CHOOSE_LEVEL)
        if state.screen is Screen.WELCOME and b.controls.rect.contains(x, y):
            click(Screen.CONTROLS)
        if state.screen is Screen.CHOOSE_LEVEL and b.level_one.rect.contains(x, y):
            click(Screen.LEVEL_ONE_NAME)
        if state.screen is Screen.CHOOSE_LEVEL and b.level_two.rect.contains(x, y):
            click(Screen.LEVEL_TWO_NAME)
        if (
            len(state.level_one.player_name) > 1
            and state.screen is Screen.LEVEL_ONE_NAME
            and b.enter.rect.contains(x, y)
        ):
            click(Screen.LEVEL_ONE, Sound.LEVEL_ONE_MUSIC)
        if (
            len(state.level_two.player_name) > 1
            and state.screen is Screen.LEVEL_TWO_NAME
            and b.level_two_enter.rect.contains(x, y)
        ):
            click(Screen.LEVEL_TWO, Sound.LEVEL_TWO_MUSIC)
        if state.screen is Screen.WELCOME and b.legends.rect.contains(x, y):
            click(Screen.LEGENDS)
        if state.screen is Screen.LEGENDS and b.level_one_legends.rect.contains(x, y):
            click(Screen.LEVEL_ONE_SCOREBOARD)
        if state.screen is Screen.LEGENDS and b.level_two_legends.rect.contains(x, y):
            click(Screen.LEVEL_TWO_SCOREBOARD)
        if state.screen is Screen.WELCOME and b.exit.rect.contains(x, y):
            raise QuitGame
        if b.back.rect.contains(x, y):
            if state.screen in _PLAYING_SCREENS:
                sounds.append(Sound.BACKGROUND_MUSIC)
            state.reset()
        return sounds

    def hovered(self, x: int, y: int) -> list[Sprite]:
        """Tint the buttons under the pointer; returns the hovered ones."""
        state = self.state
        b = self.buttons
        screen = state.screen
        checks = [
            (b.new_game, screen is Screen.WELCOME),
            (b.controls, screen is Screen.WELCOME),
            (b.level_one, screen is Screen.CHOOSE_LEVEL),
            (b.level_two, screen is Screen.CHOOSE_LEVEL),
            (
                b.enter,
                len(state.level_one.player_name) > 1 and screen is Screen.LEVEL_ONE_NAME,
            ),
            (
                b.level_two_enter,
                len(state.level_two.player_name) > 1 and screen is Screen.LEVEL_TWO_NAME,
            ),
            (b.legends, screen is Screen.WELCOME),
            (b.level_one_legends, screen is Screen.LEGENDS),
            (b.level_two_legends, screen is Screen.LEGENDS),
            (b.exit, screen is Screen.WELCOME),
            (b.back, True),
        ]
        result = []
        for sprite, active in checks:
            if active and sprite.rect.contains(x, y):
                sprite.tint = HOVER_TINT
                result.append(sprite)
            else:
                sprite.tint = WHITE
        return result