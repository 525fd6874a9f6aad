"""Tracks, coins, bomb, dragon and explosion of the second level."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .state import WINDOW_HEIGHT, WINDOW_WIDTH, Rect, Sprite

TRACK_COUNT = 2
COIN_COUNT = 7

TRACK_IMAGE = "images/leveltwo/new/uppertrack.png"
BORDER_IMAGE = "images/level2obstacles/border.png"
COIN_IMAGE = "images/level2obstacles/finalcoins.png"
COIN_POPUP_IMAGE = "images/level2obstacles/100.png"
BOMB_IMAGE = "images/level2obstacles/dragonerr.png"
DRAGON_IMAGE = "images/level2obstacles/dragon_sprite.png"
EXPLOSION_IMAGE = "images/level2obstacles/explosion.png"


@dataclass
class SpriteSheet:
    """An animation sheet and the frame cut out of it."""

    image: str
    width: int
    height: int
    frame: Rect


def _check_sheet(sheet_size: tuple[int, int]) -> tuple[int, int]:
    width, height = sheet_size
    if width <= 0 or height <= 0:
        raise ValueError(f"sprite sheet size must be positive, got {sheet_size}")
    return width, height


def _check_tracks(tracks: Sequence[Sprite]) -> None:
    if len(tracks) < TRACK_COUNT:
        raise ValueError(f"need {TRACK_COUNT} tracks, got {len(tracks)}")


def track_sprites() -> list[Sprite]:
    """The two floating tracks the character can climb onto."""
    return [
        Sprite(TRACK_IMAGE, Rect(WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2 - 100, 634, 105))
        for _ in range(TRACK_COUNT)
    ]


def invisible_borders(tracks: Sequence[Sprite]) -> list[Sprite]:
    """Strips under the tracks that stop the character jumping through them."""
    _check_tracks(tracks)
    return [
        Sprite(
            BORDER_IMAGE,
            Rect(WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2 - 100 + 30, track.rect.w, 30),
        )
        for track in tracks[:TRACK_COUNT]
    ]


def coin_sprites(
    tracks: Sequence[Sprite], sheet_size: tuple[int, int]
) -> tuple[list[Sprite], SpriteSheet]:
    """The coins above the first track and the rotating-coin sheet."""
    _check_tracks(tracks)
    width, height = _check_sheet(sheet_size)
    first = tracks[0].rect
    coins = [
        Sprite(COIN_IMAGE, Rect(first.x + 150, first.y - 70, 60, 60))
        for _ in range(COIN_COUNT)
    ]
    # The frame takes half the sheet's height as its width and half its width as its height.
    frame = Rect(0, 0, height // 2, width // 2)
    return coins, SpriteSheet(COIN_IMAGE, width, height, frame)


def coin_popup() -> Sprite:
    """The hidden "+100" pop-up shown when a coin is taken."""
    return Sprite(COIN_POPUP_IMAGE, Rect(WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2, 0, 0))


def bomb_sprite() -> Sprite:
    """The dragon's bomb, parked outside the window."""
    return Sprite(BOMB_IMAGE, Rect(-150, WINDOW_HEIGHT + 10, 100, 100))


def dragon_sprites(sheet_size: tuple[int, int]) -> tuple[SpriteSheet, Sprite]:
    """The dragon's six-by-two animation sheet and its place off the right edge."""
    width, height = _check_sheet(sheet_size)
    frame_w = width // 6 + 1
    frame_h = height // 2
    sheet = SpriteSheet(DRAGON_IMAGE, width, height, Rect(0, 0, frame_w, frame_h))
    position = Sprite(DRAGON_IMAGE, Rect(WINDOW_WIDTH + 10, 30, frame_w, frame_h))
    return sheet, position


def explosion_sprite(dragon_position: Sprite) -> Sprite:
    """The hidden explosion, level with the dragon."""
    return Sprite(
        EXPLOSION_IMAGE, Rect(WINDOW_WIDTH - 150, dragon_position.rect.y, 0, 0)
    )