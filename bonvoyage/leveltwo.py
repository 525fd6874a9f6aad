"""Scenery, character, life display and completion overlay of the second level."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .leveltwo_props import (
    TRACK_COUNT,
    SpriteSheet,
    bomb_sprite,
    coin_popup,
    coin_sprites,
    dragon_sprites,
    explosion_sprite,
    invisible_borders,
    track_sprites,
)
from .state import WINDOW_HEIGHT, WINDOW_WIDTH, Rect, Sprite

CHARACTER_IMAGE = "images/level2obstacles/winterfellCharacter.png"
THRONE_IMAGE = "images/newcomponents/ironethrone.png"
HEART_IMAGE = "images/level2obstacles/redgreenheartsprite.png"
LIFE_BONUS_IMAGE = "images/level2obstacles/5p.png"
LIFE_SCORE_IMAGE = "images/level2obstacles/lifescore.png"
HEART_DISPLAY_IMAGE = "images/level2obstacles/life.png"
OVERLAY_IMAGE = "images/levelone/overlay-min.png"
TROPHY_IMAGE = "images/newcomponents/trophy.png"


@dataclass
class LifeLayout:
    """The collectable heart, its animation, the bonus pop-up and the life display."""

    heart: Sprite
    heart_sheet: SpriteSheet
    bonus_popup: Sprite
    score_display: Sprite
    heart_display: Sprite

    @property
    def sprites(self) -> list[Sprite]:
        return [self.heart, self.bonus_popup, self.score_display, self.heart_display]


@dataclass
class CompletedLayout:
    """The darkened overlay and the trophy shown when the level is won."""

    overlay: Sprite
    message: Sprite

    @property
    def sprites(self) -> list[Sprite]:
        return [self.overlay, self.message]


@dataclass
class LevelTwoLayout:
    """Everything placed when the second level is loaded."""

    background: list[Sprite]
    character_sheet: SpriteSheet
    character: Sprite
    throne: Sprite
    tracks: list[Sprite]
    borders: list[Sprite]
    coins: list[Sprite]
    coin_sheet: SpriteSheet
    coin_popup: Sprite
    bomb: Sprite
    dragon_sheet: SpriteSheet
    dragon: Sprite
    explosion: Sprite
    life: LifeLayout

    @property
    def sprites(self) -> list[Sprite]:
        """Everything on the level in drawing order."""
        return [
            *self.background,
            self.throne,
            *self.tracks,
            *self.borders,
            *self.coins,
            self.coin_popup,
            *self.life.sprites,
            self.bomb,
            self.dragon,
            self.explosion,
            self.character,
        ]


def _check_sheet(sheet_size: tuple[int, int]) -> tuple[int, int]:
    width, height = sheet_size
    if width <= 0 or height <= 0:
        raise ValueError(f"sprite sheet size must be positive, got {sheet_size}")
    return width, height


def background_sprites() -> list[Sprite]:
    """Sky, moon, mountains, tree shade, clouds and ground, back to front."""
    return [
        Sprite("images/leveltwo/new/sky.png", Rect(0, 0, WINDOW_WIDTH, WINDOW_HEIGHT)),
        Sprite("images/leveltwo/new/final moon.png", Rect(WINDOW_WIDTH // 2, 150, 110, 110)),
        Sprite("images/leveltwo/new/mountains.png", Rect(0, 220, WINDOW_WIDTH, 650)),
        Sprite("images/leveltwo/new/tree.png", Rect(0, 385, WINDOW_WIDTH, 380)),
        Sprite("images/leveltwo/new/cloudsfinal.png", Rect(0, 50, WINDOW_WIDTH - 200, 226)),
        Sprite("images/leveltwo/new/newnightTrack.png", Rect(0, 760, WINDOW_WIDTH, 200)),
    ]


def character_sprites(sheet_size: tuple[int, int]) -> tuple[SpriteSheet, Sprite]:
    """The character's two-by-two animation sheet and its starting place."""
    width, height = _check_sheet(sheet_size)
    # The frame takes half the sheet's height as its width and half its width as its height.
    frame = Rect(0, 0, height // 2, width // 2)
    sheet = SpriteSheet(CHARACTER_IMAGE, width, height, frame)
    position = Sprite(CHARACTER_IMAGE, Rect(30, 720, frame.w, frame.h))
    return sheet, position


def iron_throne(position: int) -> Sprite:
    """The throne that ends the level, placed at a horizontal position."""
    return Sprite(THRONE_IMAGE, Rect(int(position), 300, 254, 289))


def life_layout(tracks: Sequence[Sprite], heart_sheet_size: tuple[int, int]) -> LifeLayout:
    """The heart above the first track and the life display in the corner."""
    if len(tracks) < TRACK_COUNT:
        raise ValueError(f"need {TRACK_COUNT} tracks, got {len(tracks)}")
    width, height = _check_sheet(heart_sheet_size)
    first = tracks[0].rect
    heart = Sprite(HEART_IMAGE, Rect(first.x + 50, first.y - 70, 50, 50))
    frame = Rect(0, 0, height // 2, width // 2)
    return LifeLayout(
        heart=heart,
        heart_sheet=SpriteSheet(HEART_IMAGE, width, height, frame),
        bonus_popup=Sprite(LIFE_BONUS_IMAGE, Rect(WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2, 0, 0)),
        score_display=Sprite(LIFE_SCORE_IMAGE, Rect(1110, 63, 125, 39)),
        heart_display=Sprite(HEART_DISPLAY_IMAGE, Rect(1078, 31, 90, 72)),
    )


def completed_layout() -> CompletedLayout:
    """The overlay and trophy shown when the second level is completed."""
    return CompletedLayout(
        overlay=Sprite(OVERLAY_IMAGE, Rect(0, 0, WINDOW_WIDTH, WINDOW_HEIGHT)),
        message=Sprite(
            TROPHY_IMAGE,
            Rect(WINDOW_WIDTH // 2 - 230, WINDOW_HEIGHT // 2 - 203, 460, 406),
        ),
    )


def level_two_layout(
    throne_position: int,
    character_sheet_size: tuple[int, int],
    coin_sheet_size: tuple[int, int],
    dragon_sheet_size: tuple[int, int],
    heart_sheet_size: tuple[int, int],
) -> LevelTwoLayout:
    """Place every image of the second level."""
    character_sheet, character = character_sprites(character_sheet_size)
    tracks = track_sprites()
    borders = invisible_borders(tracks)
    coins, coin_sheet = coin_sprites(tracks, coin_sheet_size)
    dragon_sheet, dragon = dragon_sprites(dragon_sheet_size)
    return LevelTwoLayout(
        background=background_sprites(),
        character_sheet=character_sheet,
        character=character,
        throne=iron_throne(throne_position),
        tracks=tracks,
        borders=borders,
        coins=coins,
        coin_sheet=coin_sheet,
        coin_popup=coin_popup(),
        bomb=bomb_sprite(),
        dragon_sheet=dragon_sheet,
        dragon=dragon,
        explosion=explosion_sprite(dragon),
        life=life_layout(tracks, heart_sheet_size),
    )