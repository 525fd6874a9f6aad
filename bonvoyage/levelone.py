"""Obstacles, lives and life-loss marks of the first level."""

from __future__ import annotations

from typing import Sequence

from .state import WINDOW_WIDTH, Rect, Sprite

LIFE_COUNT = 6
OBSTACLE_COUNT = 3
GROUND_Y = 700

_OBSTACLES = (
    ("images/levelone/obstacles/rocktwin.png", 160, 140, WINDOW_WIDTH + 100),
    ("images/levelone/obstacles/bigrock.png", 224, 136, WINDOW_WIDTH + 100),
    ("images/levelone/obstacles/pumpkin.png", 102, 93, WINDOW_WIDTH * 3),
)

LIFE_IMAGE = "images/levelone/obstacles/redlife.png"
LIFE_LOSS_IMAGE = "images/levelone/heartbreak.png"


def obstacle_sprites() -> list[Sprite]:
    """The three obstacles, placed off the right edge of the window."""
    return [
        Sprite(image, Rect(x, GROUND_Y, width, height))
        for image, width, height, x in _OBSTACLES
    ]


def life_sprites() -> list[Sprite]:
    """The hearts that show the player's remaining lives."""
    return [Sprite(LIFE_IMAGE, Rect(600, 500, 56, 40)) for _ in range(LIFE_COUNT)]


def life_loss_sprites(obstacles: Sequence[Sprite]) -> list[Sprite]:
    """One hidden broken-heart mark above each obstacle."""
    if len(obstacles) < OBSTACLE_COUNT:
        raise ValueError(
            f"need {OBSTACLE_COUNT} obstacles to place life-loss marks, got {len(obstacles)}"
        )
    return [
        Sprite(LIFE_LOSS_IMAGE, Rect(obstacle.rect.x, GROUND_Y, 0, 0))
        for obstacle in obstacles[:OBSTACLE_COUNT]
    ]