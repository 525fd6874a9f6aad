"""Game-wide state: geometry, screens and per-level variables."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 960
SCROLL_SPEED = 300

WHITE = (255, 255, 255)


@dataclass
class Rect:
    """An axis-aligned rectangle in window pixels."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    @property
    def is_empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def intersects(self, other: Rect) -> bool:
        """True when both rectangles are non-empty and overlap by at least a pixel."""
        if self.is_empty or other.is_empty:
            return False
        return (
            self.x < other.x + other.w
            and other.x < self.x + self.w
            and self.y < other.y + other.h
            and other.y < self.y + self.h
        )

    def contains(self, x: int, y: int) -> bool:
        """True when the point lies inside the rectangle, edges included."""
        return self.x <= x <= self.x + self.w and self.y <= y <= self.y + self.h


@dataclass
class Sprite:
    """An image placed on screen, with an optional colour tint."""

    image: str | None
    rect: Rect = field(default_factory=Rect)
    tint: tuple[int, int, int] = WHITE


class Screen(Enum):
    """The window currently shown."""

    WELCOME = auto()
    CHOOSE_LEVEL = auto()
    CONTROLS = auto()
    LEGENDS = auto()
    LEVEL_ONE_SCOREBOARD = auto()
    LEVEL_TWO_SCOREBOARD = auto()
    LEVEL_ONE_NAME = auto()
    LEVEL_TWO_NAME = auto()
    LEVEL_ONE = auto()
    LEVEL_TWO = auto()
    LEVEL_ONE_COMPLETED = auto()
    LEVEL_TWO_COMPLETED = auto()
    LEVEL_ONE_GAME_OVER = auto()
    LEVEL_TWO_GAME_OVER = auto()


# Screens reached after play keep the "new score" flags so the result can be saved.
_RESULT_SCREENS = frozenset(
    {
        Screen.LEVEL_ONE_COMPLETED,
        Screen.LEVEL_TWO_COMPLETED,
        Screen.LEVEL_ONE_GAME_OVER,
        Screen.LEVEL_TWO_GAME_OVER,
    }
)


def _empty_life_losses() -> list[Rect]:
    return [Rect(0, 700, 0, 0) for _ in range(3)]


@dataclass
class LevelOneState:
    """Variables of the first level."""

    sky_speed: float = 0.0
    mountains_speed: float = 0.0
    tree_shade_speed: float = 0.0
    trees_speed: float = 0.0
    clouds_speed: float = 0.0
    track_speed: float = 0.0
    track_x: int = 0
    character_x: float = 600.0
    character_y: float = 665.0
    character_tint: tuple[int, int, int] = WHITE
    character_delta_time: float = 0.0
    move_speed: float = 0.0
    tiger_y: float = 730.0
    tiger_jumped: bool = False
    point_effect_speeds: list[int] = field(default_factory=lambda: [0] * 5)
    point_speeds: list[int] = field(default_factory=lambda: [0] * 5)
    obstacle_speeds: list[int] = field(default_factory=lambda: [1380] * 3)
    life_speeds: list[int] = field(default_factory=lambda: [700] * 3)
    life_losses: list[Rect] = field(default_factory=_empty_life_losses)
    curzon_position: int = 15000
    count: int = 0
    space: bool = False
    current_score: int = 0
    high_score: int = 0
    lives: int = 6
    player_name: str = " "

    def reset(self) -> None:
        """Return the level to the state it has before a new game."""
        self.space = False
        self.track_x = 0
        self.current_score = 0
        self.lives = 6
        self.player_name = " "
        self.sky_speed = 0.0
        self.mountains_speed = 0.0
        self.tree_shade_speed = 0.0
        self.trees_speed = 0.0
        self.clouds_speed = 0.0
        self.track_speed = 0.0
        self.character_x = 600.0
        self.character_y = 665.0
        self.tiger_y = 730.0
        self.point_effect_speeds = [0] * 5
        self.point_speeds = [0] * 5
        self.obstacle_speeds = [1380] * 3
        self.life_speeds = [700] * 3
        for rect in self.life_losses:
            rect.w = 0
            rect.h = 0
        self.curzon_position = 15000
        self.count = 0
        self.character_tint = WHITE


@dataclass
class LevelTwoState:
    """Variables of the second level."""

    sky_speed: float = 0.0
    mountains_speed: float = 0.0
    tree_shade_speed: float = 0.0
    trees_speed: float = 0.0
    clouds_speed: float = 0.0
    track_speed: float = 0.0
    birds_speed: float = 0.0
    character_x: float = 100.0
    character_y: float = 700.0
    character_delta_time: float = 0.0
    move_speed: float = 300.0
    track_x: float = WINDOW_WIDTH / 2 + 200
    track_y: float = WINDOW_HEIGHT / 2 - 200
    second_track_x: float = WINDOW_WIDTH / 2 + 200
    second_track_y: float = WINDOW_HEIGHT / 2 - 200
    point_popup_delay: int = 0
    hearts_delay: int = 0
    life_rect_delay: int = 0
    explosion_delay: int = 0
    collision_effect_delay: int = 0
    current_life: int = 100
    life_percentage: int = 0
    high_score: int = 0
    current_score: int = 0
    score_update: int = 0
    space_clicked: bool = False
    life_at_stake: bool = False
    left_clicked: bool = False
    right_clicked: bool = True
    down_pressed: bool = False
    up_pressed: bool = False
    count: int = 0
    throne_position: int = 10000
    player_name: str = " "

    def reset(self) -> None:
        """Return the level to the state it has before a new game."""
        self.player_name = " "
        self.sky_speed = 0.0
        self.mountains_speed = 0.0
        self.clouds_speed = 0.0
        self.tree_shade_speed = 0.0
        self.track_speed = 0.0
        self.character_x = 0.0
        self.current_score = 0
        self.life_percentage = 0
        self.space_clicked = False
        self.right_clicked = True
        self.left_clicked = False
        self.count = 0
        self.throne_position = 10000


@dataclass
class GameState:
    """Which screen is shown, the score flags and both levels' variables."""

    screen: Screen = Screen.WELCOME
    new_score: bool = False
    save_score: bool = False
    new_level_two_score: bool = False
    level_one: LevelOneState = field(default_factory=LevelOneState)
    level_two: LevelTwoState = field(default_factory=LevelTwoState)

    @property
    def level_one_completed(self) -> bool:
        return self.screen is Screen.LEVEL_ONE_COMPLETED

    @property
    def level_two_completed(self) -> bool:
        return self.screen is Screen.LEVEL_TWO_COMPLETED

    def enter(self, screen: Screen) -> None:
        """Switch to a screen; starting a level marks its score as new."""
        self.screen = screen
        if screen is Screen.LEVEL_ONE:
            self.new_score = True
            self.new_level_two_score = False
        elif screen is Screen.LEVEL_TWO:
            self.new_score = False
            self.new_level_two_score = True
        elif screen not in _RESULT_SCREENS:
            self.new_score = False
            self.new_level_two_score = False

    def reset(self) -> None:
        """Go back to the welcome window with both levels reset."""
        self.screen = Screen.WELCOME
        self.new_score = False
        self.new_level_two_score = False
        self.level_one.reset()
        self.level_two.reset()