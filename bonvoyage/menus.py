"""Layouts of the welcome, level choice and legends windows."""

from __future__ import annotations

from dataclasses import dataclass

from .state import WINDOW_HEIGHT, WINDOW_WIDTH, Rect, Sprite


@dataclass
class WelcomeLayout:
    """The welcome window: scenery, title and the four main buttons."""

    sky: Sprite
    birds: Sprite
    mountains: Sprite
    trees: Sprite
    title: Sprite
    new_game_button: Sprite
    legends_button: Sprite
    controls_button: Sprite
    exit_button: Sprite

    @property
    def buttons(self) -> list[Sprite]:
        """The clickable buttons, top to bottom."""
        return [
            self.new_game_button,
            self.legends_button,
            self.controls_button,
            self.exit_button,
        ]

    @property
    def sprites(self) -> list[Sprite]:
        """Everything on the window in drawing order."""
        return [self.sky, self.birds, self.mountains, self.trees, self.title, *self.buttons]


@dataclass
class LevelChoiceLayout:
    """The window that picks the level to play."""

    level_one_button: Sprite
    level_two_button: Sprite

    @property
    def buttons(self) -> list[Sprite]:
        return [self.level_one_button, self.level_two_button]


@dataclass
class LegendsLayout:
    """The window that picks which level's scoreboard to show."""

    level_one_button: Sprite
    level_two_button: Sprite

    @property
    def buttons(self) -> list[Sprite]:
        return [self.level_one_button, self.level_two_button]


def welcome_layout() -> WelcomeLayout:
    """Place the welcome window's images and buttons."""
    new_game = Sprite(
        "images/buttons/newPlayButton.png",
        Rect(WINDOW_WIDTH // 2 + 180, WINDOW_HEIGHT // 2 - 220, 309, 77),
    )
    button_x = new_game.rect.x
    button_y = new_game.rect.y
    return WelcomeLayout(
        sky=Sprite(
            "./images/frontbackground/sky.png", Rect(0, 0, WINDOW_WIDTH, WINDOW_HEIGHT)
        ),
        birds=Sprite("./images/frontbackground/birds.png", Rect(0, 100, WINDOW_WIDTH, 100)),
        mountains=Sprite(
            "./images/frontbackground/mountains.png", Rect(0, 200, WINDOW_WIDTH, 800)
        ),
        trees=Sprite(
            "./images/frontbackground/frontTrees.png",
            Rect(0, 0, WINDOW_WIDTH + 50, WINDOW_HEIGHT),
        ),
        title=Sprite(
            "images/bonvoyagelogo.png",
            Rect(WINDOW_WIDTH // 2 - 120, WINDOW_HEIGHT // 2 - 460, 241, 181),
        ),
        new_game_button=new_game,
        legends_button=Sprite(
            "images/buttons/newLegendsButton.png", Rect(button_x, button_y + 100, 309, 77)
        ),
        controls_button=Sprite(
            "images/buttons/newControlsButton.png", Rect(button_x, button_y + 200, 309, 70)
        ),
        exit_button=Sprite(
            "images/buttons/newExitButton.png", Rect(button_x, button_y + 300, 309, 70)
        ),
    )


def level_choice_layout() -> LevelChoiceLayout:
    """Place the two level buttons of the new game window."""
    x = WINDOW_WIDTH // 2 - 161
    return LevelChoiceLayout(
        level_one_button=Sprite(
            "images/buttons/newSundarbanButton.png",
            Rect(x, WINDOW_HEIGHT // 2 - 200, 322, 63),
        ),
        level_two_button=Sprite(
            "images/newcomponents/winterfell.png",
            Rect(x, WINDOW_HEIGHT // 2 - 100, 322, 63),
        ),
    )


def legends_layout() -> LegendsLayout:
    """Place the two scoreboard buttons of the legends window."""
    x = WINDOW_WIDTH // 2 - 266
    return LegendsLayout(
        level_one_button=Sprite(
            "images/newcomponents/legendsOfSundorban.png",
            Rect(x, WINDOW_HEIGHT // 2 - 200, 532, 77),
        ),
        level_two_button=Sprite(
            "images//newcomponents/legendsOfWinterfell.png",
            Rect(x, WINDOW_HEIGHT // 2 - 100, 532, 77),
        ),
    )