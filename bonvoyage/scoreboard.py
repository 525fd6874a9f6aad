"""Layouts of the two levels' scoreboards (the "legends" boards)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from .scores import ScoreEntry, ranked_scores
from .state import WINDOW_HEIGHT, WINDOW_WIDTH, Rect, Sprite

ROW_COUNT = 5
LONG_NAME_LENGTH = 6

LEVEL_ONE_BOARD_IMAGE = "./images/newcomponents/sundarbanScoreboard.png"
LEVEL_TWO_BOARD_IMAGE = "./images/newcomponents/gotScoreboard.png"
LEVEL_ONE_PLACEHOLDER = ""
LEVEL_TWO_PLACEHOLDER = "000"

Measure = Callable[[str], "tuple[int, int]"]


@dataclass
class ScoreboardRow:
    """One ranked line of a scoreboard: a name and a score, each placed."""

    rank: int
    name: str
    score: int
    name_sprite: Sprite
    score_sprite: Sprite

    @property
    def score_text(self) -> str:
        return str(self.score)


@dataclass
class ScoreboardLayout:
    """The board image and its five ranked rows."""

    board: Sprite
    rows: list[ScoreboardRow]

    @property
    def sprites(self) -> list[Sprite]:
        """Everything on the board in drawing order."""
        texts = [s for row in self.rows for s in (row.name_sprite, row.score_sprite)]
        return [self.board, *texts]


def _row_y(index: int, base_narrow: int, base_wide: int) -> int:
    # The last two rows of the board image are spaced more widely.
    if index >= 3:
        return base_wide + index * 65
    return base_narrow + index * 61


def scoreboard_layout(
    entries: Iterable[ScoreEntry],
    image: str,
    measure: Measure,
    placeholder: str,
) -> ScoreboardLayout:
    """Place a board and its top five scores.

    ``measure`` gives the rendered width and height of a text; rows without a
    score show ``placeholder`` as the name and 0 as the score.
    """
    ranked = ranked_scores(entries)
    board = Sprite(
        image, Rect(WINDOW_WIDTH // 2 - 476, WINDOW_HEIGHT // 2 - 245, 952, 529)
    )
    rows = []
    for index in range(ROW_COUNT):
        if index < len(ranked):
            name, score = ranked[index].name, ranked[index].score
        else:
            name, score = placeholder, 0

        name_w, name_h = measure(name)
        name_x = 575 if len(name) > LONG_NAME_LENGTH else 590
        name_rect = Rect(name_x, _row_y(index, 425, 417), name_w - 5, name_h - 5)

        score_w, score_h = measure(str(score))
        score_rect = Rect(880, _row_y(index, 430, 422), score_w - 10, score_h - 10)

        rows.append(
            ScoreboardRow(
                rank=index + 1,
                name=name,
                score=score,
                name_sprite=Sprite(None, name_rect),
                score_sprite=Sprite(None, score_rect),
            )
        )
    return ScoreboardLayout(board, rows)


def level_one_scoreboard(entries: Iterable[ScoreEntry], measure: Measure) -> ScoreboardLayout:
    """The first level's scoreboard."""
    return scoreboard_layout(entries, LEVEL_ONE_BOARD_IMAGE, measure, LEVEL_ONE_PLACEHOLDER)


def level_two_scoreboard(entries: Iterable[ScoreEntry], measure: Measure) -> ScoreboardLayout:
    """The second level's scoreboard."""
    return scoreboard_layout(entries, LEVEL_TWO_BOARD_IMAGE, measure, LEVEL_TWO_PLACEHOLDER)