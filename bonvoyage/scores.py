"""Reading, ranking and saving the score files of both levels."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable

from .state import GameState

LEVEL_ONE_SCORE_FILE = "score.txt"
LEVEL_TWO_SCORE_FILE = "scoreleveltwo.txt"


@dataclass(frozen=True)
class ScoreEntry:
    """One player's name and score."""

    name: str
    score: int


def read_scores(path: str | os.PathLike[str]) -> list[ScoreEntry]:
    """Read whitespace-separated "name score" pairs; a missing file holds none."""
    try:
        with open(path, encoding="utf-8") as handle:
            tokens = handle.read().split()
    except FileNotFoundError:
        return []
    if len(tokens) % 2:
        raise ValueError(f"{path}: name without a score")
    entries = []
    for name, score in zip(tokens[::2], tokens[1::2]):
        try:
            entries.append(ScoreEntry(name, int(score)))
        except ValueError:
            raise ValueError(f"{path}: bad score {score!r} for {name!r}") from None
    return entries


def name_for_score(entries: Iterable[ScoreEntry], score: int) -> str | None:
    """The name of the last entry that holds this score."""
    found = None
    for entry in entries:
        if entry.score == score:
            found = entry.name
    return found


def ranked_scores(entries: Iterable[ScoreEntry]) -> list[ScoreEntry]:
    """Scores from highest to lowest, each named after its last holder.

    Entries after the first zero score are not ranked.
    """
    entries = list(entries)
    counted = []
    for entry in entries:
        if entry.score == 0:
            break
        counted.append(entry)
    scores = sorted((entry.score for entry in counted), reverse=True)
    return [ScoreEntry(name_for_score(counted, score) or "", score) for score in scores]


def high_score(entries: Iterable[ScoreEntry]) -> int:
    """The best ranked score, or 0."""
    ranked = ranked_scores(entries)
    return ranked[0].score if ranked else 0


def append_score(path: str | os.PathLike[str], name: str, score: int) -> None:
    """Add a "name score" line to a score file."""
    token = name.strip()
    if not token or any(ch.isspace() for ch in token):
        raise ValueError(f"player name must be a single word: {name!r}")
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{token} {score}\n")


def _save(path, name: str, score: int, allowed: bool) -> bool:
    with open(path, "a", encoding="utf-8"):
        pass
    if allowed and score > 0:
        append_score(path, name, score)
        return True
    return False


def save_level_one_score(
    state: GameState, path: str | os.PathLike[str] = LEVEL_ONE_SCORE_FILE
) -> bool:
    """Record the first level's score; returns whether a line was written."""
    level = state.level_one
    level.high_score = level.current_score
    return _save(
        path, level.player_name, level.high_score, state.new_score and state.save_score
    )


def save_level_two_score(
    state: GameState, path: str | os.PathLike[str] = LEVEL_TWO_SCORE_FILE
) -> bool:
    """Record the second level's score; returns whether a line was written."""
    level = state.level_two
    level.high_score = level.current_score
    return _save(
        path,
        level.player_name,
        level.high_score,
        state.new_level_two_score and state.level_two_completed,
    )


def score_texts(current: int, entries: Iterable[ScoreEntry]) -> tuple[str, str]:
    """The texts shown for the current score and the high score."""
    return str(current), str(high_score(entries))