# bonvoyage

The engine-independent core of a two-level side-scrolling runner: the
state of the game and its screens, the placement of every image on each
screen, keyboard and mouse handling, and the high-score files.

Everything is returned as plain Python objects (`Rect`, `Sprite`, layout
dataclasses, `Sound` values), so any front end can draw and play the game.

## Modules

| Module | Contents |
| --- | --- |
| `bonvoyage.state` | `Rect`, `Sprite`, `Screen`, `LevelOneState`, `LevelTwoState`, `GameState`, window size constants |
| `bonvoyage.scores` | `ScoreEntry`, reading, ranking and saving score files |
| `bonvoyage.menus` | welcome, level-choice and legends window layouts |
| `bonvoyage.nameentry` | `NameField` and the name-entry window layout |
| `bonvoyage.scoreboard` | the five-row scoreboards of both levels |
| `bonvoyage.levelone` | obstacles, lives and life-loss marks of level one |
| `bonvoyage.leveltwo_props` | tracks, borders, coins, bomb, dragon and explosion of level two |
| `bonvoyage.leveltwo` | scenery, character, throne, life display and the whole level-two layout |
| `bonvoyage.inputs` | `InputHandler`, `InputEvent`, `Key`, `EventKind`, `Sound`, `Buttons`, `QuitGame` |

## State and screens

The window is 1280 × 960 pixels (`WINDOW_WIDTH`, `WINDOW_HEIGHT`).

```python
from bonvoyage.state import GameState, Screen

state = GameState()             # starts on Screen.WELCOME
state.enter(Screen.LEVEL_ONE)   # starting a level marks its score as new
state.reset()                   # back to the welcome screen, both levels reset
```

`Rect.intersects(other)` is true when two non-empty rectangles overlap;
`Rect.contains(x, y)` is true for points inside the rectangle, edges
included. `LevelOneState.reset()` and `LevelTwoState.reset()` restore the
values each level has before a new game.

## Layouts

`welcome_layout()`, `level_choice_layout()` and `legends_layout()` place the
menu windows. `name_entry_layout(name, text_size)` places the name window,
given the rendered size of the name. `level_two_layout(...)` places every
image of level two; it needs the pixel sizes of the character, coin, dragon
and heart sprite sheets and raises `ValueError` if one is not positive.

## Input

`InputHandler(state, buttons, borders, character)`:

- `handle_event(event)` applies a key press or typed text: name editing,
  level-one jumps, level-two movement and jumps. It returns whether a player
  name changed. A quit event raises `QuitGame`.
- `handle_mouse(x, y, left_pressed)` follows button clicks from screen to
  screen and returns the `Sound` values to play, in order. The exit button
  on the welcome screen raises `QuitGame`; the back button resets the game.
- `hovered(x, y)` tints the buttons under the pointer and returns them.

A `NameField` keeps a leading blank, refuses text once it is ten characters
long (blank included), refuses text starting with space, `c`, `C`, `v` or
`V` while Ctrl is held, and `is_ready()` once a character has been typed.

## Scores

Score files hold whitespace-separated `name score` pairs:

```
arya 1200
jon 850
```

```python
from bonvoyage.scores import append_score, high_score, ranked_scores, read_scores

entries = read_scores("score.txt")   # a missing file gives []
top = ranked_scores(entries)         # highest first
best = high_score(entries)           # 0 when there are none
append_score("score.txt", "sansa", 990)
```

`ranked_scores` stops at the first zero score and names each score after
the last entry that holds it. `read_scores` raises `ValueError` for a name
without a score or a score that is not a number; `append_score` raises it
for a name that is not a single word. `save_level_one_score(state, path)`
and `save_level_two_score(state, path)` write a finished run when the
game's flags allow it and return whether a line was written.
`level_one_scoreboard(entries, measure)` and
`level_two_scoreboard(entries, measure)` build the boards, where `measure`
returns the rendered width and height of a text.

## What this package does not do

It opens no window, draws nothing, renders no text, plays no sound and has
no game loop or command to start the game. Frame-by-frame animation,
scrolling and collision outcomes during play are left to the front end.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.