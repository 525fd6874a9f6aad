"""The player-name window and the text field typed into it."""

from __future__ import annotations

from dataclasses import dataclass

from .state import WINDOW_HEIGHT, WINDOW_WIDTH, Rect, Sprite

MAX_NAME_LENGTH = 10
EMPTY_NAME = " "
LONG_NAME_LENGTH = 7

# Characters that, with Ctrl held, would copy, paste or otherwise edit the field.
_BLOCKED_WITH_CTRL = frozenset(" cCvV")


@dataclass
class NameEntryLayout:
    """The name text, its box, the enter button and the prompt."""

    text: str
    name: Sprite
    box: Sprite
    enter_button: Sprite
    command: Sprite

    @property
    def sprites(self) -> list[Sprite]:
        """Everything on the window in drawing order."""
        return [self.command, self.box, self.name, self.enter_button]


@dataclass
class NameField:
    """A player's name as typed; it always keeps its leading blank."""

    value: str = EMPTY_NAME

    def type_text(self, text: str, ctrl_held: bool = False) -> bool:
        """Append typed text unless the field is full or it is a Ctrl shortcut."""
        if not text or len(self.value) >= MAX_NAME_LENGTH:
            return False
        if ctrl_held and text[0] in _BLOCKED_WITH_CTRL:
            return False
        self.value += text
        return True

    def backspace(self) -> bool:
        """Remove the last typed character; the leading blank stays."""
        if len(self.value) <= 1:
            return False
        self.value = self.value[:-1]
        return True

    def is_ready(self) -> bool:
        """True once at least one character has been typed."""
        return len(self.value) > 1

    def clear(self) -> None:
        self.value = EMPTY_NAME


def name_entry_layout(name: str, text_size: tuple[int, int]) -> NameEntryLayout:
    """Place the name window; text_size is the rendered name's width and height."""
    width, height = text_size
    name_rect = Rect(WINDOW_WIDTH // 2 - 55, 405, width, height)
    if len(name) > LONG_NAME_LENGTH:
        name_rect.x -= 25
    return NameEntryLayout(
        text=name,
        name=Sprite(None, name_rect),
        box=Sprite(
            "images/levelone/nameSquare.png",
            Rect(WINDOW_WIDTH // 2 - 187, 385, 374, 66),
        ),
        enter_button=Sprite(
            "images/buttons/newenterbutton.png",
            Rect(WINDOW_WIDTH // 2 - 119, WINDOW_HEIGHT // 2, 238, 69),
        ),
        command=Sprite(
            "images/levelone/enterYourName.png",
            Rect(WINDOW_WIDTH // 2 - 192, WINDOW_HEIGHT // 2 - 200, 384, 73),
        ),
    )