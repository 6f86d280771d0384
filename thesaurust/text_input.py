"""Key events and a single-line editable text field."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class Key(Enum):
    """Kinds of key press the application understands."""

    CHAR = auto()
    ENTER = auto()
    ESC = auto()
    BACKSPACE = auto()
    DELETE = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    HOME = auto()
    END = auto()
    TAB = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A single key press; ``ch`` is set for character keys."""

    code: Key
    ch: str | None = None

    @classmethod
    def char(cls, ch: str) -> KeyEvent:
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return cls(Key.CHAR, ch)

    @classmethod
    def special(cls, key: Key) -> KeyEvent:
        if key is Key.CHAR:
            raise ValueError("character keys need a character; use KeyEvent.char")
        return cls(key)

    def is_char(self, *chars: str) -> bool:
        """True for a character key, and, if given, one of ``chars``."""
        return self.code is Key.CHAR and (not chars or self.ch in chars)


@dataclass
class TextInput:
    """Editable text with a cursor placed between characters."""

    value: str = ""
    cursor: int = field(init=False)

    def __post_init__(self) -> None:
        self.cursor = len(self.value)

    def __str__(self) -> str:
        return self.value

    def reset(self) -> None:
        self.value = ""
        self.cursor = 0

    def handle_key(self, key: KeyEvent) -> bool:
        """Apply an editing key; return whether the text or cursor changed."""
        code = key.code
        if code is Key.CHAR and key.ch is not None:
            self.value = self.value[: self.cursor] + key.ch + self.value[self.cursor :]
            self.cursor += 1
            return True
        if code is Key.BACKSPACE:
            if self.cursor == 0:
                return False
            self.value = self.value[: self.cursor - 1] + self.value[self.cursor :]
            self.cursor -= 1
            return True
        if code is Key.DELETE:
            if self.cursor >= len(self.value):
                return False
            self.value = self.value[: self.cursor] + self.value[self.cursor + 1 :]
            return True
        targets = {
            Key.LEFT: max(self.cursor - 1, 0),
            Key.RIGHT: min(self.cursor + 1, len(self.value)),
            Key.HOME: 0,
            Key.END: len(self.value),
        }
        if code in targets:
            moved = targets[code] != self.cursor
            self.cursor = targets[code]
            return moved
        return False