"""Screen layout: turns the application state into positioned panels."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass, field
from enum import Enum, auto

from thesaurust.app import App
from thesaurust.models import Definition, InputMode

BANNER = r"""
_____ _                                          _   
|_   _| |__   ___  ___  __ _ _   _ _ __ _   _ ___| |_ 
  | | | '_ \ / _ \/ __|/ _` | | | | '__| | | / __| __|
  | | | | | |  __/\__ \ (_| | |_| | |  | |_| \__ \ |_ 
  |_| |_| |_|\___||___/\__,_|\__,_|_|   \__,_|___/\__|
  """


class Color(Enum):
    """Foreground colours used by the panels."""

    GREEN = auto()
    YELLOW = auto()


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int
    y: int
    width: int
    height: int

    def shrink(self, horizontal: int = 0, vertical: int = 0) -> Rect:
        """Return the rectangle with margins removed from each side."""
        return Rect(
            self.x + horizontal,
            self.y + vertical,
            max(self.width - 2 * horizontal, 0),
            max(self.height - 2 * vertical, 0),
        )


@dataclass
class Panel:
    """A block of text to draw at a place on the screen."""

    title: str | None
    area: Rect
    lines: list[str] = field(default_factory=list)
    color: Color = Color.GREEN
    bordered: bool = True
    centered: bool = False
    italic: bool = False
    highlighted: int | None = None

    @property
    def inner(self) -> Rect:
        """The area left for text once the border is drawn."""
        return self.area.shrink(1, 1) if self.bordered else self.area


_LENGTH, _MIN, _PERCENT = "length", "min", "percent"


def _split(area: Rect, vertical: bool, constraints: list[tuple[str, int]]) -> list[Rect]:
    total = area.height if vertical else area.width
    sizes: list[int] = []
    remaining = total
    for kind, value in constraints:
        wanted = int(total * value / 100 + 0.5) if kind == _PERCENT else value
        size = min(wanted, remaining)
        sizes.append(size)
        remaining -= size
    if remaining > 0 and sizes:
        kinds = [kind for kind, _ in constraints]
        grow = kinds.index(_MIN) if _MIN in kinds else len(sizes) - 1
        sizes[grow] += remaining

    rects = []
    offset = area.y if vertical else area.x
    for size in sizes:
        if vertical:
            rects.append(Rect(area.x, offset, area.width, size))
        else:
            rects.append(Rect(offset, area.y, size, area.height))
        offset += size
    return rects


def _wrap(text: str, width: int) -> list[str]:
    if width <= 0:
        return []
    return textwrap.wrap(text, width)


def footer_text(instructions: str) -> str:
    """Text for a footer line; ``"default"`` stands for the quit hint."""
    return "q: Quit" if instructions == "default" else instructions


def definition_title(app: App, definitions: list[Definition]) -> str:
    """Title of the definition panel, showing position among the definitions."""
    selected = app.definition_list.selected
    if selected is None:
        raise ValueError("no definition is selected")
    return f"Definition[{selected + 1}/{len(definitions)}]"


def _mode_color(app: App, active: InputMode) -> Color:
    return Color.YELLOW if app.input_mode is active else Color.GREEN


def _right_panels(app: App, areas: list[Rect]) -> list[Panel]:
    pos_idx = app.part_of_speech_list.selected or 0
    def_idx = app.definition_list.selected or 0
    _, definitions = app.results[0].meanings_at(pos_idx)
    chosen = definitions[def_idx]
    definition_panel = Panel(
        definition_title(app, definitions),
        areas[0],
        color=_mode_color(app, InputMode.SELECT_DEFINITION),
    )
    definition_panel.lines = _wrap(chosen.definition or "", definition_panel.inner.width)
    example_panel = Panel("Example", areas[1], italic=True)
    example_panel.lines = _wrap(chosen.example or "", example_panel.inner.width)
    return [definition_panel, example_panel]


def render(app: App, width: int, height: int) -> list[Panel]:
    """Lay the application out on a screen of the given size."""
    screen = Rect(0, 0, width, height)
    main = _split(
        screen.shrink(2, 2),
        True,
        [(_LENGTH, 3), (_LENGTH, 9), (_LENGTH, 9), (_MIN, 1)],
    )
    upper = _split(main[0].shrink(1, 0), False, [(_PERCENT, 100)])
    lower = _split(
        main[1].shrink(1, 0), False, [(_PERCENT, 20), (_PERCENT, 60), (_PERCENT, 20)]
    )
    banner = _split(main[1].shrink(1, 1), True, [(_PERCENT, 100)])
    right = _split(lower[1], True, [(_PERCENT, 50), (_PERCENT, 50)])
    footer = _split(
        main[2].shrink(1, 0), True, [(_PERCENT, 80), (_PERCENT, 10), (_PERCENT, 10)]
    )

    search = Panel("Search", upper[0], color=_mode_color(app, InputMode.INSERT))
    search.lines = _wrap(str(app.input), search.inner.width)
    panels = [search]

    if app.results:
        if app.results[0].meanings is not None:
            panels.append(
                Panel(
                    "Part Of Speech",
                    lower[0],
                    list(app.part_of_speech_list.items),
                    color=_mode_color(app, InputMode.SELECT_PART_OF_SPEECH),
                    highlighted=app.part_of_speech_list.selected,
                )
            )
        panels.extend(_right_panels(app, right))
        panels.append(
            Panel(
                "Synonyms",
                lower[2],
                list(app.synonym_list.items),
                highlighted=app.synonym_list.selected,
            )
        )
    else:
        panels.append(
            Panel(None, banner[0], BANNER.split("\n"), bordered=False, centered=True)
        )

    panels.append(
        Panel(None, footer[1], [footer_text(app.update_instructions())], bordered=False)
    )
    panels.append(Panel(None, footer[2], [footer_text("default")], bordered=False))
    return panels