"""Terminal front end: draws the panels with curses and reads keys."""

from __future__ import annotations

import argparse
import curses
import locale
import sys

from thesaurust.app import App
from thesaurust.errors import TerminalError, ThesaurustError
from thesaurust.keys import key_handler
from thesaurust.text_input import Key, KeyEvent
from thesaurust.ui import Color, Panel, render

_SPECIAL_KEYS: dict[int, Key] = {
    10: Key.ENTER,
    13: Key.ENTER,
    curses.KEY_ENTER: Key.ENTER,
    27: Key.ESC,
    8: Key.BACKSPACE,
    127: Key.BACKSPACE,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
    curses.KEY_DC: Key.DELETE,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_HOME: Key.HOME,
    curses.KEY_END: Key.END,
    9: Key.TAB,
}

_PAIRS = {Color.GREEN: 1, Color.YELLOW: 2}
_HIGHLIGHT_PAIR = 3


def translate_key(code: int | str) -> KeyEvent | None:
    """Turn a curses key code or character into a key event, if it is one."""
    if isinstance(code, str):
        if len(code) != 1:
            return None
        if ord(code) in _SPECIAL_KEYS:
            return KeyEvent.special(_SPECIAL_KEYS[ord(code)])
        return KeyEvent.char(code) if code.isprintable() else None
    if code in _SPECIAL_KEYS:
        return KeyEvent.special(_SPECIAL_KEYS[code])
    if 32 <= code < 127:
        return KeyEvent.char(chr(code))
    return None


class Tui:
    """A full-screen terminal session."""

    def __init__(self, screen: curses.window | None = None) -> None:
        self._screen = screen
        self._colors = False

    def __enter__(self) -> Tui:
        self.enter()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.exit()

    def enter(self) -> None:
        """Take over the terminal."""
        locale.setlocale(locale.LC_ALL, "")
        try:
            if self._screen is None:
                self._screen = curses.initscr()
            curses.noecho()
            curses.cbreak()
            self._screen.keypad(True)
            self._init_colors()
            try:
                curses.curs_set(0)
            except curses.error:
                pass
            self._screen.clear()
        except curses.error as exc:
            raise TerminalError(exc) from exc

    def exit(self) -> None:
        """Give the terminal back in the state it was found."""
        if self._screen is None:
            return
        try:
            try:
                curses.curs_set(1)
            except curses.error:
                pass
            self._screen.keypad(False)
            curses.nocbreak()
            curses.echo()
            curses.endwin()
        except curses.error as exc:
            raise TerminalError(exc) from exc
        finally:
            self._screen = None

    def draw(self, app: App) -> None:
        """Redraw the whole screen from the application state."""
        screen = self._active_screen()
        try:
            height, width = screen.getmaxyx()
            screen.erase()
            for panel in render(app, width, height):
                self._draw_panel(panel)
            screen.refresh()
        except curses.error as exc:
            raise TerminalError(exc) from exc

    def read_key(self) -> KeyEvent | None:
        """Wait for input and return it as a key event, or None for other input."""
        screen = self._active_screen()
        try:
            code = screen.get_wch()
        except curses.error:
            return None
        return translate_key(code)

    def _active_screen(self) -> curses.window:
        if self._screen is None:
            raise TerminalError("terminal is not active")
        return self._screen

    def _init_colors(self) -> None:
        if not curses.has_colors():
            return
        curses.start_color()
        background = curses.COLOR_BLACK
        try:
            curses.use_default_colors()
            background = -1
        except curses.error:
            pass
        curses.init_pair(_PAIRS[Color.GREEN], curses.COLOR_GREEN, background)
        curses.init_pair(_PAIRS[Color.YELLOW], curses.COLOR_YELLOW, background)
        curses.init_pair(_HIGHLIGHT_PAIR, curses.COLOR_BLACK, curses.COLOR_CYAN)
        self._colors = True

    def _attr(self, color: Color) -> int:
        return curses.color_pair(_PAIRS[color]) if self._colors else 0

    def _put(self, y: int, x: int, text: str, attr: int) -> None:
        screen = self._active_screen()
        height, width = screen.getmaxyx()
        if not (0 <= y < height) or not (0 <= x < width) or not text:
            return
        try:
            screen.addstr(y, x, text[: width - x], attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen.
            pass

    def _draw_panel(self, panel: Panel) -> None:
        attr = self._attr(panel.color)
        area = panel.area
        if panel.bordered and area.width >= 2 and area.height >= 2:
            inside = area.width - 2
            self._put(area.y, area.x, "┌" + "─" * inside + "┐", attr)
            for row in range(area.y + 1, area.y + area.height - 1):
                self._put(row, area.x, "│", attr)
                self._put(row, area.x + area.width - 1, "│", attr)
            self._put(area.y + area.height - 1, area.x, "└" + "─" * inside + "┘", attr)
            if panel.title:
                self._put(area.y, area.x + 1, panel.title[:inside], attr)

        inner = panel.inner
        text_attr = attr | (getattr(curses, "A_ITALIC", 0) if panel.italic else 0)
        for row, line in enumerate(panel.lines[: inner.height]):
            line = line[: inner.width]
            offset = max((inner.width - len(line)) // 2, 0) if panel.centered else 0
            line_attr = text_attr
            if row == panel.highlighted:
                line_attr = (
                    curses.color_pair(_HIGHLIGHT_PAIR) if self._colors else curses.A_REVERSE
                )
                line = line.ljust(inner.width)
            self._put(inner.y + row, inner.x + offset, line, line_attr)


def main(argv: list[str] | None = None) -> int:
    """Run the dictionary in the terminal until the user quits."""
    parser = argparse.ArgumentParser(
        prog="thesaurust", description="A terminal-based dictionary app."
    )
    parser.parse_args(argv)

    app = App()
    try:
        with Tui() as tui:
            while not app.should_quit:
                tui.draw(app)
                key = tui.read_key()
                if key is not None:
                    key_handler(app, key)
    except ThesaurustError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0