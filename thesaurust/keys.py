"""Keyboard handling for each input mode."""

from __future__ import annotations

from collections.abc import Callable

from thesaurust.app import App
from thesaurust.client import look_up, spellcheck
from thesaurust.models import InputMode
from thesaurust.text_input import Key, KeyEvent, TextInput


def _matches(key: KeyEvent, chars: str = "", codes: tuple[Key, ...] = ()) -> bool:
    return (bool(chars) and key.is_char(*chars)) or key.code in codes


def _handle_normal(app: App, key: KeyEvent) -> None:
    if _matches(key, "q", (Key.ESC,)):
        app.quit()
    elif key.is_char("j", "k") and app.results:
        app.input_mode = InputMode.SELECT_PART_OF_SPEECH
    elif key.is_char("l", "h") and len(app.part_of_speech_list.items) == 1:
        app.input_mode = InputMode.SELECT_DEFINITION
    elif key.is_char("/"):
        app.input_mode = InputMode.INSERT
        app.input.reset()


def _handle_editing(app: App, key: KeyEvent) -> None:
    if key.code is Key.ENTER:
        app.input_mode = InputMode.NORMAL
        word = spellcheck(str(app.input))
        results = look_up(word)
        # Show the corrected spelling in the search bar.
        app.input = TextInput(word)
        app.results = list(results)
        app.update_all()
    elif key.code is Key.ESC:
        app.input_mode = InputMode.NORMAL
    else:
        app.input.handle_key(key)


def _handle_select_part_of_speech(app: App, key: KeyEvent) -> None:
    if _matches(key, "j", (Key.DOWN,)):
        app.part_of_speech_list.down()
    elif _matches(key, "k", (Key.UP,)):
        app.part_of_speech_list.up()
    elif _matches(key, "q", (Key.ESC,)):
        app.input_mode = InputMode.NORMAL
    elif key.code is Key.ENTER:
        app.input_mode = InputMode.SELECT_DEFINITION
        app.update_definition_list()
        app.update_synonym_list()


def _handle_select_definition(app: App, key: KeyEvent) -> None:
    if _matches(key, "lj", (Key.RIGHT, Key.DOWN)):
        app.definition_list.down()
        app.update_synonym_list()
    elif _matches(key, "hk", (Key.LEFT, Key.UP)):
        app.definition_list.up()
        app.update_synonym_list()
    elif _matches(key, "q", (Key.ESC,)):
        app.input_mode = InputMode.SELECT_PART_OF_SPEECH
        app.definition_list.selected = 0
        app.update_synonym_list()
    elif key.is_char("/"):
        app.input_mode = InputMode.INSERT
        app.input.reset()


_HANDLERS: dict[InputMode, Callable[[App, KeyEvent], None]] = {
    InputMode.NORMAL: _handle_normal,
    InputMode.INSERT: _handle_editing,
    InputMode.SELECT_PART_OF_SPEECH: _handle_select_part_of_speech,
    InputMode.SELECT_DEFINITION: _handle_select_definition,
}


def key_handler(app: App, key: KeyEvent) -> None:
    """Apply a key press to the application according to its input mode."""
    _HANDLERS[app.input_mode](app, key)