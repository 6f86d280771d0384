"""Application state and the updates that keep its lists in step."""

from __future__ import annotations

from dataclasses import dataclass, field

from thesaurust.models import InputMode, StatefulList, Thesaurus
from thesaurust.text_input import TextInput

_CHANGE_DEFINITION = "l, h: Change definition  /: Insert"


@dataclass
class App:
    """Everything the interface shows and the keyboard changes."""

    should_quit: bool = False
    input: TextInput = field(default_factory=TextInput)
    input_mode: InputMode = InputMode.NORMAL
    results: list[Thesaurus] = field(default_factory=list)
    part_of_speech_list: StatefulList[str] = field(default_factory=StatefulList)
    definition_list: StatefulList[str] = field(default_factory=StatefulList)
    synonym_list: StatefulList[str] = field(default_factory=StatefulList)

    def quit(self) -> None:
        self.should_quit = True

    def update_instructions(self) -> str:
        """Return the key help for the current mode."""
        mode = self.input_mode
        if mode is InputMode.NORMAL:
            if len(self.part_of_speech_list.items) == 1:
                return _CHANGE_DEFINITION
            if self.results:
                return "j, k: Change part of speech  /: Insert"
            return "/: Insert"
        if mode is InputMode.INSERT:
            return "<ENTER>: Search  <ESC>: Exit"
        if mode is InputMode.SELECT_PART_OF_SPEECH:
            return "<ENTER>: Select"
        return _CHANGE_DEFINITION

    def update_all(self) -> None:
        # Each list depends on the selection in the one before it.
        self.update_part_of_speech_list()
        self.update_definition_list()
        self.update_synonym_list()

    def update_part_of_speech_list(self) -> None:
        if not self.results:
            return
        meanings = self.results[0].meanings
        if meanings is not None:
            self.part_of_speech_list = StatefulList.with_items(
                m.part_of_speech or "" for m in meanings
            )
            self.part_of_speech_list.selected = 0

    def update_definition_list(self) -> None:
        if not self.results:
            return
        idx = self.part_of_speech_list.selected
        if idx is not None:
            _, definitions = self.results[0].meanings_at(idx)
            self.definition_list = StatefulList.with_items(
                d.definition or "" for d in definitions
            )
            self.definition_list.selected = 0

    def update_synonym_list(self) -> None:
        if not self.results:
            return
        pos_idx = self.part_of_speech_list.selected or 0
        _, definitions = self.results[0].meanings_at(pos_idx)
        def_idx = self.definition_list.selected or 0
        synonyms = definitions[def_idx].synonyms
        self.synonym_list = StatefulList.with_items(synonyms or [])