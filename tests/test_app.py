from thesaurust.app import App
from thesaurust.models import Definition, InputMode, Meaning, Thesaurus


def mock_app_in(mode):
    app = App()
    app.input_mode = mode
    return app


def mock_results_with(meanings):
    return [Thesaurus(word="mock", meanings=meanings)]


def test_default_app():
    app = App()
    assert app.input_mode is InputMode.NORMAL
    assert not app.should_quit
    assert app.results == []


def test_quit():
    app = App()
    app.quit()
    assert app.should_quit


def test_update_part_of_speech_list():
    app = mock_app_in(InputMode.NORMAL)
    parts = ["noun", "verb", "adjective"]
    app.results = mock_results_with([Meaning(p, None) for p in parts])
    app.update_part_of_speech_list()
    assert len(app.part_of_speech_list.items) == len(parts)
    assert app.part_of_speech_list.selected == 0


def test_update_all():
    app = mock_app_in(InputMode.NORMAL)
    definitions = [
        Definition(definition="Definition 1"),
        Definition(definition="Definition 2"),
        Definition(definition="Definition 3"),
    ]
    app.results = mock_results_with([Meaning("noun", definitions)])
    app.update_all()
    assert len(app.definition_list.items) == len(definitions)
    assert app.definition_list.selected == 0


def test_update_synonym_list_follows_definition():
    definitions = [
        Definition(definition="a", synonyms=["alpha"]),
        Definition(definition="b", synonyms=["beta", "bravo"]),
    ]
    app = App(results=mock_results_with([Meaning("noun", definitions)]))
    app.update_all()
    assert app.synonym_list.items == ["alpha"]
    app.definition_list.down()
    app.update_synonym_list()
    assert app.synonym_list.items == ["beta", "bravo"]


def test_update_synonym_list_without_synonyms():
    app = App(results=mock_results_with([Meaning("noun", [Definition("a")])]))
    app.update_all()
    assert app.synonym_list.items == []


def test_updates_without_results_change_nothing():
    app = App()
    app.update_all()
    assert app.part_of_speech_list.items == []
    assert app.definition_list.selected is None


def test_instructions_in_normal_mode():
    assert mock_app_in(InputMode.NORMAL).update_instructions() == "/: Insert"


def test_instructions_for_word_with_single_part_of_speech():
    app = mock_app_in(InputMode.NORMAL)
    app.results = mock_results_with([Meaning("noun", None)])
    app.update_part_of_speech_list()
    assert app.update_instructions() == "l, h: Change definition  /: Insert"


def test_instructions_in_normal_mode_with_results():
    app = mock_app_in(InputMode.NORMAL)
    app.results = mock_results_with([Meaning("noun", None)])
    assert app.results
    assert app.update_instructions() == "j, k: Change part of speech  /: Insert"


def test_instructions_in_editing_mode():
    app = mock_app_in(InputMode.INSERT)
    assert app.update_instructions() == "<ENTER>: Search  <ESC>: Exit"


def test_instructions_in_part_of_speech_selection_mode():
    app = mock_app_in(InputMode.SELECT_PART_OF_SPEECH)
    assert app.update_instructions() == "<ENTER>: Select"


def test_instructions_in_definition_selection_mode():
    app = mock_app_in(InputMode.SELECT_DEFINITION)
    assert app.update_instructions() == "l, h: Change definition  /: Insert"