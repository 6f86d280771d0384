import pytest

from thesaurust.app import App
from thesaurust.models import Definition, InputMode, Meaning, Thesaurus
from thesaurust.text_input import TextInput
from thesaurust.ui import Color, Panel, Rect, definition_title, footer_text, render


def _app_with_results() -> App:
    app = App()
    app.results = [
        Thesaurus(
            word="mock",
            meanings=[
                Meaning(
                    part_of_speech="noun",
                    definitions=[
                        Definition(
                            definition="a long definition " * 10,
                            example="an example",
                            synonyms=["alpha", "beta"],
                        ),
                        Definition(definition="second"),
                    ],
                ),
                Meaning(part_of_speech="verb", definitions=[Definition("act")]),
            ],
        )
    ]
    app.update_all()
    return app


def _by_title(panels: list[Panel]) -> dict:
    return {p.title: p for p in panels if p.title is not None}


def test_footer_text_default_is_quit_hint():
    assert footer_text("default") == "q: Quit"


def test_footer_text_passes_instructions_through():
    assert footer_text("/: Insert") == "/: Insert"


def test_definition_title_counts_from_one():
    app = _app_with_results()
    _, definitions = app.results[0].meanings_at(0)
    assert definition_title(app, definitions) == "Definition[1/2]"


def test_definition_title_without_selection_raises():
    with pytest.raises(ValueError):
        definition_title(App(), [])


def test_rect_shrink_removes_margins():
    assert Rect(0, 0, 10, 6).shrink(1, 2) == Rect(1, 2, 8, 2)


def test_render_without_results_shows_banner_and_hints():
    panels = render(App(), 80, 30)
    assert [p.title for p in panels if p.title] == ["Search"]
    banner = [p for p in panels if p.centered]
    assert len(banner) == 1
    assert any("|_   _|" in line for line in banner[0].lines)
    footer_lines = [p.lines for p in panels if not p.bordered and not p.centered]
    assert footer_lines == [["/: Insert"], ["q: Quit"]]


def test_render_with_results_has_all_blocks():
    panels = _by_title(render(_app_with_results(), 100, 40))
    assert set(panels) == {
        "Search",
        "Part Of Speech",
        "Definition[1/2]",
        "Example",
        "Synonyms",
    }
    assert panels["Part Of Speech"].lines == ["noun", "verb"]
    assert panels["Part Of Speech"].highlighted == 0
    assert panels["Synonyms"].lines == ["alpha", "beta"]
    assert panels["Example"].lines == ["an example"]
    assert panels["Example"].italic is True


def test_render_wraps_definition_to_panel_width():
    panel = _by_title(render(_app_with_results(), 100, 40))["Definition[1/2]"]
    assert len(panel.lines) > 1
    assert all(len(line) <= panel.inner.width for line in panel.lines)


@pytest.mark.parametrize("size", [(80, 30), (120, 50), (40, 20)])
def test_render_keeps_panels_on_screen(size):
    width, height = size
    for panel in render(_app_with_results(), width, height):
        assert panel.area.x >= 0 and panel.area.y >= 0
        assert panel.area.x + panel.area.width <= width
        assert panel.area.y + panel.area.height <= height


def test_search_panel_shows_input_and_highlights_in_insert_mode():
    app = App(input=TextInput("coffee"), input_mode=InputMode.INSERT)
    search = _by_title(render(app, 80, 30))["Search"]
    assert search.lines == ["coffee"]
    assert search.color is Color.YELLOW
    app.input_mode = InputMode.NORMAL
    assert _by_title(render(app, 80, 30))["Search"].color is Color.GREEN


def test_part_of_speech_panel_highlighted_in_selection_mode():
    app = _app_with_results()
    app.input_mode = InputMode.SELECT_PART_OF_SPEECH
    panels = _by_title(render(app, 100, 40))
    assert panels["Part Of Speech"].color is Color.YELLOW
    assert panels["Definition[1/2]"].color is Color.GREEN