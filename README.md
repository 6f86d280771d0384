# thesaurust

A dictionary and thesaurus that runs in your terminal.

Type a word, and thesaurust checks its spelling, looks it up, and shows
its parts of speech, definitions, an example sentence and synonyms.
A misspelled word is replaced by the closest suggestion from the
spelling service before the lookup, and the search bar shows the
corrected word.

Words are looked up in English over the network: spelling suggestions
come from `https://api.datamuse.com` and definitions from
`https://api.dictionaryapi.dev`.

## Installation

```
pip install .
```

## Usage

```
thesaurust
```

The command takes no options apart from `--help`. It draws a full-screen
interface with `curses`: a search bar at the top and, once a word has
been looked up, panels for the part of speech, the definition (titled
with its position, such as `Definition[2/5]`), an example and the
synonyms. Before the first lookup a banner is shown instead. The footer
always shows the keys you can use right now, and `q: Quit`.

If a lookup fails (no connection, an unexpected status code, a word with
no suggestions), the interface closes, the error is printed to standard
error and the command exits with status 1.

### Keys

Normal mode:

| Key        | Action                                                |
|------------|-------------------------------------------------------|
| `/`        | Clear the search bar and start typing a word          |
| `j`, `k`   | Choose a part of speech (when there are results)      |
| `l`, `h`   | Browse definitions (when there is one part of speech) |
| `q`, `Esc` | Quit                                                  |

Typing a word:

| Key                         | Action                     |
|-----------------------------|----------------------------|
| `Enter`                     | Search                     |
| `Esc`                       | Stop typing                |
| `Backspace`, `Delete`       | Remove a character         |
| `Left`, `Right`, `Home`, `End` | Move the cursor         |

Choosing a part of speech:

| Key                  | Action                        |
|----------------------|-------------------------------|
| `j`/`Down`, `k`/`Up` | Move through the list, wrapping at the ends |
| `Enter`              | Select and browse definitions |
| `q`, `Esc`           | Back to normal mode           |

Browsing definitions:

| Key                    | Action                                   |
|------------------------|------------------------------------------|
| `l`/`Right`/`j`/`Down` | Next definition                          |
| `h`/`Left`/`k`/`Up`    | Previous definition                      |
| `/`                    | Search for another word                  |
| `q`, `Esc`             | Back to the part of speech list, with the first definition selected |

## Using it as a library

The lookup functions in `thesaurust.client` can be used without the
terminal interface:

```python
from thesaurust.client import look_up, spellcheck, suggest

word = spellcheck("coffeee")      # the first suggestion, e.g. "coffee"
suggestions = suggest("coffee")   # list of Suggestion(word, score)
entries = look_up(word)           # list of Thesaurus entries
part_of_speech, definitions = entries[0].meanings_at(0)
print(part_of_speech, definitions[0].definition, definitions[0].synonyms)
```

`look_up_handler(word, url)` and `suggest_handler(word, url)` do the same
against a service at another base URL.

The interface state lives in `thesaurust.app.App`; `thesaurust.keys.key_handler`
applies a `thesaurust.text_input.KeyEvent` to it, and `thesaurust.ui.render`
lays it out as a list of `Panel` objects for a screen of a given size, so
the state can be driven and inspected without a terminal.

Failures raise subclasses of `thesaurust.errors.ThesaurustError`:
`HttpRequestError`, `JsonReadError`, `BadStatusError`, `NoSuggestionError`,
`WordNotFoundError` and `TerminalError`.

## Limitations

- Every lookup needs a network connection; there is no offline dictionary
  and no cache.
- Only English entries are looked up.
- Only the first entry returned for a word is shown.
- The terminal interface needs Python's `curses` module, which standard
  Windows builds of Python do not include.

## Running the tests

```
pip install ".[test]"
pytest
```