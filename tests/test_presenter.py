"""Tests for console rendering."""

import json

from rich.console import Console

from wordbook.cli.presenter import ConsolePresenter, summarize_definition
from wordbook.core.models import BusyState, LoadStatus, ViewState, WordEntry


def make_presenter(**kwargs):
    console = Console(record=True, width=120, color_system=None)
    return ConsolePresenter(console, **kwargs)


def test_renders_entries():
    p = make_presenter()
    p.render_state(ViewState((WordEntry(1, "lexicon", "..."),), LoadStatus.IDLE))

    out = p.console.export_text()
    assert "lexicon" in out
    assert "1" in out


def test_empty_message():
    p = make_presenter()
    p.render_state(ViewState())
    assert "No words found" in p.console.export_text()


def test_error_keeps_stale_list_visible():
    p = make_presenter()
    p.render_state(ViewState((WordEntry(1, "lexicon", ""),), LoadStatus.ERROR, "connection refused"))

    out = p.console.export_text()
    assert "connection refused" in out
    assert "lexicon" in out


def test_quiet_suppresses_output():
    p = make_presenter()
    p.quiet = True
    p.render_state(ViewState())
    p.render_busy(BusyState(adding=True))
    assert p.console.export_text() == ""


def test_summarize_json_definition():
    definition = json.dumps([{"partOfSpeech": "noun", "definitions": [{"definition": "A dictionary."}]}])
    assert summarize_definition(definition) == "(noun) A dictionary."


def test_summarize_plain_definition():
    assert summarize_definition("plain  text\nhere") == "plain text here"
    assert summarize_definition("x" * 100, width=10) == "xxxxxxx..."


def test_show_entry_prints_every_meaning_and_example():
    definition = json.dumps([
        {"partOfSpeech": "noun", "definitions": [
            {"definition": "The vocabulary of a language.", "example": "the English lexicon"},
            {"definition": "A dictionary.", "example": None},
        ]},
        {"partOfSpeech": "verb", "definitions": [{"definition": "To compile [a list]."}]},
    ])
    p = make_presenter()
    p.show_entry(WordEntry(3, "lexicon", definition))

    out = p.console.export_text()
    assert "lexicon" in out
    assert "ID 3" in out
    assert "noun" in out and "verb" in out
    assert "1. The vocabulary of a language." in out
    assert "2. A dictionary." in out
    assert '"the English lexicon"' in out
    assert "1. To compile [a list]." in out


def test_show_entry_falls_back_to_raw_text():
    p = make_presenter()
    p.show_entry(WordEntry(4, "zeal", "great energy [in pursuit] of a cause"))

    out = p.console.export_text()
    assert "zeal" in out
    assert "great energy [in pursuit] of a cause" in out


def test_show_entry_raw_json_that_is_not_meanings():
    p = make_presenter()
    p.show_entry(WordEntry(5, "odd", '{"note": "kept as is"}'))

    assert '{"note": "kept as is"}' in p.console.export_text()
