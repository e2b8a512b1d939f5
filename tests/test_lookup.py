"""Tests for the Free Dictionary API lookup."""

import json

import httpx
import pytest

from wordbook.core.lookup import (
    DefinitionLookupError,
    Meaning,
    fetch_definition,
    meanings_from_json,
    meanings_to_json,
)

API_URL = "https://dictionary.test/api/v2/entries/en"

LEXICON_RESPONSE = [
    {
        "word": "lexicon",
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [
                    {"definition": "The vocabulary of a particular language.", "example": "the English lexicon"},
                    {"definition": "A dictionary."},
                ],
            },
            {"partOfSpeech": "verb", "definitions": []},
        ],
    }
]


def http_for(status, body=None, content=None):
    def handler(request):
        if content is not None:
            return httpx.Response(status, content=content)
        return httpx.Response(status, json=body)
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_parses_first_entry_meanings():
    meanings = await fetch_definition("lexicon", API_URL, http=http_for(200, LEXICON_RESPONSE))

    assert len(meanings) == 1
    assert meanings[0].part_of_speech == "noun"
    assert meanings[0].definitions[0].example == "the English lexicon"
    assert meanings[0].definitions[1].example is None


@pytest.mark.asyncio
async def test_not_found_returns_none():
    assert await fetch_definition("qwzx", API_URL, http=http_for(404, {"title": "No Definitions Found"})) is None


@pytest.mark.asyncio
async def test_no_meanings_returns_none():
    body = [{"word": "x", "meanings": []}]
    assert await fetch_definition("x", API_URL, http=http_for(200, body)) is None


@pytest.mark.asyncio
async def test_server_error_raises():
    with pytest.raises(DefinitionLookupError):
        await fetch_definition("lexicon", API_URL, http=http_for(503, {}))


@pytest.mark.asyncio
async def test_garbage_body_raises():
    with pytest.raises(DefinitionLookupError):
        await fetch_definition("lexicon", API_URL, http=http_for(200, content=b"<html>"))


def test_meanings_json_uses_api_field_names():
    meaning = Meaning.from_dict(LEXICON_RESPONSE[0]["meanings"][0])
    data = json.loads(meanings_to_json([meaning]))

    assert data[0]["partOfSpeech"] == "noun"
    assert data[0]["definitions"][0] == {
        "definition": "The vocabulary of a particular language.",
        "example": "the English lexicon",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [
    [{"word": "x", "meanings": ["noun"]}],
    [{"word": "x", "meanings": [{"partOfSpeech": "noun", "definitions": ["a thing"]}]}],
    [{"word": "x", "meanings": {"partOfSpeech": "noun", "definitions": []}}],
    [{"word": "x", "meanings": [{"partOfSpeech": "noun", "definitions": {"definition": "a thing"}}]}],
])
async def test_unexpected_shape_raises_lookup_error(body):
    with pytest.raises(DefinitionLookupError, match="Unexpected API response shape"):
        await fetch_definition("x", API_URL, http=http_for(200, body))


def test_meanings_from_json():
    stored = meanings_to_json([Meaning.from_dict(LEXICON_RESPONSE[0]["meanings"][0])])
    meanings = meanings_from_json(stored)

    assert meanings[0].part_of_speech == "noun"
    assert len(meanings[0].definitions) == 2


@pytest.mark.parametrize("text", ["plain text", '{"not": "a list"}', '["noun"]'])
def test_meanings_from_json_rejects_other_text(text):
    with pytest.raises(ValueError):
        meanings_from_json(text)
