"""
Word routes: /api/words
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from wordbook.core.lookup import DefinitionLookupError, meanings_to_json
from wordbook.core.words import WordStore
from wordbook.server.deps import get_lookup, get_word_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/words", tags=["words"])


class CreateWordRequest(BaseModel):
    word: str
    definition: str


class LookupWordRequest(BaseModel):
    word: str


@router.get("")
async def list_words(store: WordStore = Depends(get_word_store)):
    """List all words in ascending id order."""
    words = store.list_all()
    logger.info("Listing %d words", len(words))
    return {"words": [w.to_dict() for w in words]}


@router.post("")
async def create_word(req: CreateWordRequest, store: WordStore = Depends(get_word_store)):
    """Add a word with a caller-supplied definition."""
    try:
        entry = store.add(req.word, req.definition)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return entry.to_dict()


@router.post("/lookup")
async def create_word_from_lookup(
    req: LookupWordRequest,
    store: WordStore = Depends(get_word_store),
    lookup=Depends(get_lookup),
):
    """Look up a definition and store the word with it."""
    word = req.word.strip()
    if not word:
        raise HTTPException(status_code=400, detail="Word must not be empty")

    try:
        meanings = await lookup(word)
    except DefinitionLookupError as e:
        logger.error("%s", e)
        raise HTTPException(status_code=502, detail=str(e))

    if not meanings:
        raise HTTPException(status_code=404, detail=f"Definition not found via API for word: {word}")

    entry = store.add(word, meanings_to_json(meanings))
    return entry.to_dict()


@router.delete("/{word_id}")
async def delete_word(word_id: int, store: WordStore = Depends(get_word_store)):
    """Delete a word by id."""
    if not store.delete(word_id):
        raise HTTPException(status_code=404, detail=f"Word with ID {word_id} not found for deletion.")
    return {"deleted": word_id}
