"""
Lemma routes: /api/lemma, /api/analyze, /api/categories
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from wnlemma.core.category import Category
from wnlemma.core.stemmer import WordnetStemmer
from wnlemma.server.deps import cached_lemma, get_cache, get_stemmer


router = APIRouter(prefix="/api", tags=["lemmas"])


class PhraseRequest(BaseModel):
    category: str
    phrase: str


def parse_category(value: str) -> Category:
    try:
        return Category.parse(value)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/categories")
async def list_categories(stemmer: WordnetStemmer = Depends(get_stemmer)):
    """List categories and how many suffix rules each has."""
    return {
        "categories": [
            {"id": c.value, "name": c.label, "rule_count": len(stemmer.substitutions.get(c, ()))}
            for c in Category
        ]
    }


@router.get("/stats")
async def get_stats(stemmer: WordnetStemmer = Depends(get_stemmer)):
    return {"stats": stemmer.stats()}


@router.get("/lemma/{category}/{word:path}")
async def get_lemma(category: str, word: str, stemmer: WordnetStemmer = Depends(get_stemmer), cache=Depends(get_cache)):
    """Best base form for a word (the word itself if nothing is known)."""
    cat = parse_category(category)
    return {"category": cat.label, "word": word, "lemma": cached_lemma(stemmer, cache, cat, word)}


@router.get("/analyze/{category}/{word:path}")
async def analyze_word(category: str, word: str, stemmer: WordnetStemmer = Depends(get_stemmer)):
    """All known base forms, in the order morphy found them."""
    cat = parse_category(category)
    return {"category": cat.label, "word": word, "candidates": stemmer.analyze(cat, word)}


@router.post("/lemma/phrase")
async def lemmatize_phrase(req: PhraseRequest, stemmer: WordnetStemmer = Depends(get_stemmer), cache=Depends(get_cache)):
    cat = parse_category(req.category)
    lemmas = [cached_lemma(stemmer, cache, cat, w) for w in req.phrase.lower().split()]
    return {"category": cat.label, "phrase": req.phrase, "lemmas": " ".join(lemmas)}
