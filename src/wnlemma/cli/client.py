"""
HTTP client for the wnlemma API.
"""

from urllib.parse import quote

import httpx

from wnlemma.core.config import get_settings


def _url(path: str) -> str:
    return f"{get_settings().API_URL}{path}"


def get_lemma(category: str, word: str) -> dict:
    r = httpx.get(_url(f"/lemma/{category}/{quote(word, safe='')}"))
    r.raise_for_status()
    return r.json()


def analyze(category: str, word: str) -> dict:
    r = httpx.get(_url(f"/analyze/{category}/{quote(word, safe='')}"))
    r.raise_for_status()
    return r.json()


def lemma_phrase(category: str, phrase: str) -> dict:
    r = httpx.post(_url("/lemma/phrase"), json={"category": category, "phrase": phrase})
    r.raise_for_status()
    return r.json()


def get_stats() -> dict:
    r = httpx.get(_url("/stats"))
    r.raise_for_status()
    return r.json()["stats"]
