"""
Unit tests using FastAPI TestClient (no separate server needed).
"""

import pytest
from fastapi.testclient import TestClient

from wnlemma.core.wordnet_files import WordnetFileNotFound
from wnlemma.core.config import Settings
from wnlemma.server.deps import cache_prefix, get_cache, get_stemmer
from wnlemma.server.main import app


class FakeCache:
    def __init__(self):
        self.data = {}

    def get(self, category, word):
        return self.data.get((category, word))

    def put(self, category, word, lemma):
        self.data[(category, word)] = lemma


@pytest.fixture
def client(stemmer):
    app.dependency_overrides[get_stemmer] = lambda: stemmer
    app.dependency_overrides[get_cache] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["name"] == "wnlemma API"


class TestLemma:
    def test_lemma(self, client):
        r = client.get("/api/lemma/noun/berries")
        assert r.status_code == 200
        assert r.json() == {"category": "noun", "word": "berries", "lemma": "berry"}

    def test_pos_letter(self, client):
        r = client.get("/api/lemma/v/rode")
        assert r.status_code == 200
        assert r.json()["category"] == "verb"
        assert r.json()["lemma"] == "ride"

    def test_unknown_word_falls_back(self, client):
        r = client.get("/api/lemma/noun/xyzzy")
        assert r.json()["lemma"] == "xyzzy"

    def test_word_with_reserved_characters(self, client):
        r = client.get("/api/lemma/noun/and%2For%3F")
        assert r.status_code == 200
        assert r.json()["word"] == "and/or?"
        assert r.json()["lemma"] == "and/or?"

    def test_unknown_category(self, client):
        r = client.get("/api/lemma/pronoun/them")
        assert r.status_code == 400
        assert "Unknown category" in r.json()["detail"]

    def test_phrase(self, client):
        r = client.post("/api/lemma/phrase", json={"category": "noun", "phrase": "Dogs and Geese"})
        assert r.status_code == 200
        assert r.json()["lemmas"] == "dog and goose"

    def test_uses_cache(self, client, stemmer):
        cache = FakeCache()
        app.dependency_overrides[get_cache] = lambda: cache

        r = client.get("/api/lemma/noun/dogs")
        assert r.json()["lemma"] == "dog"
        assert list(cache.data.values()) == ["dog"]

        # cached value is served as-is
        key = next(iter(cache.data))
        cache.data[key] = "cached-dog"
        r = client.get("/api/lemma/noun/dogs")
        assert r.json()["lemma"] == "cached-dog"


class TestAnalyze:
    def test_candidates(self, client):
        r = client.get("/api/analyze/noun/axes")
        assert r.status_code == 200
        assert r.json()["candidates"] == ["ax", "axis"]

    def test_no_candidates(self, client):
        r = client.get("/api/analyze/adv/faster")
        assert r.json()["candidates"] == []


class TestInfo:
    def test_categories(self, client):
        r = client.get("/api/categories")
        cats = {c["name"]: c["rule_count"] for c in r.json()["categories"]}
        assert cats == {"noun": 9, "verb": 8, "adj": 4, "adv": 0}

    def test_stats(self, client):
        r = client.get("/api/stats")
        assert r.json()["stats"]["verb"]["exceptions"] == 2


def test_wordnet_unavailable(tmp_path):
    def missing():
        raise WordnetFileNotFound(tmp_path / "index.noun")

    app.dependency_overrides[get_stemmer] = missing
    app.dependency_overrides[get_cache] = lambda: None
    try:
        r = TestClient(app).get("/api/lemma/noun/dogs")
    finally:
        app.dependency_overrides.clear()

    assert r.status_code == 503
    assert "index.noun" in r.json()["detail"]


def test_cache_prefix_depends_on_wordnet_dir(tmp_path):
    a = Settings(WORDNET_DIR=str(tmp_path / "wn-3.0"), CACHE_PREFIX="lem")
    b = Settings(WORDNET_DIR=str(tmp_path / "wn-3.1"), CACHE_PREFIX="lem")

    assert cache_prefix(a).startswith("lem:")
    assert cache_prefix(a) == cache_prefix(Settings(WORDNET_DIR=str(tmp_path / "wn-3.0"), CACHE_PREFIX="lem"))
    assert cache_prefix(a) != cache_prefix(b)
