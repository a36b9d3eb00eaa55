"""
Shared dependencies for routes.
"""

import hashlib
from functools import lru_cache
from pathlib import Path

import redis

from wnlemma.core.cache import LemmaCache
from wnlemma.core.category import Category
from wnlemma.core.config import Settings, get_settings
from wnlemma.core.stemmer import WordnetStemmer


@lru_cache
def get_stemmer() -> WordnetStemmer:
    return WordnetStemmer.load(get_settings().WORDNET_DIR)


def get_redis() -> redis.Redis:
    return redis.Redis.from_url(get_settings().REDIS_URL)


def cache_prefix(settings: Settings) -> str:
    """CACHE_PREFIX tagged with the WordNet directory the lemmas come from."""
    basedir = str(Path(settings.WORDNET_DIR).expanduser().resolve())
    tag = hashlib.sha1(basedir.encode()).hexdigest()[:8]
    return f"{settings.CACHE_PREFIX}:{tag}"


def get_cache() -> LemmaCache | None:
    settings = get_settings()
    if not settings.CACHE_ENABLED:
        return None
    return LemmaCache(get_redis(), prefix=cache_prefix(settings))


def cached_lemma(stemmer: WordnetStemmer, cache: LemmaCache | None, category: Category, word: str) -> str:
    if cache is None:
        return stemmer.lemma(category, word)
    lemma = cache.get(category, word)
    if lemma is None:
        lemma = stemmer.lemma(category, word)
        cache.put(category, word, lemma)
    return lemma
