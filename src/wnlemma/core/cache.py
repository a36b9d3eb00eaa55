# src/wnlemma/core/cache.py
"""
Memoized lemmas, stored in Redis.

Key layout:
  <prefix>:lemma:<category>:<word>  -> lemma
"""

import redis

from wnlemma.core.category import Category


class LemmaCache:
    def __init__(self, client: redis.Redis, prefix: str = "wnlemma"):
        self.client = client
        self.prefix = prefix

    def _lemma_key(self, category: Category, word: str) -> str:
        return f"{self.prefix}:lemma:{category.label}:{word}"

    def get(self, category: Category, word: str) -> str | None:
        value = self.client.get(self._lemma_key(category, word))
        if value is None:
            return None
        return value.decode()

    def put(self, category: Category, word: str, lemma: str) -> None:
        self.client.set(self._lemma_key(category, word), lemma)

    def clear(self) -> None:
        """Drop every cached lemma under this prefix."""
        for key in self.client.scan_iter(f"{self.prefix}:lemma:*"):
            self.client.delete(key)
