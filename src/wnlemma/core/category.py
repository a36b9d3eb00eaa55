# src/wnlemma/core/category.py
"""
Grammatical categories understood by the lemmatizer.

Each category has a stable integer id and a lowercase name that
WordNet uses for its data files ("index.noun", "noun.exc", ...).
"""

from enum import Enum


class Category(Enum):
    NOUN = 0
    VERB = 1
    ADJ = 2
    ADV = 3

    @property
    def label(self) -> str:
        return self.name.lower()

    @property
    def index_file(self) -> str:
        return f"index.{self.label}"

    @property
    def exceptions_file(self) -> str:
        return f"{self.label}.exc"

    @classmethod
    def parse(cls, value: str) -> "Category":
        """Accept 'noun', 'NOUN', or a WordNet POS letter ('n', 'v', 'a', 's', 'r')."""
        key = value.strip().lower()
        if key in POS_LETTERS:
            return POS_LETTERS[key]
        for category in cls:
            if category.label == key:
                return category
        available = ", ".join(c.label for c in cls)
        raise ValueError(f"Unknown category: {value}. Available: {available}")


# "s" marks adjective satellites in WordNet; they share the adj files.
POS_LETTERS = {
    "n": Category.NOUN,
    "v": Category.VERB,
    "a": Category.ADJ,
    "s": Category.ADJ,
    "r": Category.ADV,
}
