# src/wnlemma/core/stemmer.py
"""
WordNet morphological analysis ("morphy").

Given (category, word), find the base forms WordNet knows about:

  1. exception list (irregular forms) wins outright
  2. otherwise apply suffix rules once, keep forms found in the index
  3. if none are known, keep applying rules to the previous round's forms

The stemmer is built once from a WordNet dict directory and never
mutated afterwards, so a single instance can be shared between threads.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import structlog

from wnlemma.core.category import Category
from wnlemma.core.rules import SUBSTITUTIONS, RuleTable, apply_rules
from wnlemma.core.wordnet_files import read_exceptions, read_index


log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class WordnetStemmer:
    # lemma -> {category -> synset offsets}
    lemma_offsets: Mapping[str, Mapping[Category, tuple[int, ...]]]
    exceptions: Mapping[Category, Mapping[str, tuple[str, ...]]]
    substitutions: RuleTable = field(default_factory=lambda: SUBSTITUTIONS)

    @classmethod
    def load(cls, basedir: str | Path, substitutions: RuleTable | None = None) -> "WordnetStemmer":
        """Read index.* and *.exc for every category. Raises LoadError."""
        basedir = Path(basedir).expanduser()
        lemma_offsets: dict[str, dict[Category, tuple[int, ...]]] = {}
        exceptions = {}

        for category in Category:
            index = read_index(basedir / category.index_file)
            for lemma, offsets in index.items():
                lemma_offsets.setdefault(lemma, {})[category] = offsets

            exceptions[category] = MappingProxyType(
                read_exceptions(basedir / category.exceptions_file)
            )
            log.debug(
                "wordnet.category_loaded",
                category=category.label,
                lemmas=len(index),
                exceptions=len(exceptions[category]),
            )

        log.info("wordnet.loaded", basedir=str(basedir), lemmas=len(lemma_offsets))
        return cls(
            lemma_offsets=MappingProxyType(
                {lemma: MappingProxyType(by_cat) for lemma, by_cat in lemma_offsets.items()}
            ),
            exceptions=MappingProxyType(exceptions),
            substitutions=SUBSTITUTIONS if substitutions is None else MappingProxyType(
                {category: tuple(rules) for category, rules in substitutions.items()}
            ),
        )

    # === Lexical index ===

    def synset_offsets(self, category: Category, lemma: str) -> tuple[int, ...]:
        by_category = self.lemma_offsets.get(lemma)
        if by_category is None:
            return ()
        return by_category.get(category, ())

    def is_known(self, category: Category, word: str) -> bool:
        return len(self.synset_offsets(category, word)) > 0

    def _filter_forms(self, category: Category, forms: list[str]) -> list[str]:
        """Known forms only, deduplicated, first-seen order."""
        result = []
        seen = set()
        for form in forms:
            if form in seen:
                continue
            if self.is_known(category, form):
                seen.add(form)
                result.append(form)
        return result

    # === Morphy ===

    def analyze(self, category: Category, word: str) -> list[str]:
        """All known base forms of `word`, in generation order. Empty if none."""
        exceptions = self.exceptions.get(category, {})
        if word in exceptions:
            return self._filter_forms(category, [word, *exceptions[word]])

        rules = self.substitutions.get(category, ())
        forms = apply_rules(rules, [word])
        results = self._filter_forms(category, [word, *forms])
        if results:
            return results

        # Forms from earlier rounds were already filtered and expanded. Forms
        # longer than the word plus the longest replacement are dropped, which
        # keeps the search finite for rules that grow words.
        produced = {word, *forms}
        max_len = len(word) + max((len(new) for _, new in rules), default=0)
        while forms:
            forms = [f for f in apply_rules(rules, forms) if f not in produced and len(f) <= max_len]
            produced.update(forms)
            results = self._filter_forms(category, forms)
            if results:
                return results
        return []

    def lemma(self, category: Category, word: str) -> str:
        """Shortest known base form, or `word` itself if there is none."""
        lemmas = self.analyze(category, word)
        if not lemmas:
            return word
        # min() keeps the first of equally short candidates
        return min(lemmas, key=len)

    def lemma_phrase(self, category: Category, phrase: str) -> str:
        return " ".join(self.lemma(category, w) for w in phrase.lower().split())

    def stats(self) -> dict[str, dict[str, int]]:
        counts = {c.label: {"lemmas": 0, "exceptions": len(self.exceptions.get(c, {}))} for c in Category}
        for by_category in self.lemma_offsets.values():
            for category, offsets in by_category.items():
                if offsets:
                    counts[category.label]["lemmas"] += 1
        return counts
