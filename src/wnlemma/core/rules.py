# src/wnlemma/core/rules.py
"""
Suffix substitution rules, per category.

Each rule is (suffix, replacement). Order matters: every matching rule
contributes a candidate, in the order listed here.
"""

from collections.abc import Mapping
from types import MappingProxyType

from wnlemma.core.category import Category


Rule = tuple[str, str]
RuleTable = Mapping[Category, tuple[Rule, ...]]


SUBSTITUTIONS: RuleTable = MappingProxyType({
    Category.NOUN: (
        ("s", ""),
        ("ses", "s"),
        ("ves", "f"),
        ("xes", "x"),
        ("zes", "z"),
        ("ches", "ch"),
        ("shes", "sh"),
        ("men", "man"),
        ("ies", "y"),
    ),
    Category.VERB: (
        ("s", ""),
        ("ies", "y"),
        ("es", "e"),
        ("es", ""),
        ("ed", "e"),
        ("ed", ""),
        ("ing", "e"),
        ("ing", ""),
    ),
    Category.ADJ: (
        ("er", ""),
        ("est", ""),
        ("er", "e"),
        ("est", "e"),
    ),
    # no productive suffix rules for adverbs
    Category.ADV: (),
})


def apply_rules(rules: tuple[Rule, ...], words: list[str]) -> list[str]:
    """Apply every matching rule to every word, keeping generation order."""
    forms = []
    for word in words:
        for suffix, replacement in rules:
            if word.endswith(suffix):
                forms.append(word[:len(word) - len(suffix)] + replacement)
    return forms
