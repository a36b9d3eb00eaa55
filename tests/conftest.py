# tests/conftest.py
"""Shared fixtures: a miniature WordNet dict directory."""

import pytest

from wnlemma.core.stemmer import WordnetStemmer


LICENSE_HEADER = "  1 This software and database is being provided to you, the LICENSEE, by\n"

# lemma pos synset_cnt p_cnt [ptr...] sense_cnt tagsense_cnt offsets...
INDEX = {
    "noun": [
        "ax n 1 1 @ 1 0 03808977",
        "axe n 1 1 @ 1 0 02764044",
        "axis n 2 1 @ 2 1 13926786 05594037",
        "banana n 2 1 @ 2 0 07753592 12352287",
        "bar n 1 0 1 0 02788689",
        "baz n 1 0 1 0 09999999",
        "berry n 2 2 @ ~ 2 0 07742704 13137409",
        "dog n 2 3 @ ~ #m 2 1 02084071 10114209",
        "ferry n 2 1 @ 2 0 03329663 09249034",
        "goose n 1 1 @ 1 0 01855672",
        "kiss n 1 0 1 1 00846515",
        "man n 2 1 @ 2 1 10287213 10289039",
        "money n 1 1 @ 1 1 13384557",
        "press n 1 1 @ 1 1 06263609",
        "wolf n 1 1 @ 1 0 02114100",
    ],
    "verb": [
        "be v 1 0 1 1 02604760",
        "kiss v 1 0 1 1 01420928",
        "ride v 1 1 @ 1 1 01955984",
        "walk v 2 1 @ 2 1 01904930 02102398",
    ],
    "adj": [
        "big a 1 0 1 1 01382086",
        "green a 1 0 1 0 00375969",
        "nice a 1 0 1 1 01586342",
    ],
    "adv": [
        "quickly r 1 0 1 1 00085811",
        "well r 1 0 1 1 00011093",
    ],
}

EXCEPTIONS = {
    "noun": [
        "axes ax axis",
        "foos bar baz",
        "geese goose",
        "wolves wolfe",
    ],
    "verb": [
        "rode ride",
        "was be",
    ],
    "adj": [
        "bigger big",
    ],
    "adv": [
        "best well",
    ],
}


def write_wordnet(directory, index=INDEX, exceptions=EXCEPTIONS):
    for name, lines in index.items():
        (directory / f"index.{name}").write_text(LICENSE_HEADER + "\n".join(lines) + "\n")
    for name, lines in exceptions.items():
        (directory / f"{name}.exc").write_text("\n".join(lines) + "\n")
    return directory


@pytest.fixture
def wordnet_dir(tmp_path):
    return write_wordnet(tmp_path)


@pytest.fixture
def stemmer(wordnet_dir):
    return WordnetStemmer.load(wordnet_dir)
