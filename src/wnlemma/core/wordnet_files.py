# src/wnlemma/core/wordnet_files.py
"""
Readers for the WordNet database files the lemmatizer needs.

  index.<category>   lemma pos synset_cnt p_cnt [ptr...] sense_cnt tagsense_cnt offset...
  <category>.exc     inflected_form lemma [lemma...]

Lines starting with two spaces are license/header lines.
"""

from collections.abc import Iterator
from pathlib import Path

import structlog


log = structlog.get_logger(__name__)

HEADER_PREFIX = "  "


class LoadError(Exception):
    """WordNet data could not be loaded."""


class WordnetFileNotFound(LoadError, FileNotFoundError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"could not open or read file {path}")


def _read_lines(path: Path) -> Iterator[tuple[int, str]]:
    try:
        f = path.open("rb")
    except FileNotFoundError:
        log.error("wordnet.file_missing", path=str(path))
        raise WordnetFileNotFound(path) from None

    with f:
        for lineno, raw in enumerate(f, start=1):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise LoadError(f"{path}:{lineno}: not valid UTF-8: {e}") from e
            if line.startswith(HEADER_PREFIX):
                continue
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            yield lineno, line


def read_index(path: Path) -> dict[str, tuple[int, ...]]:
    """Parse an index file into {lemma: synset offsets}."""
    entries = {}
    for lineno, line in _read_lines(path):
        fields = line.split()
        try:
            lemma = fields[0]
            n_synsets = int(fields[2])
            n_pointers = int(fields[3])
            # skip pos, counts, pointer symbols, sense_cnt and tagsense_cnt
            start = 4 + n_pointers + 2
            raw_offsets = fields[start:start + n_synsets]
            if len(raw_offsets) != n_synsets:
                raise IndexError(f"expected {n_synsets} offsets, found {len(raw_offsets)}")
            offsets = tuple(int(x) for x in raw_offsets)
        except (IndexError, ValueError) as e:
            raise LoadError(f"{path}:{lineno}: malformed index line: {e}") from e
        entries[lemma] = offsets
    return entries


def read_exceptions(path: Path) -> dict[str, tuple[str, ...]]:
    """Parse an exception file into {inflected form: lemmas}."""
    table: dict[str, list[str]] = {}
    for lineno, line in _read_lines(path):
        fields = line.split()
        if len(fields) < 2:
            raise LoadError(f"{path}:{lineno}: exception line has no lemma")
        surface, lemmas = fields[0], fields[1:]
        table.setdefault(surface, []).extend(lemmas)
    return {surface: tuple(lemmas) for surface, lemmas in table.items()}
