"""
Lemma commands: lemma, phrase, analyze, stats.

Each runs against a local WordNet directory, or against the API with --remote.
"""

import sys

import httpx
from rich.console import Console
from rich.table import Table

from wnlemma.cli import client
from wnlemma.core.category import Category
from wnlemma.core.config import get_settings
from wnlemma.core.stemmer import WordnetStemmer
from wnlemma.core.wordnet_files import LoadError

console = Console()


def _add_source_args(parser):
    parser.add_argument("--dir", dest="wordnet_dir", help="WordNet dict directory (default: WNLEMMA_WORDNET_DIR)")
    parser.add_argument("--remote", action="store_true", help="Use the wnlemma API instead of local files")


def add_subparsers(subparsers):
    lemma_p = subparsers.add_parser("lemma", help="Lemmatize one or more words")
    lemma_p.add_argument("category", help="noun, verb, adj, adv (or n, v, a, s, r)")
    lemma_p.add_argument("words", nargs="+", help="Word forms")
    _add_source_args(lemma_p)
    lemma_p.set_defaults(func=run_lemma)

    phrase_p = subparsers.add_parser("phrase", help="Lemmatize every word of a phrase")
    phrase_p.add_argument("category")
    phrase_p.add_argument("text", help="Phrase text")
    _add_source_args(phrase_p)
    phrase_p.set_defaults(func=run_phrase)

    analyze_p = subparsers.add_parser("analyze", help="Show all candidate base forms")
    analyze_p.add_argument("category")
    analyze_p.add_argument("word")
    _add_source_args(analyze_p)
    analyze_p.set_defaults(func=run_analyze)

    stats_p = subparsers.add_parser("stats", help="Show lemma and exception counts")
    _add_source_args(stats_p)
    stats_p.set_defaults(func=run_stats)


def _category(value: str) -> Category:
    try:
        return Category.parse(value)
    except ValueError as e:
        console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)


def _stemmer(args) -> WordnetStemmer:
    basedir = args.wordnet_dir or get_settings().WORDNET_DIR
    try:
        return WordnetStemmer.load(basedir)
    except LoadError as e:
        console.print(f"[red]✗ WordNet load failed: {e}[/red]")
        sys.exit(1)


def run_lemma(args):
    category = _category(args.category)
    try:
        if args.remote:
            results = [client.get_lemma(category.label, w)["lemma"] for w in args.words]
        else:
            stemmer = _stemmer(args)
            results = [stemmer.lemma(category, w) for w in args.words]
    except httpx.HTTPError as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        sys.exit(1)

    for word, lemma in zip(args.words, results):
        console.print(f"{word:20} → {lemma}")


def run_phrase(args):
    category = _category(args.category)
    try:
        if args.remote:
            result = client.lemma_phrase(category.label, args.text)["lemmas"]
        else:
            result = _stemmer(args).lemma_phrase(category, args.text)
    except httpx.HTTPError as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        sys.exit(1)
    console.print(result)


def run_analyze(args):
    category = _category(args.category)
    try:
        if args.remote:
            candidates = client.analyze(category.label, args.word)["candidates"]
        else:
            candidates = _stemmer(args).analyze(category, args.word)
    except httpx.HTTPError as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        sys.exit(1)

    if not candidates:
        console.print(f"[dim]No known base forms for '{args.word}' ({category.label})[/dim]")
        return

    table = Table(title=f"{args.word} ({category.label})")
    table.add_column("#", justify="right")
    table.add_column("candidate")
    table.add_column("length", justify="right")
    for i, candidate in enumerate(candidates):
        table.add_row(str(i), candidate, str(len(candidate)))
    console.print(table)


def run_stats(args):
    try:
        stats = client.get_stats() if args.remote else _stemmer(args).stats()
    except httpx.HTTPError as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        sys.exit(1)

    table = Table(title="WordNet")
    table.add_column("category")
    table.add_column("lemmas", justify="right")
    table.add_column("exceptions", justify="right")
    for name, counts in stats.items():
        table.add_row(name, str(counts["lemmas"]), str(counts["exceptions"]))
    console.print(table)
