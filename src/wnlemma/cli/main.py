"""
wnlemma CLI.
"""

import argparse

from wnlemma.cli.commands import lemma
from wnlemma.core.logging_config import configure_logging


def main():
    parser = argparse.ArgumentParser(prog="wnlemma", description="WordNet lemmatizer")
    subparsers = parser.add_subparsers(dest="command")

    lemma.add_subparsers(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        configure_logging()
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
