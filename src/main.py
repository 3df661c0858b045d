"""
Main entry point for spell-checking a text against a word list.

Usage:
    python -m src.main texts/lalaland.txt
    python -m src.main texts/lalaland.txt --dictionary dictionaries/small --verbose
    python -m src.main texts/lalaland.txt --config speller.yaml --quiet
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml

from .dictionary import WordIndex
from .speller import SpellerConfig, SpellReport, spell_check


def load_config(config_path: Optional[str] = None) -> SpellerConfig:
    """Load speller configuration from a YAML file (defaults when no path is given)."""
    if config_path is None:
        return SpellerConfig()

    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return SpellerConfig(**data)


def print_report(report: SpellReport, quiet: bool = False) -> None:
    """Print misspellings and the summary block."""
    if not quiet:
        print("MISSPELLED WORDS")
        print()
        for word in report.misspelled:
            print(word)
        print()

    print(f"WORDS MISSPELLED:     {report.words_misspelled}")
    print(f"WORDS IN DICTIONARY:  {report.words_in_dictionary}")
    print(f"WORDS IN TEXT:        {report.words_in_text}")
    print(f"TIME IN load:         {report.time_load:.2f}")
    print(f"TIME IN check:        {report.time_check:.2f}")
    print(f"TIME IN size:         {report.time_size:.2f}")
    print(f"TIME IN unload:       {report.time_unload:.2f}")
    print(f"TIME IN TOTAL:        {report.time_total:.2f}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Spell-check a text against a word list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example speller.yaml:
  dictionary: dictionaries/large
  bucket_count: 28
  max_length: 45
  hash_name: additive
  unique: false
        """
    )
    parser.add_argument(
        "text",
        help="Path to the text to check"
    )
    parser.add_argument(
        "--dictionary", "-d",
        help="Path to the word list, one word per line (overrides config)"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--buckets",
        type=int,
        help="Number of hash buckets (overrides config)"
    )
    parser.add_argument(
        "--hash",
        choices=["additive", "blake2b"],
        help="Bucket hash function (overrides config)"
    )
    parser.add_argument(
        "--unique",
        action="store_true",
        help="Skip duplicate words while loading"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print the summary"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log index activity to stderr"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config)
        overrides = {
            "dictionary": args.dictionary,
            "bucket_count": args.buckets,
            "hash_name": args.hash,
            "unique": args.unique or None,
            "quiet": args.quiet or None,
        }
        config = SpellerConfig(**{
            **config.model_dump(),
            **{k: v for k, v in overrides.items() if v is not None},
        })
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        text = Path(args.text).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading text {args.text}: {e}", file=sys.stderr)
        return 1

    index = WordIndex(config.index_config())
    try:
        report = spell_check(index, text, dictionary=config.dictionary)
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_report(report, quiet=config.quiet)
    return 0


if __name__ == "__main__":
    sys.exit(main())
