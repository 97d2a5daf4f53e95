"""
Command line interface for slovoform.

Usage:
    slovoform быстрый                   # forms of an adjective
    slovoform -s синенький              # closest headword if missing
    slovoform -a печь                   # all homonyms
    slovoform --adverb -j трудно        # adverb comparatives as JSON
    slovoform export -o lexicon.db      # dump dictionaries to SQLite
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from slovoform import __version__
from slovoform.adjectives import Adjectives
from slovoform.adverbs import Adverbs
from slovoform.constants import Comparability
from slovoform.loading import LexiconFormatError
from slovoform.models import LookupResult
from slovoform.settings import DB_PATH, DEBUG

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if debug or DEBUG else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )


def load_dictionary(adverb: bool = False, path: Optional[str] = None):
    """Load the adjective or adverb dictionary, from `path` if given."""
    if adverb:
        return Adverbs.load(path)
    return Adjectives.load(path)


def format_word_text(w) -> str:
    """Format an Adjective or Adverb as text."""
    flags = [w.word_class, Comparability(w.comparability).name.lower()]
    if w.inexact:
        flags.append("inexact")
    lines = [f"{w.word}  [{', '.join(flags)}]"]

    forms = w.forms() if hasattr(w, "forms") else {}
    for label, form in forms.items():
        lines.append(f"  {label}: {form}")
    for label, form in w.comparatives().items():
        lines.append(f"  {label}: {form}")
    return '\n'.join(lines)


def lookup(dictionary, word: str, mode: str, word_filter=None) -> list:
    """Run one query; returns a (possibly empty) list of words."""
    if mode == 'all':
        return list(dictionary.find_all(word))
    if mode == 'similar':
        found = dictionary.find_similar(word, word_filter)
    else:
        found = dictionary.find_one(word, word_filter)
    return [found] if found is not None else []


def export_command(args) -> int:
    """Export the dictionaries to SQLite."""
    from slovoform.db.export import export_lexicon

    db_path = Path(args.output) if args.output else DB_PATH

    if db_path.exists() and not args.force:
        print(f"Database already exists: {db_path}")
        response = input("Overwrite? [y/N]: ").strip().lower()
        if response != 'y':
            print("Aborted.")
            return 1

    try:
        adjectives = Adjectives.load(args.adjectives)
        adverbs = Adverbs.load(args.adverbs)
    except (FileNotFoundError, LexiconFormatError) as e:
        print(f"Error loading dictionary: {e}", file=sys.stderr)
        return 1

    if db_path.exists():
        db_path.unlink()
    db_path.parent.mkdir(parents=True, exist_ok=True)

    print(f"Exporting to {db_path}...")
    t0 = time.perf_counter()
    total = export_lexicon(db_path, adjectives=adjectives, adverbs=adverbs)
    elapsed = time.perf_counter() - t0

    print(f"Exported {total:,} headwords in {elapsed:.1f}s")
    return 0


def main_export(args: list) -> int:
    """CLI entry point for the export subcommand."""
    parser = argparse.ArgumentParser(
        description='Export the dictionaries to a SQLite database',
        prog='slovoform export',
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        metavar='PATH',
        help=f'Output database path (default: {DB_PATH})',
    )

    parser.add_argument(
        '--adjectives',
        type=str,
        metavar='PATH',
        help='Adjective dictionary (default: bundled)',
    )

    parser.add_argument(
        '--adverbs',
        type=str,
        metavar='PATH',
        help='Adverb dictionary (default: bundled)',
    )

    parser.add_argument(
        '--force', '-f',
        action='store_true',
        help='Overwrite existing database without prompting',
    )

    parsed = parser.parse_args(args)
    return export_command(parsed)


def main(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args_list = args if args is not None else sys.argv[1:]

    if args_list and args_list[0] == 'export':
        configure_logging()
        return main_export(args_list[1:])

    parser = argparse.ArgumentParser(
        description='Russian adjective and adverb forms (Slovoform)',
        prog='slovoform',
        epilog='Subcommands:\n  slovoform export    Export the dictionaries to SQLite',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        'words',
        nargs='*',
        help='Words to look up',
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        '-s', '--similar',
        action='store_true',
        help='Fall back to the closest headword when a word is missing',
    )
    mode.add_argument(
        '-a', '--all',
        action='store_true',
        help='Show all homonyms',
    )

    comparability = parser.add_mutually_exclusive_group()
    comparability.add_argument(
        '--comparable',
        action='store_true',
        help='Only match comparable words',
    )
    comparability.add_argument(
        '--incomparable',
        action='store_true',
        help='Only match incomparable words',
    )

    parser.add_argument(
        '--adverb',
        action='store_true',
        help='Look up adverbs instead of adjectives',
    )

    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Output JSON',
    )

    parser.add_argument(
        '-d', '--dictionary',
        type=str,
        default=None,
        metavar='PATH',
        help='Dictionary file (default: bundled)',
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'slovoform {__version__}')
        return 0

    if not parsed.words:
        parser.print_help()
        return 1

    configure_logging(parsed.debug)

    try:
        dictionary = load_dictionary(parsed.adverb, parsed.dictionary)
    except (FileNotFoundError, LexiconFormatError) as e:
        print(f'Error loading dictionary: {e}', file=sys.stderr)
        return 1
    logger.debug(f"Loaded {dictionary!r}")

    if parsed.all:
        mode_name = 'all'
    elif parsed.similar:
        mode_name = 'similar'
    else:
        mode_name = 'one'

    word_filter = None
    if parsed.comparable:
        word_filter = Comparability.COMPARABLE
    elif parsed.incomparable:
        word_filter = Comparability.INCOMPARABLE

    status = 0
    outputs = []
    for word in parsed.words:
        found = lookup(dictionary, word, mode_name, word_filter)
        if not found:
            print(f"No match for {word!r}", file=sys.stderr)
            status = 1
        if parsed.json:
            outputs.append(LookupResult.from_words(word, mode_name, found).model_dump())
        else:
            for w in found:
                outputs.append(format_word_text(w))

    if parsed.json:
        print(json.dumps(outputs, ensure_ascii=False, indent=2))
    elif outputs:
        print('\n\n'.join(outputs))

    return status


if __name__ == '__main__':
    sys.exit(main())
