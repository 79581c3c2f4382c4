# lexigram/adapters/cli.py
"""
lexigram CLI - rule-based phrase generator and validator.

Usage:
    lexigram words
    lexigram grammar
    lexigram generate Spanish Spanish
    lexigram generate English DET ADJ NOU
    lexigram validate Spanish "el camion el"
    lexigram transform "blue the truck" --source ADJ,DET,NOU --target English
    lexigram translate "the blue sea" --source English --target French
    lexigram translate "gabel blau" --source German --target English --word-by-word

Rule files default to DATA_DIR/WORDS_FILE and DATA_DIR/GRAMMAR_FILE
(see lexigram.shared.config); --words/--grammar override them and
--merge-words/--merge-grammar merge extra files on top, in order.
"""

from __future__ import annotations

import argparse
import re
import sys
from typing import List, Optional, Sequence

import structlog
from dependency_injector import providers

from lexigram.core.domain.exceptions import DomainError, InvalidStructureError
from lexigram.core.domain.models import (
    STRUCTURE_TAG_RE,
    ExplicitStructure,
    NamedStructure,
    Structure,
)
from lexigram.services.translator import Translator, load_phrasebook
from lexigram.shared.config import settings
from lexigram.shared.container import Container
from lexigram.shared.logging_config import configure_logging
from lexigram.shared.observability import setup_observability

logger = structlog.get_logger()

EXIT_OK = 0
EXIT_NO_RESULT = 1
EXIT_LOAD_ERROR = 2
EXIT_BAD_ARGUMENT = 3


def parse_structure_arg(values: Sequence[str]) -> Structure:
    """
    Turn CLI tokens into a Structure.

    A single token that is not a tag names a language's grammar rule.
    Anything else is an explicit tag list; tokens may be separated by
    commas, whitespace, or both.
    """
    tokens = [t for t in re.split(r"[,\s]+", " ".join(values)) if t]
    if not tokens:
        raise InvalidStructureError("no tags or language name given")
    if len(tokens) == 1 and not STRUCTURE_TAG_RE.match(tokens[0]):
        return NamedStructure(language=tokens[0])
    return ExplicitStructure(tags=tokens)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexigram",
        description="lexigram - rule-based phrase generator and validator",
    )
    parser.add_argument(
        "--words",
        type=str,
        default=None,
        help=f"Word lexicon file (default: {settings.WORDS_PATH})",
    )
    parser.add_argument(
        "--grammar",
        type=str,
        default=None,
        help=f"Grammar table file (default: {settings.GRAMMAR_PATH})",
    )
    parser.add_argument(
        "--merge-words",
        action="append",
        default=[],
        metavar="PATH",
        help="Extra word lexicon merged after loading (repeatable)",
    )
    parser.add_argument(
        "--merge-grammar",
        action="append",
        default=[],
        metavar="PATH",
        help="Extra grammar table merged after loading (repeatable)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("words", help="List every lexicon entry")
    sub.add_parser("grammar", help="List every grammar rule")

    gen = sub.add_parser("generate", help="Generate a sentence")
    gen.add_argument("language", help="Target language, e.g. Spanish")
    gen.add_argument("structure", nargs="+", help="Language name or tags, e.g. DET ADJ NOU")

    val = sub.add_parser("validate", help="Check a sentence against a language's grammar")
    val.add_argument("language")
    val.add_argument("sentence")

    tr = sub.add_parser("transform", help="Reorder a sentence into another structure")
    tr.add_argument("sentence")
    tr.add_argument("--source", "-s", required=True, help="Source language or comma-separated tags")
    tr.add_argument("--target", "-t", required=True, help="Target language or comma-separated tags")

    tl = sub.add_parser("translate", help="Translate a sentence between languages")
    tl.add_argument("sentence")
    tl.add_argument("--source", "-s", required=True, help="Source language")
    tl.add_argument("--target", "-t", required=True, help="Target language")
    tl.add_argument(
        "--word-by-word",
        action="store_true",
        help="Keep the source word order (skip the grammar pass)",
    )

    return parser


def build_translator(args: argparse.Namespace, container: Optional[Container] = None) -> Translator:
    container = container or Container()

    if args.words or args.grammar:
        container.phrasebook.override(
            providers.Singleton(
                load_phrasebook,
                source=container.rule_source,
                words_path=args.words or settings.WORDS_PATH,
                grammar_path=args.grammar or settings.GRAMMAR_PATH,
            )
        )

    translator = container.translator()
    for path in args.merge_words:
        translator.update_lexicon_from_file(path)
    for path in args.merge_grammar:
        translator.update_grammar_from_file(path)
    return translator


def _print_optional(result: Optional[str]) -> int:
    if result is None:
        print("nil")
        return EXIT_NO_RESULT
    print(result)
    return EXIT_OK


def run(args: argparse.Namespace, translator: Translator) -> int:
    if args.command == "words":
        print(translator.describe_words())
        return EXIT_OK

    if args.command == "grammar":
        print(translator.describe_grammar())
        return EXIT_OK

    if args.command == "generate":
        structure = parse_structure_arg(args.structure)
        return _print_optional(translator.generate(args.language, structure))

    if args.command == "validate":
        valid = translator.validate(args.sentence, args.language)
        print("true" if valid else "false")
        return EXIT_OK if valid else EXIT_NO_RESULT

    if args.command == "transform":
        source = parse_structure_arg([args.source])
        target = parse_structure_arg([args.target])
        print(translator.transform(args.sentence, source, target))
        return EXIT_OK

    if args.command == "translate":
        if args.word_by_word:
            result = translator.translate_words(args.sentence, args.source, args.target)
        else:
            result = translator.translate_with_grammar(args.sentence, args.source, args.target)
        return _print_optional(result)

    raise AssertionError(f"unhandled command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    configure_logging()
    setup_observability()

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        translator = build_translator(args)
        return run(args, translator)
    except InvalidStructureError as e:
        logger.warning("cli_bad_argument", command=args.command, error=e.message)
        print(f"error: {e.message}", file=sys.stderr)
        return EXIT_BAD_ARGUMENT
    except DomainError as e:
        logger.error("cli_failed", command=args.command, error=e.message)
        print(f"error: {e.message}", file=sys.stderr)
        return EXIT_LOAD_ERROR


if __name__ == "__main__":
    sys.exit(main())
