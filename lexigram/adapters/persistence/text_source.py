# lexigram/adapters/persistence/text_source.py
"""
Line-oriented text loader for the word lexicon and the grammar table.

Word lexicon, one entry per line:

    truck, NOU, German:lkw, Spanish:camion

Grammar table, one language per line:

    Spanish: DET, NOU, DET
    Welsh: DET, NOU, ADJ{2}

Lines that do not match the format are skipped without error.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

import structlog

from lexigram.core.domain.exceptions import RuleSourceNotFoundError
from lexigram.core.domain.grammar import GrammarTable
from lexigram.core.domain.lexicon import Lexicon
from lexigram.core.domain.models import GrammarRule, LexiconEntry
from lexigram.core.ports.rule_source import IRuleSource

logger = structlog.get_logger()

WORD_LINE_RE = re.compile(r"^([a-z-]+), ([A-Z]{3}), ([A-Z][a-z0-9]+:[a-z-]+,*\s*)+$")
GRAMMAR_LINE_RE = re.compile(r"^([A-Z][a-z0-9]+):\s+([A-Z]{3}(\{[1-9]\})?,*\s*)*$")


# ---------------------------------------------------------------------------
# Line parsing
# ---------------------------------------------------------------------------


def _parse_word_line(line: str) -> LexiconEntry:
    word, pos, rest = line.split(", ", 2)
    mapping = {}
    for translation in rest.split(","):
        translation = translation.strip()
        if not translation:
            continue
        # A language repeated on one line keeps its last value
        language, _, translated = translation.partition(":")
        mapping[language] = translated
    return LexiconEntry(word=word, pos=pos, translations=mapping)


def _parse_grammar_line(line: str) -> GrammarRule:
    language, _, tags = line.partition(":")
    structure = [tag.strip() for tag in tags.split(",") if tag.strip()]
    return GrammarRule(language=language, structure=structure)


def parse_lexicon_lines(lines: Iterable[str]) -> Tuple[Lexicon, int]:
    """
    Build a Lexicon from raw lines.

    Returns the lexicon and the number of skipped lines. A headword seen
    twice is replaced by the later line but keeps its first position.
    """
    lexicon = Lexicon()
    skipped = 0
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not WORD_LINE_RE.match(line):
            skipped += 1
            continue
        lexicon.add(_parse_word_line(line.strip()))
    return lexicon, skipped


def parse_grammar_lines(lines: Iterable[str]) -> Tuple[GrammarTable, int]:
    """Build a GrammarTable from raw lines; returns it with the skip count."""
    grammar = GrammarTable()
    skipped = 0
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not GRAMMAR_LINE_RE.match(line):
            skipped += 1
            continue
        grammar.set(_parse_grammar_line(line.strip()))
    return grammar, skipped


# ---------------------------------------------------------------------------
# Adapter
# ---------------------------------------------------------------------------


class TextFileRuleSource(IRuleSource):
    """
    Concrete implementation of the Rule Source using local text files.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def _read_lines(self, path: str) -> Iterator[str]:
        file_path = Path(path)
        if not file_path.is_file():
            logger.error("rule_source_missing", path=str(file_path))
            raise RuleSourceNotFoundError(str(file_path))

        try:
            with file_path.open("r", encoding=self.encoding) as f:
                lines: List[str] = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("rule_source_read_failed", path=str(file_path), error=str(e))
            raise RuleSourceNotFoundError(str(file_path), reason=str(e)) from e

        return iter(lines)

    def load_lexicon(self, path: str) -> Lexicon:
        lexicon, skipped = parse_lexicon_lines(self._read_lines(path))
        logger.info("lexicon_loaded", path=str(path), entries=len(lexicon))
        if skipped:
            logger.debug("lexicon_lines_skipped", path=str(path), skipped=skipped)
        return lexicon

    def load_grammar(self, path: str) -> GrammarTable:
        grammar, skipped = parse_grammar_lines(self._read_lines(path))
        logger.info("grammar_loaded", path=str(path), languages=len(grammar))
        if skipped:
            logger.debug("grammar_lines_skipped", path=str(path), skipped=skipped)
        return grammar
