# lexigram\core\domain\phrasebook.py
from __future__ import annotations

from dataclasses import dataclass, field

from .grammar import GrammarTable
from .lexicon import Lexicon
from .models import HEADWORD_LANGUAGE


@dataclass
class Phrasebook:
    """
    The aggregate every operation reads: one Lexicon and one GrammarTable.

    Read-only during an operation. `merge` calls must not overlap with
    lookups on the same instance; there is no internal locking.
    """

    lexicon: Lexicon = field(default_factory=Lexicon)
    grammar: GrammarTable = field(default_factory=GrammarTable)

    def is_language_available(self, language: str) -> bool:
        """English always; any other language needs at least one translation."""
        return language == HEADWORD_LANGUAGE or self.lexicon.has_language(language)
