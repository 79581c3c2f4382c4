# lexigram\core\domain\__init__.py
"""
Domain Entities and Value Objects.

This package defines the core data structures used throughout the application
(LexiconEntry, GrammarRule, Structure, Lexicon, GrammarTable, Phrasebook)
together with the lookup machinery every operation shares.
"""

from .models import (
    HEADWORD_LANGUAGE,
    ExplicitStructure,
    GrammarRule,
    LexiconEntry,
    NamedStructure,
    Structure,
    as_structure,
    join_words,
    split_sentence,
)
from .lexicon import Lexicon
from .grammar import GrammarTable
from .phrasebook import Phrasebook
from .structure import StructureResolver, expand_repeated_tags

__all__ = [
    "HEADWORD_LANGUAGE",
    "ExplicitStructure",
    "GrammarRule",
    "LexiconEntry",
    "NamedStructure",
    "Structure",
    "as_structure",
    "join_words",
    "split_sentence",
    "Lexicon",
    "GrammarTable",
    "Phrasebook",
    "StructureResolver",
    "expand_repeated_tags",
]
