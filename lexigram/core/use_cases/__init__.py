# lexigram\core\use_cases\__init__.py
"""
Core Use Cases (Application Logic).

This package contains the "Interactors" of the system. Each one reads the
injected Phrasebook and performs one operation:
1. GenerateSentence: build a sentence for a language from a structure.
2. ValidateGrammar: check a sentence against a language's grammar rule.
3. TransformStructure: reorder a sentence from one structure to another.
4. TranslateSentence: word-by-word translation, optionally re-ordered.

Failures are reported through the return value (None / False), never raised.
"""

from .generate_sentence import GenerateSentence
from .validate_grammar import ValidateGrammar
from .transform_structure import TransformStructure
from .translate_sentence import TranslateSentence

__all__ = [
    "GenerateSentence",
    "ValidateGrammar",
    "TransformStructure",
    "TranslateSentence",
]
