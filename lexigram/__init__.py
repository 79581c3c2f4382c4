# lexigram\__init__.py
"""
lexigram - rule-based bilingual phrase generator and validator.

A word lexicon (headword -> part of speech + per-language translations) and a
grammar table (language -> ordered part-of-speech tags) drive four operations:

- generate a sentence for a language from a structure
- validate a sentence against a language's grammar
- reorder a sentence from one structure into another
- translate a sentence word by word, optionally re-ordering it afterwards
"""

__version__ = "0.1.0"
