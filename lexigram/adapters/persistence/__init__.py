# lexigram\adapters\persistence\__init__.py
from .text_source import TextFileRuleSource, parse_grammar_lines, parse_lexicon_lines

__all__ = [
    "TextFileRuleSource",
    "parse_grammar_lines",
    "parse_lexicon_lines",
]
