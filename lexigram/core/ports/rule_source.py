# lexigram\core\ports\rule_source.py
from typing import Protocol
from lexigram.core.domain.grammar import GrammarTable
from lexigram.core.domain.lexicon import Lexicon

class IRuleSource(Protocol):
    """
    Port for loading the word lexicon and the grammar table.
    Implementations:
    - TextFileRuleSource (line-oriented text files)
    """

    def load_lexicon(self, path: str) -> Lexicon:
        """
        Reads a word lexicon.

        Args:
            path: Location of the lexicon data.

        Returns:
            A Lexicon in source order. Malformed records are skipped.

        Raises:
            RuleSourceNotFoundError: If the data cannot be opened.
        """
        ...

    def load_grammar(self, path: str) -> GrammarTable:
        """
        Reads a grammar table.

        Raises:
            RuleSourceNotFoundError: If the data cannot be opened.
        """
        ...
