# lexigram\core\domain\grammar.py
from __future__ import annotations

from typing import Dict, Iterable, Iterator, List

from .models import GrammarRule


class GrammarTable:
    """
    Language name -> ordered part-of-speech tags.

    Unknown languages resolve to an empty structure rather than an error.
    """

    def __init__(self, rules: Iterable[GrammarRule] = ()) -> None:
        self._rules: Dict[str, List[str]] = {}
        for rule in rules:
            self.set(rule)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[GrammarRule]:
        for language, tags in self._rules.items():
            yield GrammarRule(language=language, structure=list(tags))

    def __contains__(self, language: object) -> bool:
        return language in self._rules

    def languages(self) -> List[str]:
        return list(self._rules)

    def set(self, rule: GrammarRule) -> None:
        self._rules[rule.language] = list(rule.structure)

    def get(self, language: str) -> List[str]:
        return list(self._rules.get(language, []))

    def merge(self, new_rules: Iterable[GrammarRule]) -> None:
        """
        Merge rules in place.

        For a known language the result is the new tags followed by the old
        ones, with duplicates removed and the first occurrence kept.
        """
        for rule in new_rules:
            old = self._rules.get(rule.language)
            if old is None:
                self._rules[rule.language] = list(rule.structure)
            else:
                self._rules[rule.language] = list(dict.fromkeys(rule.structure + old))
