# lexigram\core\domain\structure.py
"""
Structure resolution.

A Structure is either a reference to a language's grammar rule or an
explicit tag list. Resolution yields the raw tags (whitespace-stripped);
`expand_repeated_tags` then turns `TAG{n}` into n consecutive `TAG`s.
Only the transformer expands; generation and validation use raw tags.
"""

from __future__ import annotations

import re
from typing import List, Sequence

from .grammar import GrammarTable
from .models import STRUCTURE_TAG_RE, ExplicitStructure, NamedStructure, Structure

_REPEATED_TAG_RE = re.compile(r"^(?P<tag>[^{}]+)\{(?P<count>\d+)\}$")


def expand_repeated_tags(tags: Sequence[str]) -> List[str]:
    expanded: List[str] = []
    for tag in tags:
        match = _REPEATED_TAG_RE.match(tag)
        if match:
            expanded.extend([match.group("tag")] * int(match.group("count")))
        else:
            expanded.append(tag)
    return expanded


class StructureResolver:
    def __init__(self, grammar: GrammarTable) -> None:
        self.grammar = grammar

    def resolve(self, structure: Structure) -> List[str]:
        """Raw tags for `structure`; empty if it names an unknown language."""
        if isinstance(structure, NamedStructure):
            tags = self.grammar.get(structure.language)
        elif isinstance(structure, ExplicitStructure):
            tags = structure.tags
        else:
            return []
        return [tag.strip() for tag in tags]

    def resolve_expanded(self, structure: Structure) -> List[str]:
        return expand_repeated_tags(self.resolve(structure))

    def is_structure_valid(self, structure: Structure) -> bool:
        if isinstance(structure, NamedStructure):
            return structure.language in self.grammar
        if isinstance(structure, ExplicitStructure):
            return all(STRUCTURE_TAG_RE.match(tag) for tag in structure.tags)
        return False
