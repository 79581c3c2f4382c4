# lexigram/services/translator.py
import structlog
from typing import List, Optional, Sequence, Union

from lexigram.core.domain.models import Structure
from lexigram.core.domain.phrasebook import Phrasebook
from lexigram.core.ports.rule_source import IRuleSource
from lexigram.core.use_cases import (
    GenerateSentence,
    TransformStructure,
    TranslateSentence,
    ValidateGrammar,
)

logger = structlog.get_logger()

StructureLike = Union[Structure, str, Sequence[str]]

def load_phrasebook(source: IRuleSource, words_path: str, grammar_path: str) -> Phrasebook:
    """Reads both rule files through the given source."""
    return Phrasebook(
        lexicon=source.load_lexicon(words_path),
        grammar=source.load_grammar(grammar_path),
    )

class Translator:
    """
    Facade over one Phrasebook.

    Exposes every operation, merges additional rule files into the
    phrasebook, and renders the lexicon and grammar as text.
    """

    def __init__(self, phrasebook: Phrasebook, source: IRuleSource):
        self.phrasebook = phrasebook
        self.source = source
        self._generate = GenerateSentence(phrasebook)
        self._validate = ValidateGrammar(phrasebook)
        self._transform = TransformStructure(phrasebook)
        self._translate = TranslateSentence(phrasebook, self._transform)

    @classmethod
    def from_files(cls, source: IRuleSource, words_path: str, grammar_path: str) -> "Translator":
        return cls(load_phrasebook(source, words_path, grammar_path), source)

    # --- Operations ---

    def generate(self, target_language: str, structure: StructureLike) -> Optional[str]:
        return self._generate.execute(target_language, structure)

    def validate(self, sentence: Optional[str], language: Optional[str]) -> bool:
        return self._validate.execute(sentence, language)

    def transform(self, sentence: str, source: StructureLike, target: StructureLike) -> str:
        return self._transform.execute(sentence, source, target)

    def translate_words(self, sentence: str, source_language: str, target_language: str) -> Optional[str]:
        return self._translate.translate_words(sentence, source_language, target_language)

    def translate_with_grammar(self, sentence: str, source_language: str, target_language: str) -> Optional[str]:
        return self._translate.translate_with_grammar(sentence, source_language, target_language)

    # --- Incremental Updates ---

    def update_lexicon_from_file(self, path: str) -> None:
        new_words = self.source.load_lexicon(path)
        before = len(self.phrasebook.lexicon)
        self.phrasebook.lexicon.merge(new_words)
        logger.info(
            "lexicon_merged",
            path=path,
            incoming=len(new_words),
            added=len(self.phrasebook.lexicon) - before,
        )

    def update_grammar_from_file(self, path: str) -> None:
        new_grammar = self.source.load_grammar(path)
        self.phrasebook.grammar.merge(new_grammar)
        logger.info("grammar_merged", path=path, languages=new_grammar.languages())

    # --- Display ---

    def describe_words(self) -> str:
        lines: List[str] = []
        for entry in self.phrasebook.lexicon:
            lines.append(f"Word: {entry.word}")
            lines.append(f"Part of Speech: {entry.pos}")
            lines.append("Translations:")
            for language, translation in entry.translations.items():
                lines.append(f"{language} => {translation}")
            lines.append("")
        return "\n".join(lines)

    def describe_grammar(self) -> str:
        lines: List[str] = []
        for rule in self.phrasebook.grammar:
            lines.append(f"Language: {rule.language}")
            lines.append("Parts of Speech:")
            lines.extend(tag.strip() for tag in rule.structure)
            lines.append("")
        return "\n".join(lines)
