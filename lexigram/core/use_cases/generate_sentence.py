# lexigram/core/use_cases/generate_sentence.py
import structlog
from typing import List, Optional, Sequence, Union

from lexigram.core.domain.models import HEADWORD_LANGUAGE, Structure, as_structure, join_words
from lexigram.core.domain.phrasebook import Phrasebook
from lexigram.core.domain.structure import StructureResolver
from lexigram.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class GenerateSentence:
    """
    Use Case: Produces a sentence in a target language for a structure.

    Responsibilities:
    1. Checks that the language is usable and the structure is valid.
    2. Picks, per tag, the first lexicon entry with that part of speech.
    3. Emits the headword (English) or the translation (other languages).

    Generation is all-or-nothing: if any tag has no matching entry the
    result is None, never a partial sentence.
    """

    def __init__(self, phrasebook: Phrasebook):
        self.phrasebook = phrasebook
        self.resolver = StructureResolver(phrasebook.grammar)

    def execute(
        self,
        target_language: str,
        structure: Union[Structure, str, Sequence[str]],
    ) -> Optional[str]:
        """
        Args:
            target_language: Language name (e.g., 'Spanish').
            structure: A language name, an explicit tag list, or a Structure.

        Returns:
            The generated sentence, or None.
        """
        structure = as_structure(structure)

        with tracer.start_as_current_span("use_case.generate_sentence") as span:
            span.set_attribute("app.target_language", target_language)
            span.set_attribute("app.structure_kind", structure.kind if structure is not None else "invalid")

            if not self.phrasebook.is_language_available(target_language):
                logger.info("generation_rejected", reason="language_unavailable", lang=target_language)
                return None

            if not self.resolver.is_structure_valid(structure):
                logger.info("generation_rejected", reason="invalid_structure", lang=target_language)
                return None

            # Raw tags: repetition counts are not expanded here
            tags = self.resolver.resolve(structure)
            words: List[str] = []

            for tag in tags:
                word = self._pick_word(tag, target_language)
                if word is None:
                    logger.info("generation_failed", lang=target_language, missing_pos=tag)
                    return None
                words.append(word)

            sentence = join_words(words)
            span.set_attribute("app.generated_words", len(words))
            logger.debug("generation_success", lang=target_language, sentence=sentence)
            return sentence

    def _pick_word(self, tag: str, target_language: str) -> Optional[str]:
        lexicon = self.phrasebook.lexicon
        if target_language == HEADWORD_LANGUAGE:
            entry = lexicon.find_by_part_of_speech(tag)
            return entry.word if entry else None

        entry = lexicon.find_by_part_of_speech(tag, target_language)
        return entry.translation(target_language) if entry else None
