# lexigram/core/use_cases/translate_sentence.py
import structlog
from typing import List, Optional

from lexigram.core.domain.models import (
    HEADWORD_LANGUAGE,
    NamedStructure,
    join_words,
    split_sentence,
)
from lexigram.core.domain.phrasebook import Phrasebook
from lexigram.core.use_cases.transform_structure import TransformStructure
from lexigram.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class TranslateSentence:
    """
    Use Case: Translates a sentence between two languages.

    `translate_words` maps each word through the lexicon, keeping word order.
    `translate_with_grammar` additionally reorders the result from the source
    language's grammar into the target language's grammar.

    Both are all-or-nothing: one unresolved word makes the result None.
    """

    def __init__(self, phrasebook: Phrasebook, transformer: Optional[TransformStructure] = None):
        self.phrasebook = phrasebook
        self.transformer = transformer or TransformStructure(phrasebook)

    def execute(
        self,
        sentence: str,
        source_language: str,
        target_language: str,
        reorder: bool = True,
    ) -> Optional[str]:
        if reorder:
            return self.translate_with_grammar(sentence, source_language, target_language)
        return self.translate_words(sentence, source_language, target_language)

    def translate_words(self, sentence: str, source_language: str, target_language: str) -> Optional[str]:
        with tracer.start_as_current_span("use_case.translate_words") as span:
            span.set_attribute("app.source_language", source_language)
            span.set_attribute("app.target_language", target_language)

            if source_language == target_language:
                return sentence

            translated: List[str] = []
            for word in split_sentence(sentence):
                result = self._translate_word(word, source_language, target_language)
                if result is None:
                    logger.info(
                        "translation_failed",
                        word=word,
                        source=source_language,
                        target=target_language,
                    )
                    return None
                translated.append(result)

            return join_words(translated)

    def translate_with_grammar(self, sentence: str, source_language: str, target_language: str) -> Optional[str]:
        with tracer.start_as_current_span("use_case.translate_with_grammar"):
            translated = self.translate_words(sentence, source_language, target_language)
            if translated is None:
                return None

            word_count = len(split_sentence(sentence))
            if len(split_sentence(translated)) != word_count:
                logger.info("translation_length_changed", stage="words", source=source_language, target=target_language)
                return None

            reordered = self.transformer.execute(
                translated,
                NamedStructure(language=source_language),
                NamedStructure(language=target_language),
            )
            if len(split_sentence(reordered)) != word_count:
                logger.info("translation_length_changed", stage="grammar", source=source_language, target=target_language)
                return None

            return reordered

    def _translate_word(self, word: str, source_language: str, target_language: str) -> Optional[str]:
        lexicon = self.phrasebook.lexicon

        if source_language == HEADWORD_LANGUAGE:
            entry = lexicon.lookup(word)
            return entry.translation(target_language) if entry else None

        entry = lexicon.find_by_translation(source_language, word)
        if entry is None:
            return None
        if target_language == HEADWORD_LANGUAGE:
            return entry.word
        return entry.translation(target_language)
