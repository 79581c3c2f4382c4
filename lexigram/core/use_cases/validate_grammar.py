# lexigram/core/use_cases/validate_grammar.py
import structlog
from typing import Optional, Set

from lexigram.core.domain.models import HEADWORD_LANGUAGE, split_sentence
from lexigram.core.domain.phrasebook import Phrasebook
from lexigram.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class ValidateGrammar:
    """
    Use Case: Checks whether a sentence follows a language's grammar rule.

    A sentence is valid when every token is a known word of the language,
    the token count equals the rule's (unexpanded) tag count, and each
    token's part of speech equals the tag at its position.
    """

    def __init__(self, phrasebook: Phrasebook):
        self.phrasebook = phrasebook

    def execute(self, sentence: Optional[str], language: Optional[str]) -> bool:
        with tracer.start_as_current_span("use_case.validate_grammar") as span:
            if not sentence or not language:
                return False
            span.set_attribute("app.language", language)

            if not self.phrasebook.is_language_available(language):
                logger.info("validation_rejected", reason="language_unavailable", lang=language)
                return False

            expected = [tag.strip() for tag in self.phrasebook.grammar.get(language)]
            tokens = split_sentence(sentence)

            vocabulary = self._vocabulary(language)
            if not all(token in vocabulary for token in tokens):
                logger.debug("validation_failed", reason="unknown_word", lang=language)
                return False

            if len(tokens) != len(expected):
                logger.debug(
                    "validation_failed",
                    reason="length_mismatch",
                    lang=language,
                    tokens=len(tokens),
                    expected=len(expected),
                )
                return False

            actual = [self._part_of_speech(token, language) for token in tokens]
            valid = actual == expected
            logger.debug("validation_done", lang=language, valid=valid, actual=actual, expected=expected)
            return valid

    def _vocabulary(self, language: str) -> Set[str]:
        lexicon = self.phrasebook.lexicon
        if language == HEADWORD_LANGUAGE:
            return set(lexicon.words())
        return set(lexicon.translations_for(language))

    def _part_of_speech(self, token: str, language: str) -> Optional[str]:
        lexicon = self.phrasebook.lexicon
        if language == HEADWORD_LANGUAGE:
            entry = lexicon.lookup(token)
        else:
            entry = lexicon.find_by_translation(language, token)
        # No match compares unequal to any tag, so the sentence is rejected
        return entry.pos if entry else None
