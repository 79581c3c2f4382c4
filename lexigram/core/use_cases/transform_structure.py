# lexigram/core/use_cases/transform_structure.py
import structlog
from typing import List, Sequence, Union

from lexigram.core.domain.models import Structure, as_structure, join_words, split_sentence
from lexigram.core.domain.phrasebook import Phrasebook
from lexigram.core.domain.structure import StructureResolver
from lexigram.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

StructureLike = Union[Structure, str, Sequence[str]]

class TransformStructure:
    """
    Use Case: Reorders a sentence's words from a source structure into a
    target structure.

    Tokens are paired with the expanded source tags by position. For each
    expanded target tag, the first pair with that tag supplies the token.
    Pairs are not consumed, so a tag repeated in the target reuses the same
    token. A target tag with no source pair is skipped, which can make the
    result shorter than the target structure.
    """

    def __init__(self, phrasebook: Phrasebook):
        self.phrasebook = phrasebook
        self.resolver = StructureResolver(phrasebook.grammar)

    def execute(self, sentence: str, source: StructureLike, target: StructureLike) -> str:
        source = as_structure(source)
        target = as_structure(target)

        with tracer.start_as_current_span("use_case.transform_structure") as span:
            source_tags = self.resolver.resolve_expanded(source)
            target_tags = self.resolver.resolve_expanded(target)

            tokens = [token.strip() for token in split_sentence(sentence)]
            pairs = list(zip(tokens, source_tags))

            words: List[str] = []
            skipped = 0
            for tag in target_tags:
                match = next((token for token, pos in pairs if pos == tag), None)
                if match is None:
                    skipped += 1
                    continue
                words.append(match)

            span.set_attribute("app.skipped_tags", skipped)
            if skipped:
                logger.debug("transform_skipped_tags", skipped=skipped, target=target_tags)
            return join_words(words)
