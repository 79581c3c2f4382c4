# lexigram\shared\container.py
import os

from dependency_injector import containers, providers

from lexigram.shared.config import settings
from lexigram.adapters.persistence.text_source import TextFileRuleSource
from lexigram.core.use_cases.generate_sentence import GenerateSentence
from lexigram.core.use_cases.validate_grammar import ValidateGrammar
from lexigram.core.use_cases.transform_structure import TransformStructure
from lexigram.core.use_cases.translate_sentence import TranslateSentence
from lexigram.services.translator import Translator, load_phrasebook

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the application.
    """

    # 1. Configuration
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Gateways (Adapters)
    rule_source = providers.Singleton(
        TextFileRuleSource
    )

    # 3. Domain state (Singleton: loaded once, merged in place afterwards)
    phrasebook = providers.Singleton(
        load_phrasebook,
        source=rule_source,
        words_path=providers.Callable(os.path.join, config.DATA_DIR, config.WORDS_FILE),
        grammar_path=providers.Callable(os.path.join, config.DATA_DIR, config.GRAMMAR_FILE),
    )

    # 4. Use Cases (Factory: stateless logic over the shared phrasebook)
    generate_sentence_use_case = providers.Factory(
        GenerateSentence,
        phrasebook=phrasebook
    )

    validate_grammar_use_case = providers.Factory(
        ValidateGrammar,
        phrasebook=phrasebook
    )

    transform_structure_use_case = providers.Factory(
        TransformStructure,
        phrasebook=phrasebook
    )

    translate_sentence_use_case = providers.Factory(
        TranslateSentence,
        phrasebook=phrasebook,
        transformer=transform_structure_use_case
    )

    translator = providers.Factory(
        Translator,
        phrasebook=phrasebook,
        source=rule_source
    )
