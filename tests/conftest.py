# tests\conftest.py
import pytest
from structlog.testing import capture_logs

from lexigram.adapters.persistence.text_source import TextFileRuleSource
from lexigram.core.domain.grammar import GrammarTable
from lexigram.core.domain.lexicon import Lexicon
from lexigram.core.domain.models import GrammarRule, LexiconEntry
from lexigram.core.domain.phrasebook import Phrasebook
from lexigram.services.translator import Translator
from lexigram.shared.container import Container

WORDS_TEXT = """\
the, DET, German:der, French:le, Spanish:el
blue, ADJ, German:blau, French:bleu, Spanish:azul
red, ADJ, German:rot, French:rouge, Spanish:rojo
truck, NOU, German:lkw, Spanish:camion
sea, NOU, German:meer, French:mer
fork, NOU, German:gabel, French:fourchette, Italian:forchetta
"""

GRAMMAR_TEXT = """\
English: DET, ADJ, NOU
French: ADJ, NOU, DET
German: NOU, ADJ
Spanish: DET, NOU, DET
"""

@pytest.fixture(autouse=True)
def captured_logs():
    """Routes structlog output into a list instead of stdout."""
    with capture_logs() as logs:
        yield logs

@pytest.fixture
def sample_lexicon():
    """The lexicon from WORDS_TEXT, built without the loader."""
    return Lexicon([
        LexiconEntry(word="the", pos="DET", translations={"German": "der", "French": "le", "Spanish": "el"}),
        LexiconEntry(word="blue", pos="ADJ", translations={"German": "blau", "French": "bleu", "Spanish": "azul"}),
        LexiconEntry(word="red", pos="ADJ", translations={"German": "rot", "French": "rouge", "Spanish": "rojo"}),
        LexiconEntry(word="truck", pos="NOU", translations={"German": "lkw", "Spanish": "camion"}),
        LexiconEntry(word="sea", pos="NOU", translations={"German": "meer", "French": "mer"}),
        LexiconEntry(word="fork", pos="NOU", translations={"German": "gabel", "French": "fourchette", "Italian": "forchetta"}),
    ])

@pytest.fixture
def sample_grammar():
    return GrammarTable([
        GrammarRule(language="English", structure=["DET", "ADJ", "NOU"]),
        GrammarRule(language="French", structure=["ADJ", "NOU", "DET"]),
        GrammarRule(language="German", structure=["NOU", "ADJ"]),
        GrammarRule(language="Spanish", structure=["DET", "NOU", "DET"]),
    ])

@pytest.fixture
def phrasebook(sample_lexicon, sample_grammar):
    return Phrasebook(lexicon=sample_lexicon, grammar=sample_grammar)

@pytest.fixture
def rule_files(tmp_path):
    """Writes the sample rule files and returns (words_path, grammar_path)."""
    words = tmp_path / "words.txt"
    grammar = tmp_path / "grammar.txt"
    words.write_text(WORDS_TEXT, encoding="utf-8")
    grammar.write_text(GRAMMAR_TEXT, encoding="utf-8")
    return words, grammar

@pytest.fixture
def translator(phrasebook):
    return Translator(phrasebook, TextFileRuleSource())

@pytest.fixture(scope="function")
def container(phrasebook):
    """
    Sets up the Dependency Injection Container for testing.
    The phrasebook provider is overridden with the in-memory sample.
    """
    container = Container()
    container.phrasebook.override(phrasebook)

    yield container

    container.phrasebook.reset_override()
