# lexigram\core\domain\models.py
import re
from typing import Dict, List, Literal, Optional, Sequence, Union
from pydantic import BaseModel, Field, ValidationError

# The language whose words are the lexicon keys (headwords)
HEADWORD_LANGUAGE = "English"

WORD_PATTERN = r"^[a-z-]+$"
POS_PATTERN = r"^[A-Z]{3}$"

# A structure tag: three uppercase letters, optionally followed by {1-9}
STRUCTURE_TAG_RE = re.compile(r"^([A-Z]{3}(\{[1-9]\})?)$")

# --- Entities ---

class LexiconEntry(BaseModel):
    """
    A single headword in the lexicon.
    """
    word: str = Field(..., pattern=WORD_PATTERN, description="English headword (unique key)")
    pos: str = Field(..., pattern=POS_PATTERN, description="Part of speech, e.g. 'NOU'")

    # Language name -> translated word. May be partial.
    translations: Dict[str, str] = Field(default_factory=dict)

    def translation(self, language: str) -> Optional[str]:
        return self.translations.get(language)

    def has_translation(self, language: str) -> bool:
        return language in self.translations

class GrammarRule(BaseModel):
    """
    The expected part-of-speech order for one language.
    Tags are kept raw (e.g. 'ADJ{2}'); expansion happens in the resolver.
    """
    language: str
    structure: List[str] = Field(default_factory=list)

# --- Structures ---

class NamedStructure(BaseModel):
    """A structure given by reference to a language's grammar rule."""
    kind: Literal["named"] = "named"
    language: str

class ExplicitStructure(BaseModel):
    """A structure given as an explicit tag sequence."""
    kind: Literal["explicit"] = "explicit"
    tags: List[str] = Field(default_factory=list)

Structure = Union[NamedStructure, ExplicitStructure]

def as_structure(value: Union[Structure, str, Sequence[str], None]) -> Optional[Structure]:
    """
    Coerces caller input into a Structure.

    A plain string names a grammar rule; a list or tuple of strings is taken
    as explicit tags. Anything else yields None, which the resolver treats
    as an invalid, empty structure.
    """
    if isinstance(value, (NamedStructure, ExplicitStructure)):
        return value
    if isinstance(value, str):
        return NamedStructure(language=value)
    if isinstance(value, (list, tuple)):
        try:
            return ExplicitStructure(tags=list(value))
        except ValidationError:
            return None
    return None

# --- Sentences ---

def split_sentence(sentence: str) -> List[str]:
    return sentence.split()

def join_words(words: Sequence[str]) -> str:
    return " ".join(words)
