# lexigram\core\domain\lexicon.py
"""
Word lexicon: headword -> (part of speech, translations).

Lookups are linear scans in insertion order and the first match wins.
Generation and reverse translation depend on which entry comes first, so the
backing store is an insertion-ordered dict.

Entries go in and come out as copies; the only way to change a stored entry
is `add` or `merge`.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

from .models import LexiconEntry


def _copy(entry: Optional[LexiconEntry]) -> Optional[LexiconEntry]:
    return entry.model_copy(deep=True) if entry is not None else None


class Lexicon:
    """Insertion-ordered collection of LexiconEntry keyed by headword."""

    def __init__(self, entries: Optional[Iterable[LexiconEntry]] = None) -> None:
        self._entries: Dict[str, LexiconEntry] = {}
        for entry in entries or ():
            self.add(entry)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LexiconEntry]:
        for entry in self._entries.values():
            yield _copy(entry)

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def words(self) -> List[str]:
        return list(self._entries)

    def add(self, entry: LexiconEntry) -> None:
        """
        Insert or replace an entry.

        A replaced headword keeps its original position.
        """
        self._entries[entry.word] = _copy(entry)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def lookup(self, word: str) -> Optional[LexiconEntry]:
        return _copy(self._entries.get(word))

    def find_by_part_of_speech(
        self, tag: str, language: Optional[str] = None
    ) -> Optional[LexiconEntry]:
        """
        First entry tagged `tag`. With `language`, the entry must also
        carry a translation for that language.
        """
        for entry in self._entries.values():
            if entry.pos != tag:
                continue
            if language is not None and not entry.has_translation(language):
                continue
            return _copy(entry)
        return None

    def find_by_translation(self, language: str, word: str) -> Optional[LexiconEntry]:
        """First entry whose `language` translation equals `word`."""
        for entry in self._entries.values():
            if entry.translations.get(language) == word:
                return _copy(entry)
        return None

    def has_language(self, language: str) -> bool:
        """True if at least one entry has a translation into `language`."""
        return any(entry.has_translation(language) for entry in self._entries.values())

    def translations_for(self, language: str) -> List[str]:
        """Every translated word for `language`, in entry order."""
        return [
            entry.translations[language]
            for entry in self._entries.values()
            if entry.has_translation(language)
        ]

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def merge(self, new_entries: Iterable[LexiconEntry]) -> None:
        """
        Merge entries into this lexicon in place.

        Known headwords keep their part of speech and get their translations
        updated (new values overwrite, missing languages are added). Unknown
        headwords are appended.
        """
        for new in new_entries:
            existing = self._entries.get(new.word)
            if existing is None:
                self._entries[new.word] = _copy(new)
                continue
            existing.translations.update(new.translations)
