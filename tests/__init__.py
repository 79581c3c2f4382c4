# tests\__init__.py
"""
Test Suite for lexigram.

Organization:
- `core`: Domain models, lexicon/grammar lookups and the use cases.
- `adapters`: Text-file loader and the command-line driver.
- `services`: The Translator facade (merge, display, end-to-end calls).
"""
