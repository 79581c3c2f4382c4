# lexigram\adapters\__init__.py
"""
Adapters (Infrastructure).

Concrete implementations of the Core Ports plus the command-line driver:
- persistence: text-file loader for the word lexicon and grammar table
- cli: argparse front end issuing use-case calls and printing results
"""
