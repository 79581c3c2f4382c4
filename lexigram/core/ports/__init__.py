# lexigram\core\ports\__init__.py
"""
Core Ports (Interfaces).

This package defines the Protocols that the Adapters must implement. These
interfaces let the Core Domain obtain lexicon and grammar data without
knowing where or in which format it is stored.
"""

from .rule_source import IRuleSource

__all__ = [
    "IRuleSource",
]
