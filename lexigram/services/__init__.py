# lexigram\services\__init__.py
from .translator import Translator

__all__ = ["Translator"]
