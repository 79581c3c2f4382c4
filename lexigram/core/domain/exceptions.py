# lexigram/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Loading Errors ---

class RuleSourceNotFoundError(DomainError):
    """Raised when a word lexicon or grammar file cannot be opened."""
    def __init__(self, path: str, reason: str = "file not found"):
        self.path = path
        super().__init__(f"Cannot read rule source '{path}': {reason}.")

# --- Validation Errors ---

class InvalidStructureError(DomainError):
    """Raised when a structure argument cannot be turned into a Structure."""
    def __init__(self, reason: str):
        super().__init__(f"Invalid structure: {reason}")
