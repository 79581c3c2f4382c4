import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "lexigram"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"
    OTEL_SERVICE_NAME: str = "lexigram"

    # --- Rule Files ---
    # Relative DATA_DIR values resolve against the working directory
    DATA_DIR: str = "data"
    WORDS_FILE: str = "words.txt"
    GRAMMAR_FILE: str = "grammar.txt"

    # --- Dynamic Path Resolution ---

    @property
    def WORDS_PATH(self) -> str:
        """Path to the word lexicon (`word, POS, Lang:translation, ...` lines)."""
        return os.path.join(self.DATA_DIR, self.WORDS_FILE)

    @property
    def GRAMMAR_PATH(self) -> str:
        """Path to the grammar table (`Language: POS, POS{n}, ...` lines)."""
        return os.path.join(self.DATA_DIR, self.GRAMMAR_FILE)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
