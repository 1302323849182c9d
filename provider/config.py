"""
Question provider configuration.
Reads the Gemini settings from environment variables (.env file).
"""

import os
from dataclasses import dataclass

DEFAULT_MODEL = "gemini-2.5-flash"


@dataclass(frozen=True)
class ProviderConfig:
    api_key: str | None = None
    model: str = DEFAULT_MODEL

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    @classmethod
    def from_env(cls) -> "ProviderConfig":
        """
        Build the config from the environment.

        Environment variables:
            GEMINI_API_KEY - Gemini API key. Blank or unset means offline:
                             the provider serves the built-in questions.
            QUIZ_MODEL     - Model name (default: gemini-2.5-flash)
        """
        api_key = os.environ.get("GEMINI_API_KEY", "").strip() or None
        model = os.environ.get("QUIZ_MODEL", "").strip() or DEFAULT_MODEL
        return cls(api_key=api_key, model=model)
