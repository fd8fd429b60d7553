"""Translation Service - abstract interface for one-phrase translation."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class TranslationRequest:
    """A single phrase to translate. Created per entry and then discarded."""

    api_key: str
    phrase: str
    source_lang: str
    target_lang: str

    def to_params(self) -> Dict[str, str]:
        """Query parameters understood by the Google Translate v2 endpoint."""
        return {
            "key": self.api_key,
            "q": self.phrase,
            "source": self.source_lang,
            "target": self.target_lang,
        }


@dataclass
class TranslationResult:
    """Result of a successful translation request."""

    text: str
    provider: str


class TranslationService(ABC):
    """
    Abstract service for translating one phrase between two languages.

    Implementations (e.g., GoogleTranslationService) handle API calls.
    Failures are raised as TranslationError, never returned as a result.
    """

    @abstractmethod
    def translate(self, api_key: str, phrase: str, source: str, target: str) -> TranslationResult:
        """
        Translate a phrase.

        Args:
            api_key: Provider API key for authentication.
            phrase: Text to translate.
            source: Source language code (e.g. "en").
            target: Target language code (e.g. "de").

        Returns:
            TranslationResult with the translated text.

        Raises:
            TranslationError: on any transport, status, or payload failure.
        """
        pass
