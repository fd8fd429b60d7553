"""Google Translation Service - Implements translation via the Google Translate v2 REST API."""

import logging
from typing import Optional

import requests

from bundle_translator.errors import TranslationError
from bundle_translator.services.translation.translation_service import (
    TranslationRequest,
    TranslationResult,
    TranslationService,
)

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://www.googleapis.com/language/translate/v2"


class GoogleTranslationService(TranslationService):
    """
    Translation service using the Google Translate v2 endpoint.

    Sends one GET request per phrase. The endpoint URL and the HTTP session are
    injected so tests (or proxies) can point the service elsewhere.
    """

    PROVIDER_NAME = "google-translate-v2"

    def __init__(self, api_url: str = DEFAULT_API_URL, session: Optional[requests.Session] = None):
        self.api_url = api_url
        self._session = session or requests.Session()

    def translate(self, api_key: str, phrase: str, source: str, target: str) -> TranslationResult:
        """
        Translate `phrase` from `source` to `target`.

        Args:
            api_key: Google API key.
            phrase: Text to translate.
            source: Source language code.
            target: Target language code.

        Returns:
            TranslationResult with the first translation returned by the API.

        Raises:
            TranslationError: on transport failure, a non-200 status, an
                undecodable body, or an empty translations array.
        """
        request = TranslationRequest(
            api_key=api_key,
            phrase=phrase,
            source_lang=source,
            target_lang=target,
        )

        try:
            response = self._session.get(self.api_url, params=request.to_params())
        except requests.exceptions.RequestException as e:
            logger.debug("Failed to translate <%s> from `%s` to `%s`: %s", phrase, source, target, e)
            raise TranslationError(f"Request to {self.api_url} failed: {e}") from e

        if response.status_code != 200:
            logger.debug(
                "Failed to translate <%s> from `%s` to `%s`: HTTP %d",
                phrase, source, target, response.status_code,
            )
            raise TranslationError(
                f"Google Translate returned {response.status_code}",
                status_code=response.status_code,
            )

        translated = self._extract_translation(response)
        logger.info("Translated from %s to %s:\n  > %s\n  > %s", source, target, phrase, translated)
        return TranslationResult(text=translated, provider=self.PROVIDER_NAME)

    def close(self) -> None:
        """Release pooled connections held by the session."""
        self._session.close()

    @staticmethod
    def _extract_translation(response: requests.Response) -> str:
        """Pull `data.translations[0].translatedText` out of the response body."""
        try:
            payload = response.json()
        except ValueError as e:
            raise TranslationError("Google Translate returned a body that is not JSON") from e

        try:
            translations = payload["data"]["translations"]
        except (KeyError, TypeError) as e:
            raise TranslationError("Google Translate response has no data.translations") from e

        if not translations:
            raise TranslationError("Google Translate returned no translations")

        try:
            text = translations[0]["translatedText"]
        except (KeyError, TypeError) as e:
            raise TranslationError("Google Translate response has no translatedText") from e

        if not isinstance(text, str):
            raise TranslationError("Google Translate returned a non-string translatedText")
        return text
