"""Translation services - abstract interface and Google Translate implementation."""

from bundle_translator.services.translation.translation_service import (
    TranslationRequest,
    TranslationResult,
    TranslationService,
)
from bundle_translator.services.translation.google_translation_service import (
    DEFAULT_API_URL,
    GoogleTranslationService,
)

__all__ = [
    "TranslationService",
    "TranslationRequest",
    "TranslationResult",
    "GoogleTranslationService",
    "DEFAULT_API_URL",
]
