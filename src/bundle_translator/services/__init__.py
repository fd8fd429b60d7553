"""Services layer - translation, escaping, and configuration."""

from bundle_translator.services.settings_manager import SettingsManager

# Text processing services
from bundle_translator.services.text_processing import escape_non_ascii

# Translation services
from bundle_translator.services.translation import (
	DEFAULT_API_URL,
	GoogleTranslationService,
	TranslationRequest,
	TranslationResult,
	TranslationService,
)

__all__ = [
	"SettingsManager",
	"escape_non_ascii",
	"TranslationService",
	"TranslationRequest",
	"TranslationResult",
	"GoogleTranslationService",
	"DEFAULT_API_URL",
]
