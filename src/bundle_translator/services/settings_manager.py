"""Settings Manager - Handles API key and endpoint configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from bundle_translator.services.translation import DEFAULT_API_URL

API_KEY_ENV_VAR = "GOOGLE_API_KEY"
API_URL_ENV_VAR = "GOOGLE_TRANSLATE_URL"


class SettingsManager:
    """
    Manages settings and API key configuration.

    Reads values from the process environment, after loading a .env file
    from the project root. Variables already set in the environment win.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Directory holding the .env file.
                         If None, the current working directory is used.
        """
        if project_root is None:
            project_root = Path.cwd()

        self._project_root = Path(project_root)
        load_dotenv(dotenv_path=self._env_path)

    @property
    def _env_path(self) -> Path:
        return self._project_root / ".env"

    def get_google_api_key(self) -> Optional[str]:
        """Get the Google Translate API key from environment."""
        key = os.getenv(API_KEY_ENV_VAR)
        return key.strip() if key and key.strip() else None

    def get_api_url(self) -> str:
        """Get the translation endpoint URL, falling back to the public v2 API."""
        url = os.getenv(API_URL_ENV_VAR)
        return url.strip() if url and url.strip() else DEFAULT_API_URL

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        load_dotenv(dotenv_path=self._env_path, override=True)
