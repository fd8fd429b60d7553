"""Error hierarchy shared by the loader, writer, translator, and CLI."""

from pathlib import Path
from typing import Optional


class BundleTranslatorError(Exception):
    """Base class for every error raised by bundle_translator."""


class FileReadError(BundleTranslatorError):
    """Source properties file is missing, unreadable, or not valid UTF-8."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read {self.path}: {reason}")


class ParseError(BundleTranslatorError):
    """A logical line of the source properties file is malformed."""

    def __init__(self, path: Path, line_number: int, reason: str):
        self.path = Path(path)
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{self.path}:{line_number}: {reason}")


class FileCreateError(BundleTranslatorError):
    """Destination properties file cannot be created or truncated."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot create {self.path}: {reason}")


class TranslationError(BundleTranslatorError):
    """
    A single phrase could not be translated.

    Recoverable: the pipeline skips the affected key and keeps going.
    `status_code` is set when the endpoint answered with a non-200 status.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class MissingArgumentError(BundleTranslatorError):
    """A required command-line argument was not supplied."""


class FileWriteError(BundleTranslatorError):
    """Writing to an already opened destination file failed (e.g. disk full)."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot write {self.path}: {reason}")
