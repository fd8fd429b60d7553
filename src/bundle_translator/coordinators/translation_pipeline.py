"""Translation Pipeline - Translates a whole properties file, one key at a time."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from bundle_translator.core import PropertiesStore, PropertyEntry
from bundle_translator.errors import BundleTranslatorError, TranslationError
from bundle_translator.io import PropertiesWriter, load_properties
from bundle_translator.services.translation import TranslationService

logger = logging.getLogger(__name__)


class PipelineState(Enum):
    INIT = "init"
    LOADED = "loaded"
    ITERATING = "iterating"
    DONE = "done"
    FAILED = "failed"


@dataclass
class PipelineReport:
    """Keys handled by one run, each list in sorted key order."""

    translated: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    filtered: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.translated) + len(self.skipped) + len(self.filtered)

    def summary(self) -> str:
        return (
            f"{len(self.translated)} translated, "
            f"{len(self.skipped)} skipped, "
            f"{len(self.filtered)} empty"
        )


class TranslationPipeline:
    """
    Load -> sort keys -> translate -> escape -> write, for a single file pair.

    Per-key translation failures are logged and the key is left out of the
    output. Load and create failures put the pipeline in FAILED and are raised
    to the caller, which decides whether to terminate.
    """

    def __init__(self, translation_service: TranslationService, api_key: str, source_lang: str, target_lang: str):
        self.translation_service = translation_service
        self.api_key = api_key
        self.source_lang = source_lang
        self.target_lang = target_lang

        self.state = PipelineState.INIT
        self.store: Optional[PropertiesStore] = None

    def run(self, source_file: Path, target_file: Path) -> PipelineReport:
        """
        Translate `source_file` into `target_file`.

        Args:
            source_file: Properties file to read.
            target_file: Properties file to create or truncate.

        Returns:
            PipelineReport listing translated, skipped and filtered keys.

        Raises:
            FileReadError, ParseError: if the source cannot be loaded.
            FileCreateError: if the destination cannot be opened.
            FileWriteError: if writing a line fails mid-run.
        """
        if self.state is not PipelineState.INIT:
            raise RuntimeError(f"Pipeline already ran (state: {self.state.value})")

        try:
            self.store = load_properties(source_file)
            writer = PropertiesWriter(target_file).open()
        except BundleTranslatorError:
            self.state = PipelineState.FAILED
            raise
        self.state = PipelineState.LOADED
        logger.info("Loaded %d keys from %s", len(self.store), source_file)

        report = PipelineReport()
        with writer:
            entries = self.store.entries()
            self.state = PipelineState.ITERATING
            for entry in entries:
                self._process_entry(entry, writer, report)

        self.state = PipelineState.DONE
        logger.info("Wrote %s: %s", target_file, report.summary())
        return report

    def _process_entry(self, entry: PropertyEntry, writer: PropertiesWriter, report: PipelineReport) -> None:
        try:
            result = self.translation_service.translate(self.api_key, entry.value, self.source_lang, self.target_lang)
        except TranslationError as e:
            logger.warning("Failed to translate %s <%s>: %s", entry.key, entry.value, e)
            report.skipped.append(entry.key)
            return

        if writer.write_entry(PropertyEntry(entry.key, result.text)):
            report.translated.append(entry.key)
        else:
            report.filtered.append(entry.key)
