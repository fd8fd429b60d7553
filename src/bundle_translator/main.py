"""Command-line entry point for translating Java ResourceBundle properties files.

Example:
    bundle-translate --source en --target de translations.properties translations_de.properties
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from bundle_translator import __version__
from bundle_translator.coordinators import TranslationPipeline
from bundle_translator.errors import BundleTranslatorError, MissingArgumentError
from bundle_translator.services import GoogleTranslationService, SettingsManager
from bundle_translator.services.settings_manager import API_KEY_ENV_VAR

logger = logging.getLogger(__name__)

PROG = "bundle-translate"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class RunOptions:
    """Validated command-line options for one run."""

    source_file: Path
    target_file: Path
    source_lang: str
    target_lang: str
    api_key: str
    api_url: str


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage=f"{PROG} [options] source_file target_file",
        description="translate a Java ResourceBundle Properties file with Google Translate",
    )
    parser.add_argument("source_file", nargs="?", help="properties file to translate")
    parser.add_argument("target_file", nargs="?", help="properties file to write (created or truncated)")
    parser.add_argument("-s", "--source", help="source language code")
    parser.add_argument("-t", "--target", help="target language code")
    parser.add_argument("-k", "--key", help=f"Google Translate API key [${API_KEY_ENV_VAR}]")
    parser.add_argument("--api-url", help="translation endpoint URL (defaults to the public v2 API)")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="only log warnings and errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")


def resolve_options(args: argparse.Namespace, settings: SettingsManager) -> RunOptions:
    """
    Check required arguments in the order they are reported to the user.

    Raises:
        MissingArgumentError: for the first missing argument.
    """
    if not args.source_file:
        raise MissingArgumentError("source property file is required")
    if not args.target_file:
        raise MissingArgumentError("destination property file is required")
    if not args.source:
        raise MissingArgumentError("--source is required")
    if not args.target:
        raise MissingArgumentError("--target is required")

    api_key = args.key or settings.get_google_api_key()
    if not api_key:
        raise MissingArgumentError("--key is required")

    return RunOptions(
        source_file=Path(args.source_file),
        target_file=Path(args.target_file),
        source_lang=args.source,
        target_lang=args.target,
        api_key=api_key,
        api_url=args.api_url or settings.get_api_url(),
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet)

    settings = SettingsManager()
    try:
        options = resolve_options(args, settings)
    except MissingArgumentError as e:
        print(e)
        parser.print_usage()
        return 1

    service = GoogleTranslationService(api_url=options.api_url)
    pipeline = TranslationPipeline(
        translation_service=service,
        api_key=options.api_key,
        source_lang=options.source_lang,
        target_lang=options.target_lang,
    )
    try:
        pipeline.run(options.source_file, options.target_file)
    except BundleTranslatorError as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        service.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
