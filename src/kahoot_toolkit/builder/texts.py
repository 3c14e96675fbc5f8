"""
Module: builder.texts

Purpose:
    Translated fixed texts used in generated documents ("Question No",
    "Right"/"Wrong", page footer). Bundles are JSON files shipped in
    builder/locales/, one per language code.

Key Functions:
    - supported_languages(): Language codes with a bundle
    - resolve_language(): Supported code or default (with warning)
    - load_texts(): Cached TextBundle for a language

Key Classes:
    - TextBundle: Key lookup with str.format placeholders

Dependencies:
    - json (std)
    - importlib.resources (std)

Used By:
    - builder.output: DOCX and PDF renderers
    - cli: Locale option
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from types import MappingProxyType
from typing import Any, Mapping, Tuple

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
LOCALES_PACKAGE = "kahoot_toolkit.builder"
LOCALES_DIR = "locales"
TEXT_NOT_FOUND = '<i18n text for key "{key}" not found>'


@dataclass(frozen=True)
class TextBundle:
    """
    Texts for one language (immutable).

    Attributes:
        language: Language code of the bundle
        texts: Read-only mapping of text keys to (format) strings
    """

    language: str
    texts: Mapping[str, str]

    def __post_init__(self) -> None:
        # Bundles are cached and shared between conversions
        object.__setattr__(self, "texts", MappingProxyType(dict(self.texts)))

    def get(self, key: str, **fields: Any) -> str:
        """
        Get translated text, filling `{placeholders}` from fields.

        Missing or blank keys return a visible fallback text instead of
        raising, so a document is still produced.
        """
        text = self.texts.get(key)
        if text is None or not text.strip():
            logger.warning(f'No text for key "{key}" in language "{self.language}"')
            return TEXT_NOT_FOUND.format(key=key)
        return text.format(**fields) if fields else text


@lru_cache(maxsize=None)
def supported_languages() -> Tuple[str, ...]:
    """Language codes that have a bundle, sorted."""
    folder = resources.files(LOCALES_PACKAGE).joinpath(LOCALES_DIR)
    return tuple(
        sorted(entry.name[: -len(".json")] for entry in folder.iterdir() if entry.name.endswith(".json"))
    )


def resolve_language(code: str | None) -> str:
    """
    Normalize a language code, falling back to DEFAULT_LANGUAGE.

    Accepts locale forms like "de_DE" or "en-GB" (only the language part
    is used).

    Example:
        >>> resolve_language("de_DE")
        'de'
        >>> resolve_language("xx")  # logs a warning
        'en'
    """
    if not code:
        return DEFAULT_LANGUAGE
    language = code.replace("-", "_").split("_", 1)[0].strip().lower()
    if language in supported_languages():
        return language
    logger.warning(f'No language bundle for "{code}", will use fallback "{DEFAULT_LANGUAGE}".')
    return DEFAULT_LANGUAGE


@lru_cache(maxsize=None)
def load_texts(language: str) -> TextBundle:
    """
    Load the text bundle for a language.

    Unsupported languages resolve to the default bundle.

    Raises:
        ValueError: Bundle file is not valid JSON
    """
    language = resolve_language(language)
    bundle = resources.files(LOCALES_PACKAGE).joinpath(LOCALES_DIR).joinpath(f"{language}.json")
    try:
        data = json.loads(bundle.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid language bundle {language}.json: {exc}") from exc
    return TextBundle(language=language, texts=data)
