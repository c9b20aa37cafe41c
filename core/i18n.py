"""Translation loading from per-language ``.ini`` files."""
from __future__ import annotations

import logging
import os
from typing import Dict

from core.ini import parse_ini_file

logger = logging.getLogger(__name__)

FILE_SUFFIX = ".ini"


class LoadError(FileNotFoundError):
    """Raised when the language file for the requested language is missing."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Language file '{path}' does not exist.")
        self.path = path

    def __reduce__(self):
        return (LoadError, (self.path,))


class Translator:
    """Translations of a single language loaded from ``lang_path + lang + '.ini'``.

    ``lang_path`` is used as given, so it has to end with a path separator,
    e.g. ``Translator("languages/", "en")``.
    """

    def __init__(self, lang_path: str, lang: str, is_rtl: bool = False) -> None:
        self._lang = ""
        self._lang_path = ""
        self._is_rtl = False
        self._translations: Dict[str, str] = {}
        self.refresh_translations(lang_path, lang, is_rtl)

    def __repr__(self) -> str:
        return (
            f"Translator(lang_path={self._lang_path!r}, lang={self._lang!r}, "
            f"is_rtl={self._is_rtl!r})"
        )

    @property
    def lang(self) -> str:
        return self._lang

    @property
    def lang_path(self) -> str:
        return self._lang_path

    @property
    def is_rtl(self) -> bool:
        """Whether the current language is written right to left."""
        return self._is_rtl

    @property
    def file_path(self) -> str:
        """Path of the language file for the current ``lang_path`` and ``lang``."""
        return f"{self._lang_path}{self._lang}{FILE_SUFFIX}"

    def refresh_translations(self, lang_path: str, lang: str, is_rtl: bool = False) -> None:
        """Reload translations, optionally switching path and language.

        The language, path and direction are updated even when the file is
        missing; the previously loaded translations are only replaced after
        a successful read.
        """
        self._lang = lang
        self._lang_path = lang_path
        self._is_rtl = is_rtl

        path = self.file_path
        if not os.path.isfile(path):
            logger.warning("Language file %s does not exist", path)
            raise LoadError(path)

        self._translations = parse_ini_file(path)
        logger.debug("Loaded %d translations from %s", len(self._translations), path)

    def change_language(self, lang: str) -> None:
        """Switch to ``lang`` under the current path. Resets ``is_rtl`` to False."""
        self.refresh_translations(self._lang_path, lang)

    def translate(self, key: str) -> str:
        """Return the text for ``key``, or ``**key**`` when it is not translated."""
        try:
            return self._translations[key]
        except KeyError:
            return f"**{key}**"

    def all_translations(self) -> Dict[str, str]:
        """Return a copy of the loaded translations."""
        return dict(self._translations)
