"""Translations loaded from per-language ``.ini`` files.

Usage::

    from easylang import Translator

    tr = Translator("languages/", "en")  # keep the trailing separator
    tr.translate("greeting")
"""

__all__ = ["LoadError", "Translator", "TranslatorSettings", "__version__"]

from core.i18n import LoadError, Translator
from core.models import TranslatorSettings
from core.version import __version__
