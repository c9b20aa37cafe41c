from pydantic import BaseModel

from core import config
from core.i18n import Translator


class TranslatorSettings(BaseModel):
    lang_path: str = config.LANGUAGES_PATH
    lang: str = config.DEFAULT_LANG
    is_rtl: bool = config.DEFAULT_IS_RTL

    @classmethod
    def from_env(cls) -> "TranslatorSettings":
        """Settings taken from the ``EASYLANG_*`` environment variables."""
        return cls(
            lang_path=config.LANGUAGES_PATH,
            lang=config.DEFAULT_LANG,
            is_rtl=config.DEFAULT_IS_RTL,
        )

    def build(self) -> Translator:
        return Translator(self.lang_path, self.lang, self.is_rtl)
