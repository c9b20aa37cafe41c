import logging
from typing import Optional

import streamlit as st
from core import config
from core.i18n import LoadError, Translator
from core.log import setup_logging
from core.state import load_state, save_state
from ui.topbar import render_topbar

logger = logging.getLogger(__name__)


def init_state():
    ss = st.session_state
    ss.setdefault("ui_prefs", {})
    ss["ui_prefs"].setdefault("language", config.DEFAULT_LANG)


def get_translator(lang: str) -> Optional[Translator]:
    """Return the session translator for ``lang``, loading it when needed."""
    is_rtl = lang in config.RTL_LANGS
    tr = st.session_state.get("translator")
    try:
        if tr is None:
            tr = Translator(config.LANGUAGES_PATH, lang, is_rtl)
        elif tr.lang != lang or tr.lang_path != config.LANGUAGES_PATH:
            tr.refresh_translations(config.LANGUAGES_PATH, lang, is_rtl)
    except LoadError as exc:
        st.session_state.pop("translator", None)
        st.error(str(exc))
        return None
    st.session_state["translator"] = tr
    return tr


def render_page(tr: Translator):
    direction = "rtl" if tr.is_rtl else "ltr"
    st.title(tr.translate("title"))
    st.markdown(
        f'<div dir="{direction}">'
        f"<p>{tr.translate('greeting')}</p>"
        f"<p>{tr.translate('farewell')}</p>"
        f"<p>{tr.translate('direction')}: {tr.translate(direction)}</p>"
        "</div>",
        unsafe_allow_html=True,
    )
    with st.expander(tr.translate("language")):
        st.json(tr.all_translations())


def main():
    setup_logging(config.LOG_LEVEL)
    st.set_page_config(page_title="EasyLang", layout="centered")
    load_state()
    init_state()

    lang = render_topbar()

    tr = get_translator(lang)
    if tr is not None:
        render_page(tr)
    save_state()


if __name__ == "__main__":
    main()
