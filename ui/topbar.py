import glob
import os

import streamlit as st
from core import config
from core.i18n import FILE_SUFFIX
from core.version import __version__


def available_languages(lang_path: str) -> list:
    """Language codes with a language file directly under ``lang_path``."""
    files = glob.glob(f"{glob.escape(lang_path)}*{FILE_SUFFIX}")
    return sorted(os.path.basename(f)[: -len(FILE_SUFFIX)] for f in files)


def render_topbar(label: str = "Language") -> str:
    """Render the top bar and return the selected language code."""
    st.session_state.setdefault("ui_prefs", {})
    current = st.session_state["ui_prefs"].setdefault("language", config.DEFAULT_LANG)
    options = available_languages(config.LANGUAGES_PATH)
    if current not in options:
        options.append(current)

    left, right = st.columns([1, 2])
    with left:
        st.markdown(f"**EasyLang v{__version__}**")
    with right:
        st.session_state["ui_prefs"]["language"] = st.selectbox(
            label,
            options,
            key="ui_lang",
            index=options.index(current),
        )
    return st.session_state["ui_prefs"]["language"]
