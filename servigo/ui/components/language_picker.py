"""
Language picker component.
"""
import streamlit as st

from ...i18n import LANGUAGE_LABELS, LANGUAGES, LocaleContext


def render_language_picker(locale: LocaleContext) -> bool:
    """
    Render the language selector.

    Returns:
        True if the language was changed (the caller should rerun)
    """
    selected = st.selectbox(
        f"🌐 {locale.t('language')}",
        options=list(LANGUAGES),
        index=LANGUAGES.index(locale.language),
        format_func=lambda code: LANGUAGE_LABELS.get(code, code),
        key="language_select",
    )
    if selected != locale.language:
        locale.set_language(selected)
        return True
    return False
