"""
Governorate picker - one card per Tunisian state; picking one filters by location.
"""
from typing import Optional

import streamlit as st

from ...i18n import LocaleContext


TUNISIAN_STATES = [
    "Ariana", "Ben Arous", "Béja", "Bizerte", "Gabès", "Gafsa",
    "Jendouba", "Kairouan", "Kasserine", "Kebili", "Kef", "Mahdia",
    "Manouba", "Medenine", "Monastir", "Nabeul", "Sfax", "Sidi Bouzid",
    "Siliana", "Sousse", "Tataouine", "Tozeur", "Tunis", "Zaghouan",
]


def render_state_picker(locale: LocaleContext, columns: int = 6) -> Optional[str]:
    """
    Render the governorate grid.

    Returns:
        The picked state, or None
    """
    t = locale.t
    st.markdown(f"#### 📍 {t('serviceCoverage')}")
    st.markdown(f"### {t('availableAcross')} {t('tunisia')}")
    st.caption(t('serviceCoverageDescription'))

    picked = None
    for start in range(0, len(TUNISIAN_STATES), columns):
        row = st.columns(columns)
        for column, state in zip(row, TUNISIAN_STATES[start:start + columns]):
            with column:
                st.markdown(
                    f'<div class="state-card"><span class="flag"></span><br>{state}</div>',
                    unsafe_allow_html=True,
                )
                if st.button(t('location'), key=f"state_{state}", use_container_width=True):
                    picked = state

    st.caption(f"{t('dontSeeArea')} {t('contactForAvailability')}")
    return picked
