"""
Hero section - headline, feature cards and trust indicators.
"""
import html

import streamlit as st

from ...i18n import LocaleContext


FEATURES = [
    ("⚡", "fastBooking", "fastBookingDesc"),
    ("🛡️", "verifiedProfessionals", "verifiedProfessionalsDesc"),
    ("💰", "transparentPricing", "transparentPricingDesc"),
]

TRUST_INDICATORS = ["happyCustomers", "averageRating", "activeProfessionals"]


def render_hero(locale: LocaleContext) -> bool:
    """
    Render the hero section.

    Returns:
        True if the "view all services" button was clicked
    """
    t = locale.t

    st.markdown(f"""
    <div class="hero">
        <span class="badge">✨ {html.escape(t('platformBadge'))}</span>
        <h1>{html.escape(t('heroTitle'))}</h1>
        <p class="subtitle">{html.escape(t('heroSubtitle'))}</p>
    </div>
    """, unsafe_allow_html=True)

    columns = st.columns(len(FEATURES))
    for column, (icon, title_key, desc_key) in zip(columns, FEATURES):
        with column:
            st.markdown(f"""
            <div class="feature-card">
                <div class="feature-title">{icon} {html.escape(t(title_key))}</div>
                <div class="feature-desc">{html.escape(t(desc_key))}</div>
            </div>
            """, unsafe_allow_html=True)

    trust_html = "".join(
        f"<span>⭐ {html.escape(t(key))}</span>" for key in TRUST_INDICATORS
    )
    st.markdown(f'<div class="trust-row">{trust_html}</div>', unsafe_allow_html=True)

    col1, col2, col3 = st.columns([1, 1, 1])
    with col2:
        return st.button(f"{t('viewAllServices')} →", type="primary", use_container_width=True)
