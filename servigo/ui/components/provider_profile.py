"""
Provider profile component - full provider view with services and reviews.
"""
import html

import streamlit as st

from ...i18n import LocaleContext
from ...models.details import ProviderDetails


def render_provider_profile(details: ProviderDetails, locale: LocaleContext, currency: str = "TND"):
    """
    Render a provider's profile page.

    Args:
        details: Loaded provider details
        locale: Active locale
        currency: Currency label for hourly rates
    """
    t = locale.t
    provider = details.provider

    photo = (
        f'<img src="{html.escape(details.photo_url)}" alt="{html.escape(details.display_name)}">'
        if details.photo_url else '<div style="font-size: 3rem;">👤</div>'
    )
    st.markdown(f"""
    <div class="provider-header">
        {photo}
        <div>
            <h2 style="margin: 0;">{html.escape(details.display_name)}</h2>
            <div>{html.escape(provider.business_name)}</div>
            <div class="verified-tag">{('✔ ' + html.escape(t('verified'))) if provider.is_approved else ''}</div>
            <div class="rating">{'★' * round(provider.rating)}{'☆' * (5 - round(provider.rating))}
                {provider.rating:.1f} ({provider.total_reviews} {html.escape(t('reviews'))})</div>
            <div>🟢 {html.escape(t('availableForBooking'))}</div>
        </div>
    </div>
    """, unsafe_allow_html=True)

    if details.category is not None:
        st.markdown(f"**{t('category')}:** {details.category.name}")

    if provider.business_description:
        st.markdown(f"### {t('aboutProvider')}")
        st.markdown(provider.business_description)

    # Services
    st.markdown(f"### {t('servicesOffered')}")
    if not details.services:
        st.info(t('noServicesAvailable'))
    for summary in details.services:
        listing = summary.listing
        label = summary.category.name if summary.category else t('service')
        with st.expander(f"🛠️ {label} • 📍 {listing.location or '-'}", expanded=summary is details.selected_service):
            if summary.primary_image:
                st.image(summary.primary_image, use_container_width=True)
            st.markdown(listing.description or t('professionalService'))
            if listing.hourly_rate is not None:
                st.markdown(f"**{listing.hourly_rate:g} {currency}{t('perHour')}**")

    # Reviews
    st.markdown(f"### {t('customerReviews')}")
    if not details.reviews:
        st.caption(t('noReviews'))
    for review in details.reviews:
        date = review.created_at.strftime("%Y-%m-%d") if review.created_at else ""
        st.markdown(f"""
        <div class="review-card">
            <div><strong>{html.escape(review.reviewer_name)}</strong>
                <span class="rating">{'★' * review.rating}</span>
                <span style="color: var(--text-muted); font-size: 0.8rem;">{date}</span></div>
            <div>{html.escape(review.comment or '')}</div>
        </div>
        """, unsafe_allow_html=True)
