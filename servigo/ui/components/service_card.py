"""
Service card component - displays enriched listings in a grid.
"""
import html
from typing import Optional

import streamlit as st

from ...i18n import LocaleContext
from ...models.enrichment import EnrichedListing
from ...models.filters import Tab


def render_service_grid(
    listings: tuple[EnrichedListing, ...],
    tab: Tab,
    category_names: dict[str, str],
    locale: LocaleContext,
    currency: str = "TND",
    columns: int = 3,
) -> Optional[str]:
    """
    Render listings as a card grid.

    Returns:
        The provider id whose profile was requested, or None
    """
    if not listings:
        st.info(locale.t('noOnsiteServices' if tab == "onsite" else 'noOnlineServices'))
        return None

    requested = None
    for start in range(0, len(listings), columns):
        row = st.columns(columns)
        for column, listing in zip(row, listings[start:start + columns]):
            with column:
                category = category_names.get(listing.listing.job_category_id or "")
                if render_service_card(listing, tab, category, locale, currency):
                    requested = listing.provider.id
    return requested


def render_service_card(
    listing: EnrichedListing,
    tab: Tab,
    category: Optional[str],
    locale: LocaleContext,
    currency: str = "TND",
) -> bool:
    """Render a single card. Returns True if "view profile" was clicked."""
    t = locale.t
    provider = listing.provider

    photo = listing.display_photo
    photo_style = f' style="background-image: url(\'{html.escape(photo)}\');"' if photo else ""
    badge = "📍 " + t('onSite') if tab == "onsite" else "💻 " + t('online')

    business = ""
    if listing.listing.business_name and listing.listing.business_name != listing.provider_name:
        business = f'<div class="business">{html.escape(listing.listing.business_name)}</div>'

    if provider.is_rated:
        rating = f'<span class="rating">★ {provider.rating:.1f}</span> ({provider.total_reviews} {t("reviews")})'
    else:
        rating = f'<span class="rating">★ {t("unrated")}</span>'

    verified = f'<span class="verified-tag">✔ {t("verified")}</span>' if provider.is_approved else ""

    price = listing.price_label(currency)
    if price:
        price = price.replace("/hour", t('perHour'))
    price_html = f'<span class="price">{html.escape(price)}</span>' if price else ""

    description = listing.listing.description or t('professionalService')

    st.markdown(f"""
    <div class="service-card">
        <div class="photo"{photo_style}>
            <span class="type-badge type-{tab}">{badge}</span>
        </div>
        <div class="body">
            <div class="title">{html.escape(listing.provider_name)} {verified}</div>
            {business}
            <div class="description">{html.escape(description[:160])}</div>
            <div class="meta">
                <span>📍 {html.escape(listing.location or '-')}</span>
                <span>{html.escape(category or '')}</span>
            </div>
            <div class="meta">
                <span>{rating}</span>
                {price_html}
            </div>
        </div>
    </div>
    """, unsafe_allow_html=True)

    return st.button(
        t('viewProfile'),
        key=f"profile_{listing.id}",
        use_container_width=True,
        disabled=provider.is_placeholder,
    )
