"""
Filter sidebar - category, location and availability controls.
"""
import streamlit as st

from ...i18n import LocaleContext
from ...models.filters import ALL
from ...pipeline.browse import BrowseSession
from ...pipeline.loader import ListingSnapshot


AVAILABILITY_OPTIONS = ["verified", "licensed"]


def render_filter_sidebar(
    session: BrowseSession,
    snapshot: ListingSnapshot,
    locale: LocaleContext,
) -> bool:
    """
    Render the filter controls and apply changes to the session.

    Returns:
        True if any criterion changed (the caller should rerun)
    """
    t = locale.t
    criteria = session.criteria
    changed = False

    st.markdown(f"### 🔎 {t('filter')}")
    st.caption(t('refineSearch'))

    # Category, limited to the active tab plus the current selection
    category_options = session.category_options(snapshot)
    names = {category.id: category.name for category in snapshot.categories}
    category = st.selectbox(
        t('category'),
        options=category_options,
        index=category_options.index(criteria.category),
        format_func=lambda value: t('allCategories') if value == ALL else names.get(value, value),
    )
    if category != criteria.category:
        session.update(category=category)
        changed = True

    # Location
    location_options = [ALL] + session.locations(snapshot)
    if criteria.location not in location_options:
        location_options.append(criteria.location)
    location = st.selectbox(
        t('location'),
        options=location_options,
        index=location_options.index(criteria.location),
        format_func=lambda value: t('allLocations') if value == ALL else value,
    )
    if location != criteria.location:
        session.update(location=location)
        changed = True

    # Availability
    st.markdown(f"**{t('availability')}**")
    selected = set()
    for option in AVAILABILITY_OPTIONS:
        if st.checkbox(t(option), value=option in criteria.availability, key=f"availability_{option}"):
            selected.add(option)
    if selected != set(criteria.availability):
        session.update(availability=selected)
        changed = True

    # Results count
    st.metric(t('resultsFound'), len(session.filtered(snapshot)))

    if st.button(f"↺ {t('resetFilters')}", use_container_width=True):
        session.reset_filters()
        for option in AVAILABILITY_OPTIONS:
            st.session_state.pop(f"availability_{option}", None)
        changed = True

    return changed
