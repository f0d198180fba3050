"""
ServiGO - find and book local professionals across Tunisia.

Streamlit UI over the listing pipeline.
"""
import atexit
import logging
import sys
from pathlib import Path

# Add project root to path for imports when running via streamlit
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import streamlit as st

from servigo.config import get_config
from servigo.client import BackendClient, BackendError, ChangeFeed
from servigo.i18n import LocaleContext
from servigo.pipeline import BrowseSession, ListingLoader, ProviderDetailsLoader, ProviderNotFoundError

from servigo.ui.styles import inject_custom_css
from servigo.ui.components import (
    render_filter_sidebar,
    render_hero,
    render_language_picker,
    render_provider_profile,
    render_service_grid,
    render_state_picker,
)


logger = logging.getLogger(__name__)


@st.cache_resource
def get_listing_loader() -> ListingLoader:
    """One client, change feed and loader shared by every browser session."""
    config = get_config()
    client = BackendClient(config.backend)
    feed = None
    if config.enable_change_feed:
        feed = ChangeFeed(client, poll_interval=config.loader.poll_interval)
    loader = ListingLoader(client, feed=feed)
    loader.start()
    atexit.register(loader.stop)
    return loader


def init_session_state():
    """Initialize session state variables."""
    st.session_state.loader = get_listing_loader()
    st.session_state.client = st.session_state.loader.client
    if "locale" not in st.session_state:
        st.session_state.locale = LocaleContext()

    defaults = {
        "browse": BrowseSession(),
        "view": "browse",  # browse, provider
        "provider_id": None,
        "query_params_applied": False,
        "seen_generation": 0,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def watch_listings():
    """Rerun the page once a newer snapshot has been published."""
    generation = st.session_state.loader.snapshot.generation
    if generation != st.session_state.seen_generation:
        st.session_state.seen_generation = generation
        st.rerun()


def main():
    """Main application entry point."""
    config = get_config()
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Page config
    st.set_page_config(
        page_title=config.ui.page_title,
        page_icon=config.ui.page_icon,
        layout="wide",
        initial_sidebar_state="expanded",
    )

    init_session_state()
    locale: LocaleContext = st.session_state.locale

    inject_custom_css(locale.document)

    render_header(locale)

    apply_query_params()

    if st.session_state.view == "provider":
        render_provider_step(locale)
    else:
        render_browse_step(locale)


def render_header(locale: LocaleContext):
    """Render the app header with the language selector."""
    col1, col2 = st.columns([4, 1])
    with col1:
        st.markdown(f"## 🛠️ ServiGO • {locale.t('findServices')}")
    with col2:
        if render_language_picker(locale):
            st.rerun()


def apply_query_params():
    """Preselect filters (or open a provider) from the page URL, once per session."""
    if st.session_state.query_params_applied:
        return
    snapshot = st.session_state.loader.snapshot
    params = {key: st.query_params.get(key) for key in ("location", "service", "provider")}

    # Wait for categories before resolving a service name
    if params["service"] and not snapshot.categories and snapshot.state == "loading":
        return

    st.session_state.browse.apply_query_params(
        {key: value for key, value in params.items() if value},
        list(snapshot.categories),
    )
    if params["provider"]:
        open_provider(params["provider"])
    st.session_state.query_params_applied = True


def open_provider(provider_id: str):
    st.session_state.provider_id = provider_id
    st.session_state.view = "provider"


def render_browse_step(locale: LocaleContext):
    """Render the hero, governorate picker, filters and the tabbed listing grid."""
    config = get_config()
    t = locale.t
    loader: ListingLoader = st.session_state.loader
    session: BrowseSession = st.session_state.browse
    snapshot = loader.snapshot
    st.session_state.seen_generation = snapshot.generation
    if loader.feed is not None:
        st.fragment(watch_listings, run_every=config.loader.poll_interval)()

    if render_hero(locale):
        session.reset_filters()
        st.rerun()

    with st.expander(f"📍 {t('serviceCoverage')}", expanded=False):
        picked = render_state_picker(locale)
        if picked:
            session.update(location=picked)
            st.rerun()

    with st.sidebar:
        if render_filter_sidebar(session, snapshot, locale):
            st.rerun()

    st.markdown(f"### {t('browseTitle')}")
    st.caption(t('browseSubtitle'))

    if snapshot.state == "loading":
        st.info(t('loadingServices'))
        return

    if snapshot.state == "error":
        st.error(t('loadFailed'))
        if st.button(f"↻ {t('retry')}"):
            loader.load_listings()
            st.rerun()
        return

    if not snapshot.listings:
        st.info(t('noServicesAvailable'))
        return

    partition = session.partition(snapshot)
    counts = partition.counts
    tab = st.radio(
        t('serviceType'),
        options=["onsite", "online"],
        index=0 if session.active_tab == "onsite" else 1,
        format_func=lambda value: (
            f"📍 {t('onSite')} ({counts['onsite']})"
            if value == "onsite"
            else f"💻 {t('online')} ({counts['online']})"
        ),
        horizontal=True,
        label_visibility="collapsed",
    )
    if tab != session.active_tab:
        session.select_tab(tab)
        st.rerun()

    category_names = {category.id: category.name for category in snapshot.categories}
    provider_id = render_service_grid(
        partition.for_tab(session.active_tab),
        session.active_tab,
        category_names,
        locale,
        currency=config.ui.currency,
    )
    if provider_id:
        open_provider(provider_id)
        st.rerun()


def render_provider_step(locale: LocaleContext):
    """Render the provider details page."""
    config = get_config()
    t = locale.t

    if st.button(f"← {t('back')}"):
        st.session_state.view = "browse"
        st.session_state.provider_id = None
        st.rerun()

    provider_id = st.session_state.provider_id or ""
    with st.spinner(t('loading')):
        try:
            details = ProviderDetailsLoader(st.session_state.client).load(provider_id)
        except (ValueError, ProviderNotFoundError) as e:
            logger.warning(f"Provider page unavailable: {e}")
            st.error(t('providerNotFound'))
            return
        except BackendError as e:
            logger.error(f"Error fetching provider data: {e}")
            st.error(t('providerNotFound'))
            if st.button(f"↻ {t('retry')}"):
                st.rerun()
            return

    render_provider_profile(details, locale, currency=config.ui.currency)


if __name__ == "__main__":
    main()
