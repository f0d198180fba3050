"""UI components package."""

from .hero import render_hero
from .language_picker import render_language_picker
from .state_picker import render_state_picker, TUNISIAN_STATES
from .filter_sidebar import render_filter_sidebar
from .service_card import render_service_grid
from .provider_profile import render_provider_profile

__all__ = [
    "render_hero",
    "render_language_picker",
    "render_state_picker",
    "TUNISIAN_STATES",
    "render_filter_sidebar",
    "render_service_grid",
    "render_provider_profile",
]
