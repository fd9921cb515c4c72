import logging
import streamlit as st
from urllib.parse import unquote

from domain.constants import ROUTE_REGISTER, ROUTE_USERS
from services.config import ConfigError, get_settings
from services.persistence import get_store
from ui.components.navigation import NAV_TARGET_KEY
from utils.logs import configure_logging

# Import the page rendering functions from the view modules
from views import registration, users

logger = logging.getLogger(__name__)

# --- Page Registry ---
# Maps a route path to its label, rendering function, and the hook run when the page is left.
PAGE_REGISTRY = {
    ROUTE_REGISTER: {
        "label": "📝 Registration",
        "render_func": registration.view,
        "on_leave": None,
    },
    ROUTE_USERS: {
        "label": "👥 Registered Users",
        "render_func": users.view,
        "on_leave": users.reset,
    },
}

ACTIVE_ROUTE_KEY = "active_route"


def resolve_route(query_value, nav_target=None) -> str:
    """Pick the route to render: a pending navigation wins over the query string."""
    for candidate in (nav_target, query_value):
        if isinstance(candidate, str):
            path = unquote(candidate)
            if path in PAGE_REGISTRY:
                return path
    return ROUTE_REGISTER


def main():
    """
    Main application router.

    Resolves the current route from the `page` query parameter (or a pending
    navigation request), runs the leave hook of the previous page so its local
    state is discarded, then renders the selected page with the shared store.
    """
    st.set_page_config(page_title="User Registration", layout="centered")

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    try:
        store = get_store(settings)
    except ConfigError as exc:
        logger.error("Store configuration invalid: %s", exc)
        st.error(f"❌ Configuration error: {exc}")
        st.stop()

    route = resolve_route(st.query_params.get("page"), st.session_state.pop(NAV_TARGET_KEY, None))
    st.query_params["page"] = route

    previous = st.session_state.get(ACTIVE_ROUTE_KEY)
    if previous != route:
        leave = PAGE_REGISTRY.get(previous, {}).get("on_leave")
        if leave:
            leave()
        st.session_state[ACTIVE_ROUTE_KEY] = route

    # --- Page Rendering ---
    PAGE_REGISTRY[route]["render_func"](store)

    # --- Footer ---
    st.sidebar.caption(
        f"{PAGE_REGISTRY[route]['label']} | Store: {settings.STORE_BACKEND} | collection: {settings.USERS_COLLECTION}"
    )


if __name__ == "__main__":
    main()
