import streamlit as st

NAV_TARGET_KEY = "nav_target"


def navigate(route: str):
    """Request a client-side route change; the router consumes it on the next run."""
    st.session_state[NAV_TARGET_KEY] = route
    st.rerun()
