"""Streamlit adapters for the controllers' notification and confirmation hooks."""
import streamlit as st
from typing import Optional

from domain.models import Notification

NOTIFICATIONS_KEY = "notifications"
CONFIRM_ANSWER_KEY = "confirm_answer"


class SessionNotifier:
    """Queues notifications in session state so they survive `st.rerun()`."""

    def __init__(self, key: str = NOTIFICATIONS_KEY):
        self.key = key

    def __call__(self, note: Notification):
        st.session_state.setdefault(self.key, []).append(note)


class SessionConfirm:
    """Answers a confirmation prompt with the yes/no the user just gave.

    The answer is consumed, so a stale "yes" can never confirm a later prompt.
    """

    def __init__(self, answer_key: str = CONFIRM_ANSWER_KEY):
        self.answer_key = answer_key

    def __call__(self, message: str) -> bool:
        return bool(st.session_state.pop(self.answer_key, False))


def render_notifications(key: str = NOTIFICATIONS_KEY):
    """Display and drain queued notifications."""
    for note in st.session_state.pop(key, []):
        if note.kind == "success":
            st.success(note.message)
        else:
            st.error(note.message)


def ask_confirmation(message: str, key: str) -> Optional[bool]:
    """
    Renders a yes/no confirmation box.

    Returns:
        True or False once the user picked an answer, None while undecided.
    """
    with st.container(border=True):
        st.warning(message)
        yes_col, no_col = st.columns(2)
        if yes_col.button("Yes", key=f"{key}_yes", type="primary", use_container_width=True):
            return True
        if no_col.button("No", key=f"{key}_no", use_container_width=True):
            return False
    return None
