import streamlit as st

from domain import constants as C
from services.persistence import UserStore
from services.users import UserListController
from ui.components import (
    page_header, render_notifications, navigate, ask_confirmation,
    SessionNotifier, SessionConfirm,
)
from ui.components import user_table
from ui.components.feedback import CONFIRM_ANSWER_KEY

CONTROLLER_KEY = "users_controller"


def reset():
    """Drop the listing session (mirror, edit state, pending confirmation)."""
    st.session_state.pop(CONTROLLER_KEY, None)
    st.session_state.pop(user_table.DELETE_CANDIDATE_KEY, None)
    st.session_state.pop(CONFIRM_ANSWER_KEY, None)


def _controller(store: UserStore) -> UserListController:
    """Creates the controller and loads the collection once per view activation."""
    if CONTROLLER_KEY not in st.session_state:
        controller = UserListController(store, SessionNotifier(), SessionConfirm())
        st.session_state[CONTROLLER_KEY] = controller
        with st.spinner(C.LOADING_TEXT):
            controller.load()
    return st.session_state[CONTROLLER_KEY]


def _render_delete_confirmation(controller: UserListController):
    candidate = st.session_state.get(user_table.DELETE_CANDIDATE_KEY)
    if not candidate:
        return
    answer = ask_confirmation(C.CONFIRM_DELETE, key=f"confirm_delete_{candidate}")
    if answer is None:
        return
    st.session_state[CONFIRM_ANSWER_KEY] = answer
    del st.session_state[user_table.DELETE_CANDIDATE_KEY]
    controller.delete(candidate)
    st.rerun()


def view(store: UserStore):
    controller = _controller(store)

    page_header("👥 Registered Users", f"Total Users: {controller.total}")
    render_notifications()
    _render_delete_confirmation(controller)

    # Loading happens inside the spinner in _controller, so only the outcome is drawn here.
    if controller.is_empty:
        st.info(C.EMPTY_TEXT)
    elif controller.users:
        user_table.render(controller)

    st.markdown("")
    if st.button("← Back to Registration", key="goto_register", type="primary", use_container_width=True):
        navigate(C.ROUTE_REGISTER)
