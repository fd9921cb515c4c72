import streamlit as st

from domain.constants import ROUTE_USERS
from services.persistence import UserStore
from services.registration import RegistrationController
from ui.components import page_header, render_notifications, navigate, SessionNotifier
from ui.components import user_form

CONTROLLER_KEY = "registration_controller"


def _controller(store: UserStore) -> RegistrationController:
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = RegistrationController(store, SessionNotifier())
    return st.session_state[CONTROLLER_KEY]


def view(store: UserStore):
    page_header("📝 User Registration", "Create your account in minutes")
    render_notifications()

    controller = _controller(store)
    user_form.render(controller, key_prefix="reg")

    st.markdown("")
    if st.button("👥 View All Users", key="goto_users", use_container_width=True):
        navigate(ROUTE_USERS)
