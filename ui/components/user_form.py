import streamlit as st

from domain import constants as C
from domain.models import EDITABLE_FIELDS
from services.registration import RegistrationController
from .base import field_error


def widget_key(key_prefix: str, name: str) -> str:
    return f"{key_prefix}_{name}"


def _on_change(controller: RegistrationController, key_prefix: str, name: str):
    controller.set_field(name, st.session_state[widget_key(key_prefix, name)])


def _on_submit(controller: RegistrationController, key_prefix: str):
    for name in EDITABLE_FIELDS:
        controller.set_field(name, st.session_state.get(widget_key(key_prefix, name), ""))
    if controller.submit():
        # Callbacks run before widgets are rebuilt, so the inputs can be reset here.
        for name in EDITABLE_FIELDS:
            st.session_state[widget_key(key_prefix, name)] = ""


def render(controller: RegistrationController, key_prefix: str = "reg"):
    """
    Renders the registration fields bound to a controller.

    Every input writes through to the controller's draft on change, which also
    clears that field's inline error. The submit button runs validation and the
    create request inside its callback.

    Args:
        controller (RegistrationController): Owner of the draft, errors and submit state.
        key_prefix (str): A unique prefix for Streamlit widget keys.
    """
    for name in EDITABLE_FIELDS:
        key = widget_key(key_prefix, name)
        if key not in st.session_state:
            st.session_state[key] = controller.draft[name]
        widget = st.text_area if name == "address" else st.text_input
        kwargs = {"height": 90} if name == "address" else {}
        widget(
            C.FORM_LABELS[name],
            key=key,
            placeholder=C.FORM_PLACEHOLDERS[name],
            on_change=_on_change,
            args=(controller, key_prefix, name),
            **kwargs,
        )
        field_error(controller.errors.get(name, ""))

    st.button(
        controller.submit_label,
        key=f"{key_prefix}_submit",
        type="primary",
        disabled=controller.submitting,
        use_container_width=True,
        on_click=_on_submit,
        args=(controller, key_prefix),
    )
