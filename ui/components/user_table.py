import streamlit as st
from typing import Dict, Any

from domain import constants as C
from domain.models import EDITABLE_FIELDS
from services.users import UserListController
from .base import table_head

DELETE_CANDIDATE_KEY = "delete_candidate"
COLUMN_WIDTHS = [2, 3, 2, 3, 2, 2]


def _edit_key(user_id: str, name: str) -> str:
    return f"edit_{user_id}_{name}"


def _on_edit_change(controller: UserListController, user_id: str, name: str):
    controller.set_edit_field(name, st.session_state[_edit_key(user_id, name)])


def _on_start_edit(controller: UserListController, user_id: str):
    controller.start_edit(user_id)
    for name, value in controller.edit_draft.items():
        st.session_state[_edit_key(user_id, name)] = value


def _on_delete(user_id: str):
    st.session_state[DELETE_CANDIDATE_KEY] = user_id


def _render_edit_row(controller: UserListController, row: Dict[str, Any]):
    cols = st.columns(COLUMN_WIDTHS)
    for col, name in zip(cols, EDITABLE_FIELDS):
        col.text_input(
            name,
            key=_edit_key(row['id'], name),
            label_visibility="collapsed",
            on_change=_on_edit_change,
            args=(controller, row['id'], name),
        )
    actions = cols[-1]
    actions.button("✓ Save", key=f"save_{row['id']}", type="primary", on_click=controller.save_edit)
    actions.button("✕ Cancel", key=f"cancel_{row['id']}", on_click=controller.cancel_edit)


def _render_row(controller: UserListController, row: Dict[str, Any]):
    cols = st.columns(COLUMN_WIDTHS)
    for col, name in zip(cols, EDITABLE_FIELDS):
        col.write(row[name])
    actions = cols[-1]
    actions.button("✎ Edit", key=f"edit_{row['id']}", on_click=_on_start_edit, args=(controller, row['id']))
    actions.button("🗑️ Delete", key=f"delete_{row['id']}", on_click=_on_delete, args=(row['id'],))


def render(controller: UserListController):
    """Displays the mirror as a table with per-row edit and delete actions."""
    head = st.columns(COLUMN_WIDTHS)
    for col, label in zip(head, C.TABLE_HEADERS):
        col.markdown(table_head(label), unsafe_allow_html=True)

    for row in controller.rows():
        with st.container(border=True):
            if row['editing']:
                _render_edit_row(controller, row)
            else:
                _render_row(controller, row)
