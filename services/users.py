"""User listing state: a local mirror of the remote collection plus row edit/delete.

The mirror is only touched after the matching store call has returned
successfully; a failed call leaves it exactly as it was.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any, Optional

from domain import constants as C
from domain.models import User, OpStatus, user_from_dict
from services import feedback
from services.feedback import Notifier, Confirmer
from services.persistence import StoreError, UserStore

logger = logging.getLogger(__name__)


class UserListController:
    def __init__(self, store: UserStore, notify: Notifier, confirm: Confirmer):
        self.store = store
        self.notify = notify
        self.confirm = confirm
        self.users: List[User] = []
        self.load_status = OpStatus.IDLE
        self.save_status = OpStatus.IDLE
        self.delete_status = OpStatus.IDLE
        self.editing_id: Optional[str] = None
        self.edit_draft: Dict[str, str] = {}

    # --- Load ---

    def load(self):
        self.load_status = OpStatus.PENDING
        try:
            docs = self.store.read_all()
        except StoreError as exc:
            logger.warning("Loading users failed: %s", exc)
            self.users = []
            self.load_status = OpStatus.FAILED
            feedback.failure(self.notify, C.MSG_LOAD_FAILED, exc)
            return
        self.users = [user_from_dict(d) for d in docs]
        self.load_status = OpStatus.SUCCEEDED
        logger.debug("Loaded %d users", len(self.users))

    @property
    def is_loading(self) -> bool:
        return self.load_status == OpStatus.PENDING

    @property
    def is_empty(self) -> bool:
        return self.load_status == OpStatus.SUCCEEDED and not self.users

    @property
    def total(self) -> int:
        return len(self.users)

    def find(self, user_id: str) -> User:
        user = next((u for u in self.users if u.id == user_id), None)
        if user is None:
            raise KeyError(user_id)
        return user

    def rows(self) -> List[Dict[str, Any]]:
        """Display rows for the table; empty profession shows as N/A."""
        rows = []
        for u in self.users:
            rows.append({
                'id': u.id,
                'fullName': u.full_name,
                'email': u.email,
                'phone': u.phone,
                'address': u.address,
                'profession': u.profession or C.MISSING_VALUE,
                'editing': u.id == self.editing_id,
            })
        return rows

    # --- Edit ---

    def start_edit(self, user_id: str):
        user = self.find(user_id)
        self.editing_id = user.id
        self.edit_draft = user.editable_fields()
        self.save_status = OpStatus.IDLE

    def set_edit_field(self, name: str, value: str):
        if self.editing_id is None:
            return
        if name not in self.edit_draft:
            raise KeyError(name)
        self.edit_draft[name] = value

    def cancel_edit(self):
        self.editing_id = None
        self.edit_draft = {}
        self.save_status = OpStatus.IDLE

    def save_edit(self) -> bool:
        """Push the edit draft for the row under edit.

        On failure edit mode and the draft are kept so the user can retry.
        """
        if self.editing_id is None or self.save_status == OpStatus.PENDING:
            return False
        user_id = self.editing_id
        fields = dict(self.edit_draft)
        self.save_status = OpStatus.PENDING
        try:
            self.store.update(user_id, fields)
        except StoreError as exc:
            logger.warning("Updating user %s failed: %s", user_id, exc)
            self.save_status = OpStatus.FAILED
            feedback.failure(self.notify, C.MSG_UPDATE_FAILED, exc)
            return False

        user = next((u for u in self.users if u.id == user_id), None)
        if user is not None:
            user.apply(fields)
        self.editing_id = None
        self.edit_draft = {}
        self.save_status = OpStatus.SUCCEEDED
        feedback.success(self.notify, C.MSG_UPDATED)
        return True

    # --- Delete ---

    def delete(self, user_id: str) -> bool:
        if not self.confirm(C.CONFIRM_DELETE):
            return False
        self.delete_status = OpStatus.PENDING
        try:
            self.store.delete(user_id)
        except StoreError as exc:
            logger.warning("Deleting user %s failed: %s", user_id, exc)
            self.delete_status = OpStatus.FAILED
            feedback.failure(self.notify, C.MSG_DELETE_FAILED, exc)
            return False

        self.users = [u for u in self.users if u.id != user_id]
        if self.editing_id == user_id:
            self.cancel_edit()
        self.delete_status = OpStatus.SUCCEEDED
        feedback.success(self.notify, C.MSG_DELETED)
        return True
