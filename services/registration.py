"""Registration form state: draft, inline errors and the single create request."""
import logging
from typing import Dict

from domain import constants as C
from domain.models import OpStatus, empty_draft
from domain.validation import validate_user
from services import feedback
from services.feedback import Notifier
from services.persistence import StoreError, UserStore

logger = logging.getLogger(__name__)


class RegistrationController:
    def __init__(self, store: UserStore, notify: Notifier):
        self.store = store
        self.notify = notify
        self.draft: Dict[str, str] = empty_draft()
        self.errors: Dict[str, str] = {}
        self.status = OpStatus.IDLE

    @property
    def submitting(self) -> bool:
        return self.status == OpStatus.PENDING

    @property
    def submit_label(self) -> str:
        return C.SUBMITTING_LABEL if self.submitting else C.SUBMIT_LABEL

    def set_field(self, name: str, value: str):
        """Update one draft field, dropping its inline error right away."""
        if name not in self.draft:
            raise KeyError(name)
        self.draft[name] = value
        if self.errors.get(name):
            self.errors.pop(name)

    def submit(self) -> bool:
        """Validate and issue one create request. Returns True when the user was stored."""
        if self.submitting:
            return False
        errors = validate_user(self.draft)
        if errors:
            self.errors = errors
            return False

        self.status = OpStatus.PENDING
        fields = dict(self.draft)
        try:
            doc_id = self.store.create(fields)
        except StoreError as exc:
            logger.warning("Registration failed: %s", exc)
            self.status = OpStatus.FAILED
            feedback.failure(self.notify, C.MSG_REGISTER_FAILED, exc)
            return False

        logger.info("Registered user %s", doc_id)
        self.draft = empty_draft()
        self.errors = {}
        self.status = OpStatus.SUCCEEDED
        feedback.success(self.notify, C.MSG_REGISTERED)
        return True
