from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional
import datetime as _dt


def now_iso():
    return _dt.datetime.now(_dt.timezone.utc).replace(microsecond=0).isoformat().replace('+00:00', 'Z')


# Stored document key -> dataclass attribute
DOC_KEYS = {
    "fullName": "full_name",
    "email": "email",
    "phone": "phone",
    "address": "address",
    "profession": "profession",
}

# Fields a user may change after registration; id and createdAt never move.
EDITABLE_FIELDS = tuple(DOC_KEYS.keys())


@dataclass
class User:
    id: str
    full_name: str
    email: str
    phone: str
    address: str
    profession: str = ""
    created_at: Optional[str] = None

    def editable_fields(self) -> Dict[str, str]:
        return {key: getattr(self, attr) or "" for key, attr in DOC_KEYS.items()}

    def apply(self, fields: Dict[str, Any]):
        """Overwrite mutable fields from a document-shaped mapping."""
        for key, value in fields.items():
            if key not in DOC_KEYS:
                continue
            setattr(self, DOC_KEYS[key], value if value is not None else "")


def user_from_dict(d: Dict[str, Any]) -> User:
    """Safe conversion from a stored document, dropping unknown keys."""
    created = d.get("createdAt")
    if isinstance(created, _dt.datetime):
        created = created.isoformat()
    user = User(
        id=str(d["id"]),
        full_name=d.get("fullName") or "",
        email=d.get("email") or "",
        phone=d.get("phone") or "",
        address=d.get("address") or "",
        profession=d.get("profession") or "",
        created_at=created,
    )
    return user


def empty_draft() -> Dict[str, str]:
    return {key: "" for key in EDITABLE_FIELDS}


class OpStatus(str, Enum):
    """Lifecycle of one store operation driven from a view."""
    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class Notification:
    kind: str  # success | error
    message: str
    created_at: str = field(default_factory=now_iso)
