"""Field validation for the registration draft."""
import re
from typing import Dict, Mapping

from domain import constants as C

EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def _blank(value) -> bool:
    return not (value or '').strip()


def validate_user(draft: Mapping[str, str]) -> Dict[str, str]:
    """Return a mapping of field name -> error message; empty when the draft is valid.

    Email and phone run the format check after the required check, so the
    format message wins when both apply (an empty email reports "Invalid email").
    Profession is optional and never checked.
    """
    errors: Dict[str, str] = {}
    full_name = draft.get('fullName') or ''
    email = draft.get('email') or ''
    phone = draft.get('phone') or ''
    address = draft.get('address') or ''

    if _blank(full_name):
        errors['fullName'] = C.ERR_FULL_NAME_REQUIRED
    if _blank(email):
        errors['email'] = C.ERR_EMAIL_REQUIRED
    if not EMAIL_RE.match(email):
        errors['email'] = C.ERR_EMAIL_INVALID
    if _blank(phone):
        errors['phone'] = C.ERR_PHONE_REQUIRED
    if len(phone) < C.MIN_PHONE_LENGTH:
        errors['phone'] = C.ERR_PHONE_SHORT
    if _blank(address):
        errors['address'] = C.ERR_ADDRESS_REQUIRED
    return errors
