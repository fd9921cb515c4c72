import random
import string
import time
from typing import Collection

_ALPHABET = string.ascii_lowercase + string.digits


def create_id_with_prefix(prefix: str, taken: Collection[str] = ()) -> str:
    """Return `<prefix>_<millis>_<4 random chars>` not present in `taken`."""
    while True:
        stamp = int(time.time() * 1000)
        rand = ''.join(random.choices(_ALPHABET, k=4))
        candidate = f"{prefix}_{stamp}_{rand}"
        if candidate not in taken:
            return candidate
