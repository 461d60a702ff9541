from __future__ import annotations

import secrets
import string

_ALPHABET = string.digits + string.ascii_lowercase


def new_id(length: int = 9) -> str:
    """Random base-36 identifier used for every stored entity."""
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))
