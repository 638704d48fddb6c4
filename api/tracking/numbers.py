"""
Tracking number generation.

Numbers look like `TRK7Q2M0XK4B9ZA`: a fixed prefix plus 12 random
characters from [A-Z0-9]. Uniqueness is enforced by the `trackings` unique
index, not here; a collision surfaces as a 409 on insert.
"""

from __future__ import annotations

import secrets
import string

PREFIX = "TRK"
RANDOM_LENGTH = 12
ALPHABET = string.ascii_uppercase + string.digits


def generate_tracking_number() -> str:
    return PREFIX + "".join(secrets.choice(ALPHABET) for _ in range(RANDOM_LENGTH))
