"""Opaque id generation for columns and cards."""

import secrets
from collections.abc import Iterable

COLUMN_PREFIX = "col"
CARD_PREFIX = "card"
TOKEN_BYTES = 4


def new_id(prefix: str, existing: Iterable[str] = ()) -> str:
    """Return a fresh "<prefix>-<hex>" id not present in existing.

    "card" → "card-3f9a01bc"
    """
    taken = set(existing)
    while True:
        candidate = f"{prefix}-{secrets.token_hex(TOKEN_BYTES)}"
        if candidate not in taken:
            return candidate


def new_column_id(existing: Iterable[str] = ()) -> str:
    return new_id(COLUMN_PREFIX, existing)


def new_card_id(existing: Iterable[str] = ()) -> str:
    return new_id(CARD_PREFIX, existing)
