"""Random identifiers and stable per-type identifiers."""

from __future__ import annotations

import random
import threading

INVALID_ID = 0
"""Identifier value that is never handed out."""

_UUID_BITS = 64

_generator = random.Random()
_generator_lock = threading.Lock()

_type_ids: dict[type, int] = {}
_type_ids_lock = threading.Lock()


def get_uuid() -> int:
    """Return a random unsigned 64-bit identifier that is never INVALID_ID."""
    with _generator_lock:
        uuid = INVALID_ID
        while uuid == INVALID_ID:
            uuid = _generator.getrandbits(_UUID_BITS)
    return uuid


def get_type_uuid(cls: type) -> int:
    """Return the identifier of ``cls``, drawn once and reused on every call."""
    with _type_ids_lock:
        uuid = _type_ids.get(cls)
        if uuid is None:
            uuid = get_uuid()
            _type_ids[cls] = uuid
        return uuid