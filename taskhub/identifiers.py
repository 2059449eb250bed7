"""
Entity identifier generation and format checking.

Identifiers are 24-character lowercase hex strings built from a 4-byte
seconds timestamp, a 5-byte random value fixed for the process, and a
3-byte counter. Identifiers minted by one process therefore sort in
creation order, which the store relies on for listing.
"""

from __future__ import annotations

import itertools
import os
import re
import threading
import time

IDENTIFIER_LENGTH = 24

_IDENTIFIER_RE = re.compile(r"[0-9a-fA-F]{24}")

_PROCESS_RANDOM = os.urandom(5)
_counter = itertools.count(int.from_bytes(os.urandom(3), "big") & 0x7FFFFF)
_lock = threading.Lock()


def new_identifier() -> str:
    """Return a fresh, previously unseen identifier."""
    with _lock:
        sequence = next(_counter) & 0xFFFFFF
        timestamp = int(time.time()) & 0xFFFFFFFF
    raw = timestamp.to_bytes(4, "big") + _PROCESS_RANDOM + sequence.to_bytes(3, "big")
    return raw.hex()


def is_valid_identifier(value: object) -> bool:
    """Return True if *value* has identifier syntax. Existence is not checked."""
    return isinstance(value, str) and _IDENTIFIER_RE.fullmatch(value) is not None
