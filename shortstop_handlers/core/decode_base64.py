"""Permissive Base64 — decodes like Node's Buffer.from(value, "base64").

Invariants:
    - Never raises, for any input string
    - URL-safe alphabet ("-", "_") accepted alongside the standard one
    - Characters outside the alphabet (whitespace, "=", punctuation) are dropped
    - A dangling single character (length % 4 == 1) carries no full byte and is discarded
"""

import base64
import re

_NON_ALPHABET = re.compile(r"[^A-Za-z0-9+/]")
_URL_SAFE = str.maketrans("-_", "+/")


def decode_base64(value: str) -> bytes:
    cleaned = _NON_ALPHABET.sub("", value.translate(_URL_SAFE))
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:-1]
    cleaned += "=" * (-len(cleaned) % 4)
    return base64.b64decode(cleaned)
