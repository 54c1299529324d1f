"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - BaseDir is always absolute once a handler has captured it
    - Token is the raw payload after the protocol prefix, never mutated
    - All handler names and env filters encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: values double as the protocol names the dispatch layer routes on
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

BaseDir = NewType("BaseDir", str)     # absolute anchor directory
Token = NewType("Token", str)         # protocol payload, prefix stripped


# ─── Enums ───────────────────────────────────────────────────────

class HandlerName(str, Enum):
    """Protocol names — one handler factory per member."""
    PATH = "path"
    FILE = "file"
    BASE64 = "base64"
    ENV = "env"
    REQUIRE = "require"
    EXEC = "exec"
    GLOB = "glob"


class EnvFilter(str, Enum):
    """Typed conversions selected by an env: token's `|<filter>` suffix."""
    DECIMAL = "d"
    BOOLEAN = "b"
    NOT_BOOLEAN = "!b"
