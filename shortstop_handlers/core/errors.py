"""Error Hierarchy — typed, categorized exceptions for handler failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Module-load and invocation-target failures are distinct types with distinct codes
    - I/O failures (file:, glob:) are NOT wrapped; the native OSError reaches the caller
    - path: and base64: have no error path at all

Design Decisions:
    - Single hierarchy with ShortstopError base: the dispatch layer catches one type
      (ADR: uniform error shape)
    - ErrorContext as dataclass: carries handler/token for observability
      without coupling to logging framework
    - Underlying exceptions chained via `raise ... from`, never discarded
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    MODULE_LOAD = "module_load"
    INVOCATION = "invocation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    handler: str | None = None
    token: str | None = None
    base_dir: str | None = None
    debug_info: dict[str, Any] | None = None


class ShortstopError(Exception):
    """Base exception for all handler errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a plain error envelope for the dispatch layer."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "handler": self.context.handler,
                    "token": self.context.token,
                    "base_dir": self.context.base_dir,
                },
            }
        }


# ─── Module Errors ──────────────────────────────────────────────

class ModuleLoadError(ShortstopError):
    """Module reference could not be resolved or its code failed to load."""
    def __init__(
        self,
        message: str,
        specifier: str,
        code: str = "MODULE_LOAD_FAILED",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.MODULE_LOAD,
            ErrorSeverity.ERROR, context,
        )
        self.specifier = specifier


class ModuleNotFoundInPathError(ModuleLoadError):
    """No loadable candidate exists for a filesystem module reference."""
    def __init__(self, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"Cannot find module '{path}'", path,
            "MODULE_NOT_FOUND", context,
        )


# ─── Invocation Errors ──────────────────────────────────────────

class InvocationTargetError(ShortstopError):
    """exec: reference resolved, but the target is missing or not invokable."""
    def __init__(
        self, token: str, method: str | None = None,
        context: ErrorContext | None = None,
    ):
        kind = "function" if method else "module"
        super().__init__(
            f"Unable to locate invokable {kind}: {token}",
            "INVOCATION_TARGET_UNRESOLVABLE", ErrorCategory.INVOCATION,
            ErrorSeverity.ERROR, context,
        )
        self.token = token
        self.method = method
