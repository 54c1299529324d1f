"""Module Reference Grammar — `module#method` parsing and invocation targets.

Invariants:
    - Split happens on the FIRST "#"; an empty method ("mod#") counts as absent
    - Every export is classified exactly once as Invokable or Value
    - A module object is Invokable only through a module-level callable `__call__`
    - Mapping exports (JSON data) use item lookup; everything else attribute lookup

Design Decisions:
    - Explicit Invokable/Value variants instead of probing callable() at the call site:
      exec dispatches on the variant (ADR: no dynamic type checks in services)
    - Module-level `__call__` as the "module is its own default export" convention,
      since Python module objects are never callable themselves
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Callable

METHOD_DELIMITER = "#"


@dataclass(frozen=True)
class ModuleReference:
    """A parsed exec: token."""
    module: str
    method: str | None = None


@dataclass(frozen=True)
class Invokable:
    """A zero-argument operation."""
    target: Callable[[], Any]

    def invoke(self) -> Any:
        return self.target()


@dataclass(frozen=True)
class Value:
    """Opaque, non-invokable data."""
    data: Any


InvocationTarget = Invokable | Value

_MISSING = object()


def parse_module_reference(token: str) -> ModuleReference:
    module, _, method = token.partition(METHOD_DELIMITER)
    return ModuleReference(module=module, method=method or None)


def classify_target(candidate: Any) -> InvocationTarget:
    """Decide whether an export can be invoked."""
    if isinstance(candidate, ModuleType):
        hook = vars(candidate).get("__call__")
        if callable(hook):
            return Invokable(hook)
        return Value(candidate)
    if callable(candidate):
        return Invokable(candidate)
    return Value(candidate)


def lookup_member(export: Any, name: str) -> InvocationTarget | None:
    """Find `name` on an export. Returns None when it does not exist."""
    if isinstance(export, Mapping):
        member = export.get(name, _MISSING)
    else:
        member = getattr(export, name, _MISSING)
    if member is _MISSING:
        return None
    return classify_target(member)
