"""Handlers Registry — explicit protocol-name -> factory mapping.

Invariants:
    - Every HandlerName member has exactly one factory
    - ASYNC_HANDLERS lists the factories whose handlers must be awaited
    - Choosing WHICH handler a token goes to is the dispatch layer's job, not ours

Design Decisions:
    - Explicit dict over module introspection: every mapping visible in one place
      (ADR: no convention-over-config)
"""

from typing import Callable

from shortstop_handlers.core.domain_types import HandlerName
from shortstop_handlers.services.handle_base64 import base64
from shortstop_handlers.services.handle_env import env
from shortstop_handlers.services.handle_exec import exec
from shortstop_handlers.services.handle_file import file
from shortstop_handlers.services.handle_glob import glob
from shortstop_handlers.services.handle_path import path
from shortstop_handlers.services.handle_require import require

HANDLERS: dict[HandlerName, Callable] = {
    HandlerName.PATH: path,
    HandlerName.FILE: file,
    HandlerName.BASE64: base64,
    HandlerName.ENV: env,
    HandlerName.REQUIRE: require,
    HandlerName.EXEC: exec,
    HandlerName.GLOB: glob,
}

ASYNC_HANDLERS = frozenset({HandlerName.FILE, HandlerName.GLOB})


def get_handler_factory(name: str | HandlerName) -> Callable:
    """Look up a factory by protocol name. Raises ValueError for unknown names."""
    return HANDLERS[HandlerName(name)]
