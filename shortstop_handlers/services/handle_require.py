"""require: handler — loads a module by filesystem reference or bare name.

Invariants:
    - Tokens starting with "/", "./" or "../" are file references, anchored to the base dir
    - Any other token is a bare specifier resolved by Python's import system
    - Loads go through a ModuleRegistry: same reference -> identical export object
    - Failures raise ModuleLoadError synchronously (never a sentinel return)

Design Decisions:
    - Registry injected (default: the process-wide one) so exec: and require:
      handlers created for different base dirs still share loaded modules
"""

import os
from typing import Any, Callable

from shortstop_handlers.core.domain_types import HandlerName
from shortstop_handlers.core.errors import ModuleLoadError
from shortstop_handlers.infrastructure.module_registry import (
    ModuleRegistry, default_registry,
)
from shortstop_handlers.services.handle_path import path

FILE_REFERENCE_PREFIXES = ("/", "./", "../")


def is_file_reference(token: str) -> bool:
    return token.startswith(FILE_REFERENCE_PREFIXES)


def require(
    base_dir: str | os.PathLike | None = None,
    registry: ModuleRegistry | None = None,
) -> Callable[[str], Any]:
    """Create the handler for the `require:` protocol."""
    resolve = path(base_dir)
    modules = registry if registry is not None else default_registry()

    def require_handler(token: str) -> Any:
        try:
            if is_file_reference(token):
                return modules.load_path(resolve(token))
            return modules.load_name(token)
        except ModuleLoadError as exc:
            exc.context.handler = HandlerName.REQUIRE.value
            exc.context.token = token
            exc.context.base_dir = resolve.base_dir
            raise

    require_handler.base_dir = resolve.base_dir
    require_handler.registry = modules
    return require_handler
