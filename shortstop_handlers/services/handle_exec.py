"""exec: handler — loads `module[#method]` and invokes the target with no arguments.

Invariants:
    - Module part resolved exactly like require: (same registry, same errors)
    - With a method: the member must exist AND be Invokable
    - Without a method: the export itself must be Invokable
    - Unresolvable targets raise InvocationTargetError naming the original token
    - Exceptions raised by the invoked function propagate untouched

Design Decisions:
    - Dispatch on core.module_reference's Invokable/Value variants, not callable() probes
"""

import logging
import os
from typing import Any, Callable

from shortstop_handlers.core.domain_types import HandlerName
from shortstop_handlers.core.errors import (
    ErrorContext, InvocationTargetError, ModuleLoadError,
)
from shortstop_handlers.core.module_reference import (
    Invokable, classify_target, lookup_member, parse_module_reference,
)
from shortstop_handlers.infrastructure.module_registry import ModuleRegistry
from shortstop_handlers.services.handle_require import require

logger = logging.getLogger(__name__)


def exec(
    base_dir: str | os.PathLike | None = None,
    registry: ModuleRegistry | None = None,
) -> Callable[[str], Any]:
    """Create the handler for the `exec:` protocol."""
    load = require(base_dir, registry)

    def exec_handler(token: str) -> Any:
        reference = parse_module_reference(token)
        try:
            export = load(reference.module)
        except ModuleLoadError as exc:
            exc.context.handler = HandlerName.EXEC.value
            exc.context.token = token
            raise

        if reference.method:
            target = lookup_member(export, reference.method)
        else:
            target = classify_target(export)

        if not isinstance(target, Invokable):
            logger.warning(
                f"No invokable target for '{token}'",
                extra={
                    "handler": HandlerName.EXEC.value, "token": token,
                    "error_code": "INVOCATION_TARGET_UNRESOLVABLE",
                },
            )
            raise InvocationTargetError(
                token, reference.method,
                ErrorContext(
                    handler=HandlerName.EXEC.value, token=token,
                    base_dir=load.base_dir,
                ),
            )
        return target.invoke()

    exec_handler.base_dir = load.base_dir
    return exec_handler
