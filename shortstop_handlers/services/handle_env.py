"""env: handler — reads an environment variable, optionally through a typed filter.

Invariants:
    - The environment is read at CALL time, not factory time (it is the mutable input)
    - No filter -> raw string, or None when unset
    - Filtered -> int/NaN (|d) or bool (|b, |!b); see core.env_filters

Design Decisions:
    - Injectable `environ` mapping: tests and embedders can resolve against a
      snapshot without mutating os.environ
"""

import logging
import os
from collections.abc import Mapping
from typing import Callable

from shortstop_handlers.core.domain_types import HandlerName
from shortstop_handlers.core.env_filters import apply_env_filter, parse_env_token

logger = logging.getLogger(__name__)


def env(environ: Mapping[str, str] | None = None) -> Callable[[str], object]:
    """Create the handler for the `env:` protocol."""

    def env_handler(token: str):
        source = os.environ if environ is None else environ
        name, env_filter = parse_env_token(token)
        raw = source.get(name)
        if raw is None:
            logger.debug(
                f"Environment variable '{name}' is not set",
                extra={"handler": HandlerName.ENV.value, "token": token},
            )
        if env_filter is None:
            return raw
        return apply_env_filter(env_filter, raw)

    return env_handler
