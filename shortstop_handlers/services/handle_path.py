"""path: handler — anchors a token to the handler's base directory.

Invariants:
    - Base dir captured once at factory time and made absolute; never changes
    - Default base dir: SHORTSTOP_BASE_DIR if set, else the process cwd
    - Pure: no I/O, never raises
"""

import os
from typing import Callable

from shortstop_handlers.config import get_settings
from shortstop_handlers.core.anchor_path import anchor_path
from shortstop_handlers.core.domain_types import BaseDir


def default_base_dir(base_dir: str | os.PathLike | None = None) -> BaseDir:
    """Absolute base dir from the argument, Settings, or the process cwd."""
    if base_dir is None:
        base_dir = get_settings().base_dir or os.getcwd()
    return BaseDir(os.path.abspath(os.fspath(base_dir)))


def path(base_dir: str | os.PathLike | None = None) -> Callable[[str], str]:
    """Create the handler for the `path:` protocol."""
    anchor = default_base_dir(base_dir)

    def path_handler(token: str) -> str:
        return anchor_path(anchor, token)

    path_handler.base_dir = anchor
    return path_handler
