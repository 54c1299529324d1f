"""glob: handler — asynchronous pattern matching rooted at a working directory.

Invariants:
    - Each call returns one awaitable resolving to a sorted list of absolute paths
    - Every match is anchored to the SAME cwd the pattern was evaluated in
    - No match is not an error: []
    - "**" always recurses; hidden entries only match when dot=True
    - ignore patterns match per path segment: "n/*" drops "n/x" but keeps "n/d/x"
    - Default cwd: SHORTSTOP_BASE_DIR if set, else the directory of the module
      that called the factory

Design Decisions:
    - stdlib glob with root_dir over os.chdir: no process-wide side effects
    - asyncio.to_thread: directory walks can be slow on large trees
    - A bare string argument is shorthand for GlobOptions(cwd=...)
"""

import asyncio
import fnmatch
import glob as globlib
import logging
import os
import sys
from collections.abc import Mapping
from pathlib import PurePath
from typing import Awaitable, Callable

from pydantic import BaseModel, ConfigDict, Field

from shortstop_handlers.config import get_settings
from shortstop_handlers.core.anchor_path import anchor_path
from shortstop_handlers.core.domain_types import HandlerName

logger = logging.getLogger(__name__)


class GlobOptions(BaseModel):
    """Matching options for the glob: handler."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    cwd: str
    dot: bool = Field(default_factory=lambda: get_settings().glob_dot)
    nodir: bool = False
    ignore: tuple[str, ...] = ()


def caller_directory(depth: int = 2) -> str:
    """Directory of the source file `depth` frames up, or the cwd if it has none."""
    filename = sys._getframe(depth).f_code.co_filename
    if os.path.isfile(filename):
        return os.path.dirname(os.path.abspath(filename))
    return os.getcwd()


def _build_options(options_or_base_dir, default_cwd: str) -> GlobOptions:
    if isinstance(options_or_base_dir, GlobOptions):
        return options_or_base_dir
    if isinstance(options_or_base_dir, (str, os.PathLike)):
        data = {"cwd": os.fspath(options_or_base_dir)}
    elif isinstance(options_or_base_dir, Mapping):
        data = dict(options_or_base_dir)
    else:
        data = {}
    if not data.get("cwd"):
        data["cwd"] = get_settings().base_dir or default_cwd
    data["cwd"] = os.path.abspath(os.fspath(data["cwd"]))
    return GlobOptions.model_validate(data)


def _segments_match(path_parts: list[str], pattern_parts: list[str]) -> bool:
    if not pattern_parts:
        return not path_parts
    head, rest = pattern_parts[0], pattern_parts[1:]
    if head == "**":
        return any(
            _segments_match(path_parts[i:], rest)
            for i in range(len(path_parts) + 1)
        )
    if not path_parts or not fnmatch.fnmatchcase(path_parts[0], head):
        return False
    return _segments_match(path_parts[1:], rest)


def is_ignored(relative: str, pattern: str) -> bool:
    """Match a relative posix path per segment: "*" stops at "/", "**" spans dirs."""
    path_parts = [p for p in relative.split("/") if p]
    pattern_parts = [p for p in pattern.split("/") if p]
    return _segments_match(path_parts, pattern_parts)


def _match(pattern: str, options: GlobOptions) -> list[str]:
    matches = globlib.glob(
        pattern, root_dir=options.cwd, recursive=True,
        include_hidden=options.dot,
    )
    relative = sorted(PurePath(m).as_posix() for m in matches)
    if options.ignore:
        relative = [
            r for r in relative
            if not any(is_ignored(r, i) for i in options.ignore)
        ]
    if options.nodir:
        relative = [
            r for r in relative
            if not os.path.isdir(os.path.join(options.cwd, r))
        ]
    return [anchor_path(options.cwd, r) for r in relative]


def glob(
    options_or_base_dir: str | os.PathLike | Mapping | GlobOptions | None = None,
) -> Callable[[str], Awaitable[list[str]]]:
    """Create the handler for the `glob:` protocol."""
    options = _build_options(options_or_base_dir, caller_directory())

    async def glob_handler(pattern: str) -> list[str]:
        paths = await asyncio.to_thread(_match, pattern, options)
        logger.debug(
            f"Pattern '{pattern}' matched {len(paths)} path(s)",
            extra={
                "handler": HandlerName.GLOB.value, "token": pattern,
                "base_dir": options.cwd, "match_count": len(paths),
            },
        )
        return paths

    glob_handler.options = options
    glob_handler.base_dir = options.cwd
    return glob_handler
