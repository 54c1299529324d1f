"""file: handler — asynchronous read of an anchored file.

Invariants:
    - Each call returns one awaitable: contents on success, the native OSError on failure
    - Nothing raises at call time; the read starts when the coroutine is awaited
    - encoding=None -> bytes, otherwise str decoded with (encoding, errors)
    - A mapping/FileOptions as the first argument is taken as options (base dir defaults)

Design Decisions:
    - asyncio.to_thread over an async file library: one blocking read per token,
      the event loop stays free
    - OSError not wrapped: callers match on FileNotFoundError/PermissionError directly
"""

import asyncio
import logging
import os
from collections.abc import Mapping
from typing import Awaitable, Callable

from pydantic import BaseModel, ConfigDict

from shortstop_handlers.config import get_settings
from shortstop_handlers.core.domain_types import HandlerName
from shortstop_handlers.services.handle_path import path

logger = logging.getLogger(__name__)


class FileOptions(BaseModel):
    """Read mode for the file: handler."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    encoding: str | None = None
    errors: str = "strict"


def _split_arguments(base_dir, options) -> tuple[str | None, FileOptions]:
    if isinstance(base_dir, (Mapping, FileOptions)):
        base_dir, options = None, base_dir
    if options is None:
        options = FileOptions(encoding=get_settings().file_encoding)
    elif isinstance(options, Mapping):
        options = FileOptions.model_validate(options)
    return base_dir, options


def file(
    base_dir: str | os.PathLike | Mapping | FileOptions | None = None,
    options: Mapping | FileOptions | None = None,
) -> Callable[[str], Awaitable[bytes | str]]:
    """Create the handler for the `file:` protocol."""
    base_dir, options = _split_arguments(base_dir, options)
    resolve = path(base_dir)

    def _read(filename: str) -> bytes | str:
        with open(filename, "rb") as fh:
            raw = fh.read()
        if options.encoding is None:
            return raw
        return raw.decode(options.encoding, options.errors)

    async def file_handler(token: str) -> bytes | str:
        filename = resolve(token)
        try:
            return await asyncio.to_thread(_read, filename)
        except OSError as exc:
            logger.warning(
                f"Failed to read '{filename}': {exc}",
                extra={"handler": HandlerName.FILE.value, "token": token},
            )
            raise

    file_handler.base_dir = resolve.base_dir
    file_handler.options = options
    return file_handler
