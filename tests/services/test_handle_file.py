"""file: handler — tests for asynchronous, anchored file reads.

Tests cover:
    - Raw bytes by default; decoded text with an encoding option
    - Options accepted as first argument (base dir defaults)
    - Absolute and relative tokens read the same file
    - Missing files fail through the awaitable, never at call time
    - Callback-style adaptation delivers (error, value) once
"""

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from shortstop_handlers.config import get_settings
from shortstop_handlers.infrastructure.callbacks import with_callback
from shortstop_handlers.services.handle_file import FileOptions, file


@pytest.mark.asyncio
async def test_reads_bytes_relative_to_base_dir(fixtures_dir):
    handler = file(fixtures_dir)
    assert await handler("greeting.txt") == b"Hello, world!\n"


@pytest.mark.asyncio
async def test_reads_absolute_token(fixtures_dir):
    handler = file()
    assert await handler(__file__) == Path(__file__).read_bytes()
    assert await handler(os.path.join(fixtures_dir, "greeting.txt")) == b"Hello, world!\n"


@pytest.mark.asyncio
async def test_reads_relative_to_cwd_by_default(fixtures_dir):
    handler = file()
    token = os.path.relpath(os.path.join(fixtures_dir, "greeting.txt")).replace(os.sep, "/")
    assert await handler(token) == b"Hello, world!\n"


@pytest.mark.asyncio
async def test_encoding_option_decodes_text(fixtures_dir):
    handler = file(fixtures_dir, {"encoding": "utf-8"})
    assert await handler("./greeting.txt") == "Hello, world!\n"


@pytest.mark.asyncio
async def test_options_as_first_argument(fixtures_dir):
    handler = file(FileOptions(encoding="ascii"))
    assert handler.base_dir == os.getcwd()
    assert await handler(os.path.join(fixtures_dir, "greeting.txt")) == "Hello, world!\n"


@pytest.mark.asyncio
async def test_settings_encoding_is_default(monkeypatch, fixtures_dir):
    monkeypatch.setenv("SHORTSTOP_FILE_ENCODING", "utf-8")
    get_settings.cache_clear()
    assert await file(fixtures_dir)("greeting.txt") == "Hello, world!\n"


def test_unknown_option_rejected():
    with pytest.raises(ValidationError):
        file({"encodng": "utf-8"})


@pytest.mark.asyncio
async def test_missing_file_raises_from_awaitable(fixtures_dir):
    handler = file(fixtures_dir)
    pending = handler("does-not-exist.txt")
    with pytest.raises(FileNotFoundError):
        await pending


@pytest.mark.asyncio
async def test_directory_token_raises_os_error(fixtures_dir):
    with pytest.raises(OSError):
        await file(fixtures_dir)("glob_tree")


@pytest.mark.asyncio
async def test_callback_style_success_and_failure(fixtures_dir):
    results = []
    read = with_callback(file(fixtures_dir))
    await read("greeting.txt", lambda err, value: results.append((err, value)))
    await read("missing.txt", lambda err, value: results.append((err, value)))
    assert results[0] == (None, b"Hello, world!\n")
    assert isinstance(results[1][0], FileNotFoundError)
    assert results[1][1] is None
