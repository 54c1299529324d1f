"""Module Registry — explicit, de-duplicating loader shared by require: and exec:.

Invariants:
    - Queried before any load: the same resolved specifier always yields the
      identical export object (no re-execution)
    - Keys are resolved: absolute file path for file modules,
      "module:<dotted.name>" for bare specifiers
    - File candidates tried in order: P, P.py, P.json, P/__init__.py
    - A failed load leaves no trace (not cached, removed from sys.modules)
    - Source modules are registered BEFORE their body runs: a require cycle
      receives the partially initialized module instead of recursing
    - All failures surface as ModuleLoadError chained to the original exception

Design Decisions:
    - Explicit registry instead of leaning on sys.modules alone: sharing and lifecycle
      are visible and injectable (tests use a fresh registry per case)
    - Source modules still go into sys.modules under a synthesized name so that
      dataclasses, pickling and relative imports inside them behave normally
    - Bare specifiers delegate to importlib.import_module (Python's own resolution)
"""

import hashlib
import importlib
import importlib.machinery
import importlib.util
import json
import logging
import os
import sys
import threading
from typing import Any

from shortstop_handlers.core.errors import (
    ErrorContext, ModuleLoadError, ModuleNotFoundInPathError,
)

logger = logging.getLogger(__name__)

PACKAGE_INIT = "__init__.py"
_SOURCE_SUFFIXES = (".py", ".json")


def _synthesized_name(path: str) -> str:
    stem = os.path.splitext(os.path.basename(path))[0]
    if stem == "__init__":
        stem = os.path.basename(os.path.dirname(path))
    digest = hashlib.sha1(path.encode("utf-8")).hexdigest()[:12]
    safe_stem = "".join(c if c.isalnum() else "_" for c in stem)
    return f"_shortstop_{safe_stem}_{digest}"


def find_module_file(path: str) -> str | None:
    """Resolve a filesystem module reference to a loadable file."""
    if os.path.isfile(path):
        return path
    for suffix in _SOURCE_SUFFIXES:
        candidate = path + suffix
        if os.path.isfile(candidate):
            return candidate
    package_init = os.path.join(path, PACKAGE_INIT)
    if os.path.isfile(package_init):
        return package_init
    return None


class ModuleRegistry:
    """Mapping from resolved specifier to loaded export, populated lazily."""

    def __init__(self):
        self._exports: dict[str, Any] = {}
        self._lock = threading.RLock()

    def __contains__(self, key: str) -> bool:
        return key in self._exports

    def __len__(self) -> int:
        return len(self._exports)

    def clear(self) -> None:
        with self._lock:
            self._exports.clear()

    def load_path(self, path: str) -> Any:
        """Load a module from an absolute filesystem reference."""
        module_file = find_module_file(path)
        if module_file is None:
            raise ModuleNotFoundInPathError(
                path, ErrorContext(debug_info={"candidates_tried": [
                    path, *(path + s for s in _SOURCE_SUFFIXES),
                    os.path.join(path, PACKAGE_INIT),
                ]}),
            )
        key = os.path.realpath(module_file)
        with self._lock:
            if key in self._exports:
                return self._exports[key]
            if key.endswith(".json"):
                export = self._load_json(key)
                self._exports[key] = export
                return export
            return self._load_source(key)

    def load_name(self, specifier: str) -> Any:
        """Load a bare specifier ("pkg", "pkg/sub" or "pkg.sub")."""
        dotted = specifier.strip("/").replace("/", ".")
        key = f"module:{dotted}"
        with self._lock:
            if key in self._exports:
                return self._exports[key]
            try:
                export = importlib.import_module(dotted)
            except Exception as exc:
                logger.warning(
                    f"Failed to import '{specifier}': {exc}",
                    extra={"specifier": specifier, "error_code": "MODULE_LOAD_FAILED"},
                )
                raise ModuleLoadError(
                    f"Cannot load module '{specifier}': {exc}", specifier,
                ) from exc
            self._exports[key] = export
            logger.debug(f"Imported '{dotted}'", extra={"specifier": specifier})
            return export

    def _load_json(self, module_file: str) -> Any:
        try:
            with open(module_file, encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            raise ModuleLoadError(
                f"Cannot load JSON module '{module_file}': {exc}", module_file,
            ) from exc
        logger.debug(f"Loaded JSON '{module_file}'", extra={"specifier": module_file})
        return data

    def _load_source(self, module_file: str) -> Any:
        name = _synthesized_name(module_file)
        is_package = os.path.basename(module_file) == PACKAGE_INIT
        search = [os.path.dirname(module_file)] if is_package else None
        loader = importlib.machinery.SourceFileLoader(name, module_file)
        spec = importlib.util.spec_from_file_location(
            name, module_file, loader=loader,
            submodule_search_locations=search,
        )
        module = importlib.util.module_from_spec(spec)
        # registered before execution so a require cycle gets the partial module
        self._exports[module_file] = module
        sys.modules[name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            sys.modules.pop(name, None)
            self._exports.pop(module_file, None)
            logger.warning(
                f"Failed to load '{module_file}': {exc}",
                extra={"specifier": module_file, "error_code": "MODULE_LOAD_FAILED"},
            )
            raise ModuleLoadError(
                f"Cannot load module '{module_file}': {exc}", module_file,
            ) from exc
        logger.debug(f"Loaded '{module_file}' as {name}", extra={"specifier": module_file})
        return module


_DEFAULT_REGISTRY = ModuleRegistry()


def default_registry() -> ModuleRegistry:
    """The process-wide registry used when a handler is not given one."""
    return _DEFAULT_REGISTRY
