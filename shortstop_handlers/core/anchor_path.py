"""Path Anchor — resolves resolution tokens against a base directory.

Invariants:
    - Absolute tokens are returned normalized (unchanged when already normalized)
    - A leading "//" collapses to "/" like any other repeated separator
    - Relative tokens are split on "/" regardless of the host separator
    - Never raises: malformed input just normalizes

Design Decisions:
    - "/" as the token separator keeps configuration files portable across OSes
"""

import os


def _collapse_leading_separators(path: str) -> str:
    # POSIX normpath keeps an implementation-defined leading "//"
    if path.startswith("//"):
        return "/" + path.lstrip("/")
    return path


def anchor_path(base_dir: str, token: str) -> str:
    """Return the absolute path `token` denotes relative to `base_dir`."""
    if os.path.isabs(token):
        return _collapse_leading_separators(os.path.normpath(token))
    segments = [s for s in token.split("/") if s]
    return _collapse_leading_separators(
        os.path.abspath(os.path.join(base_dir, *segments)),
    )
