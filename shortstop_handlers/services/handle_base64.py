"""base64: handler — permissive decode of the token into raw bytes."""

from typing import Callable

from shortstop_handlers.core.decode_base64 import decode_base64


def base64() -> Callable[[str], bytes]:
    """Create the handler for the `base64:` protocol."""

    def base64_handler(token: str) -> bytes:
        return decode_base64(token)

    return base64_handler
