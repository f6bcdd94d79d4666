from __future__ import annotations

import base64


def base64_encode(value: str | None) -> str | None:
    """Base64-encode the UTF-8 bytes of ``value``; ``None`` passes through."""
    if value is None:
        return None
    if not value:
        return ""
    return base64.b64encode(value.encode("utf-8")).decode("ascii")
