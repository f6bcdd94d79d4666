"""Typed readers for ``CAPTURE_*`` environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping

_TRUE_VALUES = frozenset({"1", "true", "yes", "on", "y"})
_NO_LIMIT_VALUES = frozenset({"none", "null", "off", "unlimited"})


def parse_env_str(name: str, default: str = "", *, environ: Mapping[str, str] | None = None) -> str:
    """Return the stripped value of ``name``, or ``default`` when it is unset."""
    raw = (os.environ if environ is None else environ).get(name)
    return default if raw is None else str(raw).strip()


def parse_env_bool(name: str, default: bool = False, *, environ: Mapping[str, str] | None = None) -> bool:
    raw = parse_env_str(name, environ=environ)
    return raw.lower() in _TRUE_VALUES if raw else default


def _to_int(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


def parse_env_int(
    name: str,
    default: int,
    *,
    minimum: int,
    maximum: int,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Parse an integer clamped to ``[minimum, maximum]``; unparsable values fall back to ``default``."""
    parsed = _to_int(parse_env_str(name, environ=environ))
    if parsed is None:
        return default
    return max(minimum, min(parsed, maximum))


def parse_env_optional_int(
    name: str,
    default: int | None,
    *,
    minimum: int = 0,
    environ: Mapping[str, str] | None = None,
) -> int | None:
    """Parse an integer where ``none``/``off`` style values mean "no limit"."""
    raw = parse_env_str(name, environ=environ)
    if raw.lower() in _NO_LIMIT_VALUES:
        return None
    parsed = _to_int(raw)
    if parsed is None:
        return default
    return max(minimum, parsed)


def parse_env_list(name: str, *, environ: Mapping[str, str] | None = None) -> list[str]:
    """Split a comma-separated variable, dropping blank items."""
    raw = parse_env_str(name, environ=environ)
    return [item.strip() for item in raw.split(",") if item.strip()]
