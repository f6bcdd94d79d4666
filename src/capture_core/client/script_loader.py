"""Fetch remote scripts and report the result through an error-first callback."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from capture_core.errors import ScriptLoadError

if TYPE_CHECKING:
    from capture_core.settings.settings import CaptureSettings

logger = logging.getLogger(__name__)

SCRIPT_TYPE = "text/javascript"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class LoadedScript:
    url: str
    body: str
    type: str = SCRIPT_TYPE


ScriptCallback = Callable[[ScriptLoadError | None, LoadedScript | None], None]


def _fetch(url: str, client: httpx.Client) -> LoadedScript:
    try:
        parsed = httpx.URL(url)
        normalized = str(parsed.copy_with(path=parsed.path or "/"))
    except httpx.InvalidURL as exc:
        raise ScriptLoadError(url, f"invalid URL ({exc})") from exc
    try:
        response = client.get(normalized)
    except httpx.HTTPError as exc:
        raise ScriptLoadError(normalized, str(exc) or type(exc).__name__) from exc
    if response.status_code >= 400:
        raise ScriptLoadError(
            normalized,
            f"HTTP {response.status_code}",
            status_code=response.status_code,
        )
    return LoadedScript(url=normalized, body=response.text)


class ScriptLoader:
    """Load scripts and keep them in page order, newest first."""

    def __init__(
        self,
        *,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._client = client
        self.timeout = timeout
        self.scripts: list[LoadedScript] = []

    @classmethod
    def from_settings(cls, settings: CaptureSettings, *, client: httpx.Client | None = None) -> "ScriptLoader":
        return cls(client=client, timeout=float(settings.script_timeout_seconds))

    def load(self, url: str, callback: ScriptCallback) -> LoadedScript | None:
        """
        Fetch ``url`` and call ``callback(None, script)`` or ``callback(error, None)``.

        Load failures are never raised; they are delivered to the callback as
        :class:`ScriptLoadError` and ``None`` is returned.
        """
        client = self._client or httpx.Client(timeout=self.timeout, follow_redirects=True)
        try:
            script = _fetch(url, client)
        except ScriptLoadError as exc:
            logger.warning("Script load failed: %s", exc)
            callback(exc, None)
            return None
        finally:
            if self._client is None:
                client.close()

        # Inserted ahead of the scripts already on the page.
        self.scripts.insert(0, script)
        logger.debug("Loaded script %s (%d bytes)", script.url, len(script.body))
        callback(None, script)
        return script


def load_script(
    url: str,
    callback: ScriptCallback,
    *,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> LoadedScript | None:
    return ScriptLoader(client=client, timeout=timeout).load(url, callback)
