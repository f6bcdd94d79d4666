"""Device, browser and OS detection from a raw user-agent string."""

from __future__ import annotations

import re
from typing import Any

TABLET = "Tablet"
MOBILE = "Mobile"
DESKTOP = "Desktop"

RAW_USER_AGENT_MAX_LENGTH = 1000

# Ordered tables: the first matching pattern wins.
_DEVICE_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("Windows Phone", re.compile(r"Windows Phone|WPDesktop", re.IGNORECASE)),
    ("iPad", re.compile(r"iPad")),
    ("iPod Touch", re.compile(r"iPod")),
    ("iPhone", re.compile(r"iPhone")),
    ("BlackBerry", re.compile(r"BlackBerry|PlayBook|BB10", re.IGNORECASE)),
    ("Kobo", re.compile(r"kobo\s(ereader|touch)", re.IGNORECASE)),
    ("Kindle Fire", re.compile(r"Kindle Fire|Silk/|KF[A-Z]{2,4}\sBuild", re.IGNORECASE)),
    ("Android Tablet", re.compile(r"Android(?!.*Mobile)")),
    ("Android", re.compile(r"Android")),
    ("Generic Tablet", re.compile(r"\btablet\b", re.IGNORECASE)),
)

_TABLET_DEVICES = frozenset({"iPad", "Android Tablet", "Kobo", "Kindle Fire", "Generic Tablet"})

_BROWSER_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("Facebook Mobile", re.compile(r"FBIOS|FB_IAB|FBAN")),
    ("Samsung Internet", re.compile(r"SamsungBrowser/")),
    ("Opera", re.compile(r"OPR/|Opera")),
    ("Microsoft Edge", re.compile(r"Edg(e|A|iOS)?/")),
    ("Chrome iOS", re.compile(r"CriOS/")),
    ("Firefox iOS", re.compile(r"FxiOS/")),
    ("Chrome", re.compile(r"Chrome/")),
    ("Mobile Safari", re.compile(r"Apple.*Mobile.*Safari")),
    ("Safari", re.compile(r"Apple.*Safari")),
    ("Firefox", re.compile(r"Firefox/")),
    ("Internet Explorer", re.compile(r"MSIE|Trident/")),
    ("Konqueror", re.compile(r"Konqueror")),
)

_OS_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("Windows Phone", re.compile(r"Windows Phone")),
    ("Windows", re.compile(r"Windows")),
    ("iOS", re.compile(r"iPhone|iPad|iPod")),
    ("Android", re.compile(r"Android")),
    ("BlackBerry", re.compile(r"BlackBerry|PlayBook|BB10")),
    ("Mac OS X", re.compile(r"Mac OS X|Macintosh")),
    ("Chrome OS", re.compile(r"CrOS")),
    ("Linux", re.compile(r"Linux")),
)


def _first_match(table: tuple[tuple[str, re.Pattern[str]], ...], user_agent: str | None) -> str:
    if not user_agent:
        return ""
    for name, pattern in table:
        if pattern.search(user_agent):
            return name
    return ""


def device(user_agent: str | None) -> str:
    return _first_match(_DEVICE_PATTERNS, user_agent)


def device_type(user_agent: str | None) -> str:
    """Classify a user agent as ``Tablet``, ``Mobile`` or ``Desktop``."""
    name = device(user_agent)
    if name in _TABLET_DEVICES:
        return TABLET
    if name:
        return MOBILE
    return DESKTOP


def browser(user_agent: str | None) -> str:
    return _first_match(_BROWSER_PATTERNS, user_agent)


def os_name(user_agent: str | None) -> str:
    return _first_match(_OS_PATTERNS, user_agent)


def client_properties(user_agent: str | None, *, lib: str = "web") -> dict[str, Any]:
    """Build the standard client property record attached to every event."""
    from capture_core import __version__

    raw = user_agent or ""
    return {
        "$lib": lib,
        "$lib_version": __version__,
        "$device_type": device_type(raw),
        "$device": device(raw),
        "$browser": browser(raw),
        "$os": os_name(raw),
        "$raw_user_agent": raw[:RAW_USER_AGENT_MAX_LENGTH],
    }
