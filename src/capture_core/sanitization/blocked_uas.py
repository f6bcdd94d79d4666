"""User-agent deny list for suppressing capture from crawlers and audit tools."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

DEFAULT_BLOCKED_UA_STRS: tuple[str, ...] = (
    "ahrefsbot",
    "ahrefssiteaudit",
    "applebot",
    "baiduspider",
    "bingbot",
    "bingpreview",
    "bot.htm",
    "bot.php",
    "crawler",
    "deepscan",
    "duckduckbot",
    "facebookexternal",
    "facebookcatalog",
    "gptbot",
    "http://yandex.com/bots",
    "hubspot",
    "ia_archiver",
    "linkedinbot",
    "mj12bot",
    "msnbot",
    "nessus",
    "petalbot",
    "pinterest",
    "prerender",
    "rogerbot",
    "screaming frog",
    "semrushbot",
    "sitebulb",
    "slurp",
    "turnitin",
    "twitterbot",
    "vercelbot",
    "yahoo! slurp",
    "yandexbot",
    # Google-specific fetchers
    "adsbot-google",
    "apis-google",
    "duplexweb-google",
    "feedfetcher-google",
    "google favicon",
    "google web preview",
    "google-read-aloud",
    "googlebot",
    "googleweblight",
    "mediapartners-google",
    "storebot-google",
    "Bytespider;",
)


@dataclass(frozen=True)
class UserAgentBlocklist:
    """Case-insensitive substring deny list."""

    patterns: tuple[str, ...]

    @classmethod
    def build(
        cls,
        custom_blocked_user_agents: Iterable[str] | None = None,
        *,
        defaults: Iterable[str] = DEFAULT_BLOCKED_UA_STRS,
    ) -> "UserAgentBlocklist":
        combined = list(defaults) + list(custom_blocked_user_agents or ())
        # Blank entries would match every user agent.
        folded = tuple(pattern.casefold() for pattern in combined if pattern and pattern.strip())
        return cls(patterns=folded)

    def matches(self, user_agent: str | None) -> bool:
        if not user_agent:
            return False
        folded = user_agent.casefold()
        return any(pattern in folded for pattern in self.patterns)


def is_blocked_ua(user_agent: str | None, custom_blocked_user_agents: Iterable[str] | None = None) -> bool:
    """Return True when ``user_agent`` contains a known bot signature or a custom pattern."""
    return UserAgentBlocklist.build(custom_blocked_user_agents).matches(user_agent)
