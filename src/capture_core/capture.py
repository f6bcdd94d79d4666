"""Decide whether an event is captured and sanitize its properties."""

from __future__ import annotations

import logging
from typing import Any

from capture_core.observability.metrics import MetricsCollector
from capture_core.sanitization.blocked_uas import UserAgentBlocklist
from capture_core.sanitization.cloner import copy_and_truncate_strings
from capture_core.settings.settings import CaptureSettings

logger = logging.getLogger(__name__)

EVENTS_SANITIZED = "capture_events_sanitized_total"
EVENTS_BLOCKED = "capture_events_blocked_total"


class CaptureGate:
    """Gate event capture on settings and user agent, then sanitize what passes."""

    def __init__(self, settings: CaptureSettings | None = None, *, metrics: MetricsCollector | None = None) -> None:
        self.settings = settings or CaptureSettings()
        self.metrics = metrics or MetricsCollector()
        self.blocklist = UserAgentBlocklist.build(self.settings.custom_blocked_user_agents)

    def suppression_reason(self, user_agent: str | None) -> str | None:
        """Return why capture is suppressed (``disabled`` or ``user_agent``), or ``None``."""
        if not self.settings.capture_enabled:
            return "disabled"
        if self.settings.useragent_filter_enabled and self.blocklist.matches(user_agent):
            return "user_agent"
        return None

    def should_capture(self, user_agent: str | None) -> bool:
        return self.suppression_reason(user_agent) is None

    def prepare(
        self,
        properties: Any,
        *,
        user_agent: str | None = None,
        event_name: str | None = None,
    ) -> Any | None:
        """
        Return a sanitized copy of ``properties``, or ``None`` when capture is suppressed.

        The caller's object is never modified.
        """
        reason = self.suppression_reason(user_agent)
        if reason is not None:
            if reason == "user_agent":
                logger.info(
                    "Dropping event from blocked user agent",
                    extra={"event_name": event_name, "user_agent": user_agent},
                )
            self.metrics.increment(EVENTS_BLOCKED, labels={"reason": reason})
            return None

        sanitized = copy_and_truncate_strings(properties, self.settings.max_string_length)
        logger.debug("Sanitized event properties", extra={"event_name": event_name})
        self.metrics.increment(EVENTS_SANITIZED)
        return sanitized
