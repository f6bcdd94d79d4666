"""Runtime configuration for the capture client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .environment import (
    parse_env_bool,
    parse_env_int,
    parse_env_list,
    parse_env_optional_int,
    parse_env_str,
)

DEFAULT_MAX_STRING_LENGTH = 65_535


@dataclass(frozen=True)
class CaptureSettings:
    environment: str = "development"
    capture_enabled: bool = True
    max_string_length: int | None = DEFAULT_MAX_STRING_LENGTH
    custom_blocked_user_agents: tuple[str, ...] = field(default_factory=tuple)
    opt_out_useragent_filter: bool = False
    log_level: str = "INFO"
    log_json: bool = False
    log_file: str | None = None
    script_timeout_seconds: int = 10

    @property
    def useragent_filter_enabled(self) -> bool:
        return not self.opt_out_useragent_filter

    def as_dict(self) -> dict[str, Any]:
        return {
            "environment": self.environment,
            "capture_enabled": self.capture_enabled,
            "max_string_length": self.max_string_length,
            "custom_blocked_user_agents": list(self.custom_blocked_user_agents),
            "opt_out_useragent_filter": self.opt_out_useragent_filter,
            "log_level": self.log_level,
            "log_json": self.log_json,
            "log_file": self.log_file,
            "script_timeout_seconds": self.script_timeout_seconds,
        }

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> "CaptureSettings":
        log_file = parse_env_str("CAPTURE_LOG_FILE", "", environ=environ)
        return cls(
            environment=parse_env_str(
                "CAPTURE_ENV",
                parse_env_str("ENVIRONMENT", "development", environ=environ),
                environ=environ,
            ).lower(),
            capture_enabled=parse_env_bool("CAPTURE_ENABLED", True, environ=environ),
            max_string_length=parse_env_optional_int(
                "CAPTURE_MAX_STRING_LENGTH",
                DEFAULT_MAX_STRING_LENGTH,
                environ=environ,
            ),
            custom_blocked_user_agents=tuple(parse_env_list("CAPTURE_BLOCKED_USER_AGENTS", environ=environ)),
            opt_out_useragent_filter=parse_env_bool("CAPTURE_OPT_OUT_USERAGENT_FILTER", False, environ=environ),
            log_level=parse_env_str("CAPTURE_LOG_LEVEL", "INFO", environ=environ).upper(),
            log_json=parse_env_bool("CAPTURE_LOG_JSON", False, environ=environ),
            log_file=log_file or None,
            script_timeout_seconds=parse_env_int(
                "CAPTURE_SCRIPT_TIMEOUT_SECONDS",
                10,
                minimum=1,
                maximum=120,
                environ=environ,
            ),
        )


def load_capture_settings(*, environ: Mapping[str, str] | None = None) -> CaptureSettings:
    return CaptureSettings.from_env(environ=environ)
