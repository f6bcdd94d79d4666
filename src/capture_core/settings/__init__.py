from .environment import (
    parse_env_bool,
    parse_env_int,
    parse_env_list,
    parse_env_optional_int,
    parse_env_str,
)
from .settings import DEFAULT_MAX_STRING_LENGTH, CaptureSettings, load_capture_settings

__all__ = [
    "CaptureSettings",
    "DEFAULT_MAX_STRING_LENGTH",
    "load_capture_settings",
    "parse_env_bool",
    "parse_env_int",
    "parse_env_list",
    "parse_env_optional_int",
    "parse_env_str",
]
