"""
capture-core - event payload sanitization and bot filtering for telemetry clients.

Deep-copies event properties with string truncation and cycle breaking, and
suppresses capture from known crawler user agents before anything is sent.
"""

from __future__ import annotations

__version__ = "0.1.0"

# =============================================================================
# CORE COMPONENTS
# =============================================================================

from .sanitization import (
    DEFAULT_BLOCKED_UA_STRS,
    UserAgentBlocklist,
    copy_and_truncate_strings,
    is_blocked_ua,
    truncate_string,
)
from .capture import CaptureGate
from .errors import CaptureCoreError, SanitizationDepthError, ScriptLoadError

# =============================================================================
# CLIENT ENVIRONMENT
# =============================================================================

from .client import (
    LoadedScript,
    ScriptLoader,
    base64_encode,
    client_properties,
    device_type,
    is_cross_domain_cookie,
    load_script,
)

# =============================================================================
# CONFIGURATION & OBSERVABILITY
# =============================================================================

from .settings import CaptureSettings, load_capture_settings
from .observability import MetricsCollector, configure_logging

# =============================================================================
# PUBLIC API
# =============================================================================

__all__ = [
    # Version
    "__version__",
    # Core
    "copy_and_truncate_strings",
    "truncate_string",
    "is_blocked_ua",
    "UserAgentBlocklist",
    "DEFAULT_BLOCKED_UA_STRS",
    "CaptureGate",
    # Errors
    "CaptureCoreError",
    "SanitizationDepthError",
    "ScriptLoadError",
    # Client environment
    "base64_encode",
    "client_properties",
    "device_type",
    "is_cross_domain_cookie",
    "LoadedScript",
    "ScriptLoader",
    "load_script",
    # Configuration & observability
    "CaptureSettings",
    "load_capture_settings",
    "MetricsCollector",
    "configure_logging",
]
