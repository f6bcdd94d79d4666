"""Environment collaborators: device detection, cookies, encoding, script loading."""

from .cookies import is_cross_domain_cookie
from .device import DESKTOP, MOBILE, TABLET, browser, client_properties, device, device_type, os_name
from .encoding import base64_encode
from .script_loader import LoadedScript, ScriptLoader, load_script

__all__ = [
    "DESKTOP",
    "MOBILE",
    "TABLET",
    "browser",
    "client_properties",
    "device",
    "device_type",
    "os_name",
    "is_cross_domain_cookie",
    "base64_encode",
    "LoadedScript",
    "ScriptLoader",
    "load_script",
]
