from .blocked_uas import DEFAULT_BLOCKED_UA_STRS, UserAgentBlocklist, is_blocked_ua
from .cloner import copy_and_truncate_strings, truncate_string

__all__ = [
    "DEFAULT_BLOCKED_UA_STRS",
    "UserAgentBlocklist",
    "is_blocked_ua",
    "copy_and_truncate_strings",
    "truncate_string",
]
