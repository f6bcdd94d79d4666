"""Cookie scoping helpers."""

from __future__ import annotations

from typing import Any

# Public-suffix style hosts where a cookie on the parent domain is refused.
_NON_CROSS_DOMAIN_SUFFIXES = frozenset({"herokuapp.com"})


def is_cross_domain_cookie(hostname: Any) -> bool:
    """
    Return whether cookies may be scoped across subdomains of ``hostname``.

    Only the last two labels are compared, so ``mysite-herokuapp.com`` and
    ``test.herokuapp.com.impersonator.io`` are still cross-domain eligible.
    """
    if not isinstance(hostname, str):
        return False
    suffix = ".".join(hostname.split(".")[-2:])
    return suffix not in _NON_CROSS_DOMAIN_SUFFIXES
