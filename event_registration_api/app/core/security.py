"""
API‑key check for mutating event routes.

The service authorises administrative calls with a single shared
secret configured via ``API_KEY``.  Clients send it inside the request
body: as the ``apikey`` field of an event payload, or as the raw text
body of a delete request.  Comparison is constant‑time.
"""

import hmac
from typing import Optional


def api_key_matches(candidate: Optional[str], expected: str) -> bool:
    """Return True if ``candidate`` equals the configured key.

    A missing candidate never matches, and neither does anything when
    the configured key is empty.
    """
    if not candidate or not expected:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))
