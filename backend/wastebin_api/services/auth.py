"""
Header Authentication
=====================

Devices prove who they are with two shared secrets sent as headers:

    m: <SECURITY_M>
    k: <SECURITY_K>

Both must match exactly. If either secret isn't configured on the server,
nobody gets in.
"""

from typing import Optional

from fastapi import Depends, Header, Request

from wastebin_api.errors import AuthError


class HeaderAuthenticator:
    """
    Compares the m/k headers against the configured secrets.

    No side effects: it only answers yes or no. The route decides what
    to send back.
    """

    def __init__(self, expected_m: Optional[str], expected_k: Optional[str]):
        self.expected_m = expected_m
        self.expected_k = expected_k

    @property
    def configured(self) -> bool:
        return bool(self.expected_m) and bool(self.expected_k)

    def is_allowed(self, m: Optional[str], k: Optional[str]) -> bool:
        if not self.configured:
            return False
        return m == self.expected_m and k == self.expected_k


# =============================================================================
# DEPENDENCY INJECTION
# =============================================================================

def get_authenticator(request: Request) -> HeaderAuthenticator:
    """The authenticator built by create_app()."""
    return request.app.state.authenticator


def require_security_headers(
    m: Optional[str] = Header(None, alias="m"),
    k: Optional[str] = Header(None, alias="k"),
    authenticator: HeaderAuthenticator = Depends(get_authenticator),
) -> None:
    """
    Route dependency: reject the request unless both headers match.

    Raises:
        AuthError: Rendered as 401 {"status": "00", ...}
    """
    if not authenticator.is_allowed(m, k):
        raise AuthError()
