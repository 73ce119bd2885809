"""Bearer Token Enforcement — admit/deny decision for gated routes.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - The scheme must be exactly "Bearer" (case-sensitive)
    - Missing credentials, wrong scheme, empty secret and mismatch all yield
      the same AuthError
    - Comparison is constant-time over UTF-8 bytes
"""

import hmac

from usuarios_api.core.errors import AuthError

BEARER_SCHEME = "Bearer"


def check_bearer_token(
    scheme: str | None, credential: str | None, secret: str,
) -> AuthError | None:
    """Compare the presented credential with the shared secret."""
    if scheme != BEARER_SCHEME or not credential or not secret:
        return AuthError()
    if not hmac.compare_digest(credential.encode("utf-8"), secret.encode("utf-8")):
        return AuthError()
    return None
