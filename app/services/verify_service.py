"""
Verify service — checks the admin password against the server-side secret.
"""

import hmac
import logging

logger = logging.getLogger(__name__)


class VerifyService:
    """Single password comparison. The secret never leaves this object."""

    def __init__(self, secret: str) -> None:
        self._secret = secret

    def verify(self, password: str) -> bool:
        if not self._secret:
            logger.warning("Password check attempted but APP_PASSWORD is not configured")
            return False
        return hmac.compare_digest(password.encode("utf-8"), self._secret.encode("utf-8"))
