"""
Admin Authentication - PIN check for the promotion endpoint.

The expected PIN is injected (Settings.admin_pin by default) so it can be
rotated through the environment.
"""

import hmac
import logging
from typing import Any, Optional

from scholar_api.core.errors import AdminAuthError

logger = logging.getLogger(__name__)


def pin_matches(supplied: Any, expected: Optional[str]) -> bool:
    """Constant-time PIN comparison. Empty or non-string values never match."""
    if not isinstance(supplied, str) or not supplied or not expected:
        return False
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


def verify_admin_pin(supplied: Any, expected: Optional[str]) -> None:
    """Raise AdminAuthError unless the supplied PIN matches."""
    if not pin_matches(supplied, expected):
        logger.warning("Rejected admin request: wrong PIN")
        raise AdminAuthError("Wrong PIN!")
