"""
Bearer token issue and verification.

Tokens are simplejwt access tokens carrying ``userId`` and ``email``.
They are stateless: nothing is recorded on issue and there is no
revocation list, so a token stays valid until it expires.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.models import TokenUser
from rest_framework_simplejwt.tokens import AccessToken

logger = logging.getLogger(__name__)

INVALID = "invalid"


@dataclass(frozen=True)
class TokenResult:
    """Outcome of :func:`verify_token`: an identity or an error kind, never both."""

    identity: Optional[TokenUser] = None
    token: Optional[AccessToken] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.identity is not None

    @property
    def user_id(self):
        return self.identity.id if self.identity is not None else None

    @property
    def email(self):
        return self.token.get("email") if self.token is not None else None


def issue_token(user_id: int, email: str) -> str:
    token = AccessToken()
    token["userId"] = user_id
    token["email"] = email
    return str(token)


def verify_token(raw: str) -> TokenResult:
    try:
        token = AccessToken(raw)
    except TokenError as e:
        logger.debug("Rejected bearer token: %s", e)
        return TokenResult(error=INVALID)
    if token.get("userId") is None:
        logger.debug("Rejected bearer token without userId claim")
        return TokenResult(error=INVALID)
    return TokenResult(identity=TokenUser(token), token=token)
