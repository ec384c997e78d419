"""
Bearer token authentication for Django REST framework.

The class reads ``Authorization: <scheme> <token>`` and hands the token
to :func:`core.services.tokens.verify_token`.  A missing token yields no
identity, so ``IsAuthenticated`` answers 401; a token that fails
verification is refused outright with 403.
"""
from __future__ import annotations

from rest_framework import authentication

from core.exceptions import InvalidTokenError
from core.services.tokens import verify_token


class BearerTokenAuthentication(authentication.BaseAuthentication):
    keyword = "Bearer"

    def authenticate(self, request):
        parts = authentication.get_authorization_header(request).split()
        # Only the second word is the token; the scheme itself is not checked.
        if len(parts) < 2:
            return None
        try:
            raw = parts[1].decode()
        except UnicodeError:
            raise InvalidTokenError()

        result = verify_token(raw)
        if not result.ok:
            raise InvalidTokenError()
        return result.identity, result.token

    def authenticate_header(self, request) -> str:
        # Non-empty so DRF keeps 401 for NotAuthenticated instead of downgrading to 403.
        return f'{self.keyword} realm="api"'
