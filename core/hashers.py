"""
Password hasher used by the credential store.

Django's stock bcrypt hasher picks its own work factor; the service pins
the cost so stored hashes stay comparable across deployments.
"""
from __future__ import annotations

from django.conf import settings
from django.contrib.auth.hashers import BCryptPasswordHasher


class FixedCostBCryptPasswordHasher(BCryptPasswordHasher):
    """bcrypt with the cost factor taken from ``PASSWORD_HASH_ROUNDS``."""

    @property
    def rounds(self) -> int:  # type: ignore[override]
        return getattr(settings, "PASSWORD_HASH_ROUNDS", 10)
