"""
Process-wide record store.

A ``Store`` holds the four record collections and their id counters.  One
instance is built when the ``core`` app becomes ready and views reach it
through :func:`get_store`; tests swap in a fresh instance per case with
:func:`install_store`.
"""
from __future__ import annotations

from django.apps import apps

from core.records import Doctor, Mapping, Patient, User

KINDS = ("user", "patient", "doctor", "mapping")


class Store:
    """In-memory collections plus monotonically increasing id counters."""

    def __init__(self) -> None:
        self.users: list[User] = []
        self.patients: list[Patient] = []
        self.doctors: list[Doctor] = []
        self.mappings: list[Mapping] = []
        self._counters = {kind: 1 for kind in KINDS}

    def next_id(self, kind: str) -> int:
        """Hand out the next id for ``kind``.  Ids are never reused."""
        value = self._counters[kind]
        self._counters[kind] = value + 1
        return value

    def __repr__(self) -> str:
        return (
            f"<Store users={len(self.users)} patients={len(self.patients)} "
            f"doctors={len(self.doctors)} mappings={len(self.mappings)}>"
        )


def get_store() -> Store:
    return apps.get_app_config("core").store


def install_store(store: Store | None = None) -> Store:
    """Replace the active store (a new empty one by default) and return it."""
    store = store or Store()
    apps.get_app_config("core").store = store
    return store
