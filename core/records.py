"""
Record types held by the in-memory store.

These are plain dataclasses rather than ORM models: the service keeps no
database and all records disappear when the process exits.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def utc_timestamp() -> str:
    """ISO-8601 UTC with millisecond precision, e.g. ``2024-05-01T09:30:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class User:
    id: int
    name: str
    email: str
    password_hash: str

    def summary(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "email": self.email}


@dataclass
class Patient:
    id: int
    name: Any
    age: Any
    gender: Any
    created_by: int
    phone: Any = ""
    address: Any = ""
    medical_history: Any = ""
    created_at: str = field(default_factory=utc_timestamp)


@dataclass
class Doctor:
    id: int
    name: Any
    specialization: Any
    phone: Any = ""
    email: Any = ""
    experience_years: Any = 0
    created_at: str = field(default_factory=utc_timestamp)


@dataclass
class Mapping:
    id: int
    patient_id: Any
    doctor_id: Any
    notes: Any = ""
    status: str = "active"
    created_at: str = field(default_factory=utc_timestamp)
