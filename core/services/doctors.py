from typing import Any, List, Mapping as MappingType, Optional

from core.exceptions import NotFoundError, ValidationError
from core.records import Doctor
from core.services.audit import log_action
from core.store import Store

# Doctors are shared by every authenticated user; nothing here takes an owner.

FALSY_SKIP_FIELDS = ("name", "specialization")
ABSENT_SKIP_FIELDS = ("phone", "email", "experience_years")

NOT_FOUND = "Doctor not found"


def find_doctor(store: Store, doctor_id: Any) -> Optional[Doctor]:
    if isinstance(doctor_id, bool):
        return None
    return next((d for d in store.doctors if d.id == doctor_id), None)


def create_doctor(store: Store, *, name=None, specialization=None, phone=None,
                  email=None, experience_years=None) -> Doctor:
    if not name or not specialization:
        raise ValidationError("Name and specialization are required")

    doctor = Doctor(
        id=store.next_id("doctor"),
        name=name,
        specialization=specialization,
        phone=phone or "",
        email=email or "",
        experience_years=experience_years or 0,
    )
    store.doctors.append(doctor)
    return doctor


def list_doctors(store: Store) -> List[Doctor]:
    return list(store.doctors)


def get_doctor(store: Store, doctor_id: Any) -> Doctor:
    doctor = find_doctor(store, doctor_id)
    if doctor is None:
        raise NotFoundError(NOT_FOUND)
    return doctor


def update_doctor(store: Store, doctor_id: Any, changes: MappingType[str, Any]) -> Doctor:
    """Same merge rules as patients: ``experience_years`` of 0 is a valid update."""
    doctor = get_doctor(store, doctor_id)
    for field in FALSY_SKIP_FIELDS:
        value = changes.get(field)
        if value:
            setattr(doctor, field, value)
    for field in ABSENT_SKIP_FIELDS:
        if field in changes:
            setattr(doctor, field, changes[field])
    return doctor


def delete_doctor(store: Store, doctor_id: Any, *, actor_id: Optional[int]=None) -> None:
    doctor = get_doctor(store, doctor_id)
    store.doctors.remove(doctor)
    log_action(user_id=actor_id, action="delete", object_type="doctor", object_id=doctor.id)
