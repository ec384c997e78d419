"""
Patient registry.

Every patient belongs to the user who created it.  Lookups filter on the
owner, so a patient owned by someone else reads exactly like one that
does not exist.
"""
from __future__ import annotations

from typing import Any, Mapping as MappingType, Optional

from core.exceptions import NotFoundError, ValidationError
from core.records import Patient
from core.services.audit import log_action
from core.store import Store

# Falsy incoming values (absent, "", 0, None) keep the old value.
FALSY_SKIP_FIELDS = ("name", "age", "gender")
# Only an absent key keeps the old value; "" or null overwrite.
ABSENT_SKIP_FIELDS = ("phone", "address", "medical_history")

NOT_FOUND = "Patient not found"


def find_owned_patient(store: Store, owner_id: int, patient_id: Any) -> Optional[Patient]:
    if isinstance(patient_id, bool):
        return None
    return next((p for p in store.patients if p.id == patient_id and p.created_by == owner_id), None)


def owned_patient_ids(store: Store, owner_id: int) -> set[int]:
    return {p.id for p in store.patients if p.created_by == owner_id}


def create_patient(store: Store, owner_id: int, *, name=None, age=None, gender=None,
                   phone=None, address=None, medical_history=None) -> Patient:
    if not name or not age or not gender:
        raise ValidationError("Name, age, and gender are required")

    patient = Patient(
        id=store.next_id("patient"),
        name=name,
        age=age,
        gender=gender,
        phone=phone or "",
        address=address or "",
        medical_history=medical_history or "",
        created_by=owner_id,
    )
    store.patients.append(patient)
    return patient


def list_patients(store: Store, owner_id: int) -> list[Patient]:
    return [p for p in store.patients if p.created_by == owner_id]


def get_patient(store: Store, owner_id: int, patient_id: Any) -> Patient:
    patient = find_owned_patient(store, owner_id, patient_id)
    if patient is None:
        raise NotFoundError(NOT_FOUND)
    return patient


def update_patient(store: Store, owner_id: int, patient_id: Any, changes: MappingType[str, Any]) -> Patient:
    """Merge ``changes`` into the patient.

    ``age`` of 0 is falsy and therefore ignored; an explicit empty
    ``phone`` is a real update.  Both are long-standing client-visible
    behaviour and are kept as is.
    """
    patient = get_patient(store, owner_id, patient_id)
    for field in FALSY_SKIP_FIELDS:
        value = changes.get(field)
        if value:
            setattr(patient, field, value)
    for field in ABSENT_SKIP_FIELDS:
        if field in changes:
            setattr(patient, field, changes[field])
    return patient


def delete_patient(store: Store, owner_id: int, patient_id: Any) -> None:
    patient = get_patient(store, owner_id, patient_id)
    store.patients.remove(patient)
    log_action(user_id=owner_id, action="delete", object_type="patient", object_id=patient.id)
