"""
Assignment ledger: links between a patient and a doctor.

A mapping has no owner field of its own.  Visibility is derived through
its patient, recomputed on every call from the current patient list.
"""
from __future__ import annotations

from typing import Any, Optional

from core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from core.records import Mapping
from core.services.audit import log_action
from core.services.doctors import find_doctor
from core.services.patients import find_owned_patient, owned_patient_ids, NOT_FOUND as PATIENT_NOT_FOUND
from core.store import Store


def create_mapping(store: Store, owner_id: int, *, patient_id=None, doctor_id=None, notes=None) -> Mapping:
    if not patient_id or not doctor_id:
        raise ValidationError("Patient ID and Doctor ID are required")

    if find_owned_patient(store, owner_id, patient_id) is None:
        raise NotFoundError(PATIENT_NOT_FOUND)
    if find_doctor(store, doctor_id) is None:
        raise NotFoundError("Doctor not found")

    # Pair uniqueness is global, whoever owns the existing mapping.
    if any(m.patient_id == patient_id and m.doctor_id == doctor_id for m in store.mappings):
        raise ConflictError("This patient is already assigned to this doctor")

    mapping = Mapping(
        id=store.next_id("mapping"),
        patient_id=patient_id,
        doctor_id=doctor_id,
        notes=notes or "",
    )
    store.mappings.append(mapping)
    return mapping


def list_mappings_for_owner(store: Store, owner_id: int) -> list[Mapping]:
    patient_ids = owned_patient_ids(store, owner_id)
    return [m for m in store.mappings if m.patient_id in patient_ids]


def list_mappings_for_patient(store: Store, owner_id: int, patient_id: Any) -> list[Mapping]:
    if find_owned_patient(store, owner_id, patient_id) is None:
        raise NotFoundError(PATIENT_NOT_FOUND)
    return [m for m in store.mappings if m.patient_id == patient_id]


def find_mapping(store: Store, mapping_id: Any) -> Optional[Mapping]:
    if isinstance(mapping_id, bool):
        return None
    return next((m for m in store.mappings if m.id == mapping_id), None)


def delete_mapping(store: Store, owner_id: int, mapping_id: Any) -> None:
    """Remove a mapping whose patient the caller owns.

    Unlike the patient registry this does not hide existence: a mapping
    on someone else's patient answers 403, not 404.
    """
    mapping = find_mapping(store, mapping_id)
    if mapping is None:
        raise NotFoundError("Mapping not found")
    if find_owned_patient(store, owner_id, mapping.patient_id) is None:
        raise AuthorizationError("Access denied")

    store.mappings.remove(mapping)
    log_action(user_id=owner_id, action="delete", object_type="mapping", object_id=mapping.id)
