"""
Patient views.

Every route acts on the caller's own patients only; ``request.user.id``
is the owner passed down to the registry.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from core.serializers.patient import PatientSerializer
from core.services import patients as registry
from core.store import get_store
from core.views.payload import request_body


@api_view(['GET', 'POST'])
def patient_collection(request):
    store = get_store()
    owner_id = request.user.id
    if request.method == 'POST':
        data = request_body(request)
        patient = registry.create_patient(
            store, owner_id,
            name=data.get('name'),
            age=data.get('age'),
            gender=data.get('gender'),
            phone=data.get('phone'),
            address=data.get('address'),
            medical_history=data.get('medical_history'),
        )
        return Response(PatientSerializer(patient).data, status=status.HTTP_201_CREATED)

    return Response(PatientSerializer(registry.list_patients(store, owner_id), many=True).data)


@api_view(['GET', 'PUT', 'DELETE'])
def patient_detail(request, patient_id: int):
    store = get_store()
    owner_id = request.user.id
    if request.method == 'PUT':
        patient = registry.update_patient(store, owner_id, patient_id, request_body(request))
    elif request.method == 'DELETE':
        registry.delete_patient(store, owner_id, patient_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
    else:
        patient = registry.get_patient(store, owner_id, patient_id)
    return Response(PatientSerializer(patient).data)
