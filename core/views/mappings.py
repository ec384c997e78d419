from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from core.serializers.mapping import MappingSerializer
from core.services import mappings as ledger
from core.store import get_store
from core.views.payload import request_body


@api_view(['GET', 'POST'])
def mapping_collection(request):
    store = get_store()
    owner_id = request.user.id
    if request.method == 'POST':
        data = request_body(request)
        mapping = ledger.create_mapping(
            store, owner_id,
            patient_id=data.get('patient_id'),
            doctor_id=data.get('doctor_id'),
            notes=data.get('notes'),
        )
        return Response(MappingSerializer(mapping).data, status=status.HTTP_201_CREATED)

    return Response(MappingSerializer(ledger.list_mappings_for_owner(store, owner_id), many=True).data)


@api_view(['GET', 'DELETE'])
def mapping_detail(request, pk: int):
    """GET treats ``pk`` as a patient id, DELETE as a mapping id."""
    store = get_store()
    owner_id = request.user.id
    if request.method == 'DELETE':
        ledger.delete_mapping(store, owner_id, pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    mappings = ledger.list_mappings_for_patient(store, owner_id, pk)
    return Response(MappingSerializer(mappings, many=True).data)
