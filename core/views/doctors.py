from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from core.serializers.doctor import DoctorSerializer
from core.services import doctors as directory
from core.store import get_store
from core.views.payload import request_body


@api_view(['GET', 'POST'])
def doctor_collection(request):
    """List the shared doctor directory or add a doctor to it."""
    store = get_store()
    if request.method == 'POST':
        data = request_body(request)
        doctor = directory.create_doctor(
            store,
            name=data.get('name'),
            specialization=data.get('specialization'),
            phone=data.get('phone'),
            email=data.get('email'),
            experience_years=data.get('experience_years'),
        )
        return Response(DoctorSerializer(doctor).data, status=status.HTTP_201_CREATED)

    return Response(DoctorSerializer(directory.list_doctors(store), many=True).data)


@api_view(['GET', 'PUT', 'DELETE'])
def doctor_detail(request, doctor_id: int):
    store = get_store()
    if request.method == 'PUT':
        doctor = directory.update_doctor(store, doctor_id, request_body(request))
    elif request.method == 'DELETE':
        directory.delete_doctor(store, doctor_id, actor_id=request.user.id)
        return Response(status=status.HTTP_204_NO_CONTENT)
    else:
        doctor = directory.get_doctor(store, doctor_id)
    return Response(DoctorSerializer(doctor).data)
