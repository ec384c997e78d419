from rest_framework import serializers


class MappingSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    patient_id = serializers.ReadOnlyField()
    doctor_id = serializers.ReadOnlyField()
    notes = serializers.ReadOnlyField()
    status = serializers.CharField(read_only=True)
    created_at = serializers.CharField(read_only=True)
