from rest_framework import serializers


class PatientSerializer(serializers.Serializer):
    # Values are echoed as the client sent them; no coercion.
    id = serializers.IntegerField(read_only=True)
    name = serializers.ReadOnlyField()
    age = serializers.ReadOnlyField()
    gender = serializers.ReadOnlyField()
    phone = serializers.ReadOnlyField()
    address = serializers.ReadOnlyField()
    medical_history = serializers.ReadOnlyField()
    created_by = serializers.IntegerField(read_only=True)
    created_at = serializers.CharField(read_only=True)
