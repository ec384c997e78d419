from rest_framework import serializers


class DoctorSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.ReadOnlyField()
    specialization = serializers.ReadOnlyField()
    phone = serializers.ReadOnlyField()
    email = serializers.ReadOnlyField()
    experience_years = serializers.ReadOnlyField()
    created_at = serializers.CharField(read_only=True)
