from rest_framework import serializers


class UserSummarySerializer(serializers.Serializer):
    """Public view of a user; the password hash is never part of it."""
    id = serializers.IntegerField(read_only=True)
    name = serializers.ReadOnlyField()
    email = serializers.ReadOnlyField()
