"""
Registration and login views.

Both endpoints are public: they run without authentication classes, so a
stale or malformed ``Authorization`` header does not get in the way of
signing in again.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from core.exceptions import ValidationError
from core.serializers.auth import UserSummarySerializer
from core.services.accounts import register_user, verify_credentials
from core.services.tokens import issue_token
from core.store import get_store
from core.views.payload import request_body


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def register_view(request):
    data = request_body(request)
    summary = register_user(
        get_store(),
        name=data.get('name'),
        email=data.get('email'),
        password=data.get('password'),
    )
    return Response(
        {'message': 'User registered successfully', 'user': UserSummarySerializer(summary).data},
        status=status.HTTP_201_CREATED,
    )


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login_view(request):
    """
    Exchange email/password for a bearer token.

    Response body: ``{"access": <token>, "user": {id, name, email}}``.
    """
    data = request_body(request)
    email = data.get('email')
    password = data.get('password')
    if not email or not password:
        raise ValidationError('Email and password are required')

    user = verify_credentials(get_store(), email, password)
    return Response({
        'access': issue_token(user.id, user.email),
        'user': UserSummarySerializer(user).data,
    })
