from django.http import JsonResponse
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def health_view(request):
    return Response({'status': 'OK', 'message': 'Healthcare Backend API is running'})


# Django-level fallbacks (unknown routes, non-integer ids, crashes outside DRF)
def not_found(request, exception=None):
    return JsonResponse({'error': 'Not found'}, status=404)


def server_error(request):
    return JsonResponse({'error': 'Internal server error'}, status=500)
