"""
URL mappings for the healthcare API.

Mounted under ``/api/`` by ``healthcare.urls``.  Every path keeps its
trailing slash; ``APPEND_SLASH`` is off so nothing is redirected.
"""
from django.urls import path

from .auth_views import login_view, register_view
from .views.doctors import doctor_collection, doctor_detail
from .views.health import health_view
from .views.mappings import mapping_collection, mapping_detail
from .views.patients import patient_collection, patient_detail

urlpatterns = [
    # Auth
    path('auth/register/', register_view, name='register_view'),
    path('auth/login/', login_view, name='login_view'),
    # Patients (owned by the caller)
    path('patients/', patient_collection, name='patient_collection'),
    path('patients/<int:patient_id>/', patient_detail, name='patient_detail'),
    # Doctors (shared directory)
    path('doctors/', doctor_collection, name='doctor_collection'),
    path('doctors/<int:doctor_id>/', doctor_detail, name='doctor_detail'),
    # Mappings: GET <pk> is a patient id, DELETE <pk> is a mapping id
    path('mappings/', mapping_collection, name='mapping_collection'),
    path('mappings/<int:pk>/', mapping_detail, name='mapping_detail'),
    # Health
    path('health/', health_view, name='health_view'),
]
