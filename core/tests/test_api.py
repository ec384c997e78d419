"""
Integration tests for the healthcare API.

These tests exercise registration, login, the three resource groups and
the ownership rules through real HTTP requests, using Django REST
framework's APIClient within ``APISimpleTestCase`` (no database).

To run the tests:

```
pytest -q core/tests
```
"""

from rest_framework import status
from rest_framework.test import APIClient, APISimpleTestCase

from core.store import install_store


class HealthcareAPITests(APISimpleTestCase):
    def setUp(self) -> None:
        """Start every test from an empty store with two registered users."""
        self.store = install_store()
        self.register("A", "a@x.com", "secret1")
        self.register("B", "b@x.com", "secret2")
        self.owner = self.authenticate(self.login("a@x.com", "secret1"))
        self.other = self.authenticate(self.login("b@x.com", "secret2"))

    def register(self, name: str, email: str, password: str):
        return self.client.post(
            "/api/auth/register/", {"name": name, "email": email, "password": password}, format="json"
        )

    def login(self, email: str, password: str) -> str:
        response = self.client.post("/api/auth/login/", {"email": email, "password": password}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        return response.data["access"]

    def authenticate(self, token: str) -> APIClient:
        """Return an APIClient that sends ``token`` as a bearer credential."""
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        return client

    def create_patient(self, client: APIClient, **fields):
        body = {"name": "P", "age": 30, "gender": "f"}
        body.update(fields)
        response = client.post("/api/patients/", body, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        return response.data

    def create_doctor(self, client: APIClient, **fields):
        body = {"name": "D", "specialization": "cardio"}
        body.update(fields)
        response = client.post("/api/doctors/", body, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        return response.data

    def test_end_to_end_flow(self):
        """Register, log in, create patient/doctor, map them, and reject the duplicate pair."""
        self.store = install_store()
        response = self.register("A", "a@x.com", "secret1")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["user"], {"id": 1, "name": "A", "email": "a@x.com"})
        self.assertNotIn("password", response.data["user"])

        client = self.authenticate(self.login("a@x.com", "secret1"))

        patient = client.post("/api/patients/", {"name": "P", "age": 30, "gender": "f"}, format="json")
        self.assertEqual(patient.status_code, status.HTTP_201_CREATED)
        self.assertEqual(patient.data["id"], 1)
        self.assertEqual(patient.data["created_by"], 1)

        doctor = client.post("/api/doctors/", {"name": "D", "specialization": "cardio"}, format="json")
        self.assertEqual(doctor.status_code, status.HTTP_201_CREATED)
        self.assertEqual(doctor.data["id"], 1)
        self.assertEqual(doctor.data["experience_years"], 0)

        mapping = client.post("/api/mappings/", {"patient_id": 1, "doctor_id": 1}, format="json")
        self.assertEqual(mapping.status_code, status.HTTP_201_CREATED)
        self.assertEqual(mapping.data["id"], 1)
        self.assertEqual(mapping.data["status"], "active")

        again = client.post("/api/mappings/", {"patient_id": 1, "doctor_id": 1}, format="json")
        self.assertEqual(again.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(again.data, {"error": "This patient is already assigned to this doctor"})

    def test_login_returns_user_summary(self):
        response = self.client.post("/api/auth/login/", {"email": "a@x.com", "password": "secret1"}, format="json")
        self.assertEqual(response.data["user"], {"id": 1, "name": "A", "email": "a@x.com"})
        self.assertTrue(response.data["access"])

    def test_login_failures(self):
        wrong = self.client.post("/api/auth/login/", {"email": "a@x.com", "password": "nope"}, format="json")
        self.assertEqual(wrong.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(wrong.data, {"error": "Invalid credentials"})

        unknown = self.client.post("/api/auth/login/", {"email": "z@x.com", "password": "secret1"}, format="json")
        self.assertEqual(unknown.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(unknown.data, wrong.data)

        missing = self.client.post("/api/auth/login/", {"email": "a@x.com"}, format="json")
        self.assertEqual(missing.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(missing.data, {"error": "Email and password are required"})

    def test_register_rejects_duplicates_and_missing_fields(self):
        duplicate = self.register("Again", "a@x.com", "whatever")
        self.assertEqual(duplicate.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(duplicate.data, {"error": "User with this email already exists"})

        missing = self.client.post("/api/auth/register/", {"name": "X", "email": "x@x.com"}, format="json")
        self.assertEqual(missing.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(missing.data, {"error": "Name, email, and password are required"})

    def test_patient_is_invisible_to_other_users(self):
        patient = self.create_patient(self.owner)
        url = f"/api/patients/{patient['id']}/"

        self.assertEqual(self.other.get("/api/patients/").data, [])
        self.assertEqual(self.other.get(url).status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(self.other.put(url, {"name": "X"}, format="json").status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(self.other.delete(url).status_code, status.HTTP_404_NOT_FOUND)

        # Still there for its owner
        response = self.owner.get(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["name"], "P")

    def test_patient_update_merge_rules(self):
        patient = self.create_patient(self.owner, phone="555-0100", address="1 Main St")
        url = f"/api/patients/{patient['id']}/"

        # age=0 is falsy and ignored: known behaviour, kept deliberately
        response = self.owner.put(url, {"age": 0, "phone": ""}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["age"], 30)
        self.assertEqual(response.data["phone"], "")
        self.assertEqual(response.data["address"], "1 Main St")

        response = self.owner.put(url, {"name": "Renamed"}, format="json")
        self.assertEqual(response.data["name"], "Renamed")
        self.assertEqual(response.data["phone"], "")

    def test_patient_delete(self):
        patient = self.create_patient(self.owner)
        url = f"/api/patients/{patient['id']}/"
        response = self.owner.delete(url)
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(self.owner.get(url).status_code, status.HTTP_404_NOT_FOUND)

    def test_patient_create_requires_fields(self):
        response = self.owner.post("/api/patients/", {"name": "P", "gender": "f"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {"error": "Name, age, and gender are required"})

    def test_doctors_are_shared(self):
        doctor = self.create_doctor(self.owner, experience_years=5)
        url = f"/api/doctors/{doctor['id']}/"

        self.assertEqual(len(self.other.get("/api/doctors/").data), 1)
        response = self.other.put(url, {"experience_years": 0}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["experience_years"], 0)
        self.assertEqual(response.data["specialization"], "cardio")

        self.assertEqual(self.other.delete(url).status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(self.owner.get(url).status_code, status.HTTP_404_NOT_FOUND)

    def test_mapping_lists_follow_patient_ownership(self):
        mine = self.create_patient(self.owner)
        theirs = self.create_patient(self.other, name="Q")
        doctor = self.create_doctor(self.owner)

        self.owner.post("/api/mappings/", {"patient_id": mine["id"], "doctor_id": doctor["id"]}, format="json")
        self.other.post("/api/mappings/", {"patient_id": theirs["id"], "doctor_id": doctor["id"]}, format="json")

        owned = self.owner.get("/api/mappings/").data
        self.assertEqual([m["patient_id"] for m in owned], [mine["id"]])

        by_patient = self.owner.get(f"/api/mappings/{mine['id']}/")
        self.assertEqual(by_patient.status_code, status.HTTP_200_OK)
        self.assertEqual(len(by_patient.data), 1)

        foreign = self.owner.get(f"/api/mappings/{theirs['id']}/")
        self.assertEqual(foreign.status_code, status.HTTP_404_NOT_FOUND)

    def test_mapping_create_errors(self):
        mine = self.create_patient(self.owner)
        theirs = self.create_patient(self.other, name="Q")
        doctor = self.create_doctor(self.owner)

        missing = self.owner.post("/api/mappings/", {"patient_id": mine["id"]}, format="json")
        self.assertEqual(missing.status_code, status.HTTP_400_BAD_REQUEST)

        foreign = self.owner.post("/api/mappings/", {"patient_id": theirs["id"], "doctor_id": doctor["id"]}, format="json")
        self.assertEqual(foreign.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(foreign.data, {"error": "Patient not found"})

        no_doctor = self.owner.post("/api/mappings/", {"patient_id": mine["id"], "doctor_id": 99}, format="json")
        self.assertEqual(no_doctor.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(no_doctor.data, {"error": "Doctor not found"})

    def test_deleting_foreign_mapping_is_forbidden_not_hidden(self):
        patient = self.create_patient(self.owner)
        doctor = self.create_doctor(self.owner)
        mapping = self.owner.post(
            "/api/mappings/", {"patient_id": patient["id"], "doctor_id": doctor["id"]}, format="json"
        ).data
        url = f"/api/mappings/{mapping['id']}/"

        response = self.other.delete(url)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data, {"error": "Access denied"})

        self.assertEqual(self.other.delete("/api/mappings/999/").status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(self.owner.delete(url).status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(self.owner.get("/api/mappings/").data, [])

    def test_health_is_public(self):
        response = self.client.get("/api/health/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], "OK")
