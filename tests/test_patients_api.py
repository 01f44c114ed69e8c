"""
Patient registration and lookup endpoint tests.
"""

from datetime import date, datetime, timezone

import pytest

from healthscript.application.dto.patient_dto import RegisterPatientRequest
from healthscript.application.use_cases.register_patient import RegisterPatientUseCase
from healthscript.domain.errors import DuplicatePatientError


def _registration(**overrides):
    body = {
        "name": "Kiran Das",
        "gender": "Male",
        "date_of_birth": "1985-02-11",
        "blood_group": "o+",
        "aadhaar": "555566667777",
    }
    body.update(overrides)
    return body


class TestRegisterPatient:
    def test_doctor_registers_patient(self, client, doctor_headers, patient_repo):
        response = client.post("/patients", json=_registration(), headers=doctor_headers)
        assert response.status_code == 201
        body = response.json()
        uhid = body["data"]["uhid"]
        assert len(uhid) == 14 and uhid.isdigit()
        assert uhid.startswith(str(datetime.now(timezone.utc).year))
        assert uhid in body["message"]
        patient = body["data"]["patient"]
        assert patient["gender"] == "male"
        assert patient["blood_group"] == "O+"
        assert len(patient_repo.items) == 1

    def test_duplicate_aadhaar_conflict(self, client, doctor_headers, registered_patient):
        response = client.post(
            "/patients", json=_registration(aadhaar="123412341234"), headers=doctor_headers
        )
        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "DUPLICATE_PATIENT"
        assert body["details"]["existing_uhid"] == "20240123456789"

    @pytest.mark.parametrize(
        "field,value",
        [("aadhaar", "1234"), ("blood_group", "Z+"), ("gender", "robot"), ("name", "  ")],
    )
    def test_invalid_fields(self, client, doctor_headers, field, value):
        response = client.post(
            "/patients", json=_registration(**{field: value}), headers=doctor_headers
        )
        assert response.status_code == 422

    def test_future_birth_date_rejected(self, client, doctor_headers):
        response = client.post(
            "/patients", json=_registration(date_of_birth="2999-01-01"), headers=doctor_headers
        )
        assert response.status_code == 422
        assert response.json()["error"] == "INVALID_PATIENT_DATA"

    def test_only_doctors_register(self, client, medical_headers):
        response = client.post("/patients", json=_registration(), headers=medical_headers)
        assert response.status_code == 403


class TestLookupPatient:
    def test_doctor_looks_up_by_uhid(self, client, doctor_headers, registered_patient):
        response = client.get("/patients/20240123456789", headers=doctor_headers)
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Asha Verma"
        assert data["age"] >= 34

    def test_malformed_uhid(self, client, doctor_headers):
        response = client.get("/patients/2024", headers=doctor_headers)
        assert response.status_code == 422
        assert response.json()["error"] == "INVALID_UHID"

    def test_unknown_uhid(self, client, doctor_headers):
        response = client.get("/patients/20249999999999", headers=doctor_headers)
        assert response.status_code == 404
        assert response.json()["error"] == "PATIENT_NOT_FOUND"

    def test_patient_sees_own_record(self, client, patient_headers):
        response = client.get("/patients/20240123456789", headers=patient_headers)
        assert response.status_code == 200

    def test_patient_cannot_see_others(self, client, patient_headers):
        response = client.get("/patients/20240000000001", headers=patient_headers)
        assert response.status_code == 403
        assert response.json()["error"] == "AUTHORIZATION_ERROR"

    def test_lookup_by_aadhaar(self, client, doctor_headers, registered_patient):
        response = client.get("/patients/aadhaar/123412341234", headers=doctor_headers)
        assert response.status_code == 200
        assert response.json()["data"]["uhid"] == "20240123456789"


async def test_register_use_case_rejects_duplicate(patient_repo, registered_patient):
    use_case = RegisterPatientUseCase(patient_repo)
    with pytest.raises(DuplicatePatientError):
        await use_case.execute(
            RegisterPatientRequest(
                name="Someone Else",
                gender="other",
                date_of_birth=registered_patient.date_of_birth,
                blood_group="A+",
                aadhaar="123412341234",
            )
        )


async def test_register_use_case_issues_unique_uhid(patient_repo):
    use_case = RegisterPatientUseCase(patient_repo)
    first = await use_case.execute(
        RegisterPatientRequest(
            name="One", gender="male", date_of_birth=date(1990, 1, 1), blood_group="A+", aadhaar="111111111111"
        )
    )
    second = await use_case.execute(
        RegisterPatientRequest(
            name="Two", gender="male", date_of_birth=date(1990, 1, 1), blood_group="A+", aadhaar="222222222222"
        )
    )
    assert first.uhid != second.uhid
