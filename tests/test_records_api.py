"""
Medical record endpoint tests.
"""

import pytest

from healthscript.application.dto.record_dto import AddRecordRequest
from healthscript.application.use_cases.add_record import AddRecordUseCase
from healthscript.domain.errors import InvalidRecordError, PatientNotFoundError

UHID = "20240123456789"


def _upload(client, headers, png, title="Chest X-ray", uhid=UHID):
    return client.post(
        "/records",
        data={"uhid": uhid, "title": title},
        files={"file": ("xray.png", png, "image/png")},
        headers=headers,
    )


@pytest.fixture
def uploaded(client, doctor_headers, registered_patient, png):
    response = _upload(client, doctor_headers, png)
    assert response.status_code == 201
    return response.json()["data"]


class TestUpload:
    def test_doctor_uploads_image(self, uploaded, png):
        assert uploaded["type"] == "image"
        assert uploaded["content_type"] == "image/png"
        assert uploaded["size_bytes"] == len(png)
        assert "data" not in uploaded

    def test_patient_uploads_to_own_records(self, client, patient_headers, png):
        response = _upload(client, patient_headers, png, title="Blood test")
        assert response.status_code == 201

    def test_patient_cannot_upload_for_others(self, client, patient_headers, png):
        response = _upload(client, patient_headers, png, uhid="20240000000001")
        assert response.status_code == 403

    def test_medical_store_has_no_record_access(self, client, medical_headers, registered_patient, png):
        response = _upload(client, medical_headers, png)
        assert response.status_code == 403

    def test_blank_title_rejected(self, client, doctor_headers, registered_patient, png):
        response = _upload(client, doctor_headers, png, title="  ")
        assert response.status_code == 422
        assert response.json()["details"]["field"] == "title"

    def test_unknown_patient(self, client, doctor_headers, png):
        response = _upload(client, doctor_headers, png, uhid="20249999999999")
        assert response.status_code == 404

    def test_unsupported_type(self, client, doctor_headers, registered_patient):
        response = client.post(
            "/records",
            data={"uhid": UHID, "title": "Notes"},
            files={"file": ("notes.txt", b"hello", "text/plain")},
            headers=doctor_headers,
        )
        assert response.status_code == 422


class TestReadRecords:
    def test_list_newest_first_without_payload(self, client, doctor_headers, uploaded, png):
        second = _upload(client, doctor_headers, png, title="MRI").json()["data"]
        response = client.get(f"/records/patient/{UHID}", headers=doctor_headers)
        assert response.status_code == 200
        records = response.json()["data"]
        assert [r["id"] for r in records] == [second["id"], uploaded["id"]]
        assert all("data" not in r for r in records)

    def test_get_includes_data_uri(self, client, patient_headers, uploaded):
        response = client.get(f"/records/{uploaded['id']}", headers=patient_headers)
        assert response.status_code == 200
        assert response.json()["data"]["data"].startswith("data:image/png;base64,")

    def test_download_returns_raw_bytes(self, client, doctor_headers, uploaded, png):
        response = client.get(f"/records/{uploaded['id']}/download", headers=doctor_headers)
        assert response.status_code == 200
        assert response.content == png
        assert response.headers["content-type"] == "image/png"
        assert 'filename="Chest X-ray.png"' in response.headers["content-disposition"]

    def test_download_non_ascii_title(self, client, doctor_headers, registered_patient, png):
        record = _upload(client, doctor_headers, png, title="रक्त जांच").json()["data"]
        response = client.get(f"/records/{record['id']}/download", headers=doctor_headers)
        assert response.status_code == 200
        assert response.content == png
        disposition = response.headers["content-disposition"]
        assert disposition.startswith('attachment; filename="')
        assert "filename*=UTF-8''%E0%A4%B0" in disposition
        assert disposition.endswith(".png")

    def test_download_title_with_quotes(self, client, doctor_headers, registered_patient, png):
        record = _upload(client, doctor_headers, png, title='Scan "left" knee').json()["data"]
        response = client.get(f"/records/{record['id']}/download", headers=doctor_headers)
        assert response.status_code == 200
        disposition = response.headers["content-disposition"]
        assert 'filename="Scan _left_ knee.png"' in disposition
        assert "filename*=UTF-8''Scan%20%22left%22%20knee.png" in disposition

    def test_missing_record(self, client, doctor_headers):
        response = client.get("/records/404", headers=doctor_headers)
        assert response.status_code == 404
        assert response.json()["error"] == "RECORD_NOT_FOUND"


class TestDeleteRecord:
    def test_owner_deletes(self, client, patient_headers, uploaded, record_repo):
        response = client.delete(f"/records/{uploaded['id']}", headers=patient_headers)
        assert response.status_code == 200
        assert response.json()["data"] == {"id": uploaded["id"], "deleted": True}
        assert record_repo.items == {}

    def test_medical_store_cannot_delete(self, client, medical_headers, uploaded):
        response = client.delete(f"/records/{uploaded['id']}", headers=medical_headers)
        assert response.status_code == 403


class TestAddRecordUseCase:
    async def test_rejects_oversized_file(self, patient_repo, record_repo, registered_patient):
        use_case = AddRecordUseCase(patient_repo, record_repo, max_size_bytes=10)
        with pytest.raises(InvalidRecordError) as exc:
            await use_case.execute(
                AddRecordRequest(uhid=UHID, title="Scan", content=b"x" * 11, content_type="image/png")
            )
        assert exc.value.details["field"] == "file"

    async def test_rejects_empty_file(self, patient_repo, record_repo, registered_patient):
        use_case = AddRecordUseCase(patient_repo, record_repo, max_size_bytes=10)
        with pytest.raises(InvalidRecordError):
            await use_case.execute(
                AddRecordRequest(uhid=UHID, title="Scan", content=b"", content_type="image/png")
            )

    async def test_pdf_detected_from_content_type(self, patient_repo, record_repo, registered_patient):
        use_case = AddRecordUseCase(patient_repo, record_repo, max_size_bytes=1024)
        record = await use_case.execute(
            AddRecordRequest(
                uhid=UHID, title="Discharge summary", content=b"%PDF-1.4", content_type="application/pdf"
            )
        )
        assert record.type.value == "pdf"
        assert record.id in record_repo.items

    async def test_unknown_patient(self, patient_repo, record_repo):
        use_case = AddRecordUseCase(patient_repo, record_repo, max_size_bytes=1024)
        with pytest.raises(PatientNotFoundError):
            await use_case.execute(
                AddRecordRequest(uhid=UHID, title="Scan", content=b"abc", content_type="image/png")
            )
