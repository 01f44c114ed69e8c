"""
Doctor profile endpoint tests.
"""

from conftest import png_bytes


def test_get_profile(client, doctor_headers):
    response = client.get("/doctor/profile", headers=doctor_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["doctor_id"] == "DOC-42"
    assert data["department"] == "Cardiology"


def test_profile_is_doctor_only(client, patient_headers):
    response = client.get("/doctor/profile", headers=patient_headers)
    assert response.status_code == 403


def test_update_keeps_omitted_fields(client, doctor_headers, account_repo, doctor_account):
    response = client.patch(
        "/doctor/profile", data={"department": "Oncology"}, headers=doctor_headers
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["department"] == "Oncology"
    assert data["designation"] == "Consultant"
    assert account_repo.items[doctor_account.id].department == "Oncology"


def test_update_photo(client, doctor_headers):
    response = client.patch(
        "/doctor/profile",
        files={"photo": ("new.png", png_bytes(color=(0, 0, 255)), "image/png")},
        headers=doctor_headers,
    )
    assert response.status_code == 200
    assert response.json()["data"]["photo"].startswith("data:image/png;base64,")


def test_update_rejects_unknown_designation(client, doctor_headers):
    response = client.patch(
        "/doctor/profile", data={"designation": "Intern"}, headers=doctor_headers
    )
    assert response.status_code == 422
    assert response.json()["error"] == "INVALID_ACCOUNT_DATA"


def test_update_rejects_non_image_photo(client, doctor_headers):
    response = client.patch(
        "/doctor/profile",
        files={"photo": ("cv.pdf", b"%PDF-1.4", "application/pdf")},
        headers=doctor_headers,
    )
    assert response.status_code == 422
