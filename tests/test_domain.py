"""
Domain entity and value object tests.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from healthscript.domain.entities.account import Account
from healthscript.domain.entities.patient import Patient
from healthscript.domain.entities.prescription import DoctorInfo, Medicine, Prescription
from healthscript.domain.entities.record import Record
from healthscript.domain.enums import RecordType, UserRole
from healthscript.domain.errors import (
    InvalidAccountDataError,
    InvalidPatientDataError,
    InvalidPrescriptionError,
    InvalidRecordError,
    InvalidUhidError,
)
from healthscript.domain.value_objects.uhid import Uhid


def _patient(**overrides):
    fields = dict(
        uhid=Uhid("20240000000001"),
        name="  Meena Iyer ",
        gender="Female",
        date_of_birth=date(2000, 1, 1),
        blood_group="O+",
        aadhaar="999988887777",
    )
    fields.update(overrides)
    return Patient(**fields)


class TestUhid:
    def test_generate_is_year_plus_ten_digits(self):
        uhid = Uhid.generate()
        assert len(uhid.value) == 14
        assert uhid.value.isdigit()
        assert uhid.year == datetime.now(timezone.utc).year

    def test_generate_for_given_year(self):
        assert Uhid.generate(year=2023).value.startswith("2023")

    @pytest.mark.parametrize("value", ["", "2024123", "2024abc4567890", "202412345678901", None])
    def test_rejects_malformed_values(self, value):
        with pytest.raises(InvalidUhidError):
            Uhid(value)
        assert not Uhid.is_valid(value)

    def test_equality_by_value(self):
        assert Uhid("20240000000001") == Uhid("20240000000001")
        assert Uhid("20240000000001") != "20240000000001"


class TestPatient:
    def test_normalizes_and_computes_age(self):
        patient = _patient()
        assert patient.name == "Meena Iyer"
        assert patient.gender == "female"
        today = date.today()
        expected = today.year - 2000 - ((today.month, today.day) < (1, 1))
        assert patient.age == expected

    def test_future_birth_date_rejected(self):
        with pytest.raises(InvalidPatientDataError) as exc:
            _patient(date_of_birth=date.today() + timedelta(days=1))
        assert exc.value.details["field"] == "date_of_birth"

    @pytest.mark.parametrize("aadhaar", ["12345678901", "1234567890123", "12345678901a"])
    def test_aadhaar_must_be_twelve_digits(self, aadhaar):
        with pytest.raises(InvalidPatientDataError):
            _patient(aadhaar=aadhaar)

    def test_blood_group_from_fixed_list(self):
        with pytest.raises(InvalidPatientDataError):
            _patient(blood_group="C+")

    def test_name_required(self):
        with pytest.raises(InvalidPatientDataError):
            _patient(name="   ")


class TestMedicine:
    def test_timing_keeps_given_order_without_duplicates(self):
        medicine = Medicine(
            name="Paracetamol",
            dosage="500mg",
            days=3,
            timing=["evening", "morning", "evening"],
        )
        assert medicine.timing == ["evening", "morning"]
        assert medicine.food_instruction == "After food"

    def test_days_must_be_positive(self):
        with pytest.raises(InvalidPrescriptionError):
            Medicine(name="Paracetamol", dosage="500mg", days=0)

    def test_dosage_required(self):
        with pytest.raises(InvalidPrescriptionError):
            Medicine(name="Paracetamol", dosage=" ", days=2)

    def test_unknown_timing_rejected(self):
        with pytest.raises(InvalidPrescriptionError):
            Medicine(name="Paracetamol", dosage="500mg", days=2, timing=["midnight"])


class TestPrescription:
    def test_requires_a_medicine(self):
        with pytest.raises(InvalidPrescriptionError):
            Prescription(uhid=Uhid("20240000000001"), medicines=[], doctor=DoctorInfo())

    def test_missing_doctor_fields_fall_back(self):
        doctor = DoctorInfo()
        assert doctor.display_name == "Unknown Doctor"
        assert doctor.field_or_na(doctor.department) == "N/A"


class TestRecord:
    def test_type_detected_from_content_type(self):
        assert RecordType.from_content_type("application/pdf") == RecordType.PDF
        assert RecordType.from_content_type("image/png") == RecordType.IMAGE
        assert RecordType.from_content_type("") == RecordType.IMAGE

    def test_download_filename_for_pdf(self):
        record = Record(
            uhid=Uhid("20240000000001"),
            type=RecordType.PDF,
            title="Prescription_2024-05-01",
            data="data:application/pdf;base64,JVBERi0=",
        )
        assert record.download_filename == "Prescription_2024-05-01.pdf"

    def test_download_filename_uses_image_subtype(self):
        record = Record(
            uhid=Uhid("20240000000001"),
            type=RecordType.IMAGE,
            title="X-ray",
            data="data:image/jpeg;base64,/9j/4AAQ",
        )
        assert record.download_filename == "X-ray.jpeg"
        assert record.size_bytes == 6

    def test_data_must_be_data_uri(self):
        with pytest.raises(InvalidRecordError):
            Record(uhid=Uhid("20240000000001"), type="image", title="Scan", data="abc")


class TestAccount:
    def test_doctor_department_must_be_known(self):
        with pytest.raises(InvalidAccountDataError) as exc:
            Account(
                role=UserRole.DOCTOR,
                name="Dr Who",
                email="who@clinic.example",
                password_hash="x",
                doctor_id="D1",
                department="Time Travel",
                designation="Consultant",
                photo="data:image/png;base64,AA==",
            )
        assert exc.value.details["field"] == "department"

    def test_email_is_lowercased(self):
        account = Account(
            role="medical",
            name="Corner Chemist",
            email="Owner@Chemist.Example ",
            password_hash="x",
            phone="9000000000",
            license_number="L-1",
            address="1 High Street",
        )
        assert account.email == "owner@chemist.example"
        assert account.login_identifier == "owner@chemist.example"

    def test_medical_store_phone_must_be_ten_digits(self):
        with pytest.raises(InvalidAccountDataError):
            Account(
                role=UserRole.MEDICAL,
                name="Corner Chemist",
                email="owner@chemist.example",
                password_hash="x",
                phone="12345",
                license_number="L-1",
                address="1 High Street",
            )

    def test_patient_logs_in_with_uhid(self):
        account = Account(
            role=UserRole.PATIENT, name="Asha", uhid="20240000000001", password_hash="x"
        )
        assert account.login_identifier == "20240000000001"

    def test_profile_update_revalidates(self):
        account = Account(
            role=UserRole.DOCTOR,
            name="Dr Who",
            email="who@clinic.example",
            password_hash="x",
            doctor_id="D1",
            department="Neurology",
            designation="Consultant",
            photo="data:image/png;base64,AA==",
        )
        account.update_doctor_profile(department="Oncology")
        assert account.department == "Oncology"
        with pytest.raises(InvalidAccountDataError):
            account.update_doctor_profile(designation="Intern")
