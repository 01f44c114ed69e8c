"""
Shared constants for HealthScript application.
"""

# Departments a doctor can register under
DOCTOR_DEPARTMENTS = [
    "Cardiology",
    "Dermatology",
    "Emergency Medicine",
    "Family Medicine",
    "Gastroenterology",
    "Neurology",
    "Obstetrics & Gynecology",
    "Oncology",
    "Pediatrics",
    "Psychiatry",
]

# Doctor designations
DOCTOR_ROLES = [
    "Consultant",
    "Specialist",
    "Senior Resident",
    "Junior Resident",
    "Head of Department",
]

BLOOD_GROUPS = ["A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"]

GENDERS = ["male", "female", "other"]

# Choices offered for each medicine, in display order
MEDICINE_TIMINGS = ["morning", "afternoon", "evening"]

UHID_LENGTH = 14
UHID_RANDOM_DIGITS = 10
AADHAAR_LENGTH = 12
PHONE_LENGTH = 10

PRESCRIPTION_RECORD_PREFIX = "Prescription_"

UNKNOWN_DOCTOR_NAME = "Unknown Doctor"
NOT_AVAILABLE = "N/A"
