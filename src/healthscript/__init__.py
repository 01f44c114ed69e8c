"""
HealthScript: digital prescription and patient record system

A clean architecture-based backend for patient registration, digital
prescriptions, medical record storage and role-based access for doctors,
patients and medical stores, with handwriting and voice drug-name recognition.
"""

__version__ = "0.1.0"
__author__ = "HealthScript Team"
__description__ = "Digital prescription and patient record system"
