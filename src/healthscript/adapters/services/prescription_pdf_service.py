"""ReportLab implementation of PrescriptionDocumentService.

Layout: title, doctor block, patient block, medical history, numbered
medicines, and a signature footer on the last page.
"""

import io
import logging
from typing import Optional

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import cm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from ...application.ports.services.prescription_document_service import (
    PrescriptionDocumentService,
)
from ...core.constants import NOT_AVAILABLE
from ...core.exceptions import DocumentRenderError
from ...core.utils.datetime_utils import format_date
from ...domain.entities.patient import Patient
from ...domain.entities.prescription import Prescription

logger = logging.getLogger(__name__)

FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
LEFT = 2 * cm
BOTTOM = 3.5 * cm
LINE = 0.6 * cm
TEXT_GREY = (0.235, 0.235, 0.235)


class _PageWriter:
    """Cursor over a canvas that starts a new page when space runs out."""

    def __init__(self, c: canvas.Canvas):
        self.c = c
        self.width, self.height = A4
        self.y = self.height - 2 * cm

    def ensure_space(self, needed: float) -> None:
        if self.y - needed < BOTTOM:
            self.c.showPage()
            self.y = self.height - 2 * cm

    def rule(self) -> None:
        self.ensure_space(LINE)
        self.c.setStrokeColorRGB(0, 0, 0)
        self.c.line(LEFT, self.y, self.width - LEFT, self.y)
        self.y -= LINE

    def text(self, value: str, x: float = LEFT, size: int = 12, bold: bool = False) -> None:
        self.ensure_space(LINE)
        self.c.setFillColorRGB(0, 0, 0)
        self.c.setFont(FONT_BOLD if bold else FONT, size)
        self.c.drawString(x, self.y, value)
        self.y -= LINE if size <= 12 else LINE * 1.4

    def wrapped(self, value: str, x: float, size: int = 12) -> None:
        max_width = self.width - x - LEFT
        self.c.setFont(FONT, size)
        for line in simpleSplit(value, FONT, size, max_width) or [""]:
            self.ensure_space(LINE)
            self.c.setFont(FONT, size)
            self.c.setFillColorRGB(*TEXT_GREY)
            self.c.drawString(x, self.y, line)
            self.y -= LINE
        self.c.setFillColorRGB(0, 0, 0)


class ReportLabPrescriptionDocumentService(PrescriptionDocumentService):
    """Render prescriptions to A4 PDF with ReportLab."""

    content_type = "application/pdf"

    def render(self, prescription: Prescription, patient: Optional[Patient]) -> bytes:
        buffer = io.BytesIO()
        try:
            c = canvas.Canvas(buffer, pagesize=A4)
            c.setTitle(f"Prescription {prescription.uhid}")
            c.setAuthor(prescription.doctor.display_name)
            self._draw(c, prescription, patient)
            c.save()
        except Exception as e:
            logger.error(
                f"Failed to render prescription for UHID {prescription.uhid}: {e}", exc_info=True
            )
            raise DocumentRenderError(
                "Failed to generate prescription PDF", {"uhid": str(prescription.uhid)}
            )
        return buffer.getvalue()

    def _draw(self, c: canvas.Canvas, prescription: Prescription, patient: Optional[Patient]) -> None:
        page = _PageWriter(c)
        doctor = prescription.doctor

        page.text("Digital Prescription", size=20, bold=True)
        page.y -= LINE * 0.5

        # Doctor
        page.rule()
        page.text(f"Dr. {doctor.display_name}", bold=True)
        page.text(doctor.field_or_na(doctor.role))
        page.text(doctor.field_or_na(doctor.department))
        page.text(f"Doctor ID: {doctor.field_or_na(doctor.doctor_id)}")

        # Patient
        page.rule()
        date_y = page.y
        page.text(f"UHID: {prescription.uhid}")
        page.text(f"Patient: {patient.name if patient else NOT_AVAILABLE}")
        age_y = page.y
        page.text(f"Age: {patient.age if patient else NOT_AVAILABLE}")
        c.setFont(FONT, 12)
        gender = patient.gender.capitalize() if patient else NOT_AVAILABLE
        c.drawString(LEFT + 7 * cm, age_y, f"Gender: {gender}")
        c.drawString(page.width - LEFT - 5 * cm, date_y, f"Date: {format_date(prescription.created_at)}")

        # Medical history
        page.rule()
        page.text("Medical History:", size=14, bold=True)
        for label, value in (
            ("Symptoms:", prescription.symptoms),
            ("Allergies:", prescription.allergies),
            ("Hereditary Diseases:", prescription.hereditary_diseases),
        ):
            if value:
                page.text(label, x=LEFT + 0.5 * cm)
                page.wrapped(value, x=LEFT + 1.5 * cm)

        # Medicines
        page.rule()
        page.text("Prescribed Medicines:", size=14, bold=True)
        for index, medicine in enumerate(prescription.medicines, start=1):
            page.ensure_space(LINE * 5)
            page.text(f"{index}. {medicine.name}", x=LEFT + 1 * cm, bold=True)
            detail_x = LEFT + 1.5 * cm
            page.text(f"Dosage: {medicine.dosage}", x=detail_x)
            page.text(f"Timing: {', '.join(medicine.timing)}", x=detail_x)
            page.text(medicine.food_instruction, x=detail_x)
            page.text(f"Duration: {medicine.days} days", x=detail_x)
            page.y -= LINE * 0.3

        # Signature footer on the final page
        c.line(LEFT, 3 * cm, page.width - LEFT, 3 * cm)
        c.setFont(FONT, 12)
        sign_x = page.width - LEFT - 5 * cm
        c.drawString(sign_x, 2.3 * cm, "Digital Signature")
        c.drawString(sign_x, 1.7 * cm, f"Dr. {doctor.display_name}")
        c.drawString(sign_x, 1.1 * cm, doctor.field_or_na(doctor.department))
        c.showPage()
