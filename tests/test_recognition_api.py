"""
Drug search and recognition endpoint tests. OCR is faked except in the
adapter tests, which patch pytesseract itself.
"""

import pytest
import pytesseract

from healthscript.adapters.external.tesseract_ocr_service import (
    TesseractTextRecognitionService,
)
from healthscript.core.config import RecognitionSettings
from healthscript.core.exceptions import OCRError
from healthscript.domain.errors import InvalidRecordError


class TestDrugSearch:
    def test_suggestions(self, client, doctor_headers):
        response = client.get("/drugs/search", params={"q": "amox"}, headers=doctor_headers)
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["query"] == "amox"
        assert "Amoxicillin" in data["suggestions"]

    def test_requires_login(self, client):
        assert client.get("/drugs/search", params={"q": "amox"}).status_code == 401


class TestVoice:
    def test_transcript_matched(self, client, doctor_headers):
        response = client.post(
            "/recognition/voice", json={"transcript": " azithromycin "}, headers=doctor_headers
        )
        assert response.status_code == 200
        assert response.json()["data"] == {"transcript": "azithromycin", "match": "Azithromycin"}

    def test_no_match(self, client, doctor_headers):
        response = client.post(
            "/recognition/voice", json={"transcript": "0000000000"}, headers=doctor_headers
        )
        assert response.json()["data"]["match"] is None


class TestHandwriting:
    def test_canvas_image(self, client, doctor_headers, ocr, png):
        ocr.handwriting = "Amoxicilin"
        response = client.post(
            "/recognition/handwriting",
            files={"file": ("canvas.png", png, "image/png")},
            headers=doctor_headers,
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["text"] == "Amoxicilin"
        assert data["match"] == "Amoxicillin"
        assert ocr.calls == ["handwriting"]

    def test_strokes(self, client, doctor_headers, ocr):
        ocr.handwriting = "Ibuprofen"
        strokes = [[[10, 10], [20, 12], [30, 15]], [[40, 40]]]
        response = client.post(
            "/recognition/handwriting", json={"strokes": strokes}, headers=doctor_headers
        )
        assert response.status_code == 200
        assert response.json()["data"]["match"] == "Ibuprofen"
        assert ocr.calls == ["strokes"]
        assert len(ocr.strokes) == 2

    def test_nothing_recognized(self, client, doctor_headers, ocr, png):
        ocr.handwriting = "   "
        response = client.post(
            "/recognition/handwriting",
            files={"file": ("canvas.png", png, "image/png")},
            headers=doctor_headers,
        )
        assert response.status_code == 422
        assert response.json()["error"] == "NO_TEXT_RECOGNIZED"

    def test_empty_stroke_list_rejected(self, client, doctor_headers):
        response = client.post(
            "/recognition/handwriting", json={"strokes": []}, headers=doctor_headers
        )
        assert response.status_code == 422

    def test_body_required(self, client, doctor_headers):
        response = client.post("/recognition/handwriting", headers=doctor_headers)
        assert response.status_code == 422


class TestScan:
    def test_scan_lists_drugs(self, client, medical_headers, ocr, png):
        ocr.document = "Tab Amlodipine 5mg OD\nTab Metformin 500 mg BD"
        response = client.post(
            "/recognition/scan",
            files={"file": ("rx.png", png, "image/png")},
            headers=medical_headers,
        )
        assert response.status_code == 200
        names = [m["name"] for m in response.json()["data"]["medicines"]]
        assert names == ["Amlodipine", "Metformin"]

    def test_blank_document(self, client, doctor_headers, ocr, png):
        response = client.post(
            "/recognition/scan",
            files={"file": ("rx.png", png, "image/png")},
            headers=doctor_headers,
        )
        assert response.status_code == 200
        assert response.json()["data"] == {"text": "", "medicines": []}


class TestTesseractService:
    @pytest.fixture
    def service(self):
        return TesseractTextRecognitionService(RecognitionSettings())

    def test_render_strokes_draws_on_white_canvas(self, service):
        img = service.render_strokes([[(10, 10), (200, 100)], [(300, 50)]])
        assert img.size == (600, 200)
        assert img.getextrema() == (0, 255)

    async def test_reads_handwriting(self, service, monkeypatch, png):
        seen = {}

        def fake_image_to_string(img, lang, config):
            seen["config"] = config
            return "  Cetirizine \n"

        monkeypatch.setattr(pytesseract, "image_to_string", fake_image_to_string)
        assert await service.read_handwriting(png) == "Cetirizine"
        assert "--psm 7" in seen["config"]

    async def test_missing_binary_raises_ocr_error(self, service, monkeypatch, png):
        def missing(*args, **kwargs):
            raise pytesseract.TesseractNotFoundError()

        monkeypatch.setattr(pytesseract, "image_to_string", missing)
        with pytest.raises(OCRError):
            await service.read_document(png)

    async def test_unreadable_image(self, service):
        with pytest.raises(InvalidRecordError):
            await service.read_document(b"not an image")
