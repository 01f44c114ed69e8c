"""pytesseract implementation of TextRecognitionService.

Handwriting is read as a single line restricted to letters and digits.
Canvas strokes are smoothed with PathSmoother and drawn onto a white
canvas before OCR.
"""

from __future__ import annotations

import asyncio
import io
import logging
from typing import List, Optional

import pytesseract
from PIL import Image, ImageDraw, ImageOps, UnidentifiedImageError

from ...application.ports.services.text_recognition_service import (
    Stroke,
    TextRecognitionService,
)
from ...core.config import RecognitionSettings
from ...core.exceptions import OCRError
from ...core.utils.path_smoothing import PathSmoother, smooth_stroke
from ...domain.errors import InvalidRecordError

logger = logging.getLogger(__name__)

HANDWRITING_WHITELIST = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
# Single text line for handwriting, uniform block for documents
HANDWRITING_CONFIG = f"--psm 7 -c tessedit_char_whitelist={HANDWRITING_WHITELIST}"
DOCUMENT_CONFIG = "--psm 6"


def _open_image(image_bytes: bytes) -> Image.Image:
    try:
        img = Image.open(io.BytesIO(image_bytes))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidRecordError("file", f"Image could not be read: {e}")
    return img


def _prepare(img: Image.Image) -> Image.Image:
    """Flatten transparency onto white and convert to greyscale."""
    if img.mode in ("RGBA", "LA", "P"):
        img = img.convert("RGBA")
        background = Image.new("RGBA", img.size, (255, 255, 255, 255))
        img = Image.alpha_composite(background, img)
    gray = img.convert("L")
    return ImageOps.autocontrast(gray)


class TesseractTextRecognitionService(TextRecognitionService):
    def __init__(self, settings: Optional[RecognitionSettings] = None):
        self.settings = settings or RecognitionSettings()
        if self.settings.tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = self.settings.tesseract_cmd

    def _ocr(self, img: Image.Image, config: str) -> str:
        try:
            text = pytesseract.image_to_string(
                img, lang=self.settings.tesseract_lang, config=config
            )
        except pytesseract.TesseractNotFoundError as e:
            raise OCRError("tesseract binary is not installed or not on PATH", {"error": str(e)})
        except pytesseract.TesseractError as e:
            raise OCRError(str(e))
        return " ".join((text or "").split())

    def render_strokes(self, strokes: List[Stroke]) -> Image.Image:
        """Draw smoothed strokes as black lines on a white canvas."""
        width, height = self.settings.canvas_width, self.settings.canvas_height
        img = Image.new("L", (width, height), 255)
        draw = ImageDraw.Draw(img)
        smoother = PathSmoother(
            smoothing=self.settings.smoothing, max_points=self.settings.smoothing_points
        )
        for stroke in strokes:
            points = smooth_stroke(stroke, smoother)
            if len(points) == 1:
                x, y = points[0]
                r = self.settings.stroke_width / 2
                draw.ellipse((x - r, y - r, x + r, y + r), fill=0)
            elif points:
                draw.line(points, fill=0, width=self.settings.stroke_width, joint="curve")
        return img

    async def read_handwriting(self, image_bytes: bytes) -> str:
        img = _prepare(_open_image(image_bytes))
        text = await asyncio.to_thread(self._ocr, img, HANDWRITING_CONFIG)
        logger.debug(f"Handwriting OCR: '{text}'")
        return text

    async def read_strokes(self, strokes: List[Stroke]) -> str:
        img = self.render_strokes(strokes)
        text = await asyncio.to_thread(self._ocr, img, HANDWRITING_CONFIG)
        logger.debug(f"Stroke OCR ({len(strokes)} strokes): '{text}'")
        return text

    async def read_document(self, image_bytes: bytes) -> str:
        img = _prepare(_open_image(image_bytes))
        text = await asyncio.to_thread(self._ocr, img, DOCUMENT_CONFIG)
        logger.debug(f"Document OCR: {len(text)} chars")
        return text
