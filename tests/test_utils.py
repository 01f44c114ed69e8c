"""
Tests for path smoothing, data URIs and date helpers.
"""

from datetime import date

import pytest

from healthscript.core.utils.data_uri import (
    data_uri_mime_type,
    data_uri_size,
    decode_data_uri,
    encode_data_uri,
    extension_for_mime_type,
)
from healthscript.core.utils.datetime_utils import get_age_from_birthdate, parse_date
from healthscript.core.utils.path_smoothing import PathSmoother, smooth_stroke


class TestPathSmoother:
    def test_first_point_returned_unchanged(self):
        smoother = PathSmoother()
        assert smoother.add_point(3, 4) == (3.0, 4.0)

    def test_newest_point_weighs_most(self):
        smoother = PathSmoother(smoothing=0.2, max_points=5)
        smoother.add_point(0, 0)
        x, y = smoother.add_point(10, 0)
        # weights 0.8 and 1.0
        assert x == pytest.approx(10 / 1.8)
        assert y == 0

    def test_keeps_only_the_last_points(self):
        smoother = PathSmoother(max_points=5)
        for i in range(8):
            smoother.add_point(i, i)
        assert len(smoother) == 5

    def test_reset_clears_buffer(self):
        smoother = PathSmoother()
        smoother.add_point(1, 1)
        smoother.add_point(5, 5)
        smoother.reset()
        assert len(smoother) == 0
        assert smoother.add_point(7, 8) == (7.0, 8.0)

    def test_smooth_stroke_resets_between_strokes(self):
        smoother = PathSmoother()
        smooth_stroke([(100, 100), (110, 100)], smoother)
        points = smooth_stroke([(0, 0)], smoother)
        assert points == [(0.0, 0.0)]

    def test_rejects_invalid_parameters(self):
        with pytest.raises(ValueError):
            PathSmoother(smoothing=1.5)
        with pytest.raises(ValueError):
            PathSmoother(max_points=0)


class TestDataUri:
    def test_encode_and_decode(self):
        uri = encode_data_uri(b"%PDF-1.4", "application/pdf")
        assert uri.startswith("data:application/pdf;base64,")
        assert decode_data_uri(uri) == ("application/pdf", b"%PDF-1.4")
        assert data_uri_size(uri) == 8

    def test_mime_type_of_malformed_uri(self):
        assert data_uri_mime_type("not a uri") == "application/octet-stream"

    def test_decode_rejects_plain_text(self):
        with pytest.raises(ValueError):
            decode_data_uri("hello")

    def test_extension_is_subtype(self):
        assert extension_for_mime_type("image/png") == "png"
        assert extension_for_mime_type("IMAGE/WEBP") == "webp"
        assert extension_for_mime_type("") == "bin"


class TestDates:
    def test_age_before_birthday(self):
        assert get_age_from_birthdate(date(2000, 6, 15), today=date(2024, 6, 14)) == 23

    def test_age_on_birthday(self):
        assert get_age_from_birthdate("2000-06-15", today=date(2024, 6, 15)) == 24

    def test_parse_date_invalid(self):
        assert parse_date("15/06/2000") is None
