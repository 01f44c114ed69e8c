"""
Drug search, voice and handwriting matching tests.
"""

import pytest

from healthscript.core.drug_list import DRUG_LIST
from healthscript.core.utils.drug_matching import (
    DrugMatcher,
    generate_misspellings,
    generate_variations,
)


@pytest.fixture(scope="module")
def matcher():
    return DrugMatcher()


class TestSearch:
    def test_substring_case_insensitive_limited_to_five(self, matcher):
        suggestions = matcher.search("CEF")
        assert len(suggestions) == 5
        assert all("cef" in s.lower() for s in suggestions)

    def test_keeps_formulary_order(self, matcher):
        suggestions = matcher.search("pril")
        assert suggestions == [d for d in DRUG_LIST if "pril" in d.lower()][:5]

    def test_blank_query_has_no_suggestions(self, matcher):
        assert matcher.search("   ") == []


class TestFindClosestDrug:
    def test_exact_name(self, matcher):
        assert matcher.find_closest_drug("paracetamol") == "Paracetamol"

    def test_spoken_variant(self, matcher):
        assert matcher.find_closest_drug("metformine") == "Metformin"

    def test_no_match_below_threshold(self, matcher):
        assert matcher.find_closest_drug("0000000000") is None

    def test_empty_text(self, matcher):
        assert matcher.find_closest_drug("") is None


class TestVariations:
    def test_misspellings_apply_every_substitution(self):
        variations = generate_misspellings("Cefixime")
        assert "kefixime" in variations
        assert "sefixime" in variations
        assert "cephixime" in variations
        assert "cefyxyme" in variations
        assert "cefiksime" in variations

    def test_doubled_letters_collapsed(self):
        assert "Ampicilin" in generate_misspellings("Ampicillin")

    def test_variations_include_vowelless_and_letters_only(self):
        variations = generate_variations("Folic Acid")
        assert "folic acid" in variations
        assert "Flc cd" in variations
        assert "FolicAcid" in variations


class TestRecognizeHandwriting:
    def test_misspelled_name_matches(self, matcher):
        result = matcher.recognize_handwriting("Amoxicilin")
        assert result.match == "Amoxicillin"
        assert result.confidence > 0.6
        assert "Amoxicillin" not in result.alternatives
        assert len(result.alternatives) <= 2

    def test_empty_text_has_no_match(self, matcher):
        result = matcher.recognize_handwriting("")
        assert result.match is None
        assert result.confidence == 0.0
        assert result.alternatives == []

    def test_gibberish_has_no_match(self, matcher):
        result = matcher.recognize_handwriting("0000000000")
        assert result.match is None
        assert result.confidence == 0.0

    def test_to_dict(self, matcher):
        payload = matcher.recognize_handwriting("Omeprazole").to_dict()
        assert payload["match"] == "Omeprazole"
        assert set(payload) == {"match", "confidence", "alternatives"}


class TestFindDrugsInText:
    def test_finds_every_drug_mentioned(self, matcher):
        text = "Rx: Tab. Amlodipine 5mg OD\nTab Metformin 500 mg BD\nCap Omeprazole 20mg"
        names = [name for name, _ in matcher.find_drugs_in_text(text)]
        assert names == ["Amlodipine", "Metformin", "Omeprazole"]

    def test_nothing_in_unrelated_text(self, matcher):
        assert matcher.find_drugs_in_text("Follow up after two weeks") == []
