"""Drug-name matching for search suggestions, voice and handwriting input.

Scores are rapidfuzz similarities scaled to 0.0-1.0. A candidate is only
considered when its confidence reaches ``min_confidence``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from rapidfuzz import fuzz, process
from rapidfuzz.utils import default_process

from ..drug_list import DRUG_LIST

NAME_WEIGHT = 0.7
VARIATION_WEIGHT = 0.3

# Character substitutions commonly seen in handwritten drug names
MISSPELLING_SUBSTITUTIONS: Dict[str, List[str]] = {
    "f": ["ph"],
    "i": ["y"],
    "c": ["k", "s"],
    "z": ["s"],
    "v": ["f"],
    "x": ["ks"],
    "qu": ["k", "kw"],
}


@dataclass
class DrugEntry:
    """A formulary name with its precomputed spelling variations."""

    name: str
    variations: List[str] = field(default_factory=list)


@dataclass
class RecognitionResult:
    match: Optional[str]
    confidence: float
    alternatives: List[str]

    def to_dict(self) -> Dict[str, object]:
        return {
            "match": self.match,
            "confidence": round(self.confidence, 4),
            "alternatives": list(self.alternatives),
        }


def generate_misspellings(word: str) -> List[str]:
    """Common misspellings of ``word``.

    Each substitution is applied to every occurrence in the lowercased word,
    and each doubled letter yields a variant with one of the pair removed.
    """
    variations: List[str] = []
    lower_word = word.lower()

    for pattern, replacements in MISSPELLING_SUBSTITUTIONS.items():
        if pattern in lower_word:
            for replacement in replacements:
                variations.append(lower_word.replace(pattern, replacement))

    for i in range(1, len(word)):
        if word[i] == word[i - 1]:
            variations.append(word[:i] + word[i + 1:])

    return variations


def generate_variations(name: str) -> List[str]:
    """Lowercase, vowel-less, letters-only and misspelled forms of a drug name."""
    candidates = [
        name.lower(),
        re.sub(r"[aeiou]", "", name, flags=re.IGNORECASE),
        re.sub(r"[^a-zA-Z]", "", name),
        *generate_misspellings(name),
    ]
    seen = set()
    variations = []
    for candidate in candidates:
        key = candidate.lower()
        if candidate and key not in seen:
            seen.add(key)
            variations.append(candidate)
    return variations


def build_drug_index(drugs: Iterable[str]) -> List[DrugEntry]:
    return [DrugEntry(name=drug, variations=generate_variations(drug)) for drug in drugs]


def _ngrams(tokens: Sequence[str], n_max: int = 3) -> List[str]:
    out = []
    for n in range(1, n_max + 1):
        for i in range(len(tokens) - n + 1):
            out.append(" ".join(tokens[i:i + n]))
    return out


class DrugMatcher:
    """Fuzzy matcher over a static drug list."""

    def __init__(
        self,
        drugs: Optional[Sequence[str]] = None,
        min_confidence: float = 0.6,
        max_alternatives: int = 3,
        search_limit: int = 5,
    ) -> None:
        self.drugs = list(drugs if drugs is not None else DRUG_LIST)
        self.entries = build_drug_index(self.drugs)
        self.min_confidence = min_confidence
        self.max_alternatives = max_alternatives
        self.search_limit = search_limit

    def search(self, query: str, limit: Optional[int] = None) -> List[str]:
        """Case-insensitive substring suggestions in formulary order."""
        needle = (query or "").strip().lower()
        if not needle:
            return []
        limit = self.search_limit if limit is None else limit
        return [drug for drug in self.drugs if needle in drug.lower()][:limit]

    def _name_confidence(self, text: str, name: str) -> float:
        return fuzz.WRatio(text, name, processor=default_process) / 100.0

    def find_closest_drug(self, text: str) -> Optional[str]:
        """Best formulary match for free text, or None below the confidence floor."""
        if not text or not text.strip():
            return None
        best = process.extractOne(
            text,
            self.drugs,
            scorer=fuzz.WRatio,
            processor=default_process,
        )
        if best is None:
            return None
        name, score, _ = best
        if score / 100.0 > self.min_confidence:
            return name
        return None

    def score_candidates(self, text: str) -> List[Tuple[str, float]]:
        """Weighted name/variation confidence for every drug, best first.

        Only candidates at or above ``min_confidence`` are returned.
        """
        query = default_process(text or "")
        if not query:
            return []

        scored = []
        for entry in self.entries:
            name_score = self._name_confidence(query, entry.name)
            variation_score = max(
                (fuzz.ratio(query, default_process(v)) / 100.0 for v in entry.variations),
                default=0.0,
            )
            confidence = NAME_WEIGHT * name_score + VARIATION_WEIGHT * variation_score
            if confidence >= self.min_confidence:
                scored.append((entry.name, confidence))

        scored.sort(key=lambda item: item[1], reverse=True)
        return scored

    def recognize_handwriting(self, text: str) -> RecognitionResult:
        """Match OCR output from handwriting against the formulary.

        A match is reported only when the best confidence exceeds the floor;
        alternatives then exclude the match. Without a match the confidence
        is 0 and the alternatives are the top candidates.
        """
        if not text or not text.strip():
            return RecognitionResult(match=None, confidence=0.0, alternatives=[])

        top = self.score_candidates(text)[: self.max_alternatives]
        alternatives = [name for name, _ in top]

        if top and top[0][1] > self.min_confidence:
            return RecognitionResult(
                match=top[0][0],
                confidence=min(top[0][1], 1.0),
                alternatives=alternatives[1:],
            )

        return RecognitionResult(match=None, confidence=0.0, alternatives=alternatives)

    def find_drugs_in_text(self, text: str, min_score: float = 0.85) -> List[Tuple[str, float]]:
        """Every formulary drug mentioned in a block of OCR text.

        Scans word n-grams (up to three words) and keeps the best score per drug,
        in order of first appearance.
        """
        tokens = [t.strip(".,;:()[]{}'\"") for t in (text or "").lower().split()]
        tokens = [t for t in tokens if len(t) > 2]
        found: Dict[str, float] = {}
        for gram in _ngrams(tokens):
            best = process.extractOne(
                gram, self.drugs, scorer=fuzz.ratio, processor=default_process
            )
            if best is None:
                continue
            name, score, _ = best
            confidence = score / 100.0
            if confidence >= min_score and confidence > found.get(name, 0.0):
                found[name] = confidence
        return list(found.items())


@lru_cache()
def get_drug_matcher() -> DrugMatcher:
    from ..config import get_settings

    recognition = get_settings().recognition
    return DrugMatcher(
        min_confidence=recognition.min_confidence,
        max_alternatives=recognition.max_alternatives,
        search_limit=recognition.search_limit,
    )
