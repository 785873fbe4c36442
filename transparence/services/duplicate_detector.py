"""
Duplicate affair detection.

Flags pairs of affairs belonging to the same politician that probably
describe the same real-world case, typically entered twice by different
import passes (Wikidata, Judilibre, press analysis). Nothing is modified;
merge and delete are separate admin actions.

Responsibility: Pairwise similarity scoring of a politician's affairs
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from itertools import combinations
from typing import List, Optional, Sequence

from ..models.affair import AffairRecord, DuplicateAffair, DuplicateGroup
from ..utils.text import tokenize

logger = logging.getLogger(__name__)

# Pairs scoring below this are not reported.
MIN_REPORT_SCORE = 40
MAX_SCORE = 100

ECLI_MATCH_SCORE = 100
POURVOI_MATCH_SCORE = 95
CASE_NUMBER_WEIGHT = 40
TITLE_WEIGHT = 50
TITLE_MIN_RATIO = 0.3
CATEGORY_WEIGHT = 15
SOURCE_OVERLAP_WEIGHT = 15

# (max days apart, weight, reason), checked in order.
DATE_WINDOWS = (
    (7, 20, "very close dates (< 7 days)"),
    (30, 15, "close dates (< 30 days)"),
    (90, 10, "overlapping dates (< 90 days)"),
)

# Common French words ignored when comparing titles.
TITLE_STOPWORDS = frozenset({
    "de", "du", "des", "le", "la", "les", "un", "une", "et", "en",
    "au", "aux", "pour", "par", "sur", "dans", "avec", "son", "sa",
    "ses", "ce", "cette", "qui", "que", "est", "a", "d", "l",
    "affaire",
})


@dataclass
class PairScore:
    """Score and reasons accumulated for one pair of affairs."""
    score: int = 0
    reasons: List[str] = field(default_factory=list)

    def add(self, weight: int, reason: str) -> None:
        self.score += weight
        self.reasons.append(reason)


def _round_half_up(value: float) -> int:
    # round() goes to even on .5; percentages round up
    return int(value + 0.5)


def _as_date(value: Optional[date]) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    return value


def title_similarity(title_a: str, title_b: str) -> float:
    """
    Share of meaningful words common to both titles.

    Overlap of the token sets divided by the larger set, in [0, 1].
    """
    words_a = set(tokenize(title_a, TITLE_STOPWORDS))
    words_b = set(tokenize(title_b, TITLE_STOPWORDS))
    if not words_a or not words_b:
        return 0.0
    return len(words_a & words_b) / max(len(words_a), len(words_b))


def score_pair(a: AffairRecord, b: AffairRecord) -> PairScore:
    """
    Score how likely two affairs are the same case.

    Identical ECLI or appeal filing numbers are conclusive on their own.
    Otherwise independent signals add up: shared case numbers, title
    overlap, category, date proximity and shared source URLs.
    """
    if a.ecli and b.ecli and a.ecli.strip().upper() == b.ecli.strip().upper():
        return PairScore(ECLI_MATCH_SCORE, ["same legal reference (ECLI)"])

    if a.pourvoi_number and b.pourvoi_number and a.pourvoi_number.strip() == b.pourvoi_number.strip():
        return PairScore(POURVOI_MATCH_SCORE, ["same legal reference (appeal filing number)"])

    result = PairScore()

    shared_cases = sorted(set(a.case_numbers) & set(b.case_numbers))
    if shared_cases:
        result.add(CASE_NUMBER_WEIGHT, f"shared case number(s): {', '.join(shared_cases)}")

    ratio = title_similarity(a.title, b.title)
    if ratio >= TITLE_MIN_RATIO:
        percent = _round_half_up(ratio * 100)
        result.add(_round_half_up(ratio * TITLE_WEIGHT), f"similar title ({percent}% common words)")

    if a.category == b.category:
        result.add(CATEGORY_WEIGHT, "same category")

    date_a = _as_date(a.reference_date)
    date_b = _as_date(b.reference_date)
    if date_a and date_b:
        days = abs((date_a - date_b).days)
        for max_days, weight, reason in DATE_WINDOWS:
            if days <= max_days:
                result.add(weight, reason)
                break

    shared_urls = a.source_urls & b.source_urls
    if shared_urls:
        result.add(SOURCE_OVERLAP_WEIGHT, f"{len(shared_urls)} shared source(s)")

    result.score = min(result.score, MAX_SCORE)
    return result


def detect_duplicate_affairs(affairs: Sequence[AffairRecord]) -> List[DuplicateGroup]:
    """
    Find candidate duplicate pairs among one politician's affairs.

    Args:
        affairs: Every affair of the politician

    Returns:
        Duplicate groups scoring at least ``MIN_REPORT_SCORE``, highest first
    """
    if len(affairs) < 2:
        return []

    groups: List[DuplicateGroup] = []
    for a, b in combinations(affairs, 2):
        if a.id == b.id:
            continue
        pair = score_pair(a, b)
        if pair.score < MIN_REPORT_SCORE or not pair.reasons:
            continue
        groups.append(
            DuplicateGroup(
                score=pair.score,
                reasons=pair.reasons,
                affairs=[DuplicateAffair.from_record(a), DuplicateAffair.from_record(b)],
            )
        )

    groups.sort(key=lambda group: group.score, reverse=True)
    logger.debug("Compared %s affairs, %s candidate duplicate pair(s)", len(affairs), len(groups))
    return groups
