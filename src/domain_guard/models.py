from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Verdict(StrEnum):
    GOOD = "good"
    BAD = "bad"


class CheckResult(BaseModel):
    """Verdict for a single candidate domain."""

    domain: str
    canonical: str
    verdict: Verdict


class RunStats(BaseModel):
    """Statistics for a single run."""

    forbidden_read: int = 0
    forbidden_retained: int = 0
    candidates_read: int = 0
    candidates_checked: int = 0
    bad_count: int = 0
    good_count: int = 0
    skipped: int = 0
