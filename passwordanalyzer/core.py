# -*- coding: utf-8 -*-
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


# -------------------- Rules --------------------
MIN_LENGTH = 8
LONG_PASSWORD_BONUS_LENGTH = 12  # strictly longer than this earns the bonus
MAX_SCORE = 100

LENGTH_POINTS_PER_CHAR = 2
LENGTH_POINTS_CAP = 30
CLASS_POINTS = 15
COMMON_PASSWORD_PENALTY = 30
LONG_PASSWORD_BONUS = 10

STRONG_THRESHOLD = 80
MEDIUM_THRESHOLD = 50

COMMON_PASSWORDS = frozenset({
    "password", "123456", "12345678", "123456789", "12345",
    "qwerty", "abc123", "password1", "admin", "welcome",
})


# -------------------- Requirement labels --------------------
UPPERCASE = "Uppercase letter"
LOWERCASE = "Lowercase letter"
NUMBER = "Number"
SPECIAL = "Special character"
MIN_LENGTH_LABEL = f"Minimum {MIN_LENGTH} characters"
NOT_COMMON = "Not a common password"
AVOID_COMMON = "Avoid common passwords"

REQUIREMENTS: Tuple[str, ...] = (UPPERCASE, LOWERCASE, NUMBER, SPECIAL, MIN_LENGTH_LABEL, NOT_COMMON)


# -------------------- Helpers --------------------
def _has_upper(s: str) -> bool: return bool(re.search(r"[A-Z]", s))
def _has_lower(s: str) -> bool: return bool(re.search(r"[a-z]", s))
def _has_digit(s: str) -> bool: return bool(re.search(r"[0-9]", s))
def _has_symbol(s: str) -> bool: return bool(re.search(r"[^A-Za-z0-9]", s))


def is_common_password(password: str) -> bool:
    return password.lower() in COMMON_PASSWORDS


def strength_for_score(score: int) -> str:
    if score >= STRONG_THRESHOLD:
        return "Strong"
    if score >= MEDIUM_THRESHOLD:
        return "Medium"
    return "Weak"


# -------------------- Result --------------------
@dataclass(frozen=True)
class AnalysisResult:
    password: Optional[str]
    length: int = 0
    has_upper_case: bool = False
    has_lower_case: bool = False
    has_numbers: bool = False
    has_special_chars: bool = False
    is_common_password: bool = False
    requirements_met: Tuple[str, ...] = field(default_factory=tuple)
    requirements_missing: Tuple[str, ...] = field(default_factory=tuple)
    score: int = 0
    max_score: int = MAX_SCORE
    strength: str = "Weak"

    @property
    def percentage(self) -> int:
        return self.score * 100 // self.max_score

    def as_dict(self, include_password: bool = False) -> Dict[str, Any]:
        """
        JSON-friendly view of the result. The raw password is left out
        unless explicitly asked for.
        """
        out: Dict[str, Any] = {
            "length": self.length,
            "has_upper_case": self.has_upper_case,
            "has_lower_case": self.has_lower_case,
            "has_numbers": self.has_numbers,
            "has_special_chars": self.has_special_chars,
            "is_common_password": self.is_common_password,
            "requirements_met": list(self.requirements_met),
            "requirements_missing": list(self.requirements_missing),
            "score": self.score,
            "max_score": self.max_score,
            "percentage": self.percentage,
            "strength": self.strength,
        }
        if include_password:
            out["password"] = self.password
        return out


# -------------------- Pipeline --------------------
def _detect(password: str) -> Dict[str, bool]:
    return {
        "has_upper_case": _has_upper(password),
        "has_lower_case": _has_lower(password),
        "has_numbers": _has_digit(password),
        "has_special_chars": _has_symbol(password),
        "is_common_password": is_common_password(password),
    }


def _classify(flags: Dict[str, bool], length: int) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """Split the six checks into (met, missing), keeping check order."""
    met: List[str] = []
    missing: List[str] = []

    checks = [
        (flags["has_upper_case"], UPPERCASE),
        (flags["has_lower_case"], LOWERCASE),
        (flags["has_numbers"], NUMBER),
        (flags["has_special_chars"], SPECIAL),
        (length >= MIN_LENGTH, MIN_LENGTH_LABEL),
    ]
    for ok, label in checks:
        (met if ok else missing).append(label)

    if flags["is_common_password"]:
        missing.append(AVOID_COMMON)
    else:
        met.append(NOT_COMMON)

    return tuple(met), tuple(missing)


def _score(flags: Dict[str, bool], length: int) -> int:
    score = min(length * LENGTH_POINTS_PER_CHAR, LENGTH_POINTS_CAP)

    classes = ("has_upper_case", "has_lower_case", "has_numbers", "has_special_chars")
    score += CLASS_POINTS * sum(1 for name in classes if flags[name])

    if flags["is_common_password"]:
        score = max(0, score - COMMON_PASSWORD_PENALTY)

    if length > LONG_PASSWORD_BONUS_LENGTH:
        score += LONG_PASSWORD_BONUS

    return min(score, MAX_SCORE)


def analyze(password: Optional[str]) -> AnalysisResult:
    """
    Score a password against the fixed checklist.

    Empty or missing input short-circuits to a zero result: no checks run,
    both requirement lists stay empty.
    """
    if not password:
        return AnalysisResult(password=password)

    length = len(password)
    flags = _detect(password)
    met, missing = _classify(flags, length)
    score = _score(flags, length)

    return AnalysisResult(
        password=password,
        length=length,
        requirements_met=met,
        requirements_missing=missing,
        score=score,
        strength=strength_for_score(score),
        **flags,
    )


# -------------------- Reporting --------------------
def format_report(result: AnalysisResult) -> str:
    lines = [
        "Password Report:",
        f"  - Strength: {result.strength} ({result.percentage}%)  score={result.score}/{result.max_score}",
        f"  - Length: {result.length}",
    ]

    bar_len = 30
    filled = int(bar_len * result.percentage / 100)
    bar = "#" * filled + "." * (bar_len - filled)
    lines.append(f"  - Meter: [{bar}]")

    if result.requirements_met:
        lines.append("")
        lines.append("Requirements met:")
        lines.extend(f"  + {label}" for label in result.requirements_met)

    if result.requirements_missing:
        lines.append("")
        lines.append("Requirements missing:")
        lines.extend(f"  - {label}" for label in result.requirements_missing)

    return "\n".join(lines)
