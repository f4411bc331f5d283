"""Certificate grade formatter and badge renderer.

This module centralises mapping between certificate grades and human-
readable labels, and provides the badge text shown next to a certificate.

Grades (fixed):
Basic = Level I, Standard = Level II, Improved = Level III,
Advanced = Level IV, Elite = Level V

Badge render rule (global):
- No trained grade: hidden (empty string)
- Otherwise: "<NAME> <ROMAN>", e.g. "Core Fitting III"
"""

from __future__ import annotations

from typing import Dict, Optional

from modules.certificates.models.grades import CertificateGrade, roman


_GRADE_TO_LABEL: Dict[CertificateGrade, str] = {
    CertificateGrade.BASIC: "Basic",
    CertificateGrade.STANDARD: "Standard",
    CertificateGrade.IMPROVED: "Improved",
    CertificateGrade.ADVANCED: "Advanced",
    CertificateGrade.ELITE: "Elite",
}

_LABEL_TO_GRADE: Dict[str, CertificateGrade] = {v.lower(): k for k, v in _GRADE_TO_LABEL.items()}


def grade_to_label(grade: CertificateGrade | None) -> str:
    """Return the descriptive label for a grade.

    ``None`` and unknown values fall back to "None".
    """
    if grade is None:
        return "None"
    try:
        return _GRADE_TO_LABEL[CertificateGrade.parse(grade)]
    except ValueError:
        return "None"


def label_to_grade(label: str) -> Optional[CertificateGrade]:
    """Return the grade for a label (case-insensitive), or None if unknown."""
    if label is None:
        return None
    return _LABEL_TO_GRADE.get(str(label).strip().lower())


def grade_to_roman(grade: CertificateGrade) -> str:
    """Return the display numeral of a grade (Basic -> I ... Elite -> V)."""
    return roman(int(CertificateGrade.parse(grade)) + 1)


def render_badge(name: str, grade: CertificateGrade | None) -> str:
    """Render a badge per global rule for a certificate name and trained grade.

    If `grade` is None or `name` is blank, returns an empty string.
    """
    if grade is None:
        return ""
    base = (name or "").strip()
    if not base:
        return ""
    return f"{base} {grade_to_roman(grade)}"


__all__ = [
    "grade_to_label",
    "label_to_grade",
    "grade_to_roman",
    "render_badge",
]
