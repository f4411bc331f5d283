"""Enumerations shared by the certificate models.

Grades (fixed, ascending):
0 Basic, 1 Standard, 2 Improved, 3 Advanced, 4 Elite

The integer value doubles as the slot index inside a certificate, so the
order of the members is significant and must never change.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any


class CertificateGrade(IntEnum):
    """Competency tier of a certificate level."""

    BASIC = 0
    STANDARD = 1
    IMPROVED = 2
    ADVANCED = 3
    ELITE = 4

    @classmethod
    def parse(cls, value: Any) -> "CertificateGrade":
        """Return a grade from a member name or index (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError as exc:
                raise ValueError(f"Unsupported certificate grade: {value}") from exc
        text = str(value or "").strip()
        if not text:
            raise ValueError("Certificate grade is required")
        if text.isdigit():
            return cls.parse(int(text))
        try:
            return cls[text.upper()]
        except KeyError as exc:
            raise ValueError(f"Unsupported certificate grade: {value}") from exc


class CertificateStatus(str, Enum):
    """Training status of a single certificate level."""

    UNTRAINED = "Untrained"
    PARTIALLY_TRAINED = "PartiallyTrained"
    TRAINED = "Trained"


class SkillAttribute(str, Enum):
    """Character attributes that drive skill training speed."""

    INTELLIGENCE = "Intelligence"
    PERCEPTION = "Perception"
    CHARISMA = "Charisma"
    WILLPOWER = "Willpower"
    MEMORY = "Memory"

    @classmethod
    def normalize(cls, value: str) -> "SkillAttribute":
        if isinstance(value, cls):
            return value
        if not value:
            raise ValueError("Skill attribute is required")
        text = str(value).strip()
        for member in cls:
            if text.lower() in {member.value.lower(), member.name.lower()}:
                return member
        raise ValueError(f"Unsupported skill attribute: {value}")


_ROMAN = ("0", "I", "II", "III", "IV", "V")


def roman(value: int) -> str:
    """Return the roman numeral for a skill or certificate level (0..5)."""
    try:
        return _ROMAN[int(value)]
    except (IndexError, ValueError, TypeError):
        return str(value)


__all__ = ["CertificateGrade", "CertificateStatus", "SkillAttribute", "roman"]
