"""One grade of a certificate from a character's point of view."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING, Iterable, Tuple

from .grades import CertificateGrade, CertificateStatus, roman
from .skills import SkillLevel
from .static_data import StaticSkillLevel

if TYPE_CHECKING:  # pragma: no cover
    from .certificate import Certificate
    from .character import Character


logger = logging.getLogger(__name__)


class CertificateLevel:
    """Tracks whether one grade's prerequisite skills are trained.

    The status is cached and only recomputed by
    :meth:`try_update_certificate_status`.
    """

    def __init__(
        self,
        grade: CertificateGrade,
        static_levels: Iterable[StaticSkillLevel],
        certificate: "Certificate",
        character: "Character",
    ) -> None:
        self.grade = CertificateGrade.parse(grade)
        self.certificate = certificate
        self.character = character
        self._static_levels: Tuple[StaticSkillLevel, ...] = tuple(static_levels)
        self.status = CertificateStatus.UNTRAINED

    @property
    def prerequisite_skills(self) -> Tuple[SkillLevel, ...]:
        return self.character.to_character(self._static_levels)

    @property
    def top_prerequisite_skills(self) -> Tuple[SkillLevel, ...]:
        """Requirements of this grade not already implied by a lower grade."""
        static = self.certificate.static_data.top_prerequisite_skills(self.grade)
        return self.character.to_character(static)

    @property
    def is_trained(self) -> bool:
        return self.status is CertificateStatus.TRAINED

    @property
    def is_partially_trained(self) -> bool:
        return self.status is CertificateStatus.PARTIALLY_TRAINED

    def _compute_status(self) -> CertificateStatus:
        prereqs = self.prerequisite_skills
        if all(req.is_trained for req in prereqs):
            return CertificateStatus.TRAINED
        if any(req.is_trained or req.is_partially_trained for req in prereqs):
            return CertificateStatus.PARTIALLY_TRAINED
        return CertificateStatus.UNTRAINED

    def try_update_certificate_status(self) -> bool:
        """Recompute the status; return True if the trained flag flipped."""
        was_trained = self.is_trained
        self.status = self._compute_status()
        changed = was_trained != self.is_trained
        if changed:
            logger.debug(
                "[certificates] %s %s -> %s",
                self.certificate.name,
                self,
                self.status.value,
            )
        return changed

    def get_training_time(self) -> timedelta:
        return self.character.get_training_time_to_multiple_skills(self.prerequisite_skills)

    def __str__(self) -> str:
        return f"Level {roman(int(self.grade) + 1)}"

    def __repr__(self) -> str:
        return f"CertificateLevel({self.certificate.name!r}, {self.grade.name}, {self.status.value})"


__all__ = ["CertificateLevel"]
