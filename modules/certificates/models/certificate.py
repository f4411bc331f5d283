"""A certificate from a character's point of view.

The certificate wraps the shared :class:`StaticCertificate` definition with
the owning character's progress. It holds one :class:`CertificateLevel` slot
per grade, indexed by :class:`CertificateGrade`; grades without prerequisite
skills in the reference data leave their slot empty. The slots are created
once at construction and never added or removed afterwards.

Threading: a certificate belongs to the thread that owns its character
(the GUI thread in the application). :meth:`Certificate.refresh_status` and
all reads must be serialised on that thread; nothing here takes a lock.
"""

from __future__ import annotations

import itertools
import logging
from datetime import timedelta
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from .certificate_level import CertificateLevel
from .grades import CertificateGrade
from .skills import SkillLevel
from .static_data import StaticCertificate, StaticItem

if TYPE_CHECKING:  # pragma: no cover
    from .character import Character, CertificateClass


logger = logging.getLogger(__name__)


class Certificate:
    def __init__(
        self,
        character: "Character",
        static: StaticCertificate,
        certificate_class: "CertificateClass",
    ) -> None:
        self._character = character
        self.static_data = static
        self.certificate_class = certificate_class
        self._levels: List[Optional[CertificateLevel]] = [None] * len(CertificateGrade)

        for grade, skills in static.prerequisite_skills.items():
            self._levels[int(grade)] = CertificateLevel(grade, skills, self, character)

        logger.debug(
            "[certificates] built %s for %s (%d levels)",
            static.name,
            getattr(character, "name", character),
            sum(1 for _ in self.all_levels),
        )

    # ---- Core properties -------------------------------------------------
    @property
    def id(self) -> int:
        return self.static_data.id

    @property
    def name(self) -> str:
        return self.static_data.name

    @property
    def description(self) -> str:
        return self.static_data.description

    @property
    def recommendations(self) -> Tuple[StaticItem, ...]:
        return self.static_data.recommendations

    @property
    def character(self) -> "Character":
        return self._character

    # ---- Levels ------------------------------------------------------------
    def level(self, grade: CertificateGrade) -> Optional[CertificateLevel]:
        return self._levels[int(CertificateGrade.parse(grade))]

    @property
    def level_one(self) -> Optional[CertificateLevel]:
        return self._levels[CertificateGrade.BASIC]

    @property
    def level_two(self) -> Optional[CertificateLevel]:
        return self._levels[CertificateGrade.STANDARD]

    @property
    def level_three(self) -> Optional[CertificateLevel]:
        return self._levels[CertificateGrade.IMPROVED]

    @property
    def level_four(self) -> Optional[CertificateLevel]:
        return self._levels[CertificateGrade.ADVANCED]

    @property
    def level_five(self) -> Optional[CertificateLevel]:
        return self._levels[CertificateGrade.ELITE]

    @property
    def all_levels(self) -> Iterator[CertificateLevel]:
        """Populated levels, Basic first. A new iterator on every access."""
        return (level for level in self._levels if level is not None)

    # ---- Status ------------------------------------------------------------
    def refresh_status(self) -> bool:
        """Refresh every level; return True if any level's trained flag changed."""
        changed = False
        for level in self.all_levels:
            # No short-circuit: every level must refresh its cached status
            changed = level.try_update_certificate_status() or changed
        return changed

    @property
    def all_top_prerequisite_skills(self) -> Iterator[SkillLevel]:
        """Top prerequisite skills of every level in grade order, not deduplicated."""
        return itertools.chain.from_iterable(
            level.top_prerequisite_skills for level in self.all_levels
        )

    def get_training_time(self) -> timedelta:
        """Time the character still needs to train every level of this certificate."""
        return self._character.get_training_time_to_multiple_skills(
            list(self.all_top_prerequisite_skills)
        )

    @property
    def lowest_untrained_level(self) -> Optional[CertificateLevel]:
        """First level not yet trained, or None when every level is trained."""
        return next((level for level in self.all_levels if not level.is_trained), None)

    @property
    def highest_trained_level(self) -> Optional[CertificateLevel]:
        """Last trained level, or None when nothing is trained.

        Levels are reported as they are; a higher grade may be trained while
        a lower one is not, in which case this can sit above
        :attr:`lowest_untrained_level`.
        """
        trained = [level for level in self.all_levels if level.is_trained]
        return trained[-1] if trained else None

    def __str__(self) -> str:
        return str(self.static_data)

    def __repr__(self) -> str:
        return f"Certificate({self.id}, {self.name!r})"


def to_static(certificate: Optional[Certificate]) -> Optional[StaticCertificate]:
    """Return the reference definition behind ``certificate`` (None for None)."""
    return None if certificate is None else certificate.static_data


__all__ = ["Certificate", "to_static"]
