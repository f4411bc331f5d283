"""Character model: trained skills, attributes and certificate views.

A character builds one :class:`CertificateClass` and one
:class:`Certificate` per catalog certificate when it is created. Callers
run :meth:`Character.update_certificates` after changing skills to refresh
the cached level status.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .certificate import Certificate
from .grades import CertificateGrade, SkillAttribute
from .skills import Skill, SkillLevel
from .static_data import (
    CertificateGroup,
    StaticCatalog,
    StaticCertificateClass,
    StaticSkillLevel,
)


logger = logging.getLogger(__name__)

DEFAULT_ATTRIBUTE_VALUE = 20


class CertificateClass:
    """Character-side wrapper of a certificate class."""

    def __init__(self, character: "Character", static: StaticCertificateClass) -> None:
        self.character = character
        self.static_data = static
        self.certificate: Optional[Certificate] = None

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
    def group(self) -> CertificateGroup:
        return self.static_data.group

    @property
    def highest_trained_grade(self) -> Optional[CertificateGrade]:
        if self.certificate is None:
            return None
        level = self.certificate.highest_trained_level
        return None if level is None else level.grade

    def __str__(self) -> str:
        return self.name


class Character:
    """An individual whose skill training progress is being tracked.

    Not thread safe: skills, certificates and the refresh pass are owned by
    a single thread.
    """

    def __init__(
        self,
        name: str,
        catalog: StaticCatalog,
        attributes: Optional[Mapping[SkillAttribute, int]] = None,
        skills: Optional[Mapping[int, int]] = None,
    ) -> None:
        self.name = name
        self.catalog = catalog
        self.attributes: Dict[SkillAttribute, int] = {
            attr: DEFAULT_ATTRIBUTE_VALUE for attr in SkillAttribute
        }
        for attr, value in (attributes or {}).items():
            attribute = SkillAttribute.normalize(attr)
            if int(value) < 1:
                raise ValueError(f"Attribute {attribute.value} must be at least 1, got {value}")
            self.attributes[attribute] = int(value)

        initial = {int(k): int(v) for k, v in (skills or {}).items()}
        self._skills: Dict[int, Skill] = {
            static.id: Skill(static, initial.get(static.id, 0)) for static in catalog.skills
        }

        self._certificate_classes: Dict[int, CertificateClass] = {}
        self._certificates: Dict[int, Certificate] = {}
        for static in catalog.certificates:
            cert_class = self._certificate_classes.get(static.certificate_class.id)
            if cert_class is None:
                cert_class = CertificateClass(self, static.certificate_class)
                self._certificate_classes[cert_class.id] = cert_class
            certificate = Certificate(self, static, cert_class)
            cert_class.certificate = certificate
            self._certificates[static.id] = certificate

        logger.debug(
            "[character] %s initialised with %d skills and %d certificates",
            name,
            len(self._skills),
            len(self._certificates),
        )

    # ---- Skills ------------------------------------------------------------
    @property
    def skills(self) -> Tuple[Skill, ...]:
        return tuple(self._skills.values())

    def skill(self, skill_id: int) -> Skill:
        try:
            return self._skills[int(skill_id)]
        except KeyError as exc:
            raise KeyError(f"Unknown skill id: {skill_id}") from exc

    def set_skill_level(self, skill_id: int, level: int) -> None:
        self.skill(skill_id).set_level(level)

    def to_character(self, static_levels: Iterable[StaticSkillLevel]) -> Tuple[SkillLevel, ...]:
        """Resolve generic requirements to this character's skills."""
        return tuple(SkillLevel(self.skill(req.skill.id), req.level) for req in static_levels)

    # ---- Training time -----------------------------------------------------
    def skill_points_per_hour(self, skill: Skill) -> float:
        primary = self.attributes[skill.static.primary_attribute]
        secondary = self.attributes[skill.static.secondary_attribute]
        return (primary + secondary / 2.0) * 60.0

    def get_training_time(self, skill_level: SkillLevel) -> timedelta:
        skill = skill_level.skill
        remaining = skill.points_for_level(skill_level.level) - skill.skill_points
        if remaining <= 0:
            return timedelta(0)
        return timedelta(hours=remaining / self.skill_points_per_hour(skill))

    def get_training_time_to_multiple_skills(self, skill_levels: Iterable[SkillLevel]) -> timedelta:
        """Total time to train every requirement from the current state.

        Requirements on the same skill are merged, keeping the highest level,
        so shared lower levels are not counted twice.
        """
        targets: Dict[int, SkillLevel] = {}
        for req in skill_levels:
            current = targets.get(req.skill.id)
            if current is None or req.level > current.level:
                targets[req.skill.id] = req
        total = timedelta(0)
        for req in targets.values():
            total += self.get_training_time(req)
        return total

    # ---- Certificates ------------------------------------------------------
    @property
    def certificates(self) -> Tuple[Certificate, ...]:
        return tuple(self._certificates.values())

    @property
    def certificate_classes(self) -> Tuple[CertificateClass, ...]:
        return tuple(self._certificate_classes.values())

    def get_certificate(self, certificate_id: int) -> Optional[Certificate]:
        return self._certificates.get(int(certificate_id))

    def update_certificates(self) -> List[Certificate]:
        """Refresh every certificate and return the ones whose status changed."""
        changed = [cert for cert in self._certificates.values() if cert.refresh_status()]
        logger.debug("[character] %s: %d certificates changed", self.name, len(changed))
        if changed:
            try:
                from utils.app_signals import app_signals

                app_signals.certificatesUpdated.emit(self)
            except Exception as e:
                logger.warning("[character] failed to emit certificatesUpdated: %s", e)
        return changed

    def __repr__(self) -> str:
        return f"Character({self.name!r})"


__all__ = ["CertificateClass", "Character", "DEFAULT_ATTRIBUTE_VALUE"]
