"""Immutable reference data for skills and certificates.

These records are shared by every character and never mutated after the
catalog is loaded. Character specific state lives in ``skills.py``,
``certificate_level.py`` and ``certificate.py``.
"""

from __future__ import annotations

from typing import Dict, Iterator, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.certificates.exceptions import CatalogReferenceError

from .grades import CertificateGrade, SkillAttribute, roman


class StaticSkill(BaseModel):
    id: int
    name: str
    rank: int = Field(default=1, ge=1)
    primary_attribute: SkillAttribute = SkillAttribute.INTELLIGENCE
    secondary_attribute: SkillAttribute = SkillAttribute.MEMORY
    description: str = ""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class StaticSkillLevel(BaseModel):
    """A skill requirement: ``skill`` trained to at least ``level``."""

    skill: StaticSkill
    level: int = Field(ge=0, le=5)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.skill.name} {roman(self.level)}"


class StaticItem(BaseModel):
    """Something a certificate is recommended for (usually a ship)."""

    id: int
    name: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class CertificateGroup(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(frozen=True)


class StaticCertificateClass(BaseModel):
    id: int
    name: str
    description: str = ""
    group: CertificateGroup

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class StaticCertificate(BaseModel):
    """Global definition of a certificate and its per-grade requirements.

    ``prerequisite_skills`` only holds grades that actually define skills and
    is kept in ascending grade order.
    """

    id: int
    certificate_class: StaticCertificateClass
    description: str = ""
    recommendations: Tuple[StaticItem, ...] = tuple()
    prerequisite_skills: Dict[CertificateGrade, Tuple[StaticSkillLevel, ...]] = Field(
        default_factory=dict
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("prerequisite_skills", mode="before")
    @classmethod
    def _order_grades(cls, value):
        if not value:
            return {}
        ordered = sorted(
            ((CertificateGrade.parse(g), levels) for g, levels in dict(value).items()),
            key=lambda pair: pair[0],
        )
        return {grade: tuple(levels) for grade, levels in ordered if levels}

    @property
    def name(self) -> str:
        return self.certificate_class.name

    @property
    def grades(self) -> Tuple[CertificateGrade, ...]:
        return tuple(self.prerequisite_skills)

    def top_prerequisite_skills(self, grade: CertificateGrade) -> Tuple[StaticSkillLevel, ...]:
        """Return the grade's requirements not already covered by a lower grade.

        Within the grade only the highest level per skill is kept. A lower
        grade covers a requirement when it asks for the same skill at an equal
        or higher level.
        """
        grade = CertificateGrade.parse(grade)
        required = self.prerequisite_skills.get(grade, ())

        highest: Dict[int, StaticSkillLevel] = {}
        for req in required:
            current = highest.get(req.skill.id)
            if current is None or req.level > current.level:
                highest[req.skill.id] = req

        covered: Dict[int, int] = {}
        for lower_grade, levels in self.prerequisite_skills.items():
            if lower_grade >= grade:
                continue
            for req in levels:
                covered[req.skill.id] = max(covered.get(req.skill.id, 0), req.level)

        result: list[StaticSkillLevel] = []
        seen: set[int] = set()
        for req in required:
            if req.skill.id in seen:
                continue
            seen.add(req.skill.id)
            keep = highest[req.skill.id]
            if keep.level > covered.get(keep.skill.id, 0):
                result.append(keep)
        return tuple(result)

    @property
    def all_top_prerequisite_skills(self) -> Tuple[StaticSkillLevel, ...]:
        result: list[StaticSkillLevel] = []
        for grade in self.prerequisite_skills:
            result.extend(self.top_prerequisite_skills(grade))
        return tuple(result)

    def __str__(self) -> str:
        return self.name


class StaticCatalog:
    """Lookup tables over one loaded reference catalog."""

    def __init__(
        self,
        skills: Mapping[int, StaticSkill],
        certificates: Mapping[int, StaticCertificate],
        items: Optional[Mapping[int, StaticItem]] = None,
        version: str = "",
    ) -> None:
        self.version = version
        self._skills: Dict[int, StaticSkill] = dict(skills)
        self._items: Dict[int, StaticItem] = dict(items or {})
        self._certificates: Dict[int, StaticCertificate] = dict(sorted(certificates.items()))

        for certificate in self._certificates.values():
            for grade, levels in certificate.prerequisite_skills.items():
                for req in levels:
                    if req.skill.id not in self._skills:
                        raise CatalogReferenceError(
                            f"certificate {certificate.id} ({grade.name}) references unknown skill id {req.skill.id}"
                        )

    @property
    def skills(self) -> Tuple[StaticSkill, ...]:
        return tuple(self._skills.values())

    @property
    def items(self) -> Tuple[StaticItem, ...]:
        return tuple(self._items.values())

    @property
    def certificates(self) -> Tuple[StaticCertificate, ...]:
        return tuple(self._certificates.values())

    def get_skill(self, skill_id: int) -> Optional[StaticSkill]:
        return self._skills.get(int(skill_id))

    def get_certificate(self, certificate_id: int) -> Optional[StaticCertificate]:
        return self._certificates.get(int(certificate_id))

    def __iter__(self) -> Iterator[StaticCertificate]:
        return iter(self._certificates.values())

    def __len__(self) -> int:
        return len(self._certificates)


__all__ = [
    "StaticSkill",
    "StaticSkillLevel",
    "StaticItem",
    "CertificateGroup",
    "StaticCertificateClass",
    "StaticCertificate",
    "StaticCatalog",
]
