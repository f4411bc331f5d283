"""Load the certificate reference catalog from JSON.

The catalog is the single source of truth for skills, certificate classes
and per-grade prerequisites. It is read once (on application start or when
the data files are reloaded) and shared read-only by every character.

Document layout::

    {
      "version": "1.0.0",
      "skills": [{"id", "name", "rank", "primary_attribute", "secondary_attribute"}],
      "items": [{"id", "name"}],
      "groups": [{"id", "name"}],
      "classes": [{"id", "name", "description", "group_id"}],
      "certificates": [{"id", "class_id", "description", "recommendations": [item ids],
                        "grades": {"basic": [{"skill_id", "level"}], ...}}]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from utils.app_settings import DEV_MODE, catalog_path
from modules.certificates.exceptions import (
    CatalogNotFoundError,
    CatalogReferenceError,
    CatalogValidationError,
)
from modules.certificates.models.grades import CertificateGrade, SkillAttribute
from modules.certificates.models.static_data import (
    CertificateGroup,
    StaticCatalog,
    StaticCertificate,
    StaticCertificateClass,
    StaticItem,
    StaticSkill,
    StaticSkillLevel,
)


logger = logging.getLogger(__name__)


class SkillRow(BaseModel):
    id: int
    name: str
    rank: int = Field(default=1, ge=1)
    primary_attribute: SkillAttribute = SkillAttribute.INTELLIGENCE
    secondary_attribute: SkillAttribute = SkillAttribute.MEMORY
    description: str = ""


class ItemRow(BaseModel):
    id: int
    name: str


class GroupRow(BaseModel):
    id: int
    name: str


class ClassRow(BaseModel):
    id: int
    name: str
    description: str = ""
    group_id: int


class PrerequisiteRow(BaseModel):
    skill_id: int
    level: int = Field(ge=0, le=5)


class CertificateRow(BaseModel):
    id: int
    class_id: int
    description: str = ""
    recommendations: List[int] = Field(default_factory=list)
    grades: Dict[str, List[PrerequisiteRow]] = Field(default_factory=dict)


class CatalogDocument(BaseModel):
    version: str = ""
    skills: List[SkillRow] = Field(default_factory=list)
    items: List[ItemRow] = Field(default_factory=list)
    groups: List[GroupRow] = Field(default_factory=list)
    classes: List[ClassRow] = Field(default_factory=list)
    certificates: List[CertificateRow] = Field(default_factory=list)


def _lookup(table: Mapping[int, Any], key: int, what: str, owner: str) -> Any:
    try:
        return table[key]
    except KeyError:
        raise CatalogReferenceError(f"{owner} references unknown {what} id {key}") from None


def _check_unique(rows: List[Any], what: str) -> None:
    seen: set[int] = set()
    for row in rows:
        if row.id in seen:
            raise CatalogValidationError(f"Duplicate {what} id {row.id}")
        seen.add(row.id)


def _build_certificate(
    row: CertificateRow,
    skills: Mapping[int, StaticSkill],
    items: Mapping[int, StaticItem],
    classes: Mapping[int, StaticCertificateClass],
) -> StaticCertificate:
    owner = f"certificate {row.id}"
    prerequisites: Dict[CertificateGrade, tuple] = {}
    seen: set[CertificateGrade] = set()
    for raw_grade, reqs in row.grades.items():
        try:
            grade = CertificateGrade.parse(raw_grade)
        except ValueError as exc:
            raise CatalogValidationError(f"{owner}: {exc}") from exc
        if grade in seen:
            raise CatalogValidationError(f"{owner}: grade {grade.name} is listed more than once")
        seen.add(grade)
        levels = tuple(
            StaticSkillLevel(skill=_lookup(skills, req.skill_id, "skill", owner), level=req.level)
            for req in reqs
        )
        # Grades without skills stay absent
        if levels:
            prerequisites[grade] = levels
    return StaticCertificate(
        id=row.id,
        certificate_class=_lookup(classes, row.class_id, "class", owner),
        description=row.description,
        recommendations=tuple(_lookup(items, i, "item", owner) for i in row.recommendations),
        prerequisite_skills=prerequisites,
    )


def load_catalog_from_dict(payload: Mapping[str, Any]) -> StaticCatalog:
    """Validate an in-memory catalog document and build the static records."""
    try:
        doc = CatalogDocument.model_validate(payload)
    except ValidationError as exc:
        raise CatalogValidationError(f"Invalid certificate catalog: {exc}", exc.errors()) from exc

    _check_unique(doc.skills, "skill")
    _check_unique(doc.items, "item")
    _check_unique(doc.groups, "group")
    _check_unique(doc.classes, "class")
    _check_unique(doc.certificates, "certificate")

    skills = {
        row.id: StaticSkill(**row.model_dump()) for row in doc.skills
    }
    items = {row.id: StaticItem(id=row.id, name=row.name) for row in doc.items}
    groups = {row.id: CertificateGroup(id=row.id, name=row.name) for row in doc.groups}
    classes = {
        row.id: StaticCertificateClass(
            id=row.id,
            name=row.name,
            description=row.description,
            group=_lookup(groups, row.group_id, "group", f"class {row.id}"),
        )
        for row in doc.classes
    }

    certificates: Dict[int, StaticCertificate] = {}
    for row in doc.certificates:
        certificates[row.id] = _build_certificate(row, skills, items, classes)
        if DEV_MODE:
            logger.debug(
                "[catalog] certificate %s (%s) grades=%s",
                row.id,
                certificates[row.id].name,
                [g.name for g in certificates[row.id].grades],
            )

    catalog = StaticCatalog(skills, certificates, items, version=doc.version)
    logger.info(
        "[catalog] loaded version %s: %d skills, %d certificates",
        doc.version or "?",
        len(skills),
        len(certificates),
    )
    try:
        from utils.app_signals import app_signals

        app_signals.catalogLoaded.emit(doc.version)
    except Exception as e:
        logger.warning("[catalog] failed to emit catalogLoaded: %s", e)
    return catalog


def load_catalog(path: Optional[Path | str] = None) -> StaticCatalog:
    """Load the catalog from ``path`` or the configured location."""
    path = Path(path) if path is not None else catalog_path()
    if not path.exists():
        raise CatalogNotFoundError(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            payload = json.load(fh)
    except json.JSONDecodeError as exc:
        raise CatalogValidationError(f"Certificate catalog is not valid JSON: {path}: {exc}") from exc
    logger.debug("[catalog] reading %s", path)
    return load_catalog_from_dict(payload)


__all__ = ["load_catalog", "load_catalog_from_dict"]
