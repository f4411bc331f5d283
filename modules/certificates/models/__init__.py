"""Certificate domain models."""

from .grades import CertificateGrade, CertificateStatus, SkillAttribute
from .static_data import (
    CertificateGroup,
    StaticCatalog,
    StaticCertificate,
    StaticCertificateClass,
    StaticItem,
    StaticSkill,
    StaticSkillLevel,
)
from .skills import Skill, SkillLevel, skill_points_for_level
from .certificate_level import CertificateLevel
from .certificate import Certificate, to_static
from .character import CertificateClass, Character

__all__ = [
    "CertificateGrade",
    "CertificateStatus",
    "SkillAttribute",
    "CertificateGroup",
    "StaticCatalog",
    "StaticCertificate",
    "StaticCertificateClass",
    "StaticItem",
    "StaticSkill",
    "StaticSkillLevel",
    "Skill",
    "SkillLevel",
    "skill_points_for_level",
    "CertificateLevel",
    "Certificate",
    "to_static",
    "CertificateClass",
    "Character",
]
