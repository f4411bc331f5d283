from __future__ import annotations

import os
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

import pytest

# Qt objects require a platform plugin.  Offscreen avoids libGL dependencies
# inside the test container.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from modules.certificates.models.character import Character
from modules.certificates.services.catalog_loader import load_catalog_from_dict


GUNNERY = 1
SMALL_PROJECTILE = 2
RAPID_FIRING = 3
MECHANICS = 4

CERT_ID = 100


def catalog_payload(
    grades: Mapping[str, Iterable[Tuple[int, int]]],
    *,
    cert_id: int = CERT_ID,
    extra_certificates: Optional[List[dict]] = None,
) -> dict:
    """Build a small catalog document with one certificate using ``grades``."""
    certificates = [
        {
            "id": cert_id,
            "class_id": 10,
            "description": "Small projectile turrets.",
            "recommendations": [587],
            "grades": {
                grade: [{"skill_id": sid, "level": lvl} for sid, lvl in reqs]
                for grade, reqs in grades.items()
            },
        }
    ]
    certificates.extend(extra_certificates or [])
    return {
        "version": "test",
        "skills": [
            {"id": GUNNERY, "name": "Gunnery", "rank": 1,
             "primary_attribute": "Perception", "secondary_attribute": "Willpower"},
            {"id": SMALL_PROJECTILE, "name": "Small Projectile Turret", "rank": 1,
             "primary_attribute": "Perception", "secondary_attribute": "Willpower"},
            {"id": RAPID_FIRING, "name": "Rapid Firing", "rank": 2,
             "primary_attribute": "Perception", "secondary_attribute": "Willpower"},
            {"id": MECHANICS, "name": "Mechanics", "rank": 1,
             "primary_attribute": "Intelligence", "secondary_attribute": "Memory"},
        ],
        "items": [{"id": 587, "name": "Rifter"}],
        "groups": [{"id": 1, "name": "Gunnery"}],
        "classes": [{"id": 10, "name": "Small Projectile Turret", "description": "Autocannons.", "group_id": 1}],
        "certificates": certificates,
    }


FULL_GRADES: Dict[str, List[Tuple[int, int]]] = {
    "basic": [(GUNNERY, 1), (SMALL_PROJECTILE, 1)],
    "standard": [(GUNNERY, 3), (SMALL_PROJECTILE, 3)],
    "improved": [(GUNNERY, 3), (SMALL_PROJECTILE, 4), (RAPID_FIRING, 2)],
    "advanced": [(SMALL_PROJECTILE, 5), (RAPID_FIRING, 4)],
    "elite": [(GUNNERY, 5), (SMALL_PROJECTILE, 5), (RAPID_FIRING, 5)],
}


@pytest.fixture
def make_character():
    """Return a factory building a character with the given skill levels."""

    def _make(grades=None, skills=None, attributes=None, **kwargs) -> Character:
        catalog = load_catalog_from_dict(catalog_payload(FULL_GRADES if grades is None else grades, **kwargs))
        return Character("Tester", catalog, attributes=attributes, skills=skills)

    return _make
