"""Certificate progress rows for display.

Rows are plain dicts so panels and the console report can render them
without touching the model objects.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from modules.certificates.models.certificate import Certificate
from modules.certificates.models.character import Character
from modules.certificates.services.grade_formatter import grade_to_label, render_badge
from utils.timefmt import format_training_time


def certificate_row(certificate: Certificate) -> Dict[str, Any]:
    """Return id, name, group, badge, trained/next grade and remaining time."""
    highest = certificate.highest_trained_level
    lowest = certificate.lowest_untrained_level
    remaining = certificate.get_training_time()
    return {
        "id": certificate.id,
        "name": certificate.name,
        "group": certificate.certificate_class.group.name,
        "badge": render_badge(certificate.name, highest.grade if highest else None),
        "highest": grade_to_label(highest.grade if highest else None),
        "next": grade_to_label(lowest.grade) if lowest else None,
        "training_time": remaining,
        "training_time_text": format_training_time(remaining),
    }


def list_certificate_rows(
    character: Character,
    certificate_ids: Optional[Iterable[int]] = None,
    group: str | None = None,
) -> List[Dict[str, Any]]:
    """Rows for the character's certificates, ordered by group then name."""
    if certificate_ids is None:
        certificates = list(character.certificates)
    else:
        certificates = [
            cert for cert in (character.get_certificate(i) for i in certificate_ids) if cert is not None
        ]
    rows = [certificate_row(cert) for cert in certificates]
    if group:
        rows = [row for row in rows if row["group"].lower() == group.lower()]
    rows.sort(key=lambda row: (row["group"], row["name"]))
    return rows


__all__ = ["certificate_row", "list_certificate_rows"]
