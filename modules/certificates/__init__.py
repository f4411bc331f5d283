"""Character certificates: reference catalog, per-character levels and status.

Nothing in this package imports Qt at module import time; the signal hub in
:mod:`utils.app_signals` is only touched when a refresh pass or catalog load
has something to announce.
"""

from .models import Certificate, CertificateGrade, CertificateLevel, Character, to_static
from .services.catalog_loader import load_catalog, load_catalog_from_dict

__all__ = [
    "Certificate",
    "CertificateGrade",
    "CertificateLevel",
    "Character",
    "to_static",
    "load_catalog",
    "load_catalog_from_dict",
]
