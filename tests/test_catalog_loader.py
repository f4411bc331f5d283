from __future__ import annotations

import json
from pathlib import Path

import pytest

from modules.certificates.exceptions import (
    CatalogError,
    CatalogNotFoundError,
    CatalogReferenceError,
    CatalogValidationError,
)
from modules.certificates.models.grades import CertificateGrade, SkillAttribute
from modules.certificates.services import catalog_loader
from modules.certificates.services.catalog_loader import load_catalog, load_catalog_from_dict

from .conftest import FULL_GRADES, GUNNERY, catalog_payload


SAMPLE_CATALOG = Path(__file__).resolve().parents[1] / "data" / "certificates.json"


def test_load_sample_catalog():
    catalog = load_catalog(SAMPLE_CATALOG)
    assert catalog.version == "1.0.0"
    assert [cert.id for cert in catalog] == [102, 139, 150]

    armor = catalog.get_certificate(150)
    assert armor.name == "Armor Repair"
    # "standard" is listed without skills and stays absent
    assert armor.grades == (CertificateGrade.BASIC, CertificateGrade.ELITE)
    assert [item.name for item in armor.recommendations] == ["Wolf"]
    assert catalog.get_skill(3300).primary_attribute is SkillAttribute.PERCEPTION


def test_load_catalog_uses_configured_path(tmp_path, monkeypatch):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_payload(FULL_GRADES)), encoding="utf-8")
    monkeypatch.setattr(catalog_loader, "catalog_path", lambda: path)

    catalog = load_catalog()
    assert len(catalog) == 1
    assert catalog.get_certificate(100).grades == tuple(CertificateGrade)


def test_missing_file(tmp_path):
    with pytest.raises(CatalogNotFoundError) as info:
        load_catalog(tmp_path / "nope.json")
    assert isinstance(info.value, CatalogError)
    assert info.value.path == tmp_path / "nope.json"


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogValidationError):
        load_catalog(path)


def test_schema_errors_are_wrapped():
    payload = catalog_payload({"basic": [(GUNNERY, 7)]})
    with pytest.raises(CatalogValidationError) as info:
        load_catalog_from_dict(payload)
    assert info.value.errors


def test_unknown_grade_name():
    payload = catalog_payload({"legendary": [(GUNNERY, 1)]})
    with pytest.raises(CatalogValidationError):
        load_catalog_from_dict(payload)


def test_unknown_skill_reference():
    payload = catalog_payload({"basic": [(4242, 1)]})
    with pytest.raises(CatalogReferenceError, match="unknown skill id 4242"):
        load_catalog_from_dict(payload)


def test_unknown_class_reference():
    payload = catalog_payload(FULL_GRADES)
    payload["certificates"][0]["class_id"] = 77
    with pytest.raises(CatalogReferenceError, match="class"):
        load_catalog_from_dict(payload)


def test_grade_keys_accept_indices():
    payload = catalog_payload({"4": [(GUNNERY, 5)], "0": [(GUNNERY, 1)]})
    cert = load_catalog_from_dict(payload).get_certificate(100)
    assert cert.grades == (CertificateGrade.BASIC, CertificateGrade.ELITE)


def test_reference_data_is_immutable():
    cert = load_catalog_from_dict(catalog_payload(FULL_GRADES)).get_certificate(100)
    with pytest.raises(Exception):
        cert.description = "changed"


def test_catalog_built_directly_rejects_unknown_skill():
    from modules.certificates.models.static_data import (
        CertificateGroup,
        StaticCatalog,
        StaticCertificate,
        StaticCertificateClass,
        StaticSkill,
        StaticSkillLevel,
    )

    gunnery = StaticSkill(id=GUNNERY, name="Gunnery")
    cert = StaticCertificate(
        id=1,
        certificate_class=StaticCertificateClass(
            id=1, name="Gunnery", group=CertificateGroup(id=1, name="Gunnery")
        ),
        prerequisite_skills={"basic": [StaticSkillLevel(skill=gunnery, level=1)]},
    )
    with pytest.raises(CatalogReferenceError, match="unknown skill id 1"):
        StaticCatalog({}, {1: cert})
    assert len(StaticCatalog({GUNNERY: gunnery}, {1: cert})) == 1


@pytest.mark.parametrize("section", ["skills", "items", "groups", "classes", "certificates"])
def test_duplicate_ids_are_rejected(section):
    payload = catalog_payload(FULL_GRADES)
    payload[section].append(dict(payload[section][0]))
    with pytest.raises(CatalogValidationError, match="Duplicate"):
        load_catalog_from_dict(payload)


def test_grade_listed_twice_is_rejected():
    payload = catalog_payload({"basic": [(GUNNERY, 1)], "0": [(GUNNERY, 2)]})
    with pytest.raises(CatalogValidationError, match="BASIC is listed more than once"):
        load_catalog_from_dict(payload)
