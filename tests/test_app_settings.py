from pathlib import Path

from utils import app_settings


def test_catalog_path_defaults_to_data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("CERTPLAN_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("CERTPLAN_CATALOG", raising=False)
    assert app_settings.catalog_path() == tmp_path / "certificates.json"


def test_catalog_path_from_ini(tmp_path, monkeypatch):
    monkeypatch.setenv("CERTPLAN_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("CERTPLAN_CATALOG", raising=False)
    (tmp_path / "app.ini").write_text("[catalog]\npath = ref/certs.json\n", encoding="utf-8")
    assert app_settings.catalog_path() == tmp_path / "ref" / "certs.json"


def test_catalog_path_env_wins(tmp_path, monkeypatch):
    monkeypatch.setenv("CERTPLAN_DATA_DIR", str(tmp_path))
    (tmp_path / "app.ini").write_text("[catalog]\npath = ignored.json\n", encoding="utf-8")
    monkeypatch.setenv("CERTPLAN_CATALOG", "/srv/catalog.json")
    assert app_settings.catalog_path() == Path("/srv/catalog.json")


def test_dev_mode_flags(tmp_path, monkeypatch):
    monkeypatch.setenv("CERTPLAN_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("CERTPLAN_DEV", raising=False)
    assert app_settings.is_dev_mode() is False

    (tmp_path / "app.ini").write_text("[app]\ndev = yes\n", encoding="utf-8")
    assert app_settings.is_dev_mode() is True

    (tmp_path / "app.ini").unlink()
    monkeypatch.setenv("CERTPLAN_DEV", "1")
    assert app_settings.is_dev_mode() is True
