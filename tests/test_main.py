from __future__ import annotations

import logging
from pathlib import Path

import main


SAMPLE_CATALOG = Path(__file__).resolve().parents[1] / "data" / "certificates.json"


def test_report_prints_rows(capsys):
    assert main.main(["--catalog", str(SAMPLE_CATALOG), "--skill", "3300=1", "--skill", "3310=1"]) == 0
    out = capsys.readouterr().out
    assert "Small Projectile Turret I" in out
    assert "Core Fitting" in out


def test_missing_skills_file(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        code = main.main(["--catalog", str(SAMPLE_CATALOG), "--skills-file", str(tmp_path / "nope.json")])
    assert code == 1
    assert "Could not read skills file" in caplog.text


def test_skills_file_with_bad_values(tmp_path, caplog):
    path = tmp_path / "skills.json"
    path.write_text('{"gunnery": "three"}', encoding="utf-8")
    with caplog.at_level(logging.ERROR):
        code = main.main(["--catalog", str(SAMPLE_CATALOG), "--skills-file", str(path)])
    assert code == 1
    assert "Invalid skills file" in caplog.text


def test_skills_file_that_is_not_a_mapping(tmp_path, caplog):
    path = tmp_path / "skills.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with caplog.at_level(logging.ERROR):
        assert main.main(["--catalog", str(SAMPLE_CATALOG), "--skills-file", str(path)]) == 1
