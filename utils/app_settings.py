"""Application settings used by the certificates module.

Values are resolved from environment variables first, then from an INI file
in the data directory (`<data dir>/app.ini`), then from defaults.

- `CERTPLAN_DATA_DIR`: data directory (default `data`).
- `CERTPLAN_CATALOG`: path to the reference catalog JSON. Falls back to
  `[catalog] path` in the INI, then `<data dir>/certificates.json`.
- `CERTPLAN_DEV=1` or `[app] dev = true`: developer mode.
"""

from __future__ import annotations

import os
import configparser
from pathlib import Path


def data_dir() -> Path:
    return Path(os.environ.get("CERTPLAN_DATA_DIR", "data"))


def _read_ini() -> configparser.ConfigParser:
    cp = configparser.ConfigParser()
    ini_path = data_dir() / "app.ini"
    if ini_path.exists():
        try:
            cp.read(ini_path)
        except configparser.Error:
            return configparser.ConfigParser()
    return cp


def _read_ini_flag() -> bool:
    """Read `dev` from the `[app]` section (true/false/1/0)."""
    raw = _read_ini().get("app", "dev", fallback="0").strip().lower()
    return raw in {"1", "true", "yes", "on"}


def catalog_path() -> Path:
    """Return the configured location of the certificate catalog."""
    env = os.environ.get("CERTPLAN_CATALOG", "").strip()
    if env:
        return Path(env)
    configured = _read_ini().get("catalog", "path", fallback="").strip()
    if configured:
        path = Path(configured)
        return path if path.is_absolute() else data_dir() / path
    return data_dir() / "certificates.json"


def is_dev_mode() -> bool:
    return (
        str(os.environ.get("CERTPLAN_DEV", "0")).strip() in {"1", "true", "True"}
        or _read_ini_flag()
    )


DEV_MODE: bool = is_dev_mode()


__all__ = ["DEV_MODE", "data_dir", "catalog_path", "is_dev_mode"]
