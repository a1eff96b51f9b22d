########## ini_config.py

from __future__ import annotations

import os
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path

INI_DEFAULT_NAME = "swot_web.ini"


@dataclass(frozen=True)
class AppSettings:
    data_dir: Path
    session_ttl_seconds: int

    # Base URL baked into /integration.js; empty -> the requesting host
    server_url: str

    flask_host: str
    flask_port: int
    flask_debug: bool
    max_content_length: int

    log_level: str


class IniConfig:
    """
    Adapter around ConfigParser and filesystem resolution.
    Keeps INI handling out of your app/service code.
    """

    def __init__(self, ini_path: Path):
        self._ini_path = ini_path
        self._cfg = ConfigParser()
        read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        if not read_ok:
            raise FileNotFoundError(f"INI file not found or unreadable: {ini_path}")

    @property
    def ini_path(self) -> Path:
        return self._ini_path

    @staticmethod
    def from_env_or_default() -> "IniConfig":
        ini_raw = (os.getenv("APP_INI") or "").strip()
        # If APP_INI is not set, default to repo-root-relative ini location
        ini_path = Path(ini_raw) if ini_raw else (Path(__file__).resolve().parents[2] / INI_DEFAULT_NAME)
        return IniConfig(ini_path)

    def _cfg_path(self, section: str, key: str, fallback: str) -> Path:
        """
        Reads a filesystem path from INI and resolves it.
        Relative paths are taken relative to the INI file's folder.
        """
        raw = (self._cfg.get(section, key, fallback=fallback) or "").strip() or fallback
        raw = os.path.expandvars(os.path.expanduser(raw))
        p = Path(raw)
        if not p.is_absolute():
            p = Path(self._ini_path).resolve().parent / p
        return p.resolve()

    def load_settings(self) -> AppSettings:
        # Storage
        data_dir = self._cfg_path("paths", "data_dir", fallback="data")

        # Sessions
        session_ttl_seconds = self._cfg.getint("sessions", "ttl_seconds", fallback=7 * 24 * 60 * 60)

        # Integration snippet
        server_url = (self._cfg.get("integration", "server_url", fallback="") or "").strip().rstrip("/")

        # Flask
        flask_host = (self._cfg.get("flask", "host", fallback="127.0.0.1") or "").strip() or "127.0.0.1"
        flask_port = self._cfg.getint("flask", "port", fallback=5000)
        flask_debug = self._cfg.getboolean("flask", "debug", fallback=True)
        max_content_length = self._cfg.getint("flask", "max_content_length", fallback=1_000_000)

        # Logging
        log_level = (self._cfg.get("logging", "level", fallback="INFO") or "").strip().upper() or "INFO"

        # Validate
        if session_ttl_seconds <= 0:
            raise ValueError(f"sessions.ttl_seconds must be positive, got {session_ttl_seconds}")

        data_dir.mkdir(parents=True, exist_ok=True)

        return AppSettings(
            data_dir=data_dir,
            session_ttl_seconds=session_ttl_seconds,
            server_url=server_url,
            flask_host=flask_host,
            flask_port=flask_port,
            flask_debug=flask_debug,
            max_content_length=max_content_length,
            log_level=log_level,
        )
