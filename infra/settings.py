from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from infra.path import default_db_path, user_data_dir

ENV_PREFIX = "CAPACITY_PLANNER_"
_TRUTHY = {"1", "true", "yes", "on"}


def _env(environ: Mapping[str, str], name: str) -> str:
    return (environ.get(ENV_PREFIX + name) or "").strip()


@dataclass(frozen=True)
class AppSettings:
    data_dir: Path
    db_url: str
    log_level: int = logging.INFO
    sql_echo: bool = False

    @property
    def log_dir(self) -> Path:
        return self.data_dir / "logs"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> "AppSettings":
        environ = os.environ if environ is None else environ

        raw_dir = _env(environ, "DATA_DIR")
        if raw_dir:
            data_dir = Path(raw_dir).expanduser()
            data_dir.mkdir(parents=True, exist_ok=True)
        else:
            data_dir = user_data_dir()

        db_url = _env(environ, "DB_URL") or f"sqlite:///{default_db_path(data_dir).as_posix()}"

        level_name = _env(environ, "LOG_LEVEL").upper() or "INFO"
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level_name!r}")

        return AppSettings(
            data_dir=data_dir,
            db_url=db_url,
            log_level=level,
            sql_echo=_env(environ, "SQL_ECHO").lower() in _TRUTHY,
        )


__all__ = ["AppSettings", "ENV_PREFIX"]
