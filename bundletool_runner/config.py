"""Environment-driven settings for the bundletool runner."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_JAR_DIR = Path("jars")
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "console"
LOG_FORMATS = ("console", "json")


@dataclass
class RunnerConfig:
    jar_dir: Path = DEFAULT_JAR_DIR
    java: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = DEFAULT_LOG_FORMAT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RunnerConfig":
        """Read BUNDLETOOL_JAR_DIR, BUNDLETOOL_JAVA, BUNDLETOOL_LOG_LEVEL and BUNDLETOOL_LOG_FORMAT.

        Raises ValueError for a log format other than "console" or "json".
        """
        env = os.environ if environ is None else environ
        jar_dir = env.get("BUNDLETOOL_JAR_DIR")
        log_format = (env.get("BUNDLETOOL_LOG_FORMAT") or DEFAULT_LOG_FORMAT).lower()
        if log_format not in LOG_FORMATS:
            raise ValueError(f"Unsupported BUNDLETOOL_LOG_FORMAT: {log_format!r} (expected console or json)")
        return cls(
            jar_dir=Path(jar_dir) if jar_dir else DEFAULT_JAR_DIR,
            java=env.get("BUNDLETOOL_JAVA") or None,
            log_level=(env.get("BUNDLETOOL_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
            log_format=log_format,
        )
