"""
Locate a Java runtime for running jar-based tools.

Resolution order:
1) Explicit override (argument or BUNDLETOOL_JAVA)
2) JAVA_HOME/bin/java
3) `java` on PATH
4) The bare name "java", leaving any failure to process launch
"""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path
from typing import List, Mapping, Optional


def java_binary_name(platform: str = sys.platform) -> str:
    return "java.exe" if platform.startswith("win") else "java"


def find_first_existing(paths: List[Path]) -> Optional[Path]:
    for p in paths:
        if p and p.is_file():
            return p
    return None


def locate_java(override: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the java executable to use. Never raises."""
    env = os.environ if environ is None else environ

    explicit = override or env.get("BUNDLETOOL_JAVA")
    if explicit:
        return explicit

    java_home = env.get("JAVA_HOME")
    if java_home:
        found = find_first_existing([
            Path(java_home) / "bin" / java_binary_name(),
            Path(java_home) / "jre" / "bin" / java_binary_name(),
        ])
        if found:
            return str(found)

    on_path = shutil.which("java", path=env.get("PATH"))
    if on_path:
        return on_path
    return "java"
