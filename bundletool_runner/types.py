"""Shared dataclasses that flow between modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True, order=True)
class ToolVersion:
    """Version reported by `bundletool version`."""
    major: int
    minor: int = 0
    build: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}"


@dataclass
class InstallRequest:
    """Arguments of a single `install-apks` call."""
    apks_path: str
    device_id: str
    modules: Sequence[str] = field(default_factory=tuple)


@dataclass
class BuildOptions:
    """Optional flags for `build-apks`.

    `keystore_path` and `keystore_key_alias` only take effect together.
    `keystore_password` is passed through as-is and must already carry the
    `pass:` or `file:` prefix bundletool expects.
    """
    keystore_path: Optional[str] = None
    keystore_key_alias: Optional[str] = None
    keystore_password: Optional[str] = None
    overwrite: bool = False
    extra_args: Optional[str] = None

    def signing_pair(self) -> Optional[Tuple[str, str]]:
        """Return (keystore, alias) when both are set, otherwise None."""
        if self.keystore_path and self.keystore_key_alias:
            return self.keystore_path, self.keystore_key_alias
        return None


@dataclass
class BuildRequest:
    """Arguments of a single `build-apks` call."""
    bundle_path: str
    device_id: str
    output_path: str
    options: BuildOptions = field(default_factory=BuildOptions)
