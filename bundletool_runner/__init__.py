"""Async wrapper around Google's bundletool jar (version, install-apks, build-apks)."""

from .bundletool import BundletoolInvoker, build_apks_args, install_apks_args, parse_version, version_args
from .errors import ProcessError, ToolError
from .types import BuildOptions, BuildRequest, InstallRequest, ToolVersion

__all__ = [
    "BundletoolInvoker",
    "BuildOptions",
    "BuildRequest",
    "InstallRequest",
    "ProcessError",
    "ToolError",
    "ToolVersion",
    "build_apks_args",
    "install_apks_args",
    "parse_version",
    "version_args",
]
