"""
Invoke Google's bundletool jar to inspect, build and install Android App Bundles.

Each operation runs `java -jar <helper_jar_path>/bundletool.jar <subcommand> ...`
exactly once and awaits the child process. Argument lists are assembled by the
module-level `*_args` functions so they can be checked without a JVM.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Awaitable, Callable, List, Optional, Sequence, Union

from .config import RunnerConfig
from .errors import ToolError
from .java import locate_java
from .process import ExecResult, exec_tool, printable_command
from .types import BuildOptions, BuildRequest, InstallRequest, ToolVersion

logger = logging.getLogger(__name__)

JAR_NAME = "bundletool.jar"

VERSION_PATTERN = re.compile(r"BundleTool (\d+)\.?(\d+)?\.?(\d+)?")

Executor = Callable[[str, Sequence[str]], Awaitable[ExecResult]]


# ---------------------------- Argument builders ----------------------------


def version_args(jar_path: str) -> List[str]:
    return ["-jar", jar_path, "version"]


def install_apks_args(jar_path: str, request: InstallRequest) -> List[str]:
    args = [
        "-jar", jar_path, "install-apks",
        "--apks", request.apks_path,
        "--device-id", request.device_id,
    ]
    if request.modules:
        args += ["--modules", ",".join(request.modules)]
    return args


def build_apks_args(jar_path: str, request: BuildRequest) -> List[str]:
    opts = request.options
    args = [
        "-jar", jar_path, "build-apks",
        "--bundle", request.bundle_path,
        "--output", request.output_path,
        "--connected-device", "--device-id", request.device_id,
    ]

    # Signing flags need both the keystore and its alias; either alone is dropped.
    signing = opts.signing_pair()
    if signing:
        args += ["--ks", signing[0], "--ks-key-alias", signing[1]]
    if opts.keystore_password:
        args += ["--ks-pass", opts.keystore_password]
    if opts.overwrite:
        args.append("--overwrite")
    if opts.extra_args:
        # Appended as a single token, not split.
        args.append(opts.extra_args)
    return args


def parse_version(stdout: str) -> ToolVersion:
    """Extract the version from `bundletool version` output.

    Raises ValueError when the output does not contain a version.
    """
    m = VERSION_PATTERN.search(stdout)
    if m is None:
        raise ValueError(f"Unexpected 'version' output: {stdout.strip()!r}")
    return ToolVersion(
        major=int(m.group(1)),
        minor=int(m.group(2)) if m.group(2) else 0,
        build=int(m.group(3)) if m.group(3) else 0,
    )


# ---------------------------- Invoker ----------------------------


class BundletoolInvoker:
    """Runs bundletool subcommands through a Java runtime.

    `helper_jar_path` is the directory holding `bundletool.jar`. `execute` is
    the process collaborator; it must raise on a non-zero exit.
    """

    def __init__(
        self,
        helper_jar_path: Union[str, os.PathLike],
        java: Optional[str] = None,
        execute: Executor = exec_tool,
    ):
        self.helper_jar_path = os.fspath(helper_jar_path)
        self.java = java or locate_java()
        self._execute = execute

    @classmethod
    def from_config(cls, config: RunnerConfig, execute: Executor = exec_tool) -> "BundletoolInvoker":
        return cls(config.jar_dir, java=locate_java(config.java), execute=execute)

    @property
    def jar_path(self) -> str:
        return os.path.abspath(os.path.join(self.helper_jar_path, JAR_NAME))

    async def get_version(self) -> ToolVersion:
        """Return the bundletool version, e.g. ToolVersion(1, 15, 6)."""
        try:
            result = await self._execute(self.java, version_args(self.jar_path))
            return parse_version(result.stdout)
        except Exception as exc:
            raise ToolError(f"Could not get bundle tool version. Original error {exc}") from exc

    async def install_apks(self, apks_path: str, device_id: str, modules: Optional[Sequence[str]] = None) -> None:
        """Install an APK set on `device_id`.

        `modules` restricts the install to the named modules (plus their
        dependencies); None or empty installs all of them. It is ignored when
        the device receives a standalone APK.
        """
        args = install_apks_args(self.jar_path, InstallRequest(apks_path, device_id, list(modules or ())))
        logger.info(f"Install apks with: {printable_command(args)}")
        try:
            await self._execute(self.java, args)
        except Exception as exc:
            raise ToolError(f"Failed to install apks. Original error {exc}") from exc

    async def build_apks(
        self,
        bundle_path: str,
        device_id: str,
        output_path: str,
        options: Optional[BuildOptions] = None,
    ) -> None:
        """Build an APK set from `bundle_path` targeted at the connected `device_id`."""
        request = BuildRequest(bundle_path, device_id, output_path, options or BuildOptions())
        args = build_apks_args(self.jar_path, request)
        logger.info(f"Build apks with: {printable_command(args)}")
        try:
            await self._execute(self.java, args)
        except Exception as exc:
            raise ToolError(f"Failed to build apks. Original error {exc}") from exc
