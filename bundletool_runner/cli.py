"""
Command-line front end for the bundletool runner.

Usage:
  python -m bundletool_runner.cli [--jar-dir DIR] [--java PATH] version
  python -m bundletool_runner.cli install-apks --apks app.apks --device-id emulator-5554 [--modules base,feature]
  python -m bundletool_runner.cli build-apks --bundle app.aab --output app.apks --device-id emulator-5554 \
      [--ks release.jks --ks-key-alias key0] [--ks-pass pass:secret] [--overwrite] [--extra-args ARG]

Logs are written during execution and a JSON summary is printed at the end.
Exits 0 on success, 1 on failure and 2 on usage errors.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .bundletool import BundletoolInvoker
from .config import LOG_FORMATS, RunnerConfig
from .errors import ToolError
from .logging_config import configure_logging, get_logger
from .types import BuildOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bundletool-runner", description="Run bundletool through a Java runtime.")
    parser.add_argument("--jar-dir", help="Directory containing bundletool.jar (env: BUNDLETOOL_JAR_DIR)")
    parser.add_argument("--java", help="Java executable to use (env: BUNDLETOOL_JAVA)")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR (env: BUNDLETOOL_LOG_LEVEL)")
    parser.add_argument("--log-format", choices=LOG_FORMATS, help="Log rendering (env: BUNDLETOOL_LOG_FORMAT)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("version", help="Print the bundletool version")

    install = sub.add_parser("install-apks", help="Install an APK set on a device")
    install.add_argument("--apks", required=True)
    install.add_argument("--device-id", required=True)
    install.add_argument("--modules", default="", help="Comma-separated module names")

    build = sub.add_parser("build-apks", help="Build an APK set for a connected device")
    build.add_argument("--bundle", required=True)
    build.add_argument("--output", required=True)
    build.add_argument("--device-id", required=True)
    build.add_argument("--ks")
    build.add_argument("--ks-key-alias")
    build.add_argument("--ks-pass", help="Must be prefixed with 'pass:' or 'file:'")
    build.add_argument("--overwrite", action="store_true")
    build.add_argument("--extra-args", help="Passed to bundletool as one extra argument")

    return parser


def resolve_config(ns: argparse.Namespace, base: Optional[RunnerConfig] = None) -> RunnerConfig:
    """Apply command-line overrides on top of the environment config."""
    config = base or RunnerConfig.from_env()
    if ns.jar_dir:
        config.jar_dir = Path(ns.jar_dir)
    if ns.java:
        config.java = ns.java
    if ns.log_level:
        config.log_level = ns.log_level.upper()
    if ns.log_format:
        config.log_format = ns.log_format
    return config


def split_modules(value: str) -> List[str]:
    return [m.strip() for m in value.split(",") if m.strip()]


async def run_command(invoker: BundletoolInvoker, ns: argparse.Namespace, summary: Dict[str, Any]) -> None:
    if ns.command == "version":
        version = await invoker.get_version()
        summary["version"] = str(version)
        return

    log = get_logger(device_id=ns.device_id)
    if ns.command == "install-apks":
        modules = split_modules(ns.modules)
        log.info("installing apks", apks=ns.apks, modules=modules)
        await invoker.install_apks(ns.apks, ns.device_id, modules)
        summary["apks"] = ns.apks
        summary["modules"] = modules
    elif ns.command == "build-apks":
        options = BuildOptions(
            keystore_path=ns.ks,
            keystore_key_alias=ns.ks_key_alias,
            keystore_password=ns.ks_pass,
            overwrite=ns.overwrite,
            extra_args=ns.extra_args,
        )
        log.info("building apks", bundle=ns.bundle, output=ns.output)
        await invoker.build_apks(ns.bundle, ns.device_id, ns.output, options)
        summary["bundle"] = ns.bundle
        summary["output"] = ns.output
    else:
        raise ValueError(f"Unknown command: {ns.command}")


def main(argv: Optional[List[str]] = None, invoker: Optional[BundletoolInvoker] = None) -> int:
    ns = build_parser().parse_args(argv)
    config = resolve_config(ns)
    configure_logging(config.log_level, json_output=config.log_format == "json")

    if invoker is None:
        invoker = BundletoolInvoker.from_config(config)

    summary: Dict[str, Any] = {
        "ok": False,
        "errors": [],
        "command": ns.command,
        "jar": invoker.jar_path,
        "java": invoker.java,
    }
    try:
        asyncio.run(run_command(invoker, ns, summary))
        summary["ok"] = True
    except ToolError as exc:
        msg = str(exc)
        print("ERROR:", msg)
        summary["errors"].append(msg)

    print(json.dumps(summary, indent=2))
    return 0 if summary["ok"] else 1


if __name__ == "__main__":
    sys.exit(main())
