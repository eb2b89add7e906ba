"""
Unit tests for the command-line front end.

A pre-built invoker with a mocked process collaborator is injected, so no
JVM is needed.
"""

import json
from unittest.mock import AsyncMock

import pytest

from bundletool_runner import cli
from bundletool_runner.bundletool import BundletoolInvoker
from bundletool_runner.errors import ProcessError
from bundletool_runner.process import ExecResult


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda *a, **kw: None)


@pytest.fixture
def execute():
    mock = AsyncMock()
    mock.return_value = ExecResult(stdout="BundleTool 1.15.6\n", stderr="")
    return mock


@pytest.fixture
def invoker(execute):
    return BundletoolInvoker("/opt/helpers", java="java", execute=execute)


def _summary(out):
    return json.loads(out[out.rfind('{\n  "ok"'):])


@pytest.mark.unit
def test_version_command(invoker, capsys):
    rc = cli.main(["version"], invoker=invoker)

    summary = _summary(capsys.readouterr().out)
    assert rc == 0
    assert summary["ok"] is True
    assert summary["version"] == "1.15.6"


@pytest.mark.unit
def test_install_command_splits_modules(invoker, execute, capsys):
    rc = cli.main(["install-apks", "--apks", "a.apks", "--device-id", "dev1", "--modules", "m1, m2"], invoker=invoker)

    summary = _summary(capsys.readouterr().out)
    args = execute.call_args.args[1]
    assert rc == 0
    assert summary["modules"] == ["m1", "m2"]
    assert args[args.index("--modules") + 1] == "m1,m2"


@pytest.mark.unit
def test_build_command_forwards_options(invoker, execute, capsys):
    rc = cli.main([
        "build-apks", "--bundle", "app.aab", "--output", "out.apks", "--device-id", "dev1",
        "--ks", "release.jks", "--ks-key-alias", "key0", "--ks-pass", "pass:pw", "--overwrite",
    ], invoker=invoker)

    args = execute.call_args.args[1]
    assert rc == 0
    assert args[-7:] == ["--ks", "release.jks", "--ks-key-alias", "key0", "--ks-pass", "pass:pw", "--overwrite"]


@pytest.mark.unit
def test_failure_reports_error(invoker, execute, capsys):
    execute.side_effect = ProcessError(["java"], 1, stderr="device not found")

    rc = cli.main(["install-apks", "--apks", "a.apks", "--device-id", "dev1"], invoker=invoker)

    summary = _summary(capsys.readouterr().out)
    assert rc == 1
    assert summary["ok"] is False
    assert summary["errors"][0].startswith("Failed to install apks. Original error")
    assert "device not found" in summary["errors"][0]


@pytest.mark.unit
def test_missing_subcommand_is_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])

    assert exc_info.value.code == 2


@pytest.mark.unit
def test_resolve_config_overrides_env(monkeypatch):
    monkeypatch.setenv("BUNDLETOOL_JAR_DIR", "/env/jars")
    monkeypatch.setenv("BUNDLETOOL_LOG_LEVEL", "WARNING")
    ns = cli.build_parser().parse_args(["--jar-dir", "/cli/jars", "--log-level", "debug", "version"])

    config = cli.resolve_config(ns)

    assert str(config.jar_dir) == "/cli/jars"
    assert config.log_level == "DEBUG"


@pytest.mark.unit
@pytest.mark.parametrize("argv_prefix,env_format,expected_json", [
    ([], None, False),
    (["--log-format", "json"], None, True),
    ([], "json", True),
    (["--log-format", "console"], "json", False),
])
def test_log_format_selects_renderer(monkeypatch, invoker, argv_prefix, env_format, expected_json):
    calls = []
    monkeypatch.setattr(cli, "configure_logging", lambda level, json_output=False: calls.append((level, json_output)))
    monkeypatch.delenv("BUNDLETOOL_LOG_LEVEL", raising=False)
    if env_format:
        monkeypatch.setenv("BUNDLETOOL_LOG_FORMAT", env_format)
    else:
        monkeypatch.delenv("BUNDLETOOL_LOG_FORMAT", raising=False)

    cli.main(argv_prefix + ["version"], invoker=invoker)

    assert calls == [("INFO", expected_json)]
