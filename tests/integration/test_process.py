"""
Integration tests for exec_tool.

Runs the current Python interpreter as the external tool, so no JVM is needed.
"""

import sys

import pytest

from bundletool_runner.errors import ProcessError
from bundletool_runner.process import exec_tool


@pytest.mark.integration
@pytest.mark.asyncio
async def test_captures_stdout():
    result = await exec_tool(sys.executable, ["-c", "print('BundleTool 1.2.3')"])

    assert result.returncode == 0
    assert result.stdout.strip() == "BundleTool 1.2.3"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_non_zero_exit_raises():
    code = "import sys; sys.stderr.write('boom'); sys.exit(3)"

    with pytest.raises(ProcessError) as exc_info:
        await exec_tool(sys.executable, ["-c", code])

    err = exc_info.value
    assert err.returncode == 3
    assert err.stderr == "boom"
    assert "Command failed (exit 3)" in str(err)
    assert "boom" in str(err)


@pytest.mark.integration
@pytest.mark.asyncio
async def test_missing_executable_raises(tmp_path):
    with pytest.raises(ProcessError) as exc_info:
        await exec_tool(str(tmp_path / "no-such-java"), ["-version"])

    assert exc_info.value.returncode == -1
