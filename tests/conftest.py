"""Shared fixtures for bundletool_runner tests."""

import os
from unittest.mock import AsyncMock

import pytest

from bundletool_runner.bundletool import BundletoolInvoker
from bundletool_runner.process import ExecResult

JAR_DIR = "/opt/helpers"


@pytest.fixture
def mock_execute():
    """Process collaborator that succeeds with empty output."""
    mock = AsyncMock()
    mock.return_value = ExecResult(stdout="", stderr="")
    return mock


@pytest.fixture
def jar_path():
    """Absolute jar path the invoker fixture resolves to."""
    return os.path.abspath(os.path.join(JAR_DIR, "bundletool.jar"))


@pytest.fixture
def invoker(mock_execute):
    """Invoker with a fixed java path and the mocked process collaborator."""
    return BundletoolInvoker(JAR_DIR, java="/usr/bin/java", execute=mock_execute)


@pytest.fixture
def called_args(mock_execute):
    """Return a callable giving the argument list of the last execute() call."""
    def _called_args():
        executable, args = mock_execute.call_args.args
        return list(args)
    return _called_args
