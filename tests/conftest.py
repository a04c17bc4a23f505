"""Shared fixtures for memvid-mcp tests."""

import os
import stat
from typing import Sequence

import pytest

from memvid_mcp.cli import CliResult
from memvid_mcp.config import MemvidConfig


class FakeRunner:
    """Records argument vectors and replays a canned CliResult."""

    def __init__(self, result: CliResult = None):
        self.result = result or CliResult(success=True, stdout="{}", stderr="")
        self.calls: list[list[str]] = []

    async def run(self, args: Sequence[str]) -> CliResult:
        self.calls.append(list(args))
        return self.result


@pytest.fixture
def config():
    return MemvidConfig(default_path="/default/path.mv2")


@pytest.fixture
def bare_config():
    """No default memory file configured."""
    return MemvidConfig()


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def make_script(tmp_path):
    """Write an executable shell script standing in for the memvid binary."""
    def _make(body: str, name: str = "memvid") -> str:
        script = tmp_path / name
        script.write_text("#!/bin/sh\n" + body + "\n")
        script.chmod(script.stat().st_mode | stat.S_IEXEC)
        return str(script)

    if os.name == "nt":
        pytest.skip("shell scripts require a POSIX system")
    return _make
