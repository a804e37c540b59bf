"""Shared test fixtures for phpmnd-hook tests."""

import json
import subprocess

import pytest

from phpmnd_hook.models import Platform
from phpmnd_hook.reporters.json_reporter import JSONReporter


@pytest.fixture
def project_root(tmp_path):
    """A project root with an empty vendor/bin directory."""
    (tmp_path / "vendor" / "bin").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def write_config(project_root):
    """Write a phpmnd.json into the project root."""

    def _write(content):
        path = project_root / "phpmnd.json"
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def reporter():
    return JSONReporter()


@pytest.fixture
def linux():
    return lambda: Platform.LINUX


@pytest.fixture
def make_runner():
    """Build fake ``subprocess.run`` callables that record their calls."""

    def _make(returncode=0, stdout=""):
        calls = []

        def _run(cmd, **kwargs):
            calls.append((cmd, kwargs))
            return subprocess.CompletedProcess(cmd, returncode, stdout=stdout)

        _run.calls = calls
        return _run

    return _make
