"""Shared fixtures for the test suite."""

import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core import bootstrap  # noqa: E402


def pytest_configure(config):
    config.addinivalue_line("markers", "requires_libc: test calls into the C runtime")


@pytest.fixture
def fresh_bootstrap():
    """Let the bootstrap hook print again within one test."""
    bootstrap.reset()
    yield bootstrap
    bootstrap.reset()


@pytest.fixture
def clean_native_env(monkeypatch):
    for name in ("NATIVE_LIBRARY", "NATIVE_SYMBOL", "NATIVE_MESSAGE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def run_main():
    """Run main.py in a child interpreter and return the completed process."""
    import subprocess

    def _run(**env_overrides):
        env = dict(os.environ)
        for name in ("NATIVE_LIBRARY", "NATIVE_SYMBOL", "NATIVE_MESSAGE"):
            env.pop(name, None)
        env["PYTHONIOENCODING"] = "utf-8"
        env.update(env_overrides)
        return subprocess.run(
            [sys.executable, str(PROJECT_ROOT / "main.py")],
            cwd=str(PROJECT_ROOT),
            env=env,
            capture_output=True,
            encoding="utf-8",
            timeout=30,
        )

    return _run
