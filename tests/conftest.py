"""
Shared fixtures for microshell tests.

Fixtures here give each test its own interpreter session, a throwaway
home directory and a scripted stand-in for the terminal line source.
"""

import os
import sys
import time

import psutil
import pytest

from Shell.session import Session


def _python_command(code):
    """Argument vector running a Python snippet in a child interpreter"""
    return [sys.executable, "-c", code]


def _wait_until_zombie(pid, timeout=5.0):
    """Poll until pid has exited but not been collected"""
    proc = psutil.Process(pid)
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if proc.status() == psutil.STATUS_ZOMBIE:
            return True
        time.sleep(0.02)
    return False


class ScriptedInput:
    """
    Line source that replays a fixed list of lines, then signals EOF.

    Records every prompt it was asked to show.
    """

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def session(monkeypatch):
    """
    Provides a fresh session; the process cwd is restored afterwards.
    """
    monkeypatch.chdir(os.getcwd())
    return Session()


@pytest.fixture
def home_dir(tmp_path, monkeypatch):
    """Points HOME at a temporary directory"""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def scripted():
    return ScriptedInput


@pytest.fixture
def python_command():
    return _python_command


@pytest.fixture
def wait_until_zombie():
    return _wait_until_zombie
