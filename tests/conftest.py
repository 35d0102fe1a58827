import subprocess
from pathlib import Path

import pytest

from repo_kickoff.console import Colors


class FakeShell:
    """Stands in for subprocess.run and records every command it is given"""

    def __init__(self):
        self.commands = []
        self.outputs = {
            ("git", "--version"): "git version 2.43.0\n",
            ("gh", "--version"): "gh version 2.40.1 (2023-12-13)\nhttps://github.com/cli/cli/releases/tag/v2.40.1\n",
        }
        self.failing = []
        self.missing = set()

    def __call__(self, command, check=False, capture_output=False, text=False, **kwargs):
        command = list(command)
        self.commands.append(command)

        if command[0] in self.missing:
            raise FileNotFoundError(2, "No such file or directory", command[0])
        if any(command[:len(prefix)] == prefix for prefix in self.failing):
            raise subprocess.CalledProcessError(1, command)

        if command[:2] == ["git", "clone"]:
            (Path(command[3]) / ".git").mkdir(parents=True)
            (Path(command[3]) / "app.py").write_text("print('hello')\n")

        stdout = self.outputs.get(tuple(command), "")
        return subprocess.CompletedProcess(command, 0, stdout=stdout, stderr="")

    @property
    def workflow(self):
        """Commands issued after the --version preflight checks"""
        return [c for c in self.commands if c[1:] != ["--version"]]


@pytest.fixture(autouse=True)
def plain_colors(monkeypatch):
    for name in ("HEADER", "BLUE", "GREEN", "YELLOW", "RED", "ENDC", "BOLD"):
        monkeypatch.setattr(Colors, name, "")


@pytest.fixture
def shell(monkeypatch):
    fake = FakeShell()
    monkeypatch.setattr("repo_kickoff.runner.subprocess.run", fake)
    return fake


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def answers(monkeypatch):
    """Feed scripted answers to input(); running out behaves like EOF"""
    queue = []
    asked = []

    def fake_input(prompt=""):
        asked.append(prompt)
        if not queue:
            raise EOFError
        return queue.pop(0)

    def feed(*values):
        queue.extend(values)
        return asked

    monkeypatch.setattr("builtins.input", fake_input)
    return feed
