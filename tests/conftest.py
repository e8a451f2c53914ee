"""Shared fixtures: throwaway global git config, fake executables and a recording runner."""
import os
import shutil
import stat
import subprocess
from pathlib import Path

import pytest

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def make_tool(directory: Path, name: str, body: str = "exit 0") -> Path:
    """Create an executable sh script called *name* in *directory*."""
    directory.mkdir(parents=True, exist_ok=True)
    tool = directory / name
    tool.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    tool.chmod(tool.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return tool


class RecordingRunner:
    """Stand-in for provision.run_command.

    *results* maps the command's basename (``npm``, ``scoop``, ...) to a return
    code, and *effects* to a callable run before returning, used to simulate
    an installer dropping new executables on disk.
    """

    def __init__(self, results=None, effects=None, stderr="boom"):
        self.calls: list[tuple[list[str], str]] = []
        self.results = results or {}
        self.effects = effects or {}
        self.stderr = stderr

    def __call__(self, args, search_path):
        self.calls.append((list(args), search_path))
        name = Path(args[0]).name
        if name in self.effects:
            self.effects[name]()
        code = self.results.get(name, 0)
        return subprocess.CompletedProcess(args, code, stdout="", stderr=self.stderr if code else "")

    @property
    def commands(self) -> list[str]:
        return [Path(args[0]).name for args, _ in self.calls]


@pytest.fixture
def git_env(tmp_path, monkeypatch):
    """Point git's global config at a temp file and keep repo discovery inside tmp_path."""
    config = tmp_path / "global.gitconfig"
    config.touch()
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    return config


@pytest.fixture
def bin_dir(tmp_path):
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def scoop_root(tmp_path):
    return tmp_path / "scoop"


@pytest.fixture
def base_dir(tmp_path):
    path = tmp_path / "work"
    path.mkdir()
    return path


def global_hooks_path() -> str:
    return subprocess.run(
        ["git", "config", "--global", "--get", "core.hooksPath"],
        capture_output=True, text=True, env=dict(os.environ),
    ).stdout.strip()
