"""Run the generated hook scripts against stub executables."""
import os
import shutil
import subprocess
import sys

import pytest

from conftest import make_tool
from commitlint_setup.artifacts import build_artifacts, write_artifacts

needs_sh = pytest.mark.skipif(shutil.which("sh") is None or sys.platform == "win32", reason="needs a POSIX sh")
needs_pwsh = pytest.mark.skipif(shutil.which("pwsh") is None or sys.platform == "win32", reason="needs pwsh")


@pytest.fixture
def hooks(base_dir):
    write_artifacts(build_artifacts(base_dir))
    return base_dir / ".githooks"


@pytest.fixture
def message_file(tmp_path):
    path = tmp_path / "COMMIT EDITMSG"
    path.write_text("feat: add login endpoint\n", encoding="utf-8")
    return path


def _env(bin_dir, **extra):
    env = dict(os.environ)
    env["PATH"] = str(bin_dir) + os.pathsep + env.get("PATH", "")
    env.update(extra)
    return env


@needs_sh
@pytest.mark.parametrize("code", [0, 3])
def test_wrapper_forwards_argument_and_exit_code(code, hooks, message_file, bin_dir, tmp_path):
    args_file = tmp_path / "args.txt"
    make_tool(bin_dir, "powershell.exe", f'printf "%s\\n" "$@" > "$STUB_ARGS"\nexit {code}')

    result = subprocess.run(
        ["sh", str(hooks / "commit-msg"), str(message_file)],
        env=_env(bin_dir, STUB_ARGS=str(args_file)), capture_output=True, text=True,
    )

    assert result.returncode == code
    args = args_file.read_text().splitlines()
    assert args[-1] == str(message_file)
    assert os.path.samefile(args[-2], hooks / "commit-msg.ps1")


def _run_launcher(hooks, message, bin_dir):
    return subprocess.run(
        ["pwsh", "-NoProfile", "-NonInteractive", "-File", str(hooks / "commit-msg.ps1"), str(message)],
        env=_env(bin_dir), capture_output=True, text=True,
    )


@needs_pwsh
def test_launcher_missing_message_file_skips_commitlint(hooks, bin_dir, tmp_path):
    marker = tmp_path / "called"
    make_tool(bin_dir, "commitlint", f'touch "{marker}"\nexit 0')

    result = _run_launcher(hooks, tmp_path / "nope", bin_dir)

    assert result.returncode != 0
    assert not marker.exists()


@needs_pwsh
def test_launcher_passes_edit_and_config(hooks, message_file, bin_dir, tmp_path):
    args_file = tmp_path / "args.txt"
    make_tool(bin_dir, "commitlint", f'printf "%s\\n" "$@" > "{args_file}"\nexit 0')

    result = _run_launcher(hooks, message_file, bin_dir)

    assert result.returncode == 0
    assert args_file.read_text().splitlines() == [
        "--edit", str(message_file), "--config", str(hooks.parent / "commitlint.config.js"),
    ]
    assert "Commit rejected" not in result.stdout


@needs_pwsh
def test_launcher_forwards_failure_and_prints_banner(hooks, message_file, bin_dir):
    make_tool(bin_dir, "commitlint", "exit 7")

    result = _run_launcher(hooks, message_file, bin_dir)

    assert result.returncode == 7
    assert "Commit rejected" in result.stdout
    assert "feat: add login endpoint" in result.stdout


@needs_pwsh
def test_launcher_missing_config_is_rejected(hooks, message_file, bin_dir):
    make_tool(bin_dir, "commitlint", "exit 0")
    (hooks.parent / "commitlint.config.js").unlink()

    result = _run_launcher(hooks, message_file, bin_dir)

    assert result.returncode == 1
    assert "commitlint config not found" in result.stdout


@needs_pwsh
@pytest.mark.skipif(shutil.which("commitlint") is None, reason="commitlint is not installed")
@pytest.mark.parametrize("message, accepted", [
    ("feat: add login endpoint", True),
    ("fix(auth): handle expired session tokens", True),
    ("update stuff", False),
])
def test_launcher_with_real_commitlint(message, accepted, hooks, tmp_path, bin_dir):
    msg = tmp_path / "COMMIT_EDITMSG"
    msg.write_text(message + "\n", encoding="utf-8")

    result = _run_launcher(hooks, msg, bin_dir)

    assert (result.returncode == 0) is accepted
    assert ("Commit rejected" in result.stdout) is not accepted
