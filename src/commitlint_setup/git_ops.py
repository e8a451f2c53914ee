import shutil
import stat
import logging
import subprocess
from pathlib import Path

from .errors import GitNotFoundError
from .models import StepResult

LOG = logging.getLogger("commitlint_setup")

HOOKS_PATH_KEY = "core.hooksPath"


def run_git(args: list[str], cwd: str | None = None) -> str:
    LOG.debug("git %s (cwd=%s)", " ".join(args), cwd)
    result = subprocess.run(
        ["git"] + args,
        capture_output=True, text=True, cwd=cwd,
    )
    if result.returncode != 0:
        raise RuntimeError(f"git {' '.join(args)} failed:\n{result.stderr.strip()}")
    return result.stdout.strip()


def require_git() -> str:
    git = shutil.which("git")
    if git is None:
        raise GitNotFoundError()
    return git


def get_global_hooks_path() -> str | None:
    try:
        value = run_git(["config", "--global", "--get", HOOKS_PATH_KEY])
    except RuntimeError:
        # exit status 1 just means the key is unset
        return None
    return value or None


def set_global_hooks_path(hooks_dir: Path) -> StepResult:
    """Point every repository of this user at *hooks_dir*; last writer wins."""
    value = hooks_dir.as_posix()
    step = StepResult(name=f"Set global {HOOKS_PATH_KEY}", ok=True)

    previous = get_global_hooks_path()
    try:
        run_git(["config", "--global", HOOKS_PATH_KEY, value])
    except (RuntimeError, OSError) as e:
        step.ok = False
        step.messages.append(str(e).strip())
        step.messages.append(f'Run manually:  git config --global {HOOKS_PATH_KEY} "{value}"')
        return step

    if previous and previous != value:
        LOG.debug("replaced previous %s %r", HOOKS_PATH_KEY, previous)
        step.messages.append(f"Replaced previous value: {previous}")
    step.messages.append(value)
    return step


def mark_executable(wrapper: Path, base: Path) -> bool:
    """Best effort: set exec bits and record +x in the index of an enclosing repo."""
    try:
        mode = wrapper.stat().st_mode
        wrapper.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    except OSError as e:
        LOG.debug("chmod %s failed: %s", wrapper, e)

    try:
        inside = run_git(["rev-parse", "--is-inside-work-tree"], cwd=str(base))
        if inside != "true":
            return False
        run_git(["update-index", "--chmod=+x", wrapper.relative_to(base).as_posix()], cwd=str(base))
    except (RuntimeError, OSError, ValueError) as e:
        LOG.debug("could not mark %s executable in the index: %s", wrapper, e)
        return False
    return True
