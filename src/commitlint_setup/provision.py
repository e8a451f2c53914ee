"""Best-effort installation of Scoop, Node.js and commitlint.

Nothing in here raises for an expected failure: each step returns a
StepResult and the chain stops early when a later step cannot work anyway.
The search path is passed in and handed back in the report so callers decide
when to apply it to the running process.
"""
import os
import sys
import shutil
import logging
import subprocess
from pathlib import Path
from typing import Callable

from .config import SCOOP_INSTALLER_URL, NODE_PACKAGE, COMMITLINT_PACKAGES
from .models import StepResult, ProvisionReport
from .ui import styled, DIM

LOG = logging.getLogger("commitlint_setup")

Runner = Callable[[list[str], str], subprocess.CompletedProcess]

MANUAL_COMMITLINT = "npm install -g " + " ".join(COMMITLINT_PACKAGES)


def run_command(args: list[str], search_path: str) -> subprocess.CompletedProcess:
    """Run *args* with PATH set to *search_path*; blocks until the command exits."""
    LOG.debug("run %s", " ".join(args))
    env = dict(os.environ)
    env["PATH"] = search_path
    return subprocess.run(args, capture_output=True, text=True, env=env)


def find_tool(name: str, search_path: str) -> str | None:
    return shutil.which(name, path=search_path)


def prepend_to_path(directory: Path, search_path: str) -> str:
    entries = [e for e in search_path.split(os.pathsep) if e]
    wanted = os.path.normcase(os.path.normpath(str(directory)))
    if any(os.path.normcase(os.path.normpath(e)) == wanted for e in entries):
        return search_path
    return os.pathsep.join([str(directory)] + entries)


def with_scoop_shims(search_path: str, scoop_root: Path) -> str:
    shims = scoop_root / "shims"
    if shims.is_dir():
        return prepend_to_path(shims, search_path)
    return search_path


def _tail(result: subprocess.CompletedProcess, lines: int = 5) -> list[str]:
    out = (result.stderr or "").strip() or (result.stdout or "").strip()
    return out.splitlines()[-lines:] if out else [f"exit status {result.returncode}"]


def _attempt(runner: Runner, args: list[str], search_path: str) -> tuple[bool, list[str]]:
    try:
        result = runner(args, search_path)
    except OSError as e:
        return False, [f"could not start {args[0]}: {e}"]
    if result.returncode != 0:
        return False, _tail(result)
    return True, []


def bootstrap_scoop(search_path: str, runner: Runner) -> StepResult:
    step = StepResult(name="Install Scoop", ok=False)
    shell = find_tool("powershell", search_path) or find_tool("pwsh", search_path)
    if shell is None:
        step.messages.append("PowerShell was not found, cannot run the Scoop installer.")
        step.messages.append("Install Scoop manually from https://scoop.sh and run this setup again.")
        return step

    print(styled(f"  Installing Scoop from {SCOOP_INSTALLER_URL} …", DIM))
    ok, details = _attempt(runner, [
        shell, "-NoProfile", "-ExecutionPolicy", "Bypass", "-Command",
        f"Invoke-RestMethod -Uri {SCOOP_INSTALLER_URL} | Invoke-Expression",
    ], search_path)
    step.ok = ok
    if not ok:
        step.messages.extend(details)
        step.messages.append("Install Scoop manually from https://scoop.sh "
                             "(it refuses to run from an elevated prompt) and run this setup again.")
    return step


def install_node(search_path: str, scoop: str, runner: Runner) -> StepResult:
    print(styled(f"  Installing {NODE_PACKAGE} with Scoop (this can take a few minutes) …", DIM))
    ok, details = _attempt(runner, [scoop, "install", NODE_PACKAGE], search_path)
    step = StepResult(name="Install Node.js", ok=ok)
    if not ok:
        step.messages.extend(details)
        step.messages.append(f"Run manually:  scoop install {NODE_PACKAGE}")
    return step


def install_commitlint(search_path: str, runner: Runner) -> StepResult:
    step = StepResult(name="Install commitlint", ok=False)
    npm = find_tool("npm", search_path)
    if npm is None:
        step.messages.append("npm was not found on PATH.")
        step.messages.append(f"After installing Node.js run:  {MANUAL_COMMITLINT}")
        return step

    print(styled("  Installing commitlint globally with npm …", DIM))
    ok, details = _attempt(runner, [npm, "install", "-g", *COMMITLINT_PACKAGES], search_path)
    step.ok = ok
    if ok:
        step.messages.append(", ".join(COMMITLINT_PACKAGES))
    else:
        step.messages.extend(details)
        step.messages.append(f"Run manually:  {MANUAL_COMMITLINT}")
    return step


def ensure_dependencies(
    search_path: str,
    *,
    scoop_root: Path,
    runner: Runner = run_command,
    platform: str = sys.platform,
) -> ProvisionReport:
    # a fresh Scoop install has shims that this session's PATH does not know yet
    report = ProvisionReport(search_path=with_scoop_shims(search_path, scoop_root))

    node = find_tool("node", report.search_path)
    if node:
        LOG.debug("node found at %s, skipping runtime install", node)
        report.steps.append(StepResult(name="Node.js", ok=True, messages=[f"already installed: {node}"]))
    else:
        scoop = find_tool("scoop", report.search_path)
        if scoop is None:
            if platform != "win32":
                report.steps.append(StepResult(name="Install Node.js", ok=False, messages=[
                    "Automatic installation uses Scoop and only runs on Windows.",
                    "Install Node.js LTS from https://nodejs.org, then run:",
                    f"  {MANUAL_COMMITLINT}",
                ]))
                return report
            step = bootstrap_scoop(report.search_path, runner)
            report.steps.append(step)
            if not step.ok:
                return report
            report.search_path = with_scoop_shims(report.search_path, scoop_root)
            scoop = find_tool("scoop", report.search_path)
            if scoop is None:
                step.ok = False
                step.messages.append(f"The installer finished but scoop is not in {scoop_root / 'shims'}.")
                return report

        step = install_node(report.search_path, scoop, runner)
        report.steps.append(step)
        if not step.ok:
            return report
        report.search_path = with_scoop_shims(report.search_path, scoop_root)
        node = find_tool("node", report.search_path)
        if node is None:
            step.ok = False
            step.messages.append("node is still not on PATH after the install; open a new terminal and retry.")
            return report

    report.steps.append(install_commitlint(report.search_path, runner))
    return report
