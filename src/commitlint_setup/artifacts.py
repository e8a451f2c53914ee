"""Rendering and writing of the config file and the two hook scripts."""
import logging
import textwrap
from pathlib import Path

from .config import CONFIG_FILENAME, LAUNCHER_FILENAME, WRAPPER_FILENAME, COMMITLINT_PACKAGES
from .errors import ArtifactWriteError
from .models import GeneratedArtifact
from .paths import hooks_directory

LOG = logging.getLogger("commitlint_setup")

CONFIG_TEMPLATE = "module.exports = { extends: ['@commitlint/config-conventional'] };\n"

# Kept ASCII-only: Git for Windows consoles and GUI clients mangle anything else.
REJECTION_BANNER = [
    "",
    "------------------------------------------------------------",
    " Commit rejected: message does not follow Conventional Commits",
    "------------------------------------------------------------",
    " Format:  <type>(<scope>): <subject>",
    " Types:   feat fix docs style refactor perf test build ci chore revert",
    "",
    " Examples:",
    "   feat: add login endpoint",
    "   fix(auth): handle expired session tokens",
    "   docs: update install steps in README",
    "",
]

LAUNCHER_TEMPLATE = textwrap.dedent("""\
    # commit-msg hook: checks the pending commit message with commitlint.
    param(
        [Parameter(Position = 0)]
        [string]$CommitMsgFile
    )

    $configPath = {config_literal}

    if (-not $CommitMsgFile -or -not (Test-Path -LiteralPath $CommitMsgFile -PathType Leaf)) {{
        Write-Host "commit-msg: commit message file not found: $CommitMsgFile"
        exit 1
    }}
    if (-not (Test-Path -LiteralPath $configPath -PathType Leaf)) {{
        Write-Host "commit-msg: commitlint config not found: $configPath"
        Write-Host 'commit-msg: run the commitlint setup again to recreate it.'
        exit 1
    }}

    $commitlint = Get-Command commitlint -ErrorAction SilentlyContinue
    if ($commitlint) {{
        & $commitlint.Source --edit $CommitMsgFile --config $configPath
    }} else {{
        $npx = Get-Command npx -ErrorAction SilentlyContinue
        if (-not $npx) {{
            Write-Host 'commit-msg: commitlint is not installed. Run:'
            Write-Host '  {install_command}'
            exit 1
        }}
        & $npx.Source --no-install commitlint --edit $CommitMsgFile --config $configPath
    }}
    $code = $LASTEXITCODE

    if ($code -ne 0) {{
    {banner}
    }}
    exit $code
""")

WRAPPER_TEMPLATE = textwrap.dedent("""\
    #!/bin/sh
    # Git runs hooks through sh; hand the message file to the PowerShell hook.
    hook_dir=$(dirname "$0")
    powershell.exe -NoProfile -ExecutionPolicy Bypass -File "$hook_dir/{launcher}" "$1"
    exit $?
""")


def ps_literal(text: str) -> str:
    """Quote *text* as a PowerShell single-quoted string."""
    return "'" + text.replace("'", "''") + "'"


def render_config() -> str:
    return CONFIG_TEMPLATE


def render_hook_launcher(config_path: Path) -> str:
    banner = "\n".join(f"    Write-Host {ps_literal(line)}" for line in REJECTION_BANNER)
    return LAUNCHER_TEMPLATE.format(
        config_literal=ps_literal(str(config_path)),
        install_command="npm install -g " + " ".join(COMMITLINT_PACKAGES),
        banner=banner,
    )


def render_posix_wrapper() -> str:
    return WRAPPER_TEMPLATE.format(launcher=LAUNCHER_FILENAME)


def build_artifacts(base: Path) -> list[GeneratedArtifact]:
    """Return the three files in the order they must be written."""
    config_path = base / CONFIG_FILENAME
    hooks = hooks_directory(base)
    return [
        GeneratedArtifact(config_path, render_config(), "\n"),
        GeneratedArtifact(hooks / LAUNCHER_FILENAME, render_hook_launcher(config_path), "\r\n"),
        GeneratedArtifact(hooks / WRAPPER_FILENAME, render_posix_wrapper(), "\n"),
    ]


def write_artifacts(artifacts: list[GeneratedArtifact]) -> None:
    for artifact in artifacts:
        try:
            artifact.path.parent.mkdir(parents=True, exist_ok=True)
            data = artifact.encoded()
            artifact.path.write_bytes(data)
        except OSError as e:
            raise ArtifactWriteError(artifact.path, e.strerror or str(e))
        LOG.debug("wrote %s (%d bytes)", artifact.path, len(data))
