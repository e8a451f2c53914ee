import os
import sys
import logging
from pathlib import Path

from .artifacts import build_artifacts, write_artifacts
from .config import load_config, setup_logging, WRAPPER_FILENAME
from .errors import SetupError
from .git_ops import require_git, set_global_hooks_path, mark_executable
from .models import SetupSummary
from .paths import resolve_base_directory, hooks_directory
from .provision import ensure_dependencies, run_command, Runner
from .ui import styled, print_banner, print_step, print_error, print_summary, BOLD, GREEN, YELLOW

LOG = logging.getLogger("commitlint_setup")

PROMPT = "Directory to install commitlint config and hooks into: "


def run_setup(
    raw_directory: str,
    *,
    scoop_root: Path,
    search_path: str | None = None,
    runner: Runner = run_command,
    platform: str = sys.platform,
) -> SetupSummary:
    """Resolve the directory, provision tools, write the hook files and wire up git.

    Fatal problems raise SetupError; everything else ends up as a warning step
    in the returned summary.
    """
    # git first: resolving may create the directory
    require_git()
    base = resolve_base_directory(raw_directory)

    if search_path is None:
        search_path = os.environ.get("PATH", "")

    print(styled("\nChecking prerequisites…\n", BOLD))
    report = ensure_dependencies(search_path, scoop_root=scoop_root, runner=runner, platform=platform)
    for step in report.steps:
        print_step(step)
    if not report.ok:
        print(styled("\n  Some prerequisites are missing; writing the hook files anyway.", YELLOW))

    hooks = hooks_directory(base)
    artifacts = build_artifacts(base)
    write_artifacts(artifacts)

    print(styled("\nConfiguring git…\n", BOLD))
    hooks_step = set_global_hooks_path(hooks)
    print_step(hooks_step)
    if not mark_executable(hooks / WRAPPER_FILENAME, base):
        LOG.debug("%s not marked executable in any index", WRAPPER_FILENAME)

    return SetupSummary(
        base_dir=base,
        hooks_path=hooks.as_posix(),
        hooks_path_set=hooks_step.ok,
        artifacts=artifacts,
        steps=report.steps + [hooks_step],
        search_path=report.search_path,
    )


def main() -> None:
    settings = load_config()
    setup_logging(settings.debug)

    print_banner()
    try:
        answer = input(PROMPT)
    except (EOFError, KeyboardInterrupt):
        print("\nAborted.")
        sys.exit(130)

    try:
        summary = run_setup(answer, scoop_root=settings.scoop_root)
    except SetupError as e:
        print_error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nAborted.")
        sys.exit(130)

    # later tools started from this process see the new shims
    os.environ["PATH"] = summary.search_path

    print_summary(summary)
    if not summary.warnings:
        print(styled("✓ commitlint is set up.", GREEN, BOLD))


if __name__ == "__main__":
    main()
