import os
import sys
import logging
from dataclasses import dataclass
from pathlib import Path

import dotenv

LOG = logging.getLogger("commitlint_setup")

HOOKS_SUBDIR = ".githooks"
CONFIG_FILENAME = "commitlint.config.js"
LAUNCHER_FILENAME = "commit-msg.ps1"
WRAPPER_FILENAME = "commit-msg"

SCOOP_INSTALLER_URL = "https://get.scoop.sh"
NODE_PACKAGE = "nodejs-lts"
COMMITLINT_PACKAGES = ("@commitlint/cli", "@commitlint/config-conventional")


@dataclass(frozen=True)
class Settings:
    debug: bool
    scoop_root: Path


def load_config() -> Settings:
    dotenv.load_dotenv()

    # SCOOP is the variable Scoop itself honours for a custom install root
    scoop = os.getenv("SCOOP") or os.path.join(os.path.expanduser("~"), "scoop")
    return Settings(
        debug=bool(os.getenv("COMMITLINT_SETUP_DEBUG")),
        scoop_root=Path(scoop),
    )


def setup_logging(verbose: bool = False) -> None:
    """Enable debug logging; *verbose* comes from Settings.debug."""
    level = logging.DEBUG if verbose else logging.WARNING
    LOG.setLevel(level)
    if level == logging.DEBUG and not LOG.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setLevel(logging.DEBUG)
        LOG.addHandler(h)
