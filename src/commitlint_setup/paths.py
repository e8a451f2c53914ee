import os
import logging
from pathlib import Path

from .config import HOOKS_SUBDIR
from .errors import InvalidDirectoryError

LOG = logging.getLogger("commitlint_setup")

_QUOTES = ("\"", "'")


def strip_wrapping_quotes(text: str) -> str:
    """Remove one pair of matching quotes, as left by Explorer's "Copy as path"."""
    if len(text) >= 2 and text[0] == text[-1] and text[0] in _QUOTES:
        return text[1:-1].strip()
    return text


def resolve_base_directory(raw: str) -> Path:
    """Turn the prompt answer into an absolute, existing directory."""
    text = (raw or "").strip()
    if not text:
        raise InvalidDirectoryError("no directory was entered.")

    text = strip_wrapping_quotes(text)
    if not text:
        raise InvalidDirectoryError("no directory was entered.")

    expanded = os.path.expanduser(os.path.expandvars(text))
    LOG.debug("directory answer %r expanded to %r", raw, expanded)
    path = Path(expanded)

    if path.exists() and not path.is_dir():
        raise InvalidDirectoryError(f"{path} exists but is not a directory.")
    if not path.exists():
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise InvalidDirectoryError(f"{path} does not exist and could not be created: {e.strerror or e}")
        LOG.debug("created base directory %s", path)

    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise InvalidDirectoryError(f"could not resolve {path}: {e}")


def hooks_directory(base: Path) -> Path:
    return base / HOOKS_SUBDIR
