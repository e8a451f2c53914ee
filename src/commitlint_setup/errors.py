"""Fatal setup errors. Anything recoverable is reported as a StepResult instead."""


class SetupError(RuntimeError):
    """Base class for conditions that abort the whole run."""


class InvalidDirectoryError(SetupError):
    """Raised when the directory answer is blank or cannot be resolved."""


class GitNotFoundError(SetupError):
    """Raised when the git CLI is unavailable on PATH."""

    def __init__(self) -> None:
        super().__init__(
            "git was not found on PATH. Install Git for Windows "
            "(https://git-scm.com/download/win) and run this setup again."
        )


class ArtifactWriteError(SetupError):
    """Raised when a generated file cannot be written."""

    def __init__(self, path, reason: str) -> None:
        super().__init__(f"could not write {path}: {reason}")
        self.path = path
