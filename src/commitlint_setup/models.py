from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class StepResult:
    name: str
    ok: bool
    messages: list[str] = field(default_factory=list)


@dataclass
class ProvisionReport:
    """Outcome of the dependency chain plus the search path it ended with."""
    steps: list[StepResult] = field(default_factory=list)
    search_path: str = ""

    @property
    def ok(self) -> bool:
        return all(s.ok for s in self.steps)


@dataclass(frozen=True)
class GeneratedArtifact:
    path: Path
    content: str
    newline: str = "\n"

    def encoded(self) -> bytes:
        text = self.content.replace("\r\n", "\n")
        if self.newline != "\n":
            text = text.replace("\n", self.newline)
        # utf-8, never utf-8-sig
        return text.encode("utf-8")


@dataclass
class SetupSummary:
    base_dir: Path
    hooks_path: str
    hooks_path_set: bool = True
    artifacts: list[GeneratedArtifact] = field(default_factory=list)
    steps: list[StepResult] = field(default_factory=list)
    search_path: str = ""

    @property
    def warnings(self) -> list[StepResult]:
        return [s for s in self.steps if not s.ok]
