"""Core types: project model and validation status.

TIER 0: No internal imports, only Python stdlib.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

DEFAULT_DESCRIPTOR_FILE = "pom.xml"
DEFAULT_DIAGRAM_FILE = "project.puml"


class ValidationStatus(str, Enum):
    """Outcome of one diagram verification."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"  # no diagram for the project


@dataclass(frozen=True)
class Dependency:
    """A declared dependency, referencing another project by coordinate."""

    group_id: str
    artifact_id: str
    scope: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Project:
    """A loaded module descriptor.

    Identity is the (group_id, artifact_id) pair: two Project instances
    loaded from the same coordinates compare equal and hash the same,
    whatever their other fields hold.
    """

    group_id: str
    artifact_id: str
    name: str = field(compare=False)
    base_dir: Path = field(compare=False)
    dependencies: tuple[Dependency, ...] = field(default=(), compare=False)
    modules: tuple[str, ...] = field(default=(), compare=False)
    parent: "Project | None" = field(default=None, compare=False, repr=False)
    descriptor: Path | None = field(default=None, compare=False)

    @property
    def coordinates(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"

    def has_parent(self) -> bool:
        return self.parent is not None

    def depends_on(self, group_id: str, artifact_id: str) -> bool:
        """Check whether this project declares a dependency on the coordinates."""
        return any(
            dep.group_id == group_id and dep.artifact_id == artifact_id
            for dep in self.dependencies
        )
