"""Custom exceptions for pumlink.

TIER 0: No internal imports, only Python stdlib.
"""

from pathlib import Path


class PumlinkError(Exception):
    """Base exception for pumlink."""

    pass


class ConfigError(PumlinkError):
    """Configuration error."""

    pass


class DescriptorLoadError(PumlinkError):
    """A module descriptor could not be read or parsed.

    Fatal for the whole run: a partially loaded module tree cannot be trusted.
    """

    def __init__(self, descriptor: Path, reason: str) -> None:
        self.descriptor = descriptor
        self.reason = reason
        super().__init__(f"Cannot load descriptor {descriptor}: {reason}")


class DiagramReadError(PumlinkError):
    """The diagram file exists but could not be read."""

    def __init__(self, diagram: Path, reason: str) -> None:
        self.diagram = diagram
        self.reason = reason
        super().__init__(f"Cannot read diagram {diagram}: {reason}")


class SyncValidationError(PumlinkError):
    """Diagram is missing one or more expected relations.

    Attributes:
        missing: Every relation token absent from the diagram.
        project_name: Display name of the checked project.
    """

    def __init__(self, missing: frozenset[str], project_name: str = "") -> None:
        self.missing = frozenset(missing)
        self.project_name = project_name
        listed = ", ".join(sorted(self.missing))
        subject = f" for {project_name}" if project_name else ""
        super().__init__(
            f"PlantUML not in sync with actual project state{subject}! Missing: {listed}"
        )
