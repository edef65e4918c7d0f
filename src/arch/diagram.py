"""Diagram validator - checks relations against project.puml text.

TIER 2: May import from core, lib.

Matching is deliberately plain: a relation is present when one line
contains both the project name and the relation token as case-sensitive
substrings. No PlantUML parsing takes place, so a token that happens to
be a substring of another name on the same line also counts.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from core.errors import DiagramReadError, SyncValidationError
from core.types import ValidationStatus
from lib.logger import get_logger

logger = get_logger("diagram")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking one project's diagram."""

    status: ValidationStatus
    project: str
    expected: frozenset[str] = field(default_factory=frozenset)
    missing: frozenset[str] = field(default_factory=frozenset)
    diagram: Path | None = None

    @property
    def ok(self) -> bool:
        return self.status != ValidationStatus.FAILED

    def raise_for_status(self) -> None:
        """Raise SyncValidationError if the diagram is out of sync."""
        if self.status == ValidationStatus.FAILED:
            raise SyncValidationError(self.missing, self.project)

    @classmethod
    def skipped(cls, project: str, diagram: Path | None = None) -> "ValidationResult":
        return cls(status=ValidationStatus.SKIPPED, project=project, diagram=diagram)


def load_diagram(path: Path) -> list[str]:
    """Read the diagram as a list of lines.

    Only newlines end a line. Form feeds and the other separators
    str.splitlines() would break on stay part of the line.

    Raises:
        DiagramReadError: If the file cannot be read or decoded.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DiagramReadError(Path(path), str(e)) from e

    # read_text already maps \r\n and \r to \n
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def relation_exists(lines: Iterable[str], project_name: str, token: str) -> bool:
    """Check if some line mentions both the project and the related component."""
    return any(project_name in line and token in line for line in lines)


def validate(
    expected: Iterable[str],
    lines: list[str],
    project_name: str,
    diagram: Path | None = None,
) -> ValidationResult:
    """Check every expected relation against the diagram lines.

    All relations are checked before the result is returned, so a failed
    result lists every missing component at once.

    Args:
        expected: Relation tokens (artifact ids and project names).
        lines: Diagram text lines.
        project_name: Display name of the project the diagram documents.
        diagram: Diagram path, kept on the result for reporting.

    Returns:
        PASSED or FAILED result carrying the missing tokens.
    """
    expected_set = frozenset(expected)
    missing: set[str] = set()

    for token in sorted(expected_set):
        if not relation_exists(lines, project_name, token):
            logger.error(f"Component not present in diagram: {token}")
            missing.add(token)

    status = ValidationStatus.FAILED if missing else ValidationStatus.PASSED
    return ValidationResult(
        status=status,
        project=project_name,
        expected=expected_set,
        missing=frozenset(missing),
        diagram=diagram,
    )
