"""Diagram verification run - wires loader, walker, deriver and validator.

TIER 2: May import from core, lib.
"""

from collections.abc import Iterator
from pathlib import Path

from arch.diagram import ValidationResult, load_diagram, validate
from arch.relations import expected_relations
from arch.tree import module_descriptor
from core.ports import DescriptorLoader
from core.types import ValidationStatus
from lib.config import get
from lib.logger import get_logger
from lib.pom import load_project

logger = get_logger("verify")


def verify_project(
    descriptor: Path,
    group_filter: str | None = None,
    relaxed_naming: bool | None = None,
    loader: DescriptorLoader = load_project,
    diagram_name: str | None = None,
    descriptor_name: str | None = None,
) -> ValidationResult:
    """Verify that one project's diagram shows all of its relations.

    Args:
        descriptor: Path to the project's descriptor (pom.xml).
        group_filter: Group id outgoing dependencies must have
            (default: config verify.group_id, then the project's own group id).
        relaxed_naming: Reserved, has no effect on matching
            (default: config verify.relaxed_naming).
        loader: Descriptor loader.
        diagram_name: Diagram file name (default: config verify.diagram_file).
        descriptor_name: Module descriptor file name
            (default: config verify.descriptor_file).

    Returns:
        SKIPPED when the project has no diagram, else PASSED or FAILED.

    Raises:
        DescriptorLoadError: If any descriptor in the tree cannot be loaded.
        DiagramReadError: If the diagram exists but cannot be read.
    """
    diagram_name = diagram_name or get("verify.diagram_file")
    descriptor_name = descriptor_name or get("verify.descriptor_file")
    if relaxed_naming is None:
        relaxed_naming = get("verify.relaxed_naming")

    project = loader(Path(descriptor), with_parent=True)
    diagram = project.base_dir / diagram_name

    if not diagram.exists():
        logger.warning(f"No PUML defined for {project.name}")
        return ValidationResult.skipped(project.name, diagram)

    group_filter = group_filter or get("verify.group_id") or project.group_id
    logger.debug(f"Verifying {project.coordinates} against {diagram} (group filter {group_filter})")
    if relaxed_naming:
        logger.debug("Relaxed naming is reserved and does not change matching yet")

    expected = expected_relations(project, group_filter, loader, descriptor_name)
    lines = load_diagram(diagram)
    result = validate(expected, lines, project.name, diagram)

    if result.status == ValidationStatus.FAILED:
        logger.error("PlantUML not in sync with actual project state!")
    else:
        logger.info(f"{diagram_name} of {project.name} is in sync")

    return result


def iter_descriptors(
    descriptor: Path,
    loader: DescriptorLoader = load_project,
    descriptor_name: str | None = None,
) -> Iterator[Path]:
    """Yield the descriptor and every module descriptor below it, depth-first.

    Aggregators are yielded too, each before its modules.
    """
    descriptor_name = descriptor_name or get("verify.descriptor_file")
    visited: set[Path] = set()
    stack = [Path(descriptor)]

    while stack:
        current = stack.pop()
        resolved = current.resolve()
        if resolved in visited:
            continue
        visited.add(resolved)
        yield current

        project = loader(current, with_parent=False)
        children = [
            module_descriptor(project.base_dir, name, descriptor_name) for name in project.modules
        ]
        stack.extend(reversed([child for child in children if child.is_file()]))


def verify_tree(
    descriptor: Path,
    group_filter: str | None = None,
    relaxed_naming: bool | None = None,
    loader: DescriptorLoader = load_project,
    diagram_name: str | None = None,
    descriptor_name: str | None = None,
) -> list[ValidationResult]:
    """Run verify_project for a project and every module below it.

    Returns:
        One result per descriptor, root first.
    """
    return [
        verify_project(
            path,
            group_filter=group_filter,
            relaxed_naming=relaxed_naming,
            loader=loader,
            diagram_name=diagram_name,
            descriptor_name=descriptor_name,
        )
        for path in iter_descriptors(descriptor, loader, descriptor_name)
    ]


def format_report(results: list[ValidationResult]) -> str:
    """Format verification results for display.

    Args:
        results: Output from verify_project() or verify_tree().

    Returns:
        Formatted string for terminal output.
    """
    lines: list[str] = ["── Diagram sync ─────────────────────"]

    for result in results:
        if result.status == ValidationStatus.SKIPPED:
            lines.append(f"- {result.project}: no diagram, skipped")
        elif result.status == ValidationStatus.PASSED:
            lines.append(f"✓ {result.project}: {len(result.expected)} relation(s) in sync")
        else:
            lines.append(f"✗ {result.project}: {len(result.missing)} relation(s) missing")
            lines.extend(f"    Missing: {token}" for token in sorted(result.missing))

    failed = sum(1 for r in results if r.status == ValidationStatus.FAILED)
    if failed:
        lines.append(f"✗ {failed} diagram(s) not in sync with actual project state")
    else:
        lines.append("✓ All diagrams in sync")

    return "\n".join(lines)
