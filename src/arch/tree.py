"""Module tree walker - expands an aggregator into its leaf projects.

TIER 2: May import from core, lib.
"""

from pathlib import Path

from core.ports import DescriptorLoader
from core.types import DEFAULT_DESCRIPTOR_FILE, Project
from lib.logger import get_logger
from lib.pom import load_project

logger = get_logger("tree")


def module_descriptor(base_dir: Path, module_name: str, descriptor_name: str) -> Path:
    """Build the descriptor path of a child module.

    Always <base_dir>/<module_name>/<descriptor_name>, one separator per segment.
    """
    return Path(base_dir) / module_name.strip("/") / descriptor_name


def expand(
    project: Project,
    loader: DescriptorLoader = load_project,
    descriptor_name: str = DEFAULT_DESCRIPTOR_FILE,
    _visited: set[Path] | None = None,
) -> set[Project]:
    """Flatten a project into every leaf project reachable through its modules.

    A project without modules is a leaf and expands to itself. An aggregator
    is never part of its own result, so one whose module descriptors are all
    missing expands to the empty set.

    Module lists are expected to form a tree. A descriptor reached a second
    time is skipped with a warning rather than walked again.

    Args:
        project: Project to expand.
        loader: Descriptor loader used for child modules.
        descriptor_name: File name of a module descriptor.

    Returns:
        Set of leaf projects.

    Raises:
        DescriptorLoadError: If an existing child descriptor cannot be loaded.
    """
    visited = _visited if _visited is not None else set()
    if project.descriptor is not None:
        visited.add(Path(project.descriptor).resolve())

    if not project.modules:
        logger.info(f"{project.name} has no modules")
        return {project}

    logger.info(f"Checking {descriptor_name} in path: {project.base_dir}")
    leaves: set[Project] = set()

    for module_name in project.modules:
        candidate = module_descriptor(project.base_dir, module_name, descriptor_name)
        logger.debug(f"Checking module {descriptor_name}: {candidate}")

        if not candidate.is_file():
            continue

        resolved = candidate.resolve()
        if resolved in visited:
            logger.warning(f"Module {module_name} of {project.name} already visited, skipping")
            continue

        logger.debug(f"Found module {descriptor_name}: {candidate}")
        child = loader(candidate, with_parent=False)
        leaves |= expand(child, loader, descriptor_name, visited)

    return leaves
