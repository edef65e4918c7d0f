"""Relation deriver - which diagram relations a project must show.

TIER 2: May import from core, lib.

Outgoing relations are the artifact ids a project depends on inside the
filtered group. Incoming relations are the names of the projects in the
surrounding module tree that depend on it.
"""

from arch.tree import expand
from core.ports import DescriptorLoader
from core.types import DEFAULT_DESCRIPTOR_FILE, Project
from lib.logger import get_logger
from lib.pom import load_project

logger = get_logger("relations")


def outgoing(project: Project, group_filter: str) -> set[str]:
    """Get artifact ids of the project's dependencies within a group.

    Third-party dependencies (any other group id) are left out.

    Args:
        project: Project whose dependencies are read.
        group_filter: Group id a dependency must have to count.

    Returns:
        Distinct artifact ids.
    """
    return {dep.artifact_id for dep in project.dependencies if dep.group_id == group_filter}


def is_related(candidate: Project, project: Project) -> bool:
    """Check whether candidate declares a dependency on project."""
    return candidate.depends_on(project.group_id, project.artifact_id)


def incoming(
    project: Project,
    loader: DescriptorLoader = load_project,
    descriptor_name: str = DEFAULT_DESCRIPTOR_FILE,
) -> set[str]:
    """Get names of the projects in the parent's module tree that depend on project.

    Args:
        project: Project being depended on.
        loader: Descriptor loader used while walking the tree.
        descriptor_name: File name of a module descriptor.

    Returns:
        Project names. Empty when the project has no parent.
    """
    if not project.has_parent():
        logger.debug(
            f"Project {project.name} has no parent project, "
            "will not calculate incoming dependencies based on that."
        )
        return set()

    candidates = expand(project.parent, loader, descriptor_name)
    return {candidate.name for candidate in candidates if is_related(candidate, project)}


def expected_relations(
    project: Project,
    group_filter: str,
    loader: DescriptorLoader = load_project,
    descriptor_name: str = DEFAULT_DESCRIPTOR_FILE,
) -> set[str]:
    """Get every relation token the project's diagram has to contain.

    Returns:
        Union of outgoing artifact ids and incoming project names.
    """
    outgoing_ids = outgoing(project, group_filter)
    logger.info(f"Expected outgoing dependencies: {sorted(outgoing_ids)}")

    incoming_names = incoming(project, loader, descriptor_name)
    logger.info(f"Expected incoming dependencies: {sorted(incoming_names)}")

    return outgoing_ids | incoming_names
