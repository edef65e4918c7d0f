"""Maven POM reader - loads a module descriptor into a Project.

TIER 1: May import from core only.

Only the parts of a POM the diagram check needs are read: coordinates,
name, declared dependencies, parent reference and module list.
Versions, profiles and dependencyManagement are ignored.
"""

import re
import xml.etree.ElementTree as ET
from pathlib import Path

from core.errors import DescriptorLoadError
from core.types import DEFAULT_DESCRIPTOR_FILE, Dependency, Project
from lib.logger import get_logger

logger = get_logger("pom")

DEFAULT_PARENT_PATH = "../pom.xml"

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def _local(tag: str) -> str:
    """Strip the '{namespace}' prefix ElementTree puts on tags."""
    return tag.rsplit("}", 1)[-1]


def _child(element: ET.Element | None, name: str) -> ET.Element | None:
    if element is None:
        return None
    for child in element:
        if _local(child.tag) == name:
            return child
    return None


def _children(element: ET.Element | None, name: str) -> list[ET.Element]:
    if element is None:
        return []
    return [child for child in element if _local(child.tag) == name]


def _text(element: ET.Element | None, name: str) -> str | None:
    child = _child(element, name)
    if child is None or child.text is None:
        return None
    return child.text.strip() or None


def _properties(root: ET.Element, group_id: str, artifact_id: str) -> dict[str, str]:
    """Collect the placeholders a dependency coordinate may reference."""
    props: dict[str, str] = {}
    declared = _child(root, "properties")
    if declared is not None:
        for child in declared:
            if child.text:
                props[_local(child.tag)] = child.text.strip()

    parent = _child(root, "parent")
    parent_group = _text(parent, "groupId")
    if parent_group:
        props["project.parent.groupId"] = parent_group
    props["project.groupId"] = group_id
    props["pom.groupId"] = group_id
    props["groupId"] = group_id
    props["project.artifactId"] = artifact_id
    return props


def _resolve(value: str, props: dict[str, str]) -> str:
    """Substitute known ${...} placeholders, keeping unknown ones verbatim."""
    return _PLACEHOLDER.sub(lambda m: props.get(m.group(1), m.group(0)), value)


def _parse(descriptor: Path) -> ET.Element:
    try:
        root = ET.parse(descriptor).getroot()
    except (OSError, ET.ParseError) as e:
        raise DescriptorLoadError(descriptor, str(e)) from e

    if _local(root.tag) != "project":
        raise DescriptorLoadError(descriptor, f"unexpected root element <{_local(root.tag)}>")
    return root


def _parent_descriptor(descriptor: Path, parent: ET.Element) -> Path | None:
    if _child(parent, "relativePath") is None:
        relative = DEFAULT_PARENT_PATH
    else:
        # An empty <relativePath/> disables the local lookup
        relative = _text(parent, "relativePath")
        if relative is None:
            return None
    candidate = descriptor.parent / relative
    if candidate.is_dir():
        candidate = candidate / DEFAULT_DESCRIPTOR_FILE
    return candidate


def _load_parent(
    descriptor: Path, parent: ET.Element | None, seen: set[Path]
) -> Project | None:
    """Load the parent POM if it is available on disk and matches the reference."""
    if parent is None:
        return None

    parent_path = _parent_descriptor(descriptor, parent)
    if parent_path is None or not parent_path.is_file():
        logger.debug(f"Parent descriptor not found for {descriptor}: {parent_path}")
        return None

    if parent_path.resolve() in seen:
        raise DescriptorLoadError(descriptor, f"cyclic parent reference through {parent_path}")

    project = load_project(parent_path, with_parent=True, _seen=seen)
    expected = (_text(parent, "groupId"), _text(parent, "artifactId"))
    if (project.group_id, project.artifact_id) != expected:
        logger.debug(
            f"Ignoring {parent_path}: {project.coordinates} does not match "
            f"parent reference {expected[0]}:{expected[1]}"
        )
        return None

    return project


def load_project(
    descriptor: Path,
    with_parent: bool = True,
    _seen: set[Path] | None = None,
) -> Project:
    """Load a pom.xml into a Project.

    Args:
        descriptor: Path to the pom.xml file.
        with_parent: Also load the parent chain through <relativePath>.

    Returns:
        The loaded Project. A fresh instance on every call.

    Raises:
        DescriptorLoadError: If the file cannot be read or parsed, or lacks
            a groupId/artifactId, or if the parent chain loops back on
            itself.
    """
    descriptor = Path(descriptor)
    seen = _seen if _seen is not None else set()
    seen.add(descriptor.resolve())
    root = _parse(descriptor)
    parent_ref = _child(root, "parent")

    artifact_id = _text(root, "artifactId")
    group_id = _text(root, "groupId") or _text(parent_ref, "groupId")
    if artifact_id is None:
        raise DescriptorLoadError(descriptor, "missing <artifactId>")
    if group_id is None:
        raise DescriptorLoadError(descriptor, "missing <groupId> (own or inherited)")

    props = _properties(root, group_id, artifact_id)

    dependencies: list[Dependency] = []
    for dep in _children(_child(root, "dependencies"), "dependency"):
        dep_group = _text(dep, "groupId")
        dep_artifact = _text(dep, "artifactId")
        if dep_group is None or dep_artifact is None:
            raise DescriptorLoadError(descriptor, "dependency without groupId/artifactId")
        dependencies.append(
            Dependency(
                group_id=_resolve(dep_group, props),
                artifact_id=_resolve(dep_artifact, props),
                scope=_text(dep, "scope"),
            )
        )

    modules = tuple(
        module.text.strip()
        for module in _children(_child(root, "modules"), "module")
        if module.text and module.text.strip()
    )

    parent = _load_parent(descriptor, parent_ref, seen) if with_parent else None

    return Project(
        group_id=group_id,
        artifact_id=artifact_id,
        name=_resolve(_text(root, "name") or artifact_id, props),
        base_dir=descriptor.parent,
        dependencies=tuple(dependencies),
        modules=modules,
        parent=parent,
        descriptor=descriptor,
    )
