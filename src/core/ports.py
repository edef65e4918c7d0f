"""Port interfaces.

TIER 0: No internal imports, only Python stdlib.

Ports define contracts that adapters must implement, so the arch layer
depends on the shape of a descriptor loader rather than on a concrete
build-file format.

Usage:
    # In arch - accept any loader
    def expand(project: Project, loader: DescriptorLoader = load_project): ...

    # In tests - inject a fake
    def fake_loader(descriptor: Path, with_parent: bool = True) -> Project: ...
"""

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from core.types import Project


@runtime_checkable
class DescriptorLoader(Protocol):
    """Port for module descriptor access.

    Implemented by: lib.pom.load_project
    """

    def __call__(self, descriptor: Path, with_parent: bool = True) -> Project:
        """Load the descriptor at `descriptor` into a Project."""
        ...


def verify_port(implementation: Any, port: type) -> bool:
    """Verify that an implementation satisfies a port.

    Args:
        implementation: Object to verify.
        port: Protocol class to check against.

    Returns:
        True if implementation satisfies the port.

    Example:
        from lib.pom import load_project
        from core.ports import DescriptorLoader, verify_port

        assert verify_port(load_project, DescriptorLoader)
    """
    return isinstance(implementation, port)
