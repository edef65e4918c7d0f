"""Architecture diagram verification.

TIER 2: May import from core, lib.
"""

from .diagram import ValidationResult, load_diagram, relation_exists, validate
from .relations import expected_relations, incoming, is_related, outgoing
from .tree import expand, module_descriptor
from .verify import format_report, iter_descriptors, verify_project, verify_tree

__all__ = [
    "ValidationResult",
    "expand",
    "expected_relations",
    "format_report",
    "incoming",
    "is_related",
    "iter_descriptors",
    "load_diagram",
    "module_descriptor",
    "outgoing",
    "relation_exists",
    "validate",
    "verify_project",
    "verify_tree",
]
