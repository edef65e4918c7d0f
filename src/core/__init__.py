"""Core module - types, errors, ports.

TIER 0: No internal imports, only Python stdlib.

Exports:
- Error types: PumlinkError, ConfigError, DescriptorLoadError,
  DiagramReadError, SyncValidationError
- Model: Project, Dependency, ValidationStatus
- Ports: DescriptorLoader
"""

from core.errors import (
    ConfigError,
    DescriptorLoadError,
    DiagramReadError,
    PumlinkError,
    SyncValidationError,
)
from core.jsonc import parse_jsonc, strip_comments
from core.ports import DescriptorLoader, verify_port
from core.types import (
    DEFAULT_DESCRIPTOR_FILE,
    DEFAULT_DIAGRAM_FILE,
    Dependency,
    Project,
    ValidationStatus,
)

__all__ = [
    "DEFAULT_DESCRIPTOR_FILE",
    "DEFAULT_DIAGRAM_FILE",
    "ConfigError",
    "Dependency",
    "DescriptorLoadError",
    "DescriptorLoader",
    "DiagramReadError",
    "Project",
    "PumlinkError",
    "SyncValidationError",
    "ValidationStatus",
    "parse_jsonc",
    "strip_comments",
    "verify_port",
]
