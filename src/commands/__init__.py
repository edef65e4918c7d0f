"""Commands module - CLI entry points.

TIER 3: Entry points, may import from all layers.

Commands:
- verify.py: check project.puml diagrams against the module tree
"""
