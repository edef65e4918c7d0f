"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


POM_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
{body}
</project>
"""


def render_pom(
    artifact_id: str,
    group_id: str | None = "com.acme",
    name: str | None = None,
    dependencies: list[tuple[str, str]] | None = None,
    modules: list[str] | None = None,
    parent: tuple[str, str] | None = None,
    relative_path: str | None = None,
) -> str:
    """Render a minimal pom.xml."""
    body: list[str] = []

    if parent is not None:
        body.append("  <parent>")
        body.append(f"    <groupId>{parent[0]}</groupId>")
        body.append(f"    <artifactId>{parent[1]}</artifactId>")
        body.append("    <version>1.0</version>")
        if relative_path is not None:
            body.append(f"    <relativePath>{relative_path}</relativePath>")
        body.append("  </parent>")

    if group_id is not None:
        body.append(f"  <groupId>{group_id}</groupId>")
    body.append(f"  <artifactId>{artifact_id}</artifactId>")
    body.append("  <version>1.0</version>")
    if name is not None:
        body.append(f"  <name>{name}</name>")

    if modules:
        body.append("  <modules>")
        body.extend(f"    <module>{module}</module>" for module in modules)
        body.append("  </modules>")

    if dependencies:
        body.append("  <dependencies>")
        for dep_group, dep_artifact in dependencies:
            body.append("    <dependency>")
            body.append(f"      <groupId>{dep_group}</groupId>")
            body.append(f"      <artifactId>{dep_artifact}</artifactId>")
            body.append("    </dependency>")
        body.append("  </dependencies>")

    return POM_TEMPLATE.format(body="\n".join(body))


@pytest.fixture
def write_pom():
    """Factory writing a pom.xml into a directory and returning its path."""

    def _write(directory: Path, artifact_id: str, **kwargs) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        pom = directory / "pom.xml"
        pom.write_text(render_pom(artifact_id, **kwargs))
        return pom

    return _write


@pytest.fixture
def acme_tree(tmp_path, write_pom):
    """Create a multi-module build.

    acme-parent
    ├── billing-api
    ├── orders-service   (depends on billing-api, junit)
    └── a                (depends on billing-api)
    """
    root = tmp_path / "acme"
    write_pom(
        root,
        "acme-parent",
        name="acme-parent",
        modules=["billing-api", "orders-service", "a"],
    )
    write_pom(
        root / "billing-api",
        "billing-api",
        name="billing-api",
        parent=("com.acme", "acme-parent"),
    )
    write_pom(
        root / "orders-service",
        "orders-service",
        name="orders-service",
        parent=("com.acme", "acme-parent"),
        dependencies=[("com.acme", "billing-api"), ("junit", "junit")],
    )
    write_pom(
        root / "a",
        "a",
        name="module-a",
        parent=("com.acme", "acme-parent"),
        dependencies=[("com.acme", "billing-api")],
    )
    return root


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Isolate config lookup and the runtime log level for each test."""
    import lib.logger
    from lib.config import clear_cache

    monkeypatch.setenv("PUMLINK_ROOT", str(tmp_path))
    monkeypatch.setattr(lib.logger, "_level_override", None)
    clear_cache()
    yield
    clear_cache()
