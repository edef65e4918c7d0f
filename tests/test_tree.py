"""Tests for arch/tree.py - module tree expansion."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from arch.tree import expand, module_descriptor
from core.errors import DescriptorLoadError
from core.types import Project
from lib.pom import load_project


def _project(artifact_id: str, base_dir: Path, modules: tuple[str, ...] = ()) -> Project:
    return Project(
        group_id="com.acme",
        artifact_id=artifact_id,
        name=artifact_id,
        base_dir=base_dir,
        modules=modules,
    )


class TestModuleDescriptor:
    """Tests for module_descriptor()."""

    def test_joins_with_one_separator_per_segment(self):
        """base/module/pom.xml, never base/modulepom.xml."""
        path = module_descriptor(Path("/build/acme"), "billing-api", "pom.xml")

        assert path == Path("/build/acme/billing-api/pom.xml")

    def test_trailing_slash_in_module_name(self):
        """A module written as 'a/' resolves like 'a'."""
        assert module_descriptor(Path("/r"), "a/", "pom.xml") == Path("/r/a/pom.xml")

    def test_nested_and_relative_modules(self):
        """Module entries may contain sub paths."""
        assert module_descriptor(Path("/r"), "libs/core", "pom.xml") == Path(
            "/r/libs/core/pom.xml"
        )
        assert module_descriptor(Path("/r/parent"), "../sibling", "pom.xml") == Path(
            "/r/parent/../sibling/pom.xml"
        )


class TestExpand:
    """Tests for expand()."""

    def test_leaf_expands_to_itself(self, tmp_path):
        """A project without modules is returned as the only leaf."""
        leaf = _project("billing-api", tmp_path)

        assert expand(leaf) == {leaf}

    def test_all_modules_missing_gives_empty_set(self, tmp_path):
        """An aggregator whose modules are missing contributes nothing."""
        aggregator = _project("acme-parent", tmp_path, modules=("a", "b"))
        loader = MagicMock()

        assert expand(aggregator, loader) == set()
        loader.assert_not_called()

    def test_collects_leaves(self, acme_tree):
        """Only leaf projects are returned, not the aggregator."""
        root = load_project(acme_tree / "pom.xml")

        leaves = expand(root)

        assert {p.artifact_id for p in leaves} == {"billing-api", "orders-service", "a"}

    def test_recurses_into_nested_aggregators(self, tmp_path, write_pom):
        """Leaves of nested aggregators are included, the aggregators are not."""
        write_pom(tmp_path, "root", modules=["platform", "app"])
        write_pom(tmp_path / "platform", "platform", modules=["core", "io"])
        write_pom(tmp_path / "platform" / "core", "core")
        write_pom(tmp_path / "platform" / "io", "io")
        write_pom(tmp_path / "app", "app")

        leaves = expand(load_project(tmp_path / "pom.xml"))

        assert {p.artifact_id for p in leaves} == {"core", "io", "app"}

    def test_skips_missing_module_silently(self, tmp_path, write_pom):
        """Existing modules are loaded, missing ones skipped."""
        write_pom(tmp_path, "root", modules=["present", "absent"])
        write_pom(tmp_path / "present", "present")

        leaves = expand(load_project(tmp_path / "pom.xml"))

        assert {p.artifact_id for p in leaves} == {"present"}

    def test_uses_injected_loader_without_parent(self, tmp_path):
        """Children are loaded through the given loader with with_parent=False."""
        (tmp_path / "a").mkdir()
        (tmp_path / "a" / "pom.xml").write_text("ignored")
        child = _project("a", tmp_path / "a")
        loader = MagicMock(return_value=child)

        leaves = expand(_project("root", tmp_path, modules=("a",)), loader)

        assert leaves == {child}
        loader.assert_called_once_with(tmp_path / "a" / "pom.xml", with_parent=False)

    def test_custom_descriptor_name(self, tmp_path, write_pom):
        """The descriptor file name is configurable."""
        write_pom(tmp_path / "a", "a")
        (tmp_path / "a" / "pom.xml").rename(tmp_path / "a" / "build.xml")

        leaves = expand(_project("root", tmp_path, modules=("a",)), descriptor_name="build.xml")

        assert {p.artifact_id for p in leaves} == {"a"}

    def test_broken_module_aborts(self, tmp_path, write_pom):
        """A module descriptor that cannot be parsed aborts the walk."""
        write_pom(tmp_path, "root", modules=["good", "bad"])
        write_pom(tmp_path / "good", "good")
        (tmp_path / "bad").mkdir()
        (tmp_path / "bad" / "pom.xml").write_text("<project>")

        with pytest.raises(DescriptorLoadError):
            expand(load_project(tmp_path / "pom.xml"))

    def test_cyclic_modules_terminate(self, tmp_path, write_pom):
        """A module list pointing back up the tree is not walked twice."""
        write_pom(tmp_path, "root", modules=["a"])
        write_pom(tmp_path / "a", "a", modules=[".."])

        assert expand(load_project(tmp_path / "pom.xml")) == set()
