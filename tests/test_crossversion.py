"""Tests for cross-version name rewriting — pure logic."""

from __future__ import annotations

from sbtidea.crossversion import (
    binary_scala_version,
    cross_name,
    equiv_module,
    exact_module,
)
from sbtidea.models.report import CrossVersion
from sbtidea.testing import module_id


class TestBinaryScalaVersion:
    def test_release_keeps_major_minor(self):
        assert binary_scala_version("2.10.4") == "2.10"
        assert binary_scala_version("2.11.0") == "2.11"

    def test_before_transition_keeps_full_version(self):
        assert binary_scala_version("2.9.2") == "2.9.2"

    def test_milestone_of_first_patch_keeps_full_version(self):
        assert binary_scala_version("2.10.0-M1") == "2.10.0-M1"

    def test_release_candidate_of_later_patch(self):
        assert binary_scala_version("2.10.1-RC1") == "2.10"

    def test_bin_compatible_snapshot(self):
        assert binary_scala_version("2.10.3-bin-SNAPSHOT") == "2.10"

    def test_numbered_release_suffix(self):
        assert binary_scala_version("2.12.0-1") == "2.12"

    def test_unparseable_version_kept(self):
        assert binary_scala_version("nightly") == "nightly"


class TestCrossName:
    def test_disabled_keeps_name(self):
        assert cross_name(module_id("org:lib:1.0"), "2.10.4") == "lib"

    def test_binary_appends_binary_version(self):
        assert cross_name(module_id("org:lib:1.0", CrossVersion.BINARY), "2.10.4") == "lib_2.10"

    def test_full_appends_full_version(self):
        assert cross_name(module_id("org:lib:1.0", CrossVersion.FULL), "2.10.4") == "lib_2.10.4"


class TestEquivModule:
    def test_suffixed_name_matches_cross_built_name(self):
        plain = module_id("org:lib_2.10:1.0")
        cross = module_id("org:lib:1.0", CrossVersion.BINARY)
        assert equiv_module(plain, cross, "2.10.4")
        assert equiv_module(cross, plain, "2.10.4")

    def test_equivalence_flips_with_toolchain_version(self):
        plain = module_id("org:lib_2.10:1.0")
        cross = module_id("org:lib:1.0", CrossVersion.BINARY)
        assert not equiv_module(plain, cross, "2.11.8")
        assert not equiv_module(cross, plain, "2.11.8")

    def test_different_binary_suffixes_differ(self):
        assert not equiv_module(
            module_id("org:lib_2.10:1.0"), module_id("org:lib_2.11:1.0"), "2.10.4"
        )

    def test_organization_must_match(self):
        assert not equiv_module(module_id("org:lib:1.0"), module_id("other:lib:1.0"), "2.10.4")

    def test_revision_is_ignored(self):
        assert equiv_module(module_id("org:lib:1.0"), module_id("org:lib:2.0"), "2.10.4")


class TestExactModule:
    def test_same_coordinates(self):
        assert exact_module(module_id("org:lib:1.0"), module_id("org:lib:1.0"))

    def test_revision_matters(self):
        assert not exact_module(module_id("org:lib:1.0"), module_id("org:lib:2.0"))

    def test_no_cross_version_rewriting(self):
        assert not exact_module(
            module_id("org:lib_2.10:1.0"), module_id("org:lib:1.0", CrossVersion.BINARY)
        )
