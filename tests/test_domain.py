"""Tests for configuration -> scope mapping and the IDEA project records."""

from __future__ import annotations

import pytest

from sbtidea.mapping.scope import to_scope
from sbtidea.models.domain import (
    Directories,
    IdeaLibrary,
    IdeaProjectInfo,
    ModuleLibRef,
    ScalaInstance,
    Scope,
    SubProjectInfo,
)
from sbtidea.models.report import Artifact, ArtifactRole


class TestToScope:
    @pytest.mark.parametrize(
        "configuration,scope",
        [
            ("compile", Scope.COMPILE),
            ("runtime", Scope.RUNTIME),
            ("test", Scope.TEST),
            ("provided", Scope.PROVIDED),
        ],
    )
    def test_known_configurations(self, configuration, scope):
        assert to_scope(configuration) is scope

    def test_unknown_configuration_defaults_to_compile(self):
        assert to_scope("custom") is Scope.COMPILE

    def test_case_sensitive(self):
        assert to_scope("Test") is Scope.COMPILE

    def test_config_names(self):
        assert Scope.COMPILE.config_name == ""
        assert Scope.RUNTIME.config_name == "RUNTIME"
        assert Scope.TEST.config_name == "TEST"
        assert Scope.PROVIDED.config_name == "PROVIDED"


class TestDirectories:
    def test_add_src_returns_new_instance(self):
        dirs = Directories(sources=("src/main/scala",), resources=(), out_dir="target/classes")
        more = dirs.add_src(["src/main/java"])
        assert more.sources == ("src/main/scala", "src/main/java")
        assert dirs.sources == ("src/main/scala",)
        assert more.out_dir == "target/classes"

    def test_add_res(self):
        dirs = Directories(sources=(), resources=("src/main/resources",), out_dir="out")
        assert dirs.add_res(("extra",)).resources == ("src/main/resources", "extra")


class TestProjectInfo:
    def test_sub_project_carries_scoped_libraries(self):
        dirs = Directories(sources=("src/main/scala",), resources=(), out_dir="target/classes")
        lib = IdeaLibrary("org_lib_1.0", classes=("/c/lib.jar",))
        sub = SubProjectInfo(
            base_dir="/work/core",
            name="core",
            dependency_projects=[],
            compile_dirs=dirs,
            test_dirs=dirs.add_src(["src/test/scala"]),
            libraries=[ModuleLibRef(Scope.TEST, lib)],
            scala_instance=ScalaInstance("2.10.4", "/s/lib.jar", "/s/comp.jar"),
        )
        project = IdeaProjectInfo(
            base_dir="/work", name="root", child_projects=[sub], idea_libs=[lib]
        )
        assert project.child_projects[0].libraries[0].library is lib
        assert sub.idea_group is None
        assert sub.test_dirs.sources == ("src/main/scala", "src/test/scala")

    def test_lib_refs_compare_by_scope_and_library(self):
        lib = IdeaLibrary("foo.jar", classes=("/d/foo.jar",))
        same = IdeaLibrary("foo.jar", ("/d/foo.jar",))
        assert ModuleLibRef(Scope.COMPILE, lib) == ModuleLibRef(Scope.COMPILE, same)
        assert ModuleLibRef(Scope.COMPILE, lib) != ModuleLibRef(Scope.TEST, lib)


class TestArtifactRole:
    @pytest.mark.parametrize(
        "classifier,role",
        [
            (None, ArtifactRole.BINARY),
            ("sources", ArtifactRole.SOURCES),
            ("javadoc", ArtifactRole.JAVADOC),
            ("tests", ArtifactRole.OTHER),
        ],
    )
    def test_classifier_to_role(self, classifier, role):
        assert Artifact("lib", classifier=classifier).role is role
