"""Data models for the IDEA project description."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum


class Scope(Enum):
    """IDEA library scope. The value is the name written into module files."""

    COMPILE = ""
    RUNTIME = "RUNTIME"
    TEST = "TEST"
    PROVIDED = "PROVIDED"

    @property
    def config_name(self) -> str:
        return self.value


@dataclass(frozen=True)
class IdeaLibrary:
    """A named artifact bundle: binary jars plus optional sources and javadocs."""

    name: str
    classes: tuple[str, ...] = ()
    javadocs: tuple[str, ...] = ()
    sources: tuple[str, ...] = ()


@dataclass(frozen=True)
class ModuleLibRef:
    """An IdeaLibrary attached to a module under a given scope."""

    scope: Scope
    library: IdeaLibrary


@dataclass(frozen=True)
class ScalaInstance:
    """Toolchain used to compile a project."""

    version: str
    library_jar: str
    compiler_jar: str
    extra_jars: tuple[str, ...] = ()


@dataclass(frozen=True)
class Directories:
    """Source, resource and output locations. Paths need not exist yet."""

    sources: tuple[str, ...]
    resources: tuple[str, ...]
    out_dir: str

    def add_src(self, more_sources: tuple[str, ...] | list[str]) -> Directories:
        return replace(self, sources=self.sources + tuple(more_sources))

    def add_res(self, more_resources: tuple[str, ...] | list[str]) -> Directories:
        return replace(self, resources=self.resources + tuple(more_resources))


@dataclass
class SubProjectInfo:
    """Everything needed to write one IDEA module."""

    base_dir: str
    name: str
    dependency_projects: list[str]
    compile_dirs: Directories
    test_dirs: Directories
    libraries: list[ModuleLibRef]
    scala_instance: ScalaInstance
    idea_group: str | None = None
    web_app_path: str | None = None
    base_package: str | None = None


@dataclass
class IdeaProjectInfo:
    """Root project plus its child modules and project-level libraries."""

    base_dir: str
    name: str
    child_projects: list[SubProjectInfo] = field(default_factory=list)
    idea_libs: list[IdeaLibrary] = field(default_factory=list)


@dataclass
class IdeaUserEnvironment:
    web_facet: bool = False


@dataclass
class IdeaProjectEnvironment:
    """Project-wide IDEA settings."""

    project_jdk_name: str
    java_language_level: str
    include_sbt_project_definition_module: bool = True
    project_output_path: str | None = None
    excluded_folders: str = ""
    compile_with_idea: bool = False
    module_path: str | None = None
    use_project_fsc: bool = False
