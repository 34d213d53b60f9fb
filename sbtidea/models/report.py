"""Data models for dependency-resolution reports and classpath entries.

These mirror what the build tool hands back from ``update``,
``updateClassifiers`` and the ``*Classpath`` tasks. They are pure data
structures, built fresh for every extraction.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CrossVersion(Enum):
    """How a module name is suffixed with the toolchain version."""

    DISABLED = "disabled"
    BINARY = "binary"  # name_2.10
    FULL = "full"  # name_2.10.4


class ArtifactRole(Enum):
    """Role of an artifact inside a module, derived from its classifier."""

    BINARY = "binary"
    SOURCES = "sources"
    JAVADOC = "javadoc"
    OTHER = "other"


@dataclass(frozen=True)
class ModuleId:
    """Resolved dependency identity (organization, name, revision)."""

    organization: str
    name: str
    revision: str
    cross_version: CrossVersion = CrossVersion.DISABLED

    def __str__(self) -> str:
        return f"{self.organization}:{self.name}:{self.revision}"


@dataclass(frozen=True)
class Artifact:
    """A single published file of a module."""

    name: str
    type: str = "jar"
    extension: str = "jar"
    classifier: str | None = None

    @property
    def role(self) -> ArtifactRole:
        if self.classifier is None:
            return ArtifactRole.BINARY
        if self.classifier == "sources":
            return ArtifactRole.SOURCES
        if self.classifier == "javadoc":
            return ArtifactRole.JAVADOC
        return ArtifactRole.OTHER


@dataclass(frozen=True)
class ModuleReport:
    """A resolved module together with the (artifact, file) pairs it produced."""

    module: ModuleId
    artifacts: tuple[tuple[Artifact, str], ...] = ()

    def files_with_classifier(self, classifier: str | None) -> list[str]:
        """Files whose artifact classifier equals ``classifier`` exactly."""
        return [path for artifact, path in self.artifacts if artifact.classifier == classifier]

    def files_with_role(self, role: ArtifactRole) -> list[str]:
        return [path for artifact, path in self.artifacts if artifact.role is role]


@dataclass(frozen=True)
class ConfigurationReport:
    """Resolution result of one configuration (compile, test, ...)."""

    configuration: str
    modules: tuple[ModuleReport, ...] = ()


@dataclass(frozen=True)
class UpdateReport:
    """Result of a dependency-resolution run, one entry per configuration."""

    configurations: tuple[ConfigurationReport, ...] = ()

    def configuration(self, name: str) -> ConfigurationReport | None:
        for report in self.configurations:
            if report.configuration == name:
                return report
        return None


@dataclass(frozen=True)
class Attributed:
    """Classpath entry: a file plus the module metadata attached to it, if any."""

    file: str
    module: ModuleId | None = None
