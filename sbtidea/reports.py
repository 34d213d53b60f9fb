"""Exported task results — pydantic schemas and a file-backed TaskEvaluator.

A build can dump the values of the tasks the extractor needs into a single
JSON document; :class:`FileTaskEvaluator` then answers task evaluations from
that document, so libraries can be extracted outside a live build session.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from sbtidea.exceptions import ReportFormatError
from sbtidea.mapping.evaluator import Inc, TaskKey, TaskResult, Value
from sbtidea.models.domain import ScalaInstance
from sbtidea.models.report import (
    Artifact,
    Attributed,
    ConfigurationReport,
    CrossVersion,
    ModuleId,
    ModuleReport,
    UpdateReport,
)

logger = structlog.get_logger(__name__)


class ModuleIdSchema(BaseModel):
    organization: str
    name: str
    revision: str
    cross_version: Literal["disabled", "binary", "full"] = "disabled"

    def to_domain(self) -> ModuleId:
        return ModuleId(
            organization=self.organization,
            name=self.name,
            revision=self.revision,
            cross_version=CrossVersion(self.cross_version),
        )


class ArtifactSchema(BaseModel):
    name: str
    type: str = "jar"
    extension: str = "jar"
    classifier: str | None = None

    def to_domain(self) -> Artifact:
        return Artifact(
            name=self.name, type=self.type, extension=self.extension, classifier=self.classifier
        )


class ArtifactFileSchema(BaseModel):
    artifact: ArtifactSchema
    file: str


class ModuleReportSchema(BaseModel):
    module: ModuleIdSchema
    artifacts: list[ArtifactFileSchema] = Field(default_factory=list)

    def to_domain(self) -> ModuleReport:
        return ModuleReport(
            module=self.module.to_domain(),
            artifacts=tuple((a.artifact.to_domain(), a.file) for a in self.artifacts),
        )


class ConfigurationReportSchema(BaseModel):
    configuration: str
    modules: list[ModuleReportSchema] = Field(default_factory=list)

    def to_domain(self) -> ConfigurationReport:
        return ConfigurationReport(
            configuration=self.configuration,
            modules=tuple(m.to_domain() for m in self.modules),
        )


class UpdateReportSchema(BaseModel):
    configurations: list[ConfigurationReportSchema] = Field(default_factory=list)

    def to_domain(self) -> UpdateReport:
        return UpdateReport(configurations=tuple(c.to_domain() for c in self.configurations))


class AttributedSchema(BaseModel):
    file: str
    module: ModuleIdSchema | None = None

    def to_domain(self) -> Attributed:
        return Attributed(file=self.file, module=self.module.to_domain() if self.module else None)


class ScalaInstanceSchema(BaseModel):
    version: str
    library_jar: str
    compiler_jar: str
    extra_jars: list[str] = Field(default_factory=list)

    def to_domain(self) -> ScalaInstance:
        return ScalaInstance(
            version=self.version,
            library_jar=self.library_jar,
            compiler_jar=self.compiler_jar,
            extra_jars=tuple(self.extra_jars),
        )


class BuildExport(BaseModel):
    """Top-level export document: one project, its toolchain and task values."""

    model_config = ConfigDict(extra="ignore")

    project: str
    scala: ScalaInstanceSchema
    tasks: dict[str, Any] = Field(default_factory=dict)
    failed: dict[str, str] = Field(default_factory=dict)


_CLASSPATH_ADAPTER = TypeAdapter(list[AttributedSchema])


def _decode_update(raw: Any) -> UpdateReport:
    return UpdateReportSchema.model_validate(raw).to_domain()


def _decode_classpath(raw: Any) -> tuple[Attributed, ...]:
    return tuple(entry.to_domain() for entry in _CLASSPATH_ADAPTER.validate_python(raw))


# Task name -> decoder for its exported value
TASK_DECODERS = {
    "update": _decode_update,
    "updateClassifiers": _decode_update,
    "externalDependencyClasspath": _decode_classpath,
    "unmanagedClasspath": _decode_classpath,
}


def load_export(path: str | Path) -> BuildExport:
    """Read and validate an export file.

    Raises:
        ReportFormatError: the file is unreadable or does not match the schema.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ReportFormatError(f"Cannot read export file {path}: {e}") from e
    try:
        return BuildExport.model_validate_json(content)
    except ValidationError as e:
        raise ReportFormatError(f"Invalid export file {path}: {e}") from e


class FileTaskEvaluator:
    """TaskEvaluator answering from a :class:`BuildExport`.

    Tasks listed under ``failed`` evaluate to :class:`Inc`; tasks absent from
    both maps, or requested for another project, are not found.
    """

    def __init__(self, export: BuildExport) -> None:
        self._export = export

    @classmethod
    def from_file(cls, path: str | Path) -> FileTaskEvaluator:
        return cls(load_export(path))

    @property
    def project_ref(self) -> str:
        return self._export.project

    @property
    def scala_instance(self) -> ScalaInstance:
        return self._export.scala.to_domain()

    def evaluate(self, key: TaskKey, project_ref: str) -> TaskResult | None:
        if project_ref != self._export.project:
            return None
        label = str(key)
        if label in self._export.failed:
            return Inc(self._export.failed[label])
        if label not in self._export.tasks:
            return None

        decoder = TASK_DECODERS.get(key.name)
        raw = self._export.tasks[label]
        if decoder is None:
            logger.debug("export.undecoded_task", task=label)
            return Value(raw)
        try:
            return Value(decoder(raw))
        except ValidationError as e:
            raise ReportFormatError(f"Invalid value for task '{label}': {e}") from e
