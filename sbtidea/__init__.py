"""sbtidea: map sbt dependency reports onto IntelliJ IDEA libraries."""

__version__ = "0.1.0"

from sbtidea.mapping import (
    LibrariesExtractor,
    TaskEvaluator,
    TaskKey,
    extract_libraries,
    to_scope,
)
from sbtidea.models.domain import IdeaLibrary, ModuleLibRef, ScalaInstance, Scope
from sbtidea.models.report import ModuleId, UpdateReport

__all__ = [
    "IdeaLibrary",
    "LibrariesExtractor",
    "ModuleId",
    "ModuleLibRef",
    "ScalaInstance",
    "Scope",
    "TaskEvaluator",
    "TaskKey",
    "UpdateReport",
    "extract_libraries",
    "to_scope",
]
