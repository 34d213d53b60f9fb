"""Library mapping — evaluate build tasks and convert them into IDEA libraries."""

from sbtidea.mapping.evaluator import Inc, TaskEvaluator, TaskKey, Value, evaluate_task
from sbtidea.mapping.libraries import (
    LibrariesExtractor,
    add_classifiers,
    convert_deps,
    extract_libraries,
    scala_instance_library,
)
from sbtidea.mapping.scope import to_scope

__all__ = [
    "Inc",
    "LibrariesExtractor",
    "TaskEvaluator",
    "TaskKey",
    "Value",
    "add_classifiers",
    "convert_deps",
    "evaluate_task",
    "extract_libraries",
    "scala_instance_library",
    "to_scope",
]
