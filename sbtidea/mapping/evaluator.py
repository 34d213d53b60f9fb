"""Task evaluation against the host build tool.

The build graph is owned by the host; this module only describes how a task
is addressed and what comes back. Anything able to run a named task for a
project (a live build session, a file of exported results, a test double)
can act as a :class:`TaskEvaluator`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Union, runtime_checkable

import structlog

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class TaskKey:
    """A task name, optionally scoped to a configuration (``test:update``)."""

    name: str
    config: str | None = None

    def __str__(self) -> str:
        return f"{self.config}:{self.name}" if self.config else self.name

    @classmethod
    def parse(cls, label: str) -> TaskKey:
        config, sep, name = label.partition(":")
        if not sep:
            return cls(name=label)
        return cls(name=name, config=config)


@dataclass(frozen=True)
class Value:
    """Successful task result."""

    value: Any


@dataclass(frozen=True)
class Inc:
    """Incomplete task result: the task or one of its inputs failed."""

    error: str


TaskResult = Union[Value, Inc]


@runtime_checkable
class TaskEvaluator(Protocol):
    """Interface every build-graph handle must satisfy.

    Returns None when the task is not defined for the project.
    """

    def evaluate(self, key: TaskKey, project_ref: str) -> TaskResult | None: ...


EXTERNAL_DEPENDENCY_CLASSPATH_TEST = TaskKey("externalDependencyClasspath", "test")
UPDATE = TaskKey("update")
UPDATE_CLASSIFIERS = TaskKey("updateClassifiers")


def unmanaged_classpath(config: str) -> TaskKey:
    return TaskKey("unmanagedClasspath", config)


def evaluate_task(evaluator: TaskEvaluator, key: TaskKey, project_ref: str) -> Any | None:
    """Run ``key`` for ``project_ref`` and return its value, or None on failure.

    Callers decide whether a None result is fatal.
    """
    result = evaluator.evaluate(key, project_ref)
    if result is None:
        logger.warning("task.not_found", task=str(key), project=project_ref)
        return None
    if isinstance(result, Inc):
        logger.warning("task.failed", task=str(key), project=project_ref, error=result.error)
        return None
    logger.debug("task.evaluated", task=str(key), project=project_ref)
    return result.value
