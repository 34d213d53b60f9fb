"""Test doubles for sbtidea — use in unit / integration tests.

Usage::

    from sbtidea.testing import FakeTaskEvaluator, module_report

    evaluator = FakeTaskEvaluator({"update": report, "test:externalDependencyClasspath": cp})
    evaluator = FakeTaskEvaluator({...}, failed={"updateClassifiers": "boom"})
"""

from __future__ import annotations

from typing import Any

from sbtidea.mapping.evaluator import Inc, TaskKey, TaskResult, Value
from sbtidea.models.report import (
    Artifact,
    Attributed,
    ConfigurationReport,
    CrossVersion,
    ModuleId,
    ModuleReport,
    UpdateReport,
)


class FakeTaskEvaluator:
    """TaskEvaluator backed by plain dicts keyed by task label (``test:update``).

    Parameters
    ----------
    values:
        Task label -> value returned as :class:`Value`.
    failed:
        Task label -> error message returned as :class:`Inc`.

    Any other task is reported as not found.
    """

    def __init__(self, values: dict[str, Any], *, failed: dict[str, str] | None = None) -> None:
        self._values = dict(values)
        self._failed = dict(failed or {})
        self._calls: list[tuple[TaskKey, str]] = []

    @property
    def calls(self) -> list[tuple[TaskKey, str]]:
        """(key, project_ref) pairs received — useful for assertions in tests."""
        return self._calls

    def evaluate(self, key: TaskKey, project_ref: str) -> TaskResult | None:
        self._calls.append((key, project_ref))
        label = str(key)
        if label in self._failed:
            return Inc(self._failed[label])
        if label in self._values:
            return Value(self._values[label])
        return None


def module_id(coordinates: str, cross_version: CrossVersion = CrossVersion.DISABLED) -> ModuleId:
    """``"org:name:rev"`` -> ModuleId."""
    organization, name, revision = coordinates.split(":")
    return ModuleId(organization, name, revision, cross_version)


def module_report(
    coordinates: str,
    jar: str | None = None,
    *,
    classified: dict[str, str] | None = None,
) -> ModuleReport:
    """Module report with an optional main jar plus ``{classifier: file}`` artifacts."""
    module = module_id(coordinates)
    artifacts: list[tuple[Artifact, str]] = []
    if jar is not None:
        artifacts.append((Artifact(module.name), jar))
    for classifier, path in (classified or {}).items():
        artifacts.append((Artifact(module.name, classifier=classifier), path))
    return ModuleReport(module=module, artifacts=tuple(artifacts))


def update_report(**configurations: list[ModuleReport]) -> UpdateReport:
    """``update_report(compile=[...], test=[...])`` keeping keyword order."""
    return UpdateReport(
        configurations=tuple(
            ConfigurationReport(configuration=name, modules=tuple(modules))
            for name, modules in configurations.items()
        )
    )


def classpath(*modules: ModuleId) -> tuple[Attributed, ...]:
    """Managed classpath listing for ``modules``; file names are derived from ids."""
    return tuple(Attributed(file=f"/cache/{m.name}-{m.revision}.jar", module=m) for m in modules)
