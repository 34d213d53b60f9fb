"""Library extraction — turn resolution reports into scoped IDEA libraries.

Managed libraries come from ``update`` (locations of resolved artifacts),
filtered by ``test:externalDependencyClasspath`` (what is actually on the
classpath) and optionally enriched with sources/javadocs from
``updateClassifiers``. Unmanaged libraries come from ``unmanagedClasspath``
in compile and test, with sources/javadocs found by Maven naming
convention next to each jar.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

import structlog

from sbtidea.crossversion import equiv_module, exact_module
from sbtidea.exceptions import DependencyClasspathError
from sbtidea.mapping.evaluator import (
    EXTERNAL_DEPENDENCY_CLASSPATH_TEST,
    UPDATE,
    UPDATE_CLASSIFIERS,
    TaskEvaluator,
    TaskKey,
    evaluate_task,
    unmanaged_classpath,
)
from sbtidea.mapping.scope import to_scope
from sbtidea.models.domain import IdeaLibrary, ModuleLibRef, ScalaInstance
from sbtidea.models.report import (
    ArtifactRole,
    Attributed,
    ModuleId,
    ModuleReport,
    UpdateReport,
)

logger = structlog.get_logger(__name__)

# Priority order: a module accepted in an earlier configuration is not
# repeated in a later one.
CONFIGURATION_ORDER = ("compile", "runtime", "test", "provided")

# (sources classifiers, javadoc classifiers)
Classifiers = tuple[Sequence[str], Sequence[str]]

# Pairs kept while normalizing so classifier lookup can use the raw module id.
LibRefWithModule = tuple[ModuleLibRef, ModuleId]


def _unique(paths: Iterable[str]) -> tuple[str, ...]:
    """Order-preserving de-duplication."""
    return tuple(dict.fromkeys(paths))


def _library_name(module: ModuleId) -> str:
    return f"{module.organization}_{module.name}_{module.revision}"


def scala_instance_library(instance: ScalaInstance) -> IdeaLibrary:
    """Project-level library for the Scala toolchain itself."""
    return IdeaLibrary(
        name=f"scala-{instance.version}",
        classes=(instance.library_jar, instance.compiler_jar),
        javadocs=tuple(j for j in instance.extra_jars if j.endswith("docs.jar")),
        sources=tuple(j for j in instance.extra_jars if j.endswith("-sources.jar")),
    )


def library_from_module(
    module_report: ModuleReport, classifiers: Classifiers | None = None
) -> IdeaLibrary:
    """Build an IdeaLibrary named ``org_name_revision`` from a module report.

    Classes are the artifacts without classifier. Sources and javadocs are
    only collected when ``classifiers`` is given.
    """
    module = module_report.module

    def by_classifiers(names: Sequence[str]) -> tuple[str, ...]:
        files: list[str] = []
        for name in names:
            files.extend(module_report.files_with_classifier(name))
        return tuple(files)

    sources: tuple[str, ...] = ()
    javadocs: tuple[str, ...] = ()
    if classifiers is not None:
        sources = by_classifiers(classifiers[0])
        javadocs = by_classifiers(classifiers[1])

    return IdeaLibrary(
        name=_library_name(module),
        classes=tuple(module_report.files_with_role(ArtifactRole.BINARY)),
        javadocs=javadocs,
        sources=sources,
    )


def convert_deps(
    report: UpdateReport, classpath: Sequence[Attributed], scala_version: str
) -> list[LibRefWithModule]:
    """Scope-tag the modules of ``report`` that are actually on ``classpath``.

    Configurations are visited in :data:`CONFIGURATION_ORDER`; a module
    equivalent to one already accepted is skipped, so compile wins over test.
    """
    classpath_modules = [entry.module for entry in classpath if entry.module is not None]
    accepted: list[LibRefWithModule] = []

    for configuration in CONFIGURATION_ORDER:
        config_report = report.configuration(configuration)
        if config_report is None:
            continue
        scope = to_scope(config_report.configuration)

        for module_report in config_report.modules:
            module = module_report.module
            if any(equiv_module(module, seen, scala_version) for _, seen in accepted):
                continue
            if not any(equiv_module(dep, module, scala_version) for dep in classpath_modules):
                logger.debug(
                    "libraries.not_on_classpath", module=str(module), configuration=configuration
                )
                continue
            accepted.append((ModuleLibRef(scope, library_from_module(module_report)), module))

    return accepted


def add_classifiers(
    lib_refs: Sequence[LibRefWithModule], report: UpdateReport, classifiers: Classifiers
) -> list[LibRefWithModule]:
    """Merge sources/javadocs from a classifier-augmented report into ``lib_refs``.

    Both reports come from the same resolution, so modules are matched by
    exact identity within the same scope. References with no match are
    returned unchanged.
    """
    candidates = [
        (config_report.configuration, module_report)
        for config_report in report.configurations
        for module_report in config_report.modules
    ]

    merged: list[LibRefWithModule] = []
    for lib_ref, module in lib_refs:
        found = next(
            (
                module_report
                for configuration, module_report in candidates
                if to_scope(configuration) is lib_ref.scope
                and exact_module(module_report.module, module)
            ),
            None,
        )
        if found is None:
            merged.append((lib_ref, module))
            continue

        extra = library_from_module(found, classifiers)
        existing = lib_ref.library
        library = IdeaLibrary(
            name=existing.name,
            classes=_unique(extra.classes + existing.classes),
            javadocs=_unique(extra.javadocs + existing.javadocs),
            sources=_unique(extra.sources + existing.sources),
        )
        merged.append((ModuleLibRef(lib_ref.scope, library), module))
    return merged


def extract_libraries(report: UpdateReport) -> list[IdeaLibrary]:
    """Flat conversion of every module in ``report``, with sources and javadocs."""
    return [
        IdeaLibrary(
            name=_library_name(m.module),
            classes=tuple(m.files_with_role(ArtifactRole.BINARY)),
            javadocs=tuple(m.files_with_role(ArtifactRole.JAVADOC)),
            sources=tuple(m.files_with_role(ArtifactRole.SOURCES)),
        )
        for config_report in report.configurations
        for m in config_report.modules
    ]


def _classifier_sibling(jar: Path, classifier: str) -> Path | None:
    """Look for ``<name>-<classifier>.jar`` next to ``jar``."""
    stem = jar.name[: -len(".jar")] if jar.name.endswith(".jar") else jar.name
    candidate = jar.with_name(f"{stem}-{classifier}.jar")
    return candidate if candidate.exists() else None


_SIBLING_ROLES = (ArtifactRole.SOURCES, ArtifactRole.JAVADOC)


def _is_classifier_jar(jar: Path) -> bool:
    return any(jar.name.endswith(f"-{role.value}.jar") for role in _SIBLING_ROLES)


class LibrariesExtractor:
    """Extract IDEA libraries for one project from the host build graph.

    Reads the tasks ``test:externalDependencyClasspath``, ``update``,
    ``updateClassifiers`` and ``unmanagedClasspath`` (compile and test).
    Holds no state between calls.
    """

    def __init__(
        self,
        evaluator: TaskEvaluator,
        project_ref: str,
        scala_instance: ScalaInstance,
        with_classifiers: Classifiers | None = None,
    ) -> None:
        self._evaluator = evaluator
        self._project_ref = project_ref
        self._scala_instance = scala_instance
        self._with_classifiers = with_classifiers

    def all_libraries(self) -> list[ModuleLibRef]:
        return self.managed_libraries() + self.unmanaged_libraries()

    def managed_libraries(self) -> list[ModuleLibRef]:
        """One entry per module on the test dependency classpath.

        Raises:
            DependencyClasspathError: the classpath listing could not be evaluated.
        """
        classpath = self._evaluate(EXTERNAL_DEPENDENCY_CLASSPATH_TEST)
        if classpath is None:
            logger.error(
                "libraries.classpath_failed",
                task=str(EXTERNAL_DEPENDENCY_CLASSPATH_TEST),
                project=self._project_ref,
            )
            raise DependencyClasspathError(str(EXTERNAL_DEPENDENCY_CLASSPATH_TEST))

        report = self._evaluate(UPDATE)
        if report is None:
            return []

        lib_refs = convert_deps(report, classpath, self._scala_instance.version)

        if self._with_classifiers is not None:
            classifier_report = self._evaluate(UPDATE_CLASSIFIERS)
            if classifier_report is not None:
                lib_refs = add_classifiers(lib_refs, classifier_report, self._with_classifiers)

        logger.info("libraries.managed", project=self._project_ref, count=len(lib_refs))
        return [lib_ref for lib_ref, _ in lib_refs]

    def unmanaged_libraries(self) -> list[ModuleLibRef]:
        """One entry per jar in ``unmanagedClasspath``.

        Sources and javadoc jars are attached to their binary jar rather than
        listed themselves. A jar present in both compile and test is only
        kept in compile.
        """
        compile_libs = self._unmanaged_libraries_for("compile")
        compile_set = {lib_ref.library for lib_ref in compile_libs}
        test_libs = [
            lib_ref
            for lib_ref in self._unmanaged_libraries_for("test")
            if lib_ref.library not in compile_set
        ]
        logger.info(
            "libraries.unmanaged",
            project=self._project_ref,
            compile=len(compile_libs),
            test=len(test_libs),
        )
        return compile_libs + test_libs

    def _unmanaged_libraries_for(self, configuration: str) -> list[ModuleLibRef]:
        entries = self._evaluate(unmanaged_classpath(configuration))
        if entries is None:
            return []

        scope = to_scope(configuration)
        lib_refs: list[ModuleLibRef] = []
        for entry in entries:
            jar = Path(entry.file)
            if _is_classifier_jar(jar):
                continue
            sources = _classifier_sibling(jar, ArtifactRole.SOURCES.value)
            javadoc = _classifier_sibling(jar, ArtifactRole.JAVADOC.value)
            library = IdeaLibrary(
                name=jar.name,
                classes=(str(jar),),
                javadocs=(str(javadoc),) if javadoc else (),
                sources=(str(sources),) if sources else (),
            )
            lib_refs.append(ModuleLibRef(scope, library))
        return lib_refs

    def _evaluate(self, key: TaskKey) -> Any | None:
        return evaluate_task(self._evaluator, key, self._project_ref)
