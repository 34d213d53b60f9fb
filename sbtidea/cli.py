"""CLI entry point for standalone usage: sbt-idea-libs.

Subcommands:
    sbt-idea-libs libraries export.json          # Scoped IDEA libraries of a project
    sbt-idea-libs libraries export.json --json   # Same, as JSON
    sbt-idea-libs extract export.json            # Flat library list from an update report
"""

from __future__ import annotations

import json
import sys

import click

from sbtidea.config import load_settings
from sbtidea.core.logging import setup_logging
from sbtidea.exceptions import SbtIdeaError
from sbtidea.mapping.evaluator import TaskKey, Value
from sbtidea.mapping.libraries import (
    LibrariesExtractor,
    extract_libraries,
    scala_instance_library,
)
from sbtidea.models.domain import IdeaLibrary, ModuleLibRef
from sbtidea.models.report import UpdateReport
from sbtidea.reports import FileTaskEvaluator


def _library_dict(library: IdeaLibrary) -> dict:
    return {
        "name": library.name,
        "classes": list(library.classes),
        "sources": list(library.sources),
        "javadocs": list(library.javadocs),
    }


def _lib_ref_dict(lib_ref: ModuleLibRef) -> dict:
    return {"scope": lib_ref.scope.name.lower(), **_library_dict(lib_ref.library)}


def _print_library(library: IdeaLibrary, prefix: str = "") -> None:
    click.echo(f"  {prefix}{library.name}")
    for path in library.classes:
        click.echo(f"      classes  {path}")
    for path in library.sources:
        click.echo(f"      sources  {path}")
    for path in library.javadocs:
        click.echo(f"      javadoc  {path}")


def _load_evaluator(export_file: str) -> FileTaskEvaluator:
    try:
        return FileTaskEvaluator.from_file(export_file)
    except SbtIdeaError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """sbt-idea-libs: map sbt dependency reports onto IDEA libraries."""
    setup_logging("DEBUG" if verbose else None)


@main.command("libraries")
@click.argument("export_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--no-classifiers",
    is_flag=True,
    help="Skip sources/javadocs from updateClassifiers (also: SBTIDEA_WITH_CLASSIFIERS=false)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def libraries(export_file: str, no_classifiers: bool, as_json: bool) -> None:
    """List the scoped libraries of the exported project."""
    classifiers = None if no_classifiers else load_settings().classifiers

    evaluator = _load_evaluator(export_file)
    scala = evaluator.scala_instance
    extractor = LibrariesExtractor(evaluator, evaluator.project_ref, scala, classifiers)
    try:
        lib_refs = extractor.all_libraries()
    except SbtIdeaError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        payload = {
            "project": evaluator.project_ref,
            "scala": _library_dict(scala_instance_library(scala)),
            "libraries": [_lib_ref_dict(r) for r in lib_refs],
        }
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(f"Project {evaluator.project_ref} (scala {scala.version})")
    click.echo(f"Found {len(lib_refs)} libraries\n")
    for lib_ref in lib_refs:
        _print_library(lib_ref.library, prefix=f"[{lib_ref.scope.name.lower()}] ")


@main.command("extract")
@click.argument("export_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--task", default="update", help="Update-report task to read")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def extract(export_file: str, task: str, as_json: bool) -> None:
    """List every module of an update report with its sources and javadocs."""
    evaluator = _load_evaluator(export_file)
    try:
        result = evaluator.evaluate(TaskKey.parse(task), evaluator.project_ref)
    except SbtIdeaError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not isinstance(result, Value) or not isinstance(result.value, UpdateReport):
        click.echo(f"Error: task '{task}' has no update report in {export_file}", err=True)
        sys.exit(1)

    libs = extract_libraries(result.value)
    if as_json:
        click.echo(json.dumps([_library_dict(lib) for lib in libs], indent=2))
        return
    click.echo(f"Found {len(libs)} libraries\n")
    for lib in libs:
        _print_library(lib)


if __name__ == "__main__":
    main()
