"""Shared pytest fixtures for sbtidea tests."""

import json

import pytest
import structlog


@pytest.fixture(autouse=True)
def _structlog_to_stdlib():
    """Route structlog through stdlib logging so pytest captures it off stdout."""
    structlog.configure(
        processors=[structlog.stdlib.add_log_level, structlog.processors.KeyValueRenderer()],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


def _lib_module(cross_version="disabled", name="lib_2.10"):
    return {"organization": "org", "name": name, "revision": "1.0", "cross_version": cross_version}


JUNIT = {"organization": "junit", "name": "junit", "revision": "4.11"}


@pytest.fixture
def export_data(tmp_path):
    """Export document for project ``root``: one cross-built compile lib, junit for tests."""
    lib_dir = tmp_path / "lib"
    lib_dir.mkdir()
    (lib_dir / "foo.jar").write_bytes(b"")
    (lib_dir / "foo-sources.jar").write_bytes(b"")

    lib_jar = {"artifact": {"name": "lib_2.10"}, "file": "/ivy/lib_2.10-1.0.jar"}
    lib_report = {"module": _lib_module(), "artifacts": [lib_jar]}
    junit_report = {
        "module": JUNIT,
        "artifacts": [{"artifact": {"name": "junit"}, "file": "/ivy/junit-4.11.jar"}],
    }
    return {
        "project": "root",
        "scala": {
            "version": "2.10.4",
            "library_jar": "/scala/scala-library.jar",
            "compiler_jar": "/scala/scala-compiler.jar",
            "extra_jars": ["/scala/scala-library-sources.jar", "/scala/scala-library-docs.jar"],
        },
        "tasks": {
            "test:externalDependencyClasspath": [
                {"file": "/ivy/lib_2.10-1.0.jar", "module": _lib_module("binary", "lib")},
                {"file": "/ivy/junit-4.11.jar", "module": JUNIT},
            ],
            "update": {
                "configurations": [
                    {"configuration": "compile", "modules": [lib_report]},
                    {"configuration": "test", "modules": [lib_report, junit_report]},
                ]
            },
            "updateClassifiers": {
                "configurations": [
                    {
                        "configuration": "compile",
                        "modules": [
                            {
                                "module": _lib_module(),
                                "artifacts": [
                                    lib_jar,
                                    {
                                        "artifact": {"name": "lib_2.10", "classifier": "sources"},
                                        "file": "/ivy/lib_2.10-1.0-sources.jar",
                                    },
                                ],
                            }
                        ],
                    }
                ]
            },
            "compile:unmanagedClasspath": [
                {"file": str(lib_dir / "foo.jar")},
                {"file": str(lib_dir / "foo-sources.jar")},
            ],
        },
        "failed": {},
    }


@pytest.fixture
def export_file(tmp_path, export_data):
    path = tmp_path / "export.json"
    path.write_text(json.dumps(export_data))
    return path
