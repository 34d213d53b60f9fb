"""Cross-version name rewriting and module equivalence.

Scala libraries are published with the binary toolchain version appended to
their name (``lib_2.10``). A build may declare such a dependency either with
the suffix spelled out or with cross-versioning enabled on the bare name, so
comparing modules has to rewrite both names first.
"""

from __future__ import annotations

import re

from sbtidea.models.report import CrossVersion, ModuleId

# First toolchain release line with a stable binary version.
TRANSITION_SCALA_VERSION = (2, 10)

_RELEASE_RE = re.compile(r"(\d+)\.(\d+)\.(\d+)(?:-\d+)?")
_BIN_COMPAT_RE = re.compile(r"(\d+)\.(\d+)\.(\d+)-bin(?:-.*)?")
_NON_RELEASE_RE = re.compile(r"(\d+)\.(\d+)\.(\d+)(-\w+)")


def _api_version(full: str) -> tuple[int, int] | None:
    """Return (major, minor) when ``full`` is API-compatible with its release line."""
    m = _RELEASE_RE.fullmatch(full) or _BIN_COMPAT_RE.fullmatch(full)
    if m:
        return int(m.group(1)), int(m.group(2))
    m = _NON_RELEASE_RE.fullmatch(full)
    if m and int(m.group(3)) > 0:
        return int(m.group(1)), int(m.group(2))
    return None


def binary_scala_version(full: str) -> str:
    """Binary compatibility version for a full toolchain version.

    ``2.10.4`` -> ``2.10``; ``2.9.2`` -> ``2.9.2``; ``2.10.0-M1`` -> ``2.10.0-M1``.
    """
    api = _api_version(full)
    if api is not None and api >= TRANSITION_SCALA_VERSION:
        return f"{api[0]}.{api[1]}"
    return full


def cross_name(module: ModuleId, scala_version: str) -> str:
    """Module name after applying its cross-version mode."""
    if module.cross_version is CrossVersion.BINARY:
        return f"{module.name}_{binary_scala_version(scala_version)}"
    if module.cross_version is CrossVersion.FULL:
        return f"{module.name}_{scala_version}"
    return module.name


def equiv_module(m1: ModuleId, m2: ModuleId, scala_version: str) -> bool:
    """Same organization and same cross-version-adjusted name. Revision is ignored."""
    return m1.organization == m2.organization and cross_name(m1, scala_version) == cross_name(
        m2, scala_version
    )


def exact_module(m1: ModuleId, m2: ModuleId) -> bool:
    """Same organization, name and revision, without cross-version rewriting."""
    return (m1.organization, m1.name, m1.revision) == (m2.organization, m2.name, m2.revision)
