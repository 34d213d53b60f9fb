"""Settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from sbtidea.mapping.libraries import Classifiers

_TRUE = {"1", "true", "yes", "on"}


def _env_list(key: str, default: str) -> tuple[str, ...]:
    raw = os.environ.get(key, default)
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _env_bool(key: str, default: bool) -> bool:
    raw = os.environ.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE


@dataclass(frozen=True)
class Settings:
    sources_classifiers: tuple[str, ...] = ("sources",)
    javadoc_classifiers: tuple[str, ...] = ("javadoc",)
    with_classifiers: bool = True

    @property
    def classifiers(self) -> Classifiers | None:
        """Classifier pair for LibrariesExtractor, or None when disabled."""
        if not self.with_classifiers:
            return None
        return (self.sources_classifiers, self.javadoc_classifiers)


def load_settings() -> Settings:
    """Build :class:`Settings` from ``SBTIDEA_*`` environment variables."""
    return Settings(
        sources_classifiers=_env_list("SBTIDEA_SOURCES_CLASSIFIERS", "sources"),
        javadoc_classifiers=_env_list("SBTIDEA_JAVADOC_CLASSIFIERS", "javadoc"),
        with_classifiers=_env_bool("SBTIDEA_WITH_CLASSIFIERS", True),
    )
