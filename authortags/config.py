"""Plugin settings, read from the ``author_tags`` section of the site config."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from authortags.logger import get_logger

log = get_logger(__name__)

SETTINGS_SECTION = "author_tags"

# Federalist preview builds serve the site under this path prefix; links there
# have to point at the canonical url instead.
LEGACY_BASEURL_MARKER = "site/18F/18f.gsa.gov"


@dataclass(frozen=True)
class Settings:
    """Knobs for the author tags and filters."""

    authors_collection: str = "authors"
    fallback_collection: str = "pif_team"
    author_dataset: str = "authors"
    legacy_baseurl_marker: str = LEGACY_BASEURL_MARKER
    default_heading: str = "h2"
    log_level: str = "INFO"
    log_file: Optional[Path] = None


def load_settings(
    site_config: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Build Settings from defaults, the site config section, then the environment."""
    settings = Settings()
    environ = os.environ if environ is None else environ

    section = (site_config or {}).get(SETTINGS_SECTION)
    if section is not None:
        if not isinstance(section, Mapping):
            log.warning(
                "Ignoring non-mapping settings section",
                section=SETTINGS_SECTION,
                type=type(section).__name__,
            )
        else:
            known = {f.name for f in fields(Settings)}
            overrides: dict[str, Any] = {}
            for key, value in section.items():
                if key not in known:
                    log.warning("Ignoring unknown setting", section=SETTINGS_SECTION, key=key)
                    continue
                overrides[key] = value
            if overrides.get("log_file") is not None:
                overrides["log_file"] = Path(overrides["log_file"])
            settings = replace(settings, **overrides)

    log_level = environ.get("LOG_LEVEL")
    if log_level:
        settings = replace(settings, log_level=log_level)

    log.debug("Settings loaded", settings=settings)
    return settings
