"""Author lookup shared by the tags and filters.

Teammates live in up to three places: the ``authors`` collection, the
``pif_team`` roster kept for people who have not been migrated yet, and the
flat ``authors`` data file. Callers pick which of these to search and in what
order; the first match wins.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence

from authortags.logger import get_logger
from authortags.models import AuthorRecord

log = get_logger(__name__)


def find_author(
    slug: str,
    records: Iterable[AuthorRecord],
    ignore_case: bool = False,
) -> Optional[AuthorRecord]:
    """Return the first record whose ``name`` matches *slug*, in scan order.

    The ``{% author %}`` tag compares names exactly while ``team_link``
    ignores case; both behaviours are kept as they are.
    """
    wanted = slug.lower() if ignore_case else slug
    for record in records:
        if record.name is None:
            if ignore_case:
                log.debug("Author record has no name", slug=slug, record=record)
            continue
        name = record.name.lower() if ignore_case else record.name
        if name == wanted:
            return record
    return None


def resolve(slug: str, sources: Sequence[Sequence[AuthorRecord]]) -> Optional[AuthorRecord]:
    """Search *sources* in priority order and return the first exact match."""
    for records in sources:
        match = find_author(slug, records)
        if match is not None:
            return match
    return None


class AuthorData:
    """Flat ``slug -> record`` view over a data file such as ``_data/authors.yml``."""

    def __init__(self, dataset: Optional[Mapping[str, Any]]) -> None:
        self.dataset = dataset or {}

    def fetch(self, slug: str, key: str) -> Any:
        record = self.dataset.get(slug)
        if record is None:
            record = self.dataset.get(slug.lower())
        if not isinstance(record, Mapping):
            return None
        return record.get(key)
