"""The ``lookup`` and ``team_link`` filters.

Both are forgiving: a miss is logged and the filter returns ``MISSING`` so
the rest of the page still renders.
"""
from __future__ import annotations

from typing import Any, Mapping

from authortags.authors import AuthorData, find_author
from authortags.config import Settings
from authortags.errors import FilterArgumentError
from authortags.logger import get_logger
from authortags.models import MISSING, RenderContext, SiteConfig

log = get_logger(__name__)


def site_url(config: SiteConfig, settings: Settings) -> str:
    """Base for profile links.

    Works locally, on Federalist previews and in production: previews live
    under a path containing the legacy marker, so they link to ``url``.
    """
    if settings.legacy_baseurl_marker in config.baseurl:
        return config.url
    return config.baseurl


def lookup(ctx: RenderContext, slug: str, args: str) -> Any:
    """Value of ``key`` for *slug* in a data file, given ``"dataset, key"``.

    ``{{ author | lookup("authors, full_name") }}`` reads
    ``site.data.authors[author].full_name``. Returns None when the entry
    exists without that key and MISSING when there is no entry at all.
    """
    parts = args.split(",")
    if len(parts) < 2:
        raise FilterArgumentError(f"lookup expects 'dataset, key', got {args!r}")
    dataset_name = parts[0].strip()
    key = parts[1].strip()

    dataset = ctx.data.get(dataset_name)
    if not isinstance(dataset, Mapping):
        log.warning(
            "No such dataset",
            filter="lookup",
            dataset=dataset_name,
            slug=slug,
            page=ctx.page_path,
        )
        return MISSING

    record = dataset.get(slug)
    if record is None or record is False:
        log.warning(
            "No such author",
            filter="lookup",
            dataset=dataset_name,
            slug=slug,
            page=ctx.page_path,
        )
        return MISSING
    if not isinstance(record, Mapping):
        return None
    return record.get(key)


def team_link(ctx: RenderContext, slug: str) -> Any:
    """Link to the author's profile page, matching *slug* case-insensitively.

    Falls back to the bare full name from the authors data file for people
    without a profile page.
    """
    settings = ctx.settings
    if slug:
        author = find_author(
            slug, ctx.collection(settings.authors_collection), ignore_case=True
        )
        if author is not None:
            name = author.name.lower()
            url = f"{site_url(ctx.config, settings)}/author/{name}"
            return f"<a class='post-author' itemprop='name' href='{url}'>{author.full_name or ''}</a>"

        full_name = AuthorData(ctx.data.get(settings.author_dataset)).fetch(slug, "full_name")
        if full_name:
            return full_name

    log.warning("No such author", filter="team_link", slug=slug, page=ctx.page_path)
    return MISSING
