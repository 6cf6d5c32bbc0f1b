"""Rendering for the ``{% author %}`` and ``{% authored_posts %}`` tags."""
from __future__ import annotations

from authortags.authors import resolve
from authortags.errors import UnresolvedAuthor
from authortags.models import RenderContext


def render_author(slug: str, ctx: RenderContext) -> str:
    """Inline label for *slug*, looked up in authors first, then the fallback roster.

    Raises UnresolvedAuthor when neither source knows the slug; the render
    is meant to fail so the typo gets fixed.
    """
    settings = ctx.settings
    teammate = resolve(
        slug,
        [
            ctx.collection(settings.authors_collection),
            ctx.collection(settings.fallback_collection),
        ],
    )
    if teammate is None:
        raise UnresolvedAuthor(slug)
    return f'<span class="author {teammate.name}">{teammate.full_name or ""}</span>'


def parse_heading(markup: str, default: str = "h2") -> str:
    """Heading tag from ``heading=h3`` style markup; *default* when empty."""
    markup = markup.strip()
    if not markup:
        return default
    _, sep, value = markup.partition("=")
    value = value.strip()
    if not sep or not value:
        raise ValueError(f"expected heading=<tag>, got {markup!r}")
    return value


def render_authored_posts(ctx: RenderContext, heading: str = "h2") -> str:
    """List of the current page author's posts, or ``""`` when there are none."""
    page = ctx.require_page()
    authored = [post for post in ctx.posts if page.name in post.authors]
    if not authored:
        return ""

    first_name = page.first_name or ""
    site_url = ctx.config.baseurl
    parts = [f"<{heading}>{first_name}’s blog posts:</{heading}>", "<ul>"]
    for post in authored:
        parts.append(f"<li><a href='{site_url}{post.url}'>{post.title or ''}</a></li>")
    parts.append("</ul>")
    return "".join(parts)
