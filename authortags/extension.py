"""Jinja2 glue: the ``author`` / ``authored_posts`` tags and the author filters.

Usage::

    from jinja2 import Environment, FileSystemLoader
    from authortags.extension import setup

    env = Environment(loader=FileSystemLoader("_layouts"))
    setup(env, site_config)
    env.get_template("author.html").render(site=site, page=page)

Templates can then use::

    {% author boone %}
    {% authored_posts heading=h3 %}
    {{ author | lookup("authors, full_name") }}
    {{ author | team_link }}
"""
from __future__ import annotations

import re
from typing import Any, Mapping, Optional

from jinja2 import Environment, nodes, pass_context
from jinja2.ext import Extension
from jinja2.parser import Parser
from jinja2.runtime import Context
from markupsafe import Markup

from authortags import filters, tags
from authortags.config import Settings, load_settings
from authortags.errors import MissingContext
from authortags.logger import configure_logging, get_logger
from authortags.models import MISSING, RenderContext

log = get_logger(__name__)


def _quote(markup: str) -> str:
    """Jinja string literal holding *markup* exactly."""
    markup = markup.strip()
    if len(markup) >= 2 and markup[0] == markup[-1] and markup[0] in "\"'":
        markup = markup[1:-1]
    return '"' + markup.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _settings(environment: Environment) -> Settings:
    return getattr(environment, "author_tags_settings", None) or Settings()


def render_context(context: Context) -> RenderContext:
    """Explicit RenderContext from the ``site`` and ``page`` template variables."""
    site = context.get("site")
    if site is None:
        raise MissingContext("site")
    return RenderContext.from_site(
        site, context.get("page"), settings=_settings(context.environment)
    )


class AuthorExtension(Extension):
    tags = {"author", "authored_posts"}

    def __init__(self, environment: Environment) -> None:
        super().__init__(environment)
        environment.extend(author_tags_settings=Settings())

    def _tag_pattern(self) -> re.Pattern:
        start = re.escape(self.environment.block_start_string)
        end = re.escape(self.environment.block_end_string)
        return re.compile(
            rf"({start}[-+]?\s*)(author|authored_posts)\b(.*?)([-+]?{end})", re.DOTALL
        )

    def preprocess(self, source: str, name: Optional[str], filename: Optional[str] = None) -> str:
        # Tag arguments are Liquid-style raw text (``007``, ``boone hamilton``),
        # not Jinja expressions; hand them to parse() as one string literal.
        return self._tag_pattern().sub(
            lambda m: f"{m.group(1)}{m.group(2)} {_quote(m.group(3))} {m.group(4)}", source
        )

    def parse(self, parser: Parser) -> nodes.Node:
        token = next(parser.stream)
        lineno = token.lineno
        markup = parser.stream.expect("string").value.strip()

        if token.value == "author":
            if not markup:
                parser.fail("author tag requires an author slug", lineno)
            call = self.call_method(
                "_render_author", [nodes.ContextReference(), nodes.Const(markup)], lineno=lineno
            )
        else:
            try:
                heading = tags.parse_heading(markup, _settings(self.environment).default_heading)
            except ValueError as exc:
                parser.fail(str(exc), lineno)
            call = self.call_method(
                "_render_authored_posts",
                [nodes.ContextReference(), nodes.Const(heading)],
                lineno=lineno,
            )
        return nodes.Output([call], lineno=lineno)

    def _render_author(self, context: Context, slug: str) -> Markup:
        return Markup(tags.render_author(slug, render_context(context)))

    def _render_authored_posts(self, context: Context, heading: str) -> Markup:
        return Markup(tags.render_authored_posts(render_context(context), heading))


def _template_value(context: Context, value: Any, hint: str) -> Any:
    # Let the host's undefined type decide how a miss renders.
    if value is MISSING or value is None:
        return context.environment.undefined(hint=hint)
    return value


@pass_context
def lookup_filter(context: Context, value: str, args: str) -> Any:
    result = filters.lookup(render_context(context), value, args)
    return _template_value(context, result, f"lookup found nothing for {value!r} ({args})")


@pass_context
def team_link_filter(context: Context, value: str) -> Any:
    result = filters.team_link(render_context(context), value)
    if isinstance(result, str):
        return Markup(result)
    return _template_value(context, result, f"team_link found nothing for {value!r}")


def register(environment: Environment, settings: Optional[Settings] = None) -> Environment:
    """Install the author tags and filters on *environment*."""
    environment.add_extension(AuthorExtension)
    if settings is not None:
        environment.author_tags_settings = settings
    environment.filters["lookup"] = lookup_filter
    environment.filters["team_link"] = team_link_filter
    log.debug("Author tags registered", settings=_settings(environment))
    return environment


def setup(environment: Environment, site_config: Optional[Mapping[str, Any]] = None) -> Environment:
    """Load settings, configure logging and register everything in one go."""
    settings = load_settings(site_config)
    configure_logging(settings.log_level, settings.log_file)
    return register(environment, settings)
