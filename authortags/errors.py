"""Exceptions raised by the author tags and filters."""
from __future__ import annotations


class AuthorTagsError(Exception):
    """Base class for every error raised by this package."""


class UnresolvedAuthor(AuthorTagsError, LookupError):
    """No author record matches the slug given to ``{% author %}``."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"No teammate found by that name: {slug}")
        self.slug = slug


class MissingContext(AuthorTagsError, KeyError):
    """A field the host must always provide is absent from the render context."""

    def __init__(self, field: str) -> None:
        super().__init__(field)
        self.field = field

    def __str__(self) -> str:
        return f"Render context is missing required field: {self.field}"


class FilterArgumentError(AuthorTagsError, ValueError):
    """A filter was called with a malformed argument string."""
