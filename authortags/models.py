"""Read-only views over the data the host generator hands to each render."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from authortags.config import Settings
from authortags.errors import MissingContext


class _Missing:
    """Falsy marker returned by the filters when a lookup finds nothing."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def _document_fields(doc: Mapping[str, Any]) -> Mapping[str, Any]:
    """Front-matter fields of a collection document.

    Documents either carry their fields at top level or nest them under
    ``data`` the way Jekyll documents do.
    """
    data = doc.get("data")
    return data if isinstance(data, Mapping) else doc


@dataclass(frozen=True)
class AuthorRecord:
    """One teammate entry from the authors collection or the fallback roster."""

    name: Optional[str]
    full_name: Optional[str]
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "AuthorRecord":
        data = _document_fields(doc)
        extra = {k: v for k, v in data.items() if k not in ("name", "full_name")}
        return cls(name=data.get("name"), full_name=data.get("full_name"), extra=extra)


@dataclass(frozen=True)
class Post:
    title: Optional[str]
    url: str
    authors: tuple[str, ...] = ()

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Post":
        data = _document_fields(doc)
        authors = data.get("authors") or ()
        if isinstance(authors, str):
            authors = (authors,)
        url = doc.get("url") or data.get("url") or ""
        return cls(title=data.get("title"), url=url, authors=tuple(authors))


@dataclass(frozen=True)
class PageContext:
    name: Optional[str] = None
    first_name: Optional[str] = None
    path: Optional[str] = None

    @classmethod
    def from_mapping(cls, page: Mapping[str, Any]) -> "PageContext":
        return cls(
            name=page.get("name"),
            first_name=page.get("first_name"),
            path=page.get("path"),
        )


@dataclass(frozen=True)
class SiteConfig:
    baseurl: str = ""
    url: str = ""


@dataclass(frozen=True)
class RenderContext:
    """Everything a tag or filter may read while rendering one page.

    Built once per call from the host's ``site`` and ``page`` template
    variables. ``site`` is expected to look like::

        {
            "baseurl": "/blog", "url": "https://example.gov",
            "posts": [...],
            "collections": {"authors": [...], "pif_team": [...]},
            "data": {"authors": {"boone": {"full_name": "..."}}},
        }
    """

    config: SiteConfig = field(default_factory=SiteConfig)
    collections: Mapping[str, tuple[AuthorRecord, ...]] = field(default_factory=dict)
    data: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    posts: tuple[Post, ...] = ()
    page: Optional[PageContext] = None
    settings: Settings = field(default_factory=Settings)

    @classmethod
    def from_site(
        cls,
        site: Mapping[str, Any],
        page: Optional[Mapping[str, Any]] = None,
        settings: Optional[Settings] = None,
    ) -> "RenderContext":
        collections: dict[str, tuple[AuthorRecord, ...]] = {}
        for name, docs in (site.get("collections") or {}).items():
            collections[name] = tuple(AuthorRecord.from_document(doc) for doc in docs or ())
        return cls(
            config=SiteConfig(
                baseurl=site.get("baseurl") or "",
                url=site.get("url") or "",
            ),
            collections=collections,
            data=site.get("data") or {},
            posts=tuple(Post.from_document(doc) for doc in site.get("posts") or ()),
            page=PageContext.from_mapping(page) if page is not None else None,
            settings=settings or Settings(),
        )

    def collection(self, name: str) -> Sequence[AuthorRecord]:
        """Records of the named collection; empty when the site has none."""
        return self.collections.get(name, ())

    def require_page(self) -> PageContext:
        if self.page is None:
            raise MissingContext("page")
        if self.page.name is None:
            raise MissingContext("page.name")
        return self.page

    @property
    def page_path(self) -> Optional[str]:
        return self.page.path if self.page is not None else None
