import pytest

from authortags.errors import MissingContext
from authortags.models import MISSING, AuthorRecord, PageContext, Post, RenderContext


def test_missing_is_a_falsy_singleton():
    assert not MISSING
    assert MISSING is type(MISSING)()
    assert MISSING not in ("", None, False)
    assert repr(MISSING) == "MISSING"


@pytest.mark.parametrize(
    "doc",
    [
        {"data": {"name": "boone", "full_name": "Boone Hamilton", "team": "18F"}},
        {"name": "boone", "full_name": "Boone Hamilton", "team": "18F"},
    ],
)
def test_author_record_from_document(doc):
    record = AuthorRecord.from_document(doc)
    assert record == AuthorRecord("boone", "Boone Hamilton", {"team": "18F"})


def test_author_record_without_name():
    assert AuthorRecord.from_document({"data": {"full_name": "X"}}).name is None


def test_post_from_jekyll_document():
    post = Post.from_document({"url": "/a/", "data": {"title": "A", "authors": ["x", "y"]}})
    assert post == Post(title="A", url="/a/", authors=("x", "y"))


def test_post_single_author_string():
    assert Post.from_document({"title": "A", "url": "/a", "authors": "boone"}).authors == ("boone",)


def test_post_without_authors():
    assert Post.from_document({"title": "A", "url": "/a"}).authors == ()


def test_render_context_from_site(site, boone_page):
    ctx = RenderContext.from_site(site, boone_page)
    assert ctx.config.url == "https://18f.gsa.gov"
    assert ctx.config.baseurl == ""
    assert [r.name for r in ctx.collection("authors")] == ["boone", "Elaine", None]
    assert ctx.collection("alumni") == ()
    assert len(ctx.posts) == 4
    assert ctx.page == PageContext("boone", "Boone", "_authors/boone.md")
    assert ctx.page_path == "_authors/boone.md"


def test_render_context_from_empty_site():
    ctx = RenderContext.from_site({"baseurl": None})
    assert ctx.config.baseurl == ""
    assert ctx.posts == ()
    assert ctx.page is None
    assert ctx.page_path is None
    with pytest.raises(MissingContext):
        ctx.require_page()
