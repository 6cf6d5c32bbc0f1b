import pytest
from structlog.testing import capture_logs

from authortags.authors import AuthorData, find_author, resolve
from authortags.models import AuthorRecord

AUTHORS = (
    AuthorRecord(name="boone", full_name="Boone Hamilton"),
    AuthorRecord(name=None, full_name="Nameless"),
    AuthorRecord(name="Elaine", full_name="Elaine Kamlley"),
)
ROSTER = (
    AuthorRecord(name="ari", full_name="Ari Fellow"),
    AuthorRecord(name="boone", full_name="Boone From The Roster"),
)


def test_find_author_exact_match():
    assert find_author("boone", AUTHORS).full_name == "Boone Hamilton"


def test_find_author_exact_is_case_sensitive():
    assert find_author("elaine", AUTHORS) is None
    assert find_author("BOONE", AUTHORS) is None


@pytest.mark.parametrize("slug", ["elaine", "ELAINE", "Elaine"])
def test_find_author_ignore_case(slug):
    assert find_author(slug, AUTHORS, ignore_case=True).full_name == "Elaine Kamlley"


def test_find_author_reports_nameless_records_when_ignoring_case():
    with capture_logs() as logs:
        assert find_author("nobody", AUTHORS, ignore_case=True) is None
    assert [entry["event"] for entry in logs] == ["Author record has no name"]


def test_find_author_returns_first_in_scan_order():
    records = (
        AuthorRecord(name="boone", full_name="First"),
        AuthorRecord(name="boone", full_name="Second"),
    )
    assert find_author("boone", records).full_name == "First"


def test_resolve_prefers_earlier_sources():
    assert resolve("boone", [AUTHORS, ROSTER]).full_name == "Boone Hamilton"


def test_resolve_falls_back_to_later_sources():
    assert resolve("ari", [AUTHORS, ROSTER]).full_name == "Ari Fellow"


def test_resolve_not_found():
    assert resolve("nobody", [AUTHORS, ROSTER]) is None
    assert resolve("boone", []) is None
    assert resolve("boone", [(), ()]) is None


def test_author_data_fetch():
    data = AuthorData({"boone": {"full_name": "Boone H"}, "odd": "not a record"})
    assert data.fetch("boone", "full_name") == "Boone H"
    assert data.fetch("BOONE", "full_name") == "Boone H"
    assert data.fetch("boone", "twitter") is None
    assert data.fetch("odd", "full_name") is None
    assert data.fetch("nobody", "full_name") is None


def test_author_data_without_dataset():
    assert AuthorData(None).fetch("boone", "full_name") is None
