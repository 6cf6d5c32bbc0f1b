from pathlib import Path

import pytest
import yaml
from jinja2 import Environment

from authortags.extension import register
from authortags.models import RenderContext

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def site() -> dict:
    return yaml.safe_load((FIXTURES / "site.yaml").read_text(encoding="utf-8"))


@pytest.fixture
def boone_page() -> dict:
    return {"name": "boone", "first_name": "Boone", "path": "_authors/boone.md"}


@pytest.fixture
def ctx(site, boone_page) -> RenderContext:
    return RenderContext.from_site(site, boone_page)


@pytest.fixture
def env() -> Environment:
    return register(Environment(autoescape=True))
