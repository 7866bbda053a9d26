from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from media_browser.core.config import settings
from media_browser.core.constants import QUALITY_OPTIONS, SORT_OPTIONS
from media_browser.core.version import __version__
from media_browser.models.views import DetailView, ListingView
from media_browser.utils.pagination import page_url

# media_browser/core/templates.py -> media_browser/core -> media_browser
templates_dir = Path(__file__).resolve().parent.parent / "templates"

jinja_env = Environment(
    loader=FileSystemLoader(str(templates_dir)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
jinja_env.globals.update(
    app_name=settings.APP_NAME,
    app_version=__version__,
    source_url=settings.SOURCE_URL,
    image_base=settings.TMDB_IMAGE_BASE_URL,
    sort_options=SORT_OPTIONS,
    quality_options=QUALITY_OPTIONS,
    page_url=page_url,
)


def render_listing(view: ListingView) -> str:
    return jinja_env.get_template("index.html").render(view=view)


def render_detail(view: DetailView) -> str:
    return jinja_env.get_template("watch.html").render(view=view)


def render_error(title: str, message: str) -> str:
    return jinja_env.get_template("error.html").render(title=title, message=message)
