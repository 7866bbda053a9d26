from datetime import date
from typing import Mapping

from media_browser.core.constants import DEFAULT_SORT, EARLIEST_YEAR
from media_browser.models.media import ContentKind, ListingQuery


def parse_int(value: str | None, default: int = 1, minimum: int = 1) -> int:
    """Parse a positive integer query value, falling back to `default` on anything malformed."""
    try:
        parsed = int(value) if value is not None else default
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= minimum else default


def parse_kind(value: str | None) -> ContentKind | None:
    """
    Map the `type` query value to a content kind.

    Missing -> movies, explicit empty -> unspecified (None), unknown -> movies.
    """
    if value is None:
        return ContentKind.MOVIES
    value = value.strip()
    if value == "":
        return None
    try:
        return ContentKind(value)
    except ValueError:
        return ContentKind.MOVIES


def parse_listing_query(params: Mapping[str, str]) -> ListingQuery:
    """Build a ListingQuery from raw inbound parameters. Never raises."""

    def text(name: str) -> str:
        return (params.get(name) or "").strip()

    return ListingQuery(
        kind=parse_kind(params.get("type")),
        query=text("q"),
        sort_by=text("sort") or DEFAULT_SORT,
        year=text("year") if text("year").isdigit() else "",
        genre=text("genre"),
        with_people=text("with_people"),
        person_name=text("person_name"),
        quality=text("quality"),
        country=text("country"),
        page=parse_int(params.get("page")),
    )


def year_options(current_year: int | None = None) -> list[int]:
    """Years from the current calendar year down to 1900, inclusive."""
    current_year = current_year or date.today().year
    return list(range(current_year, EARLIEST_YEAR - 1, -1))
