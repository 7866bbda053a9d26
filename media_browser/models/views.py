from pydantic import BaseModel, Field

from media_browser.models.media import (
    CastMember,
    ContentDetail,
    ContentKind,
    ContentSummary,
    Country,
    CrewMember,
    Genre,
    ListingQuery,
)


class Pagination(BaseModel):
    page: int = 1
    total_pages: int = 0
    total_results: int = 0

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


class ListingView(BaseModel):
    """Everything the listing page renders."""

    items: list[ContentSummary] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)
    genres: list[Genre] = Field(default_factory=list)
    countries: list[Country] = Field(default_factory=list)
    year_options: list[int] = Field(default_factory=list)
    filters: ListingQuery = Field(default_factory=ListingQuery)
    # Raw inbound query pairs, used to build pager links
    params: list[tuple[str, str]] = Field(default_factory=list)
    notices: list[str] = Field(default_factory=list)

    @property
    def heading(self) -> str:
        if self.filters.query:
            return f'Search Results: "{self.filters.query}"'
        if self.filters.with_people and self.filters.person_name:
            return f"Titles with {self.filters.person_name}"
        if self.filters.kind is ContentKind.SHOWS:
            return "Popular TV Shows"
        return "Popular Movies"


class DetailView(BaseModel):
    """Everything the watch page renders."""

    content_id: int
    kind: ContentKind = ContentKind.MOVIES
    content: ContentDetail | None = None
    cast: list[CastMember] = Field(default_factory=list)
    director: CrewMember | None = None
    stream_url: str | None = None
    season: int = 1
    episode: int = 1
    notices: list[str] = Field(default_factory=list)

    @property
    def selected_season(self):
        if not self.content:
            return None
        return next((s for s in self.content.seasons if s.season_number == self.season), None)
