from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ContentKind(str, Enum):
    """Content kind as it appears in inbound query strings."""

    MOVIES = "movies"
    SHOWS = "shows"

    @property
    def media_type(self) -> str:
        """The metadata API's name for this kind."""
        return "movie" if self is ContentKind.MOVIES else "tv"

    @property
    def date_field(self) -> str:
        return "release_date" if self is ContentKind.MOVIES else "first_air_date"

    @classmethod
    def from_media_type(cls, media_type: str) -> "ContentKind":
        return cls.SHOWS if media_type == "tv" else cls.MOVIES


class Genre(BaseModel):
    id: int
    name: str


class Country(BaseModel):
    iso_3166_1: str
    english_name: str


class Company(BaseModel):
    id: int
    name: str
    logo_path: str | None = None


class Creator(BaseModel):
    id: int
    name: str
    profile_path: str | None = None


class CastMember(BaseModel):
    id: int
    name: str
    character: str | None = None
    profile_path: str | None = None


class CrewMember(BaseModel):
    id: int
    name: str
    job: str | None = None
    profile_path: str | None = None


class SeasonSummary(BaseModel):
    season_number: int
    name: str | None = None
    episode_count: int = 0


def _first_runtime(item: dict[str, Any]) -> int | None:
    runtime = item.get("runtime")
    if runtime:
        return runtime
    episode_run_time = item.get("episode_run_time") or []
    return episode_run_time[0] if episode_run_time else None


class ContentSummary(BaseModel):
    """A single card on the listing page."""

    id: int
    kind: ContentKind
    title: str = ""
    poster_path: str | None = None
    overview: str = ""
    release_date: str | None = None
    runtime: int | None = None
    number_of_seasons: int | None = None

    @property
    def year(self) -> str | None:
        if self.release_date and len(self.release_date) >= 4:
            return self.release_date[:4]
        return None

    @classmethod
    def from_tmdb(cls, item: dict[str, Any], kind: ContentKind) -> "ContentSummary":
        """Normalize a movie or TV result into the common display shape."""
        return cls(
            id=item["id"],
            kind=kind,
            title=item.get("title") or item.get("name") or "",
            poster_path=item.get("poster_path"),
            overview=item.get("overview") or "",
            release_date=item.get("release_date") or item.get("first_air_date") or None,
            runtime=_first_runtime(item),
            number_of_seasons=item.get("number_of_seasons"),
        )


class ContentDetail(ContentSummary):
    """Everything the watch page shows about one title."""

    backdrop_path: str | None = None
    vote_average: float = 0.0
    vote_count: int = 0
    genres: list[Genre] = Field(default_factory=list)
    production_companies: list[Company] = Field(default_factory=list)
    status: str | None = None
    tagline: str | None = None
    number_of_episodes: int | None = None
    episode_run_time: int | None = None
    created_by: list[Creator] = Field(default_factory=list)
    seasons: list[SeasonSummary] = Field(default_factory=list)

    @classmethod
    def from_tmdb(cls, item: dict[str, Any], kind: ContentKind) -> "ContentDetail":
        summary = ContentSummary.from_tmdb(item, kind)
        episode_run_time = item.get("episode_run_time") or []
        return cls(
            **summary.model_dump(),
            backdrop_path=item.get("backdrop_path"),
            vote_average=item.get("vote_average") or 0.0,
            vote_count=item.get("vote_count") or 0,
            genres=item.get("genres") or [],
            production_companies=item.get("production_companies") or [],
            status=item.get("status"),
            tagline=item.get("tagline") or None,
            number_of_episodes=item.get("number_of_episodes"),
            episode_run_time=episode_run_time[0] if episode_run_time else None,
            created_by=item.get("created_by") or [],
            # Season 0 holds specials; the picker starts at season 1
            seasons=[s for s in item.get("seasons") or [] if s.get("season_number")],
        )


class ListingQuery(BaseModel):
    """Parsed, validated listing parameters. `kind` is None when unspecified."""

    kind: ContentKind | None = ContentKind.MOVIES
    query: str = ""
    sort_by: str = "popularity.desc"
    year: str = ""
    genre: str = ""
    with_people: str = ""
    person_name: str = ""
    quality: str = ""
    country: str = ""
    page: int = Field(default=1, ge=1)


class StreamResult(BaseModel):
    """Either a playable URL or an error message, never both."""

    url: str | None = None
    error: str | None = None
    transport_failed: bool = Field(default=False, exclude=True)

    def payload(self) -> dict[str, str]:
        if self.url is not None:
            return {"url": self.url}
        return {"error": self.error or ""}
