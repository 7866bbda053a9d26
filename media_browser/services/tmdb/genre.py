from typing import Any, Iterable

from media_browser.models.media import Genre


def merge_genres(*genre_lists: Iterable[dict[str, Any] | Genre]) -> list[Genre]:
    """Merge genre lists keyed by id. The first occurrence of an id wins."""
    merged: dict[int, Genre] = {}
    for genres in genre_lists:
        for genre in genres or []:
            genre = genre if isinstance(genre, Genre) else Genre.model_validate(genre)
            merged.setdefault(genre.id, genre)
    return list(merged.values())
