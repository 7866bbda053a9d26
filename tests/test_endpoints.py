"""End-to-end tests for the HTTP surface, with both upstreams mocked by respx."""

from __future__ import annotations

import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from conftest import COUNTRIES, EMBED_URL, MOVIE_GENRES, TMDB_BASE, TV_GENRES, movie, page_of, show
from media_browser.core.app import app


@pytest.fixture()
def client(upstream: respx.MockRouter):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def catalog(upstream: respx.MockRouter) -> respx.MockRouter:
    """Upstream responses shared by the page tests."""
    upstream.get(f"{TMDB_BASE}/configuration/countries").respond(json=COUNTRIES)
    upstream.get(f"{TMDB_BASE}/genre/movie/list").respond(json=MOVIE_GENRES)
    upstream.get(f"{TMDB_BASE}/genre/tv/list").respond(json=TV_GENRES)
    return upstream


# ---------------------------------------------------------------------------
# /api/stream
# ---------------------------------------------------------------------------


class TestStreamEndpoint:
    def test_url(self, client: TestClient, upstream: respx.MockRouter) -> None:
        route = upstream.get(EMBED_URL).respond(text="https://example.com/embed/abc")

        response = client.get("/api/stream/1396", params={"tmdb": "1", "s": "2", "e": "3"})

        assert response.status_code == 200
        assert response.json() == {"url": "https://example.com/embed/abc"}
        params = route.calls[0].request.url.params
        assert (params["video_id"], params["tmdb"], params["season"], params["episode"]) == ("1396", "1", "2", "3")

    def test_defaults_to_zero(self, client: TestClient, upstream: respx.MockRouter) -> None:
        route = upstream.get(EMBED_URL).respond(text="https://example.com/embed/603")

        client.get("/api/stream/603")

        params = route.calls[0].request.url.params
        assert (params["tmdb"], params["season"], params["episode"]) == ("0", "0", "0")

    def test_upstream_error_text_is_200(self, client: TestClient, upstream: respx.MockRouter) -> None:
        upstream.get(EMBED_URL).respond(text="Video not found")

        response = client.get("/api/stream/1")

        assert response.status_code == 200
        assert response.json() == {"error": "Video not found"}

    def test_transport_failure_is_500(self, client: TestClient, upstream: respx.MockRouter) -> None:
        upstream.get(EMBED_URL).mock(side_effect=httpx.ConnectError("refused"))

        response = client.get("/api/stream/1")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch stream"}


# ---------------------------------------------------------------------------
# /api/seasons, /api/episodes
# ---------------------------------------------------------------------------


class TestPassthroughEndpoints:
    def test_seasons(self, client: TestClient, upstream: respx.MockRouter) -> None:
        body = show(1396, number_of_seasons=5, seasons=[{"season_number": 1, "episode_count": 7}])
        upstream.get(f"{TMDB_BASE}/tv/1396").respond(json=body)

        response = client.get("/api/seasons/1396")

        assert response.status_code == 200
        assert response.json() == body

    def test_episodes(self, client: TestClient, upstream: respx.MockRouter) -> None:
        body = {"season_number": 2, "episodes": [{"episode_number": 1, "name": "Seven Thirty-Seven"}]}
        upstream.get(f"{TMDB_BASE}/tv/1396/season/2").respond(json=body)

        response = client.get("/api/episodes/1396/2")

        assert response.status_code == 200
        assert response.json() == body

    def test_upstream_failure_is_502(self, client: TestClient, upstream: respx.MockRouter) -> None:
        upstream.get(f"{TMDB_BASE}/tv/1").respond(status_code=404, json={"status_message": "not found"})

        response = client.get("/api/seasons/1")

        assert response.status_code == 502
        assert "detail" in response.json()

    def test_undecodable_body_is_502(self, client: TestClient, upstream: respx.MockRouter) -> None:
        upstream.get(f"{TMDB_BASE}/tv/1396/season/2").respond(content=b"\xff\xfe\xfa garbage")

        response = client.get("/api/episodes/1396/2")

        assert response.status_code == 502


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


class TestListingPage:
    def test_default_is_popular_movies(self, client: TestClient, catalog: respx.MockRouter) -> None:
        discover = catalog.get(f"{TMDB_BASE}/discover/movie").respond(
            json=page_of([movie(603, "The Matrix")], page=1, total_pages=3, total_results=60)
        )
        detail = catalog.get(f"{TMDB_BASE}/movie/603").respond(json=movie(603, "The Matrix", runtime=136))

        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "Popular Movies" in response.text
        assert "The Matrix" in response.text
        assert "136m" in response.text
        assert "Page 1 of 3 (60 total)" in response.text
        assert discover.calls[0].request.url.params["sort_by"] == "popularity.desc"
        assert detail.call_count == 1

    def test_person_search(self, client: TestClient, catalog: respx.MockRouter) -> None:
        discover = catalog.get(f"{TMDB_BASE}/discover/movie").respond(json=page_of([movie(1)]))
        search = catalog.get(f"{TMDB_BASE}/search/movie").respond(json=page_of([]))

        response = client.get("/", params={"with_people": "6384", "person_name": "Keanu Reeves"})

        assert response.status_code == 200
        assert discover.calls[0].request.url.params["with_cast"] == "6384"
        assert not search.called
        assert "Titles with Keanu Reeves" in response.text

    def test_multi_search(self, client: TestClient, catalog: respx.MockRouter) -> None:
        catalog.get(f"{TMDB_BASE}/search/multi").respond(
            json=page_of(
                [
                    {**movie(603, "The Matrix"), "media_type": "movie"},
                    {"id": 6384, "name": "Keanu Reeves", "media_type": "person"},
                    {**show(1, "Matrix Show"), "media_type": "tv"},
                ],
                total_results=3,
            )
        )

        response = client.get("/?type=&q=matrix")

        assert response.status_code == 200
        assert 'href="/watch/603?type=movies"' in response.text
        assert 'href="/watch/1?type=shows"' in response.text
        assert "Keanu Reeves" not in response.text

    def test_pager_links(self, client: TestClient, catalog: respx.MockRouter) -> None:
        catalog.get(f"{TMDB_BASE}/discover/tv").respond(json=page_of([show(1)], page=3, total_pages=9))

        response = client.get("/?type=shows&genre=18&page=3")

        assert 'href="?type=shows&amp;genre=18&amp;page=2"' in response.text
        assert 'href="?type=shows&amp;genre=18&amp;page=4"' in response.text

    def test_malformed_page_and_type(self, client: TestClient, catalog: respx.MockRouter) -> None:
        discover = catalog.get(f"{TMDB_BASE}/discover/movie").respond(json=page_of([]))

        response = client.get("/?type=cartoons&page=abc")

        assert response.status_code == 200
        assert discover.calls[0].request.url.params["page"] == "1"

    def test_upstream_down_still_renders_shell(self, client: TestClient, upstream: respx.MockRouter) -> None:
        upstream.get(url__startswith=TMDB_BASE).mock(side_effect=httpx.ConnectError("down"))

        response = client.get("/")

        assert response.status_code == 200
        assert "Could not load titles." in response.text
        assert "non-affiliated third parties" in response.text

    def test_undecodable_body_still_renders_shell(self, client: TestClient, upstream: respx.MockRouter) -> None:
        upstream.get(url__startswith=TMDB_BASE).respond(content=b"\xff\xfe\xfa garbage")

        response = client.get("/?type=shows")

        assert response.status_code == 200
        assert "Could not load titles." in response.text
        assert "non-affiliated third parties" in response.text


class TestWatchPage:
    def test_movie(self, client: TestClient, upstream: respx.MockRouter) -> None:
        upstream.get(f"{TMDB_BASE}/movie/603").respond(json=movie(603, "The Matrix", runtime=136, vote_average=8.2))
        upstream.get(f"{TMDB_BASE}/movie/603/credits").respond(
            json={"cast": [{"id": 6384, "name": "Keanu Reeves", "character": "Neo"}], "crew": []}
        )
        embed = upstream.get(EMBED_URL).respond(text="https://example.com/embed/603")

        response = client.get("/watch/603?type=movies")

        assert response.status_code == 200
        assert 'src="https://example.com/embed/603"' in response.text
        assert "Keanu Reeves" in response.text
        params = embed.calls[0].request.url.params
        assert (params["tmdb"], params["season"], params["episode"]) == ("1", "0", "0")

    def test_show_defaults_to_first_episode(self, client: TestClient, upstream: respx.MockRouter) -> None:
        upstream.get(f"{TMDB_BASE}/tv/1396").respond(json=show(1396, "Breaking Bad"))
        upstream.get(f"{TMDB_BASE}/tv/1396/credits").respond(json={"cast": [], "crew": []})
        embed = upstream.get(EMBED_URL).respond(text="Video not found")

        response = client.get("/watch/1396?type=shows")

        assert response.status_code == 200
        assert "Breaking Bad" in response.text
        params = embed.calls[0].request.url.params
        assert (params["season"], params["episode"]) == ("1", "1")

    def test_unknown_id_renders_shell(self, client: TestClient, upstream: respx.MockRouter) -> None:
        upstream.get(url__startswith=TMDB_BASE).respond(status_code=404, json={})
        upstream.get(EMBED_URL).respond(text="Video not found")

        response = client.get("/watch/999999")

        assert response.status_code == 200
        assert "not available right now" in response.text


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_unknown_page_renders_error_shell(client: TestClient) -> None:
    response = client.get("/no/such/page")

    assert response.status_code == 404
    assert "Not Found" in response.text
    assert "non-affiliated third parties" in response.text


def test_malformed_watch_id_renders_error_shell(client: TestClient) -> None:
    response = client.get("/watch/abc")

    assert response.status_code == 422
    assert "text/html" in response.headers["content-type"]
    assert "Bad Request" in response.text
    assert "non-affiliated third parties" in response.text


def test_malformed_api_path_stays_json(client: TestClient) -> None:
    response = client.get("/api/seasons/abc")

    assert response.status_code == 422
    assert "detail" in response.json()
