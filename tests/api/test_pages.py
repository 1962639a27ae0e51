from __future__ import annotations

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from freebies.api.routes import pages
from freebies.catalog import source
from freebies.catalog.errors import CatalogFetchError
from freebies.main import app
from freebies.summary.errors import SummaryGenerationError

CARD_MARKER = 'data-testid="offer-card"'


def _split_sections(html: str) -> tuple[str, str]:
    current, _, upcoming = html.partition('data-section="upcoming"')
    return current, upcoming


async def _failing_catalog():
    raise CatalogFetchError("catalog down")


async def _fixed_summary(description: str) -> str:
    return "A charming point-and-click adventure."


async def _failing_summary(description: str) -> str:
    raise SummaryGenerationError("no key")


def test_index_renders_both_sections() -> None:
    client = TestClient(app)

    response = client.get("/")

    assert response.status_code == 200
    current, upcoming = _split_sections(response.text)
    assert "Currently Free" in current
    assert current.count(CARD_MARKER) == 2
    assert "CHUCHEL" in current
    assert "Albion Online Free Welcome Gift" in current
    assert "Coming Soon" in upcoming
    assert upcoming.count(CARD_MARKER) == 1
    assert "Super Space Club" in upcoming
    assert 'href="/game/chuchel-203808"' in current


@pytest.mark.parametrize("term", ["CHUCHEL", "chuchel", "  ChUcHeL  "])
def test_index_search_is_case_insensitive(term: str) -> None:
    client = TestClient(app)

    response = client.get("/", params={"q": term})

    assert response.status_code == 200
    assert response.text.count(CARD_MARKER) == 1
    assert "CHUCHEL" in response.text
    assert "Super Space Club" not in response.text
    assert 'data-testid="no-results"' not in response.text


def test_index_search_without_matches_shows_no_results() -> None:
    client = TestClient(app)

    response = client.get("/", params={"q": "definitely-not-a-game"})

    assert response.status_code == 200
    assert response.text.count(CARD_MARKER) == 0
    assert "No games found matching" in response.text
    assert "definitely-not-a-game" in response.text
    assert "No games to display currently." in response.text


def test_index_shows_error_banner_when_catalog_fails(monkeypatch) -> None:
    monkeypatch.setattr(pages, "fetch_catalog", _failing_catalog)
    client = TestClient(app)

    response = client.get("/")

    assert response.status_code == 200
    assert 'data-testid="catalog-error"' in response.text
    assert "Failed to load game data. Please try again later." in response.text
    assert response.text.count(CARD_MARKER) == 0
    assert 'data-testid="no-results"' not in response.text


def test_offers_grid_returns_partial_for_htmx() -> None:
    client = TestClient(app)

    response = client.get("/offers/grid", params={"q": "space"}, headers={"HX-Request": "true"})

    assert response.status_code == 200
    assert "<html" not in response.text
    assert response.text.count(CARD_MARKER) == 1
    assert "Super Space Club" in response.text


def test_offers_grid_returns_full_page_without_htmx() -> None:
    client = TestClient(app)

    response = client.get("/offers/grid", params={"q": "space"})

    assert response.status_code == 200
    assert "<html" in response.text
    assert response.text.count(CARD_MARKER) == 1


def test_game_detail_renders_offer_and_summary(monkeypatch) -> None:
    monkeypatch.setattr(pages, "generate_summary", _fixed_summary)
    client = TestClient(app)

    response = client.get("/game/chuchel-203808")

    assert response.status_code == 200
    assert 'data-testid="offer-title"' in response.text
    assert "CHUCHEL" in response.text
    assert "https://store.epicgames.com/en-US/p/chuchel-203808" in response.text
    assert "View on Epic Store" in response.text
    assert 'data-testid="offer-description"' in response.text
    assert "A charming point-and-click adventure." in response.text
    assert 'data-testid="summary-error"' not in response.text
    assert "Base Game" in response.text
    assert 'data-testid="gallery-image"' not in response.text


def test_game_detail_survives_summary_failure(monkeypatch) -> None:
    monkeypatch.setattr(pages, "generate_summary", _failing_summary)
    client = TestClient(app)

    response = client.get("/game/chuchel-203808")

    assert response.status_code == 200
    html = response.text
    assert 'data-testid="offer-title">CHUCHEL</h1>' in html
    assert 'data-testid="offer-description">CHUCHEL is a comedy adventure game' in html
    assert 'href="https://store.epicgames.com/en-US/p/chuchel-203808"' in html
    assert 'data-testid="store-link"' in html
    assert 'data-testid="summary-error"' in html
    assert 'data-testid="ai-summary"' not in html
    assert "AI Summary Error" in html
    assert "Could not generate AI summary at this time." in html


def test_game_detail_resolves_catalog_slug_and_gallery(monkeypatch) -> None:
    monkeypatch.setattr(pages, "generate_summary", _fixed_summary)
    client = TestClient(app)

    response = client.get("/game/albion-online-7eb24d")

    assert response.status_code == 200
    assert "Albion Online Free Welcome Gift" in response.text
    assert "Add-On" in response.text
    assert response.text.count('data-testid="gallery-image"') == 1


def test_game_detail_unknown_slug_is_not_found(monkeypatch) -> None:
    monkeypatch.setattr(pages, "generate_summary", _fixed_summary)
    client = TestClient(app)

    response = client.get("/game/no-such-game")

    assert response.status_code == 404
    assert "404" in response.text


def test_game_detail_catalog_failure_is_not_found(monkeypatch) -> None:
    monkeypatch.setattr(pages, "fetch_catalog", _failing_catalog)
    client = TestClient(app)

    response = client.get("/game/chuchel-203808")

    assert response.status_code == 404


class _RemoteResponse:
    def __init__(self, payload: object) -> None:
        self._payload = payload

    def raise_for_status(self) -> None:
        return None

    def json(self) -> object:
        return self._payload


class _RemoteClient:
    def __init__(self, payload: object) -> None:
        self._payload = payload

    async def __aenter__(self) -> "_RemoteClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        return None

    async def get(self, url: str) -> _RemoteResponse:
        return _RemoteResponse(self._payload)


def _serve_remote_payload(monkeypatch, payload: object) -> None:
    monkeypatch.setattr(
        source,
        "get_settings",
        lambda: SimpleNamespace(
            catalog_source="remote",
            catalog_url="https://catalog.example.local/feed",
            catalog_timeout_seconds=5.0,
        ),
    )
    monkeypatch.setattr(source.httpx, "AsyncClient", lambda timeout: _RemoteClient(payload))


@pytest.mark.parametrize("payload", [{"currentGames": True}, {"currentGames": [], "nextGames": 5}])
def test_index_shows_error_banner_for_malformed_remote_collections(monkeypatch, payload: dict) -> None:
    _serve_remote_payload(monkeypatch, payload)
    client = TestClient(app)

    response = client.get("/")

    assert response.status_code == 200
    assert 'data-testid="catalog-error"' in response.text
    assert response.text.count(CARD_MARKER) == 0


def test_index_keeps_valid_remote_offers_next_to_null_promotion_arrays(monkeypatch) -> None:
    element = {
        "id": "epic-1",
        "title": "Null Promotions Game",
        "offerType": "BASE_GAME",
        "price": {"totalPrice": {"discountPrice": 0, "originalPrice": 1999}},
        "promotions": {
            "promotionalOffers": [
                {"promotionalOffers": [{"startDate": "2025-04-24T15:00:00.000Z", "endDate": "2025-05-01T15:00:00.000Z"}]}
            ],
            "upcomingPromotionalOffers": None,
        },
    }
    broken = {"id": "epic-2", "promotions": None}
    _serve_remote_payload(monkeypatch, {"data": {"Catalog": {"searchStore": {"elements": [element, broken]}}}})
    client = TestClient(app)

    response = client.get("/")

    assert response.status_code == 200
    assert 'data-testid="catalog-error"' not in response.text
    assert response.text.count(CARD_MARKER) == 1
    assert "Null Promotions Game" in response.text
