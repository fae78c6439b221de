import copy

import httpx
import pytest

from tests import payloads
from xtream import Xtream

BASE_URL = "http://example.com"


def _filter_by_category(items, category_id):
    if not category_id:
        return items
    return [item for item in items if int(category_id) in item["category_ids"]]


class MockPanel:
    """A fake Xtream panel answering /player_api.php from the fixture payloads."""

    def __init__(self):
        self.requests: list[httpx.Request] = []

    @property
    def actions(self) -> list[str]:
        return [request.url.params.get("action") for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        params = request.url.params

        if params.get("username") == "error":
            return httpx.Response(404)

        action = params.get("action")
        category_id = params.get("category_id")

        if action in ("get_live_categories", "get_vod_categories", "get_series_categories"):
            body = payloads.CATEGORIES
        elif action == "get_live_streams":
            body = _filter_by_category(payloads.CHANNELS, category_id)
        elif action == "get_vod_streams":
            body = _filter_by_category(payloads.MOVIES, category_id)
        elif action == "get_series":
            body = _filter_by_category(payloads.SHOWS, category_id)
        elif action == "get_vod_info":
            body = payloads.MOVIE_NOT_FOUND if params.get("vod_id") == "1000" else payloads.MOVIE
        elif action == "get_series_info":
            body = self._show(params.get("series_id"))
        elif action == "get_short_epg":
            listings = [] if params.get("stream_id") == "1000" else payloads.SHORT_EPG["epg_listings"]
            if params.get("limit"):
                listings = listings[: int(params["limit"])]
            body = {"epg_listings": listings}
        elif action == "get_simple_data_table":
            body = payloads.FULL_EPG
        else:
            body = {"user_info": payloads.PROFILE, "server_info": payloads.SERVER_INFO}

        return httpx.Response(200, json=copy.deepcopy(body))

    @staticmethod
    def _show(series_id):
        if series_id == "1000":
            return payloads.SHOW_NOT_FOUND
        if series_id == "3000":
            return payloads.SHOW_WITHOUT_SEASONS
        if series_id == "2000":
            show = copy.deepcopy(payloads.SHOW)
            show["seasons"][0]["cover_tmdb"] = show["seasons"][0].pop("cover_big")
            return show
        return payloads.SHOW


@pytest.fixture
def panel():
    return MockPanel()


@pytest.fixture
def make_client(panel):
    """Build an Xtream client wired to the mock panel."""

    def _make(serializer=None, username="test", password="password", **kwargs):
        return Xtream(
            BASE_URL,
            username,
            password,
            serializer=serializer,
            transport=httpx.MockTransport(panel.handler),
            **kwargs,
        )

    return _make


@pytest.fixture
def show_payload():
    return copy.deepcopy(payloads.SHOW)


@pytest.fixture
def show_without_seasons_payload():
    payload = copy.deepcopy(payloads.SHOW_WITHOUT_SEASONS)
    payload["info"]["series_id"] = 3000
    return payload
