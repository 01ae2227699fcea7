"""Unit tests for mersalg.ingestion.catalog: HTTP session is mocked."""

import random
from unittest.mock import MagicMock

import pytest
import requests

from mersalg.ingestion.catalog import (
    CatalogBlocked,
    CatalogError,
    CatalogTimeout,
    PowerCatalog,
    UserAgentProvider,
)


def _response(status=200, payload=None, json_error=None):
    r = MagicMock()
    r.status_code = status
    if json_error:
        r.json.side_effect = json_error
    else:
        r.json.return_value = payload
    if status >= 400:
        r.raise_for_status.side_effect = requests.HTTPError(f"{status}")
    return r


def _catalog(response=None, side_effect=None):
    session = MagicMock()
    if side_effect is not None:
        session.get.side_effect = side_effect
    else:
        session.get.return_value = response
    agents = UserAgentProvider(["test-agent/1.0"])
    return PowerCatalog(session=session, user_agents=agents, api_base="https://api.test/list",
                        category_id=1341, timeout=3), session


class TestUserAgentProvider:
    def test_single_agent(self):
        assert UserAgentProvider(["a"]).next() == "a"

    def test_seeded_rng_is_reproducible(self):
        agents = ["a", "b", "c", "d"]
        first = [UserAgentProvider(agents, random.Random(1)).next() for _ in range(3)]
        second = [UserAgentProvider(agents, random.Random(1)).next() for _ in range(3)]
        assert first == second

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            UserAgentProvider([])


class TestPowerCatalog:
    def test_search_params_and_headers(self):
        cat, session = _catalog(_response(payload={"products": [{"productId": 1}], "totalProductCount": 40}))
        page = cat.search("zenbook", 15)
        assert page.total_count == 40
        assert page.products == [{"productId": 1}]
        kwargs = session.get.call_args.kwargs
        assert kwargs["params"] == {"q": "zenbook", "cat": 1341, "size": 15, "from": 0}
        assert kwargs["headers"]["User-Agent"] == "test-agent/1.0"
        assert kwargs["timeout"] == 3

    def test_fetch_page(self):
        cat, session = _catalog(_response(payload={"products": []}))
        page = cat.fetch_page(30, 30)
        assert page.products == []
        assert page.total_count == 0
        assert session.get.call_args.kwargs["params"] == {"cat": 1341, "size": 30, "from": 30}

    def test_total_defaults_to_product_count(self):
        cat, _ = _catalog(_response(payload={"products": [{"productId": 1}, {"productId": 2}]}))
        assert cat.search("x", 15).total_count == 2

    def test_non_dict_products_dropped(self):
        cat, _ = _catalog(_response(payload={"products": [{"productId": 1}, "junk", None]}))
        assert len(cat.search("x", 15).products) == 1

    def test_timeout(self):
        cat, _ = _catalog(side_effect=requests.Timeout("slow"))
        with pytest.raises(CatalogTimeout):
            cat.search("x", 15)

    def test_connection_error(self):
        cat, _ = _catalog(side_effect=requests.ConnectionError("down"))
        with pytest.raises(CatalogError):
            cat.search("x", 15)

    @pytest.mark.parametrize("status", [403, 429])
    def test_blocked(self, status):
        cat, _ = _catalog(_response(status=status))
        with pytest.raises(CatalogBlocked):
            cat.search("x", 15)

    def test_server_error(self):
        cat, _ = _catalog(_response(status=500))
        with pytest.raises(CatalogError) as exc:
            cat.search("x", 15)
        assert not isinstance(exc.value, CatalogBlocked)

    def test_invalid_json(self):
        cat, _ = _catalog(_response(json_error=ValueError("bad json")))
        with pytest.raises(CatalogError):
            cat.search("x", 15)

    def test_unexpected_payload(self):
        cat, _ = _catalog(_response(payload=["not", "a", "dict"]))
        with pytest.raises(CatalogError):
            cat.search("x", 15)

    def test_error_hierarchy(self):
        assert issubclass(CatalogTimeout, CatalogError)
        assert issubclass(CatalogBlocked, CatalogError)
