import asyncio

import httpx
import pytest
from tenacity import wait_none

from flower_orders.services.catalog_client import (
    CatalogClient,
    CatalogError,
    CatalogUnavailableError,
    ProductNotFoundError,
)


@pytest.fixture(autouse=True)
def no_retry_wait(monkeypatch):
    monkeypatch.setattr(CatalogClient.get_product.retry, "wait", wait_none())


@pytest.fixture
def mock_transport(monkeypatch):
    """Route every AsyncClient the catalog client opens through a handler"""
    calls = []
    real_async_client = httpx.AsyncClient

    def install(handler):
        def recording_handler(request):
            calls.append(request)
            return handler(request)

        def factory(**kwargs):
            return real_async_client(transport=httpx.MockTransport(recording_handler), **kwargs)

        monkeypatch.setattr(httpx, "AsyncClient", factory)
        return calls

    return install


def test_reads_product(mock_transport):
    calls = mock_transport(lambda request: httpx.Response(200, json={
        "id": 7, "title": "Orchid Box", "price": 1200, "durationHours": 6, "images": ["orchid.jpg"]
    }))
    product = asyncio.run(CatalogClient(base_url="http://catalog").get_product("7"))
    assert product.id == "7"
    assert product.title == "Orchid Box"
    assert product.duration_hours == 6
    assert product.images == ["orchid.jpg"]
    assert str(calls[0].url) == "http://catalog/products/7"


def test_missing_product(mock_transport):
    mock_transport(lambda request: httpx.Response(404, json={"detail": "nope"}))
    with pytest.raises(ProductNotFoundError):
        asyncio.run(CatalogClient(base_url="http://catalog").get_product("7"))


def test_malformed_product(mock_transport):
    mock_transport(lambda request: httpx.Response(200, json={"title": "No price"}))
    with pytest.raises(CatalogError):
        asyncio.run(CatalogClient(base_url="http://catalog").get_product("7"))


def test_connection_errors_are_retried_then_raised(mock_transport):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    calls = mock_transport(refuse)
    with pytest.raises(CatalogUnavailableError):
        asyncio.run(CatalogClient(base_url="http://catalog").get_product("7"))
    assert len(calls) == 3


def test_recovers_after_transient_failure(mock_transport):
    attempts = {"n": 0}

    def flaky(request):
        attempts["n"] += 1
        if attempts["n"] == 1:
            raise httpx.ReadTimeout("slow", request=request)
        return httpx.Response(200, json={"title": "Tulips", "price": 300, "durationHours": 2})

    mock_transport(flaky)
    product = asyncio.run(CatalogClient(base_url="http://catalog").get_product("tulips"))
    assert product.title == "Tulips"
    assert product.images == []


@pytest.mark.parametrize("response", [
    httpx.Response(200, text="<html>maintenance</html>"),
    httpx.Response(200, json=[{"title": "Roses", "price": 500, "durationHours": 3}]),
    httpx.Response(200, json="Roses"),
])
def test_non_object_body_is_catalog_error(mock_transport, response):
    mock_transport(lambda request: response)
    with pytest.raises(CatalogError) as excinfo:
        asyncio.run(CatalogClient(base_url="http://catalog").get_product("7"))
    assert not isinstance(excinfo.value, CatalogUnavailableError)


def test_server_errors_are_retried_then_raised(mock_transport):
    calls = mock_transport(lambda request: httpx.Response(503, text="overloaded"))
    with pytest.raises(CatalogUnavailableError):
        asyncio.run(CatalogClient(base_url="http://catalog").get_product("7"))
    assert len(calls) == 3


def test_recovers_after_server_error(mock_transport):
    responses = iter([
        httpx.Response(502),
        httpx.Response(200, json={"id": "7", "title": "Orchid Box", "price": 1200, "durationHours": 6}),
    ])
    calls = mock_transport(lambda request: next(responses))
    product = asyncio.run(CatalogClient(base_url="http://catalog").get_product("7"))
    assert product.title == "Orchid Box"
    assert len(calls) == 2


def test_client_errors_are_not_retried(mock_transport):
    calls = mock_transport(lambda request: httpx.Response(400, json={"detail": "bad id"}))
    with pytest.raises(CatalogError):
        asyncio.run(CatalogClient(base_url="http://catalog").get_product("7"))
    assert len(calls) == 1


def test_ping(mock_transport):
    calls = mock_transport(lambda request: httpx.Response(200, json={"status": "healthy"}))
    assert asyncio.run(CatalogClient(base_url="http://catalog").ping()) is True
    assert str(calls[0].url) == "http://catalog/health"


def test_ping_unreachable(mock_transport):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    calls = mock_transport(refuse)
    assert asyncio.run(CatalogClient(base_url="http://catalog").ping()) is False
    assert len(calls) == 1
