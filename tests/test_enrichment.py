import asyncio

import httpx

from trip_router.services.enrichment.client import CityImageClient, placeholder_image_url

BASE_URL = "https://wiki.test/api/rest_v1/page/summary"


def _summary(title: str) -> dict:
    return {"title": title, "thumbnail": {"source": f"https://img.test/thumb/{title}/320px-{title}.jpg"}}


def _client(handler, concurrency: int = 3) -> CityImageClient:
    return CityImageClient(
        base_url=BASE_URL,
        timeout=1.0,
        concurrency=concurrency,
        transport=httpx.MockTransport(handler),
    )


def test_fetch_city_image_upsizes_thumbnail():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(200, json=_summary("Kyoto"))

    url = asyncio.run(_client(handler).fetch_city_image("Kyoto", "Japan"))

    assert url == "https://img.test/thumb/Kyoto/600px-Kyoto.jpg"
    assert seen == ["/api/rest_v1/page/summary/Kyoto,_Japan"]


def test_fetch_city_image_falls_back_to_original_image():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"originalimage": {"source": "https://img.test/full/Sapa.jpg"}})

    assert asyncio.run(_client(handler).fetch_city_image("Sapa")) == "https://img.test/full/Sapa.jpg"


def test_fetch_city_image_absent_on_404():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"title": "Not found."})

    assert asyncio.run(_client(handler).fetch_city_image("Atlantis")) is None


def test_results_are_cached():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return httpx.Response(200, json=_summary("Hanoi"))

    client = _client(handler)

    async def run_twice():
        first = await client.fetch_city_image("Hanoi", "Vietnam")
        second = await client.fetch_city_image("Hanoi", "Vietnam")
        return first, second

    first, second = asyncio.run(run_twice())

    assert first == second
    assert len(calls) == 1


def test_fetch_city_images_runs_in_bounded_waves():
    in_flight = 0
    peak = 0
    calls = 0

    async def handler(request: httpx.Request) -> httpx.Response:
        nonlocal in_flight, peak, calls
        calls += 1
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0.01)
        in_flight -= 1
        return httpx.Response(200, json=_summary(request.url.path.rsplit("/", 1)[-1]))

    cities = [(f"City{idx}", None) for idx in range(7)]
    images = asyncio.run(_client(handler, concurrency=3).fetch_city_images(cities))

    assert calls == 7
    assert peak <= 3
    assert set(images) == {city for city, _ in cities}


def test_failures_degrade_to_placeholder_per_city():
    def handler(request: httpx.Request) -> httpx.Response:
        if "Tokyo" in request.url.path:
            return httpx.Response(500)
        if "Osaka" in request.url.path:
            raise httpx.ConnectTimeout("timed out", request=request)
        if "Atlantis" in request.url.path:
            return httpx.Response(404)
        return httpx.Response(200, json=_summary("Kyoto"))

    images = asyncio.run(
        _client(handler).fetch_city_images([("Tokyo", "Japan"), ("Osaka", "Japan"), ("Kyoto", "Japan"), ("Atlantis", None)])
    )

    assert images["Tokyo"] == placeholder_image_url("Tokyo")
    assert images["Osaka"] == placeholder_image_url("Osaka")
    assert images["Atlantis"] == placeholder_image_url("Atlantis")
    assert images["Kyoto"] == "https://img.test/thumb/Kyoto/600px-Kyoto.jpg"


def test_placeholder_is_stable_per_city():
    assert placeholder_image_url("Ho Chi Minh City") == placeholder_image_url("Ho Chi Minh City")
    assert "ho-chi-minh-city" in placeholder_image_url("Ho Chi Minh City")
    assert asyncio.run(_client(lambda request: httpx.Response(200)).fetch_city_images([])) == {}


def test_image_cache_is_bounded():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        title = request.url.path.rsplit("/", 1)[-1]
        calls.append(title)
        return httpx.Response(200, json=_summary(title))

    client = CityImageClient(base_url=BASE_URL, transport=httpx.MockTransport(handler), cache_size=2)

    async def run():
        await client.fetch_city_image("Tokyo")
        await client.fetch_city_image("Kyoto")
        await client.fetch_city_image("Tokyo")
        await client.fetch_city_image("Osaka")
        await client.fetch_city_image("Tokyo")
        await client.fetch_city_image("Kyoto")

    asyncio.run(run())

    assert len(client._cache) == 2
    assert calls == ["Tokyo", "Kyoto", "Osaka", "Kyoto"]
