import json
import re

import respx
from httpx import Response

SEARCH_URL = "https://places.googleapis.com/v1/places:searchText"
DETAILS_URL = "https://places.googleapis.com/v1/places"


def _place(place_id, name, types=None, primary=None, **extra):
    place = {"id": place_id, "displayName": {"text": name}, "types": types or [], **extra}
    if primary:
        place["primaryType"] = primary
    return place


@respx.mock
async def test_nearby_end_to_end(client):
    places = [_place("p0", "The Local", ["pub"], "pub", priceLevel="PRICE_LEVEL_INEXPENSIVE")]
    places += [_place(f"c{i}", f"Cafe {i}", ["cafe"]) for i in range(3)]
    places += [_place(f"b{i}", f"Bar {i}") for i in range(25)]
    route = respx.post(SEARCH_URL).mock(return_value=Response(200, json={"places": places}))

    resp = await client.get(
        "/api/places/nearby",
        params={"lat": "40.7", "lng": "-74.0", "radius": "2000", "keyword": "pub"},
    )

    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "OK"
    assert len(data["results"]) == 20
    assert data["results"][0]["place_id"] == "p0"
    assert data["results"][0]["price_level"] == 1
    assert data["results"][1]["place_id"] == "b0"
    assert all(not r["place_id"].startswith("c") for r in data["results"])

    body = json.loads(route.calls.last.request.content)
    assert body["textQuery"] == "pub"
    assert body["locationBias"]["circle"]["radius"] == 2000.0
    assert body["locationBias"]["circle"]["center"] == {"latitude": 40.7, "longitude": -74.0}


@respx.mock
async def test_nearby_defaults(client):
    route = respx.post(SEARCH_URL).mock(return_value=Response(200, json={}))

    resp = await client.get("/api/places/nearby", params={"lat": "1", "lng": "2", "radius": "-5"})

    assert resp.status_code == 200
    assert resp.json() == {"results": [], "status": "ZERO_RESULTS", "error": None}
    body = json.loads(route.calls.last.request.content)
    assert body["textQuery"] == "bar lounge nightclub"
    assert body["locationBias"]["circle"]["radius"] == 5000.0


async def test_nearby_invalid_coordinates(client):
    with respx.mock(assert_all_called=False) as mock:
        search = mock.post(SEARCH_URL)
        resp = await client.get("/api/places/nearby", params={"lat": "abc", "lng": "2"})
        assert not search.called

    assert resp.status_code == 400
    assert "lat" in resp.json()["detail"]


async def test_nearby_missing_coordinates(client):
    resp = await client.get("/api/places/nearby")
    assert resp.status_code == 400


@respx.mock
async def test_nearby_upstream_failure_is_502(client):
    respx.post(SEARCH_URL).mock(return_value=Response(500, text="backend error"))

    resp = await client.get("/api/places/nearby", params={"lat": "1", "lng": "2"})

    assert resp.status_code == 502
    assert "Google Places" in resp.json()["detail"]


@respx.mock
async def test_nearby_upstream_rate_limit_is_502(client):
    respx.post(SEARCH_URL).mock(return_value=Response(429, text="quota"))

    resp = await client.get("/api/places/nearby", params={"lat": "1", "lng": "2"})

    assert resp.status_code == 502
    assert resp.json()["detail"] == "Rate limit exceeded for Google Places"


@respx.mock
async def test_details_best_effort(client):
    respx.get(f"{DETAILS_URL}/a").mock(
        return_value=Response(200, json=_place("a", "Bar A", location={"latitude": 1.0, "longitude": 2.0}))
    )
    respx.get(f"{DETAILS_URL}/gone").mock(return_value=Response(404, text="not found"))
    respx.get(f"{DETAILS_URL}/b").mock(return_value=Response(200, json=_place("b", "Bar B")))

    resp = await client.get("/api/places/details", params={"ids": "a, gone ,b,"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "OK"
    assert [r["place_id"] for r in data["results"]] == ["a", "b"]
    assert data["results"][0]["geometry"] == {"location": {"lat": 1.0, "lng": 2.0}}
    assert data["results"][1]["geometry"] is None


@respx.mock
async def test_details_all_failed_still_ok(client):
    respx.get(f"{DETAILS_URL}/x").mock(return_value=Response(500, text="boom"))

    resp = await client.get("/api/places/details", params={"ids": "x"})

    assert resp.status_code == 200
    assert resp.json() == {"results": [], "status": "OK"}


async def test_details_missing_ids(client):
    resp = await client.get("/api/places/details")
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Missing ids parameter"


async def test_details_blank_ids(client):
    resp = await client.get("/api/places/details", params={"ids": " , ,"})
    assert resp.status_code == 400


@respx.mock
async def test_nearby_skips_malformed_candidate(client):
    respx.post(SEARCH_URL).mock(
        return_value=Response(
            200,
            json={
                "places": [
                    {"id": "joe", "displayName": {"text": "Joe's Bar"}},
                    {"id": "odd", "displayName": {"text": "Odd Pub"}, "types": ["bar", None]},
                    {"id": "broken", "displayName": {"text": "Broken Bar"}, "rating": {"stars": 4}},
                ]
            },
        )
    )

    resp = await client.get("/api/places/nearby", params={"lat": "1", "lng": "2"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "OK"
    assert [r["place_id"] for r in data["results"]] == ["joe", "odd"]
    assert data["results"][1]["types"] == ["bar"]


@respx.mock
async def test_details_control_character_id_is_dropped(client):
    respx.get(f"{DETAILS_URL}/good").mock(return_value=Response(200, json=_place("good", "Good Bar")))
    bad = respx.get(url__regex=re.escape(DETAILS_URL) + r"/bad.*").mock(
        return_value=Response(404, text="not found")
    )

    resp = await client.get("/api/places/details", params={"ids": "good,bad\x01id"})

    assert resp.status_code == 200
    assert [r["place_id"] for r in resp.json()["results"]] == ["good"]
    assert bad.calls.last.request.url.raw_path == b"/v1/places/bad%01id"
