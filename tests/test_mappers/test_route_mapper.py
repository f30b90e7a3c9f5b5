from app.mappers.route_mapper import map_leg, map_route
from app.schemas.google_maps import RawRoute, RawRouteLeg


def test_map_leg():
    leg = map_leg(RawRouteLeg(duration="754s", distanceMeters=4200))
    assert leg.duration.value == 754
    assert leg.duration.text == "13 mins"
    assert leg.distance.value == 4200
    assert leg.distance.text == "4.2 km"


def test_map_leg_missing_values():
    leg = map_leg(RawRouteLeg())
    assert leg.duration.value == 0
    assert leg.duration.text == "0 mins"
    assert leg.distance.value == 0
    assert leg.distance.text == "0 m"


def test_map_route_keeps_leg_order():
    route = map_route(RawRoute.model_validate({
        "legs": [
            {"duration": "60s", "distanceMeters": 500},
            {"duration": "3600s", "distanceMeters": 1500},
        ],
        "polyline": {"encodedPolyline": "abc123"},
    }))
    assert [leg.distance.text for leg in route.legs] == ["500 m", "1.5 km"]
    assert route.legs[1].duration.text == "1 hr 0 mins"
    assert route.overview_polyline.points == "abc123"


def test_map_route_without_polyline():
    route = map_route(RawRoute())
    assert route.legs == []
    assert route.overview_polyline.points == ""
