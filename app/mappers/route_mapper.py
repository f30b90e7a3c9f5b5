from app.mappers.units import format_distance, format_duration, parse_duration_seconds
from app.schemas.google_maps import RawRoute, RawRouteLeg
from app.schemas.venues import OverviewPolyline, Route, RouteLeg, TextValue


def map_leg(leg: RawRouteLeg) -> RouteLeg:
    seconds = max(parse_duration_seconds(leg.duration), 0)
    meters = max(leg.distanceMeters or 0, 0)
    return RouteLeg(
        duration=TextValue(value=seconds, text=format_duration(seconds)),
        distance=TextValue(value=meters, text=format_distance(meters)),
    )


def map_route(route: RawRoute) -> Route:
    points = route.polyline.encodedPolyline if route.polyline else None
    return Route(
        legs=[map_leg(leg) for leg in route.legs],
        overview_polyline=OverviewPolyline(points=points or ""),
    )
