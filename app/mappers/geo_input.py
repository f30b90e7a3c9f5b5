import math

from app.schemas.venues import Coordinate

MAX_WAYPOINTS = 8


def parse_finite_float(raw: str | None) -> float | None:
    if raw is None:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_coordinate(raw: str | None) -> Coordinate | None:
    """Parse "lat,lng" into a Coordinate.

    Only the first two comma-separated tokens are read; anything after them
    is ignored. Returns None unless both tokens are finite numbers.
    """
    if not raw:
        return None
    tokens = raw.split(",")
    if len(tokens) < 2:
        return None
    lat = parse_finite_float(tokens[0])
    lng = parse_finite_float(tokens[1])
    if lat is None or lng is None:
        return None
    return Coordinate(latitude=lat, longitude=lng)


def parse_coordinate_list(
    raw: str | None,
    separator: str = "|",
    max_count: int = MAX_WAYPOINTS,
) -> list[Coordinate]:
    """Parse a separated list of "lat,lng" pairs, silently skipping bad segments."""
    if not raw:
        return []
    coords: list[Coordinate] = []
    for segment in raw.split(separator):
        coord = parse_coordinate(segment)
        if coord is not None:
            coords.append(coord)
    return coords[:max_count]


def parse_positive_float(raw: str | None, fallback: float) -> float:
    value = parse_finite_float(raw)
    if value is None or value <= 0:
        return fallback
    return value
