import re

_DURATION_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)s?\s*$")


def format_duration(seconds: int) -> str:
    """Render a duration in seconds as "12 mins" or "1 hr 5 mins".

    Minutes are rounded half up, so 30 seconds already counts as a minute.
    """
    minutes = (seconds + 30) // 60
    if minutes < 60:
        return f"{minutes} mins"
    return f"{minutes // 60} hr {minutes % 60} mins"


def format_distance(meters: int) -> str:
    if meters < 1000:
        return f"{meters} m"
    return f"{meters / 1000:.1f} km"


def parse_duration_seconds(raw: str | None) -> int:
    """Convert a Routes API duration such as "754s" to whole seconds (0 if unusable)."""
    if not raw:
        return 0
    match = _DURATION_RE.match(raw)
    if not match:
        return 0
    return int(float(match.group(1)))
