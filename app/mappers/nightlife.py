from app.schemas.google_maps import RawPlace

NIGHTLIFE_TYPES = ("bar", "night_club", "pub", "wine_bar", "cocktail_bar", "lounge")
_NAME_HINTS = ("bar", "lounge", "club", "pub")


def is_nightlife_venue(place: RawPlace) -> bool:
    """Loose bar-like check used to filter text search candidates.

    A candidate passes when any of these hold:
      - its primary type contains a nightlife type
      - one of its types contains a nightlife type or "bar"
      - its display name contains "bar", "lounge", "club" or "pub"

    Google's type taxonomy is inconsistent between places, so this favors
    recall: a golf "club" or a "Barber" shop will pass too.
    """
    primary_type = place.primaryType or ""
    if any(t in primary_type for t in NIGHTLIFE_TYPES):
        return True

    for place_type in place.types or []:
        if "bar" in place_type or any(t in place_type for t in NIGHTLIFE_TYPES):
            return True

    name = (place.displayName.text if place.displayName else None) or ""
    name = name.lower()
    return any(hint in name for hint in _NAME_HINTS)
