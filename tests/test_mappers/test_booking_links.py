from app.mappers.booking_links import build_booking_links


def test_links_with_location():
    links = build_booking_links("Joe's Bar", "New York")

    assert links.venue == "Joe's Bar"
    assert links.googleSearchUrl == (
        "https://www.google.com/search?q=Joe's%20Bar%20New%20York%20reservations"
    )
    assert links.sevenroomsUrl == "https://www.sevenrooms.com/explore/search/Joe's%20Bar"
    assert links.whatsappMsg == (
        "Hi, I'd like to make a reservation at Joe's Bar. Do you have availability?"
    )


def test_links_without_location():
    links = build_booking_links("Velvet")
    assert links.googleSearchUrl == "https://www.google.com/search?q=Velvet%20reservations"


def test_blank_location_is_ignored():
    links = build_booking_links("Velvet", "  ")
    assert links.googleSearchUrl == "https://www.google.com/search?q=Velvet%20reservations"


def test_special_characters_are_escaped():
    links = build_booking_links("Bar & Grill/Up")
    assert links.sevenroomsUrl == "https://www.sevenrooms.com/explore/search/Bar%20%26%20Grill%2FUp"
