"""
Mock provider API responses for testing.

Realistic (trimmed) responses from the geocoding, forecast, events and
movie search endpoints. Used with respx or fake fetchers.
"""

# GET https://maps.googleapis.com/maps/api/geocode/json?address=seattle
GEOCODE_RESPONSE = {
    "results": [
        {
            "address_components": [],
            "formatted_address": "Seattle, WA, USA",
            "geometry": {
                "location": {"lat": 47.6062095, "lng": -122.3320708},
                "location_type": "APPROXIMATE",
            },
            "place_id": "ChIJVTPokywQkFQRmtVEaUZlJRA",
            "types": ["locality", "political"],
        },
        {
            "formatted_address": "Seattle Center, Seattle, WA 98109, USA",
            "geometry": {"location": {"lat": 47.6214824, "lng": -122.3481245}},
        },
    ],
    "status": "OK",
}

GEOCODE_ZERO_RESULTS = {"results": [], "status": "ZERO_RESULTS"}

GEOCODE_REQUEST_DENIED = {
    "error_message": "The provided API key is invalid.",
    "results": [],
    "status": "REQUEST_DENIED",
}

# Premier resultat sans geometry
GEOCODE_MALFORMED = {
    "results": [{"formatted_address": "Seattle, WA, USA"}],
    "status": "OK",
}

# GET https://api.darksky.net/forecast/{key}/47.6062095,-122.3320708
FORECAST_RESPONSE = {
    "latitude": 47.6062095,
    "longitude": -122.3320708,
    "timezone": "America/Los_Angeles",
    "daily": {
        "summary": "Light rain throughout the week.",
        "data": [
            {"time": 1609459200, "summary": "Clear", "icon": "clear-day"},
            {"time": 1609545600, "summary": "Light rain in the morning.", "icon": "rain"},
            {"time": 1609632000, "summary": "Overcast throughout the day.", "icon": "cloudy"},
        ],
    },
}

FORECAST_MALFORMED = {"latitude": 47.6, "longitude": -122.3, "currently": {}}

# GET https://www.eventbriteapi.com/v3/events/search/
EVENTS_RESPONSE = {
    "pagination": {"object_count": 2, "page_number": 1},
    "events": [
        {
            "name": {"text": "Seattle Tech Meetup", "html": "Seattle Tech Meetup"},
            "description": {"text": "Monthly talks about Python.", "html": "<p>...</p>"},
            "url": "https://www.eventbrite.com/e/seattle-tech-meetup-1",
            "start": {"timezone": "America/Los_Angeles", "local": "2021-03-04T18:30:00"},
        },
        {
            "name": {"text": "Pike Place Food Walk"},
            "description": {"text": None},
            "url": "https://www.eventbrite.com/e/pike-place-food-walk-2",
            "start": {"local": "2021-03-06T10:00:00"},
        },
    ],
}

# GET https://api.themoviedb.org/3/search/movie?query=seattle
MOVIES_RESPONSE = {
    "page": 1,
    "results": [
        {
            "id": 858,
            "original_title": "Sleepless in Seattle",
            "overview": "A young boy who tries to set his father up on a date...",
            "poster_path": "/iLWsLVrfkFvOXOG9PbUAYg7AK3E.jpg",
            "popularity": 14.23,
            "release_date": "1993-06-24",
            "vote_average": 6.6,
            "vote_count": 1852,
        },
        {
            "id": 42188,
            "original_title": "Seattle Superstorm",
            "overview": "",
            "poster_path": None,
            "popularity": 2.1,
            "release_date": "2012-09-29",
            "vote_average": 4.1,
            "vote_count": 16,
        },
    ],
    "total_pages": 1,
    "total_results": 2,
}
