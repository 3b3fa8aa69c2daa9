# data/regions.py
"""
Named-region overrides for the city resolver

Reverse geocoding often returns a suburb or block name instead of the city
the static directories are keyed by. A coordinate that falls inside `bbox`,
or inside `radius_km` of `landmark` while the geocoded state equals `state`,
is treated as being in `city`.

bbox = (min_lat, max_lat, min_lng, max_lng)
"""

REGION_OVERRIDES = [
    {
        "city": "Jamshedpur",
        "state": "Jharkhand",
        "bbox": (22.7, 22.9, 86.1, 86.3),
        "landmark": (22.8046, 86.2029),
        "radius_km": 50,
    },
    {
        "city": "Delhi",
        "state": "Delhi",
        "bbox": (28.40, 28.88, 76.84, 77.35),
        "landmark": (28.6139, 77.2090),
        "radius_km": 40,
    },
    {
        "city": "Mumbai",
        "state": "Maharashtra",
        "bbox": (18.89, 19.27, 72.77, 72.99),
        "landmark": (19.0760, 72.8777),
        "radius_km": 30,
    },
    {
        "city": "Bangalore",
        "state": "Karnataka",
        "bbox": (12.83, 13.14, 77.46, 77.78),
        "landmark": (12.9716, 77.5946),
        "radius_km": 30,
    },
    {
        "city": "Chennai",
        "state": "Tamil Nadu",
        "bbox": (12.90, 13.23, 80.12, 80.32),
        "landmark": (13.0827, 80.2707),
        "radius_km": 30,
    },
    {
        "city": "Kolkata",
        "state": "West Bengal",
        "bbox": (22.45, 22.65, 88.26, 88.45),
        "landmark": (22.5726, 88.3639),
        "radius_km": 30,
    },
]

# Geocoders disagree with the directories on some spellings
CITY_ALIASES = {
    "bengaluru": "Bangalore",
    "new delhi": "Delhi",
    "bombay": "Mumbai",
    "madras": "Chennai",
    "calcutta": "Kolkata",
    "gurugram": "Gurgaon",
    "east singhbhum": "Jamshedpur",
}

# Map center used when the user has not shared a location
DEFAULT_CENTER = {"lat": 20.5937, "lng": 78.9629}

EMERGENCY_HELPLINES = [
    {"number": "102", "label": "Ambulance"},
    {"number": "108", "label": "Emergency"},
]
