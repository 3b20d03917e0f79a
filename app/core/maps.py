from urllib.parse import quote

# Same character set JavaScript's encodeURIComponent leaves untouched
_UNRESERVED = "-_.!~*'()"


def get_google_maps_url(location: str) -> str:
    """Google Maps search link for a free-text location."""
    return f"https://www.google.com/maps/search/?api=1&query={quote(location, safe=_UNRESERVED)}"


def get_google_maps_directions_url(origin: str, destination: str) -> str:
    """Google Maps directions link between two free-text locations."""
    return (
        "https://www.google.com/maps/dir/?api=1"
        f"&origin={quote(origin, safe=_UNRESERVED)}"
        f"&destination={quote(destination, safe=_UNRESERVED)}"
    )
