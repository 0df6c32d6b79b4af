"""Logical page names to URL paths."""

from typing import Dict, List, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit

PAGE_PATHS = {
    "Dashboard": "/dashboard",
    "DiseaseDetection": "/disease-detection",
    "CropManagement": "/crop-management",
    "ExpertTips": "/expert-tips",
    "Weather": "/weather",
    "Community": "/community",
    "Chat": "/chat",
}

# (title key, page) in menu order
MENU = [
    ("dashboard", "Dashboard"),
    ("diseaseDetection", "DiseaseDetection"),
    ("myCrops", "CropManagement"),
    ("expertTips", "ExpertTips"),
    ("weather", "Weather"),
    ("chatAssistant", "Chat"),
    ("community", "Community"),
]


def create_page_url(page: str, params: Optional[Dict[str, str]] = None) -> str:
    """
    Build the URL for a logical page.

    Example:
        create_page_url("CropManagement", {"edit": "3"}) -> "/crop-management?edit=3"
    """
    base_url = PAGE_PATHS.get(page, f"/{page.lower()}")
    query = urlencode(params or {})
    return f"{base_url}?{query}" if query else base_url


def page_from_url(url: str) -> str:
    """First path segment of a URL, 'dashboard' for the root."""
    segments = urlsplit(url).path.split("/")
    return segments[1] if len(segments) > 1 and segments[1] else "dashboard"


def url_params(url: str) -> Dict[str, str]:
    """Query parameters of a URL; the last value wins for repeated keys."""
    return dict(parse_qsl(urlsplit(url).query))


def navigation_items() -> List[Dict[str, str]]:
    return [
        {"title_key": key, "page": page, "url": create_page_url(page)}
        for key, page in MENU
    ]
