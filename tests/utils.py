"""Test utility functions."""

import asyncio
import inspect
import json
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
from faker import Faker

fake = Faker()

SERVICE_URL = "http://service.test/api"
INVOKE_PATH = "/api/llm/invoke"
UPLOAD_PATH = "/api/upload"

# Smallest valid PNG header, enough for content-type based checks
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


class FakeService:
    """
    Scriptable stand-in for the remote generation/upload service.

    Routes are keyed by (method, path). A route is either a handler
    taking the httpx.Request (sync or async) or keyword arguments for
    a fresh httpx.Response. Every request is recorded, so tests can
    assert how many calls reached the network.
    """

    def __init__(self) -> None:
        self.routes: Dict[Tuple[str, str], Any] = {}
        self.requests: List[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def on(self, method: str, path: str, handler: Optional[Callable] = None, **response: Any) -> None:
        self.routes[(method, path)] = handler if handler is not None else response

    @property
    def calls(self) -> int:
        return len(self.requests)

    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)

    async def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": "no such route"})
        if isinstance(route, dict):
            return httpx.Response(**{"status_code": 200, **route})
        result = route(request)
        if inspect.isawaitable(result):
            result = await result
        return result


def raising(exc: Exception) -> Callable[[httpx.Request], httpx.Response]:
    """Handler that fails at transport level."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise exc

    return handler


def slow(response: httpx.Response, delay: float = 5.0) -> Callable:
    """Handler that answers only after a delay."""

    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(delay)
        return response

    return handler


def assert_valid_response(response: Any, expected_status: int = 200) -> None:
    """Assert response is valid with expected status."""
    assert response.status_code == expected_status, (
        f"Expected status {expected_status}, got {response.status_code}. "
        f"Response: {response.text}"
    )


def assert_valid_timestamp(value: str) -> None:
    """Assert value is a valid ISO timestamp."""
    try:
        datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (ValueError, AttributeError):
        raise AssertionError(f"Invalid timestamp: {value}")


def create_test_crop_data(**overrides: Any) -> Dict[str, Any]:
    """Generate crop form data."""
    data = {
        "name": fake.random_element(["Tomatoes", "Wheat", "Rice", "Cotton", "Maize"]),
        "variety": fake.word().title(),
        "planting_date": fake.date_between("-90d", "-30d").isoformat(),
        "expected_harvest_date": fake.date_between("+30d", "+120d").isoformat(),
        "field_size": round(fake.pyfloat(min_value=0.5, max_value=10), 2),
        "growth_stage": "vegetative",
        "location": f"Field {fake.random_uppercase_letter()}",
        "status": "active",
    }
    data.update(overrides)
    return data


def create_test_post_data(**overrides: Any) -> Dict[str, Any]:
    """Generate community post data."""
    data = {
        "title": fake.sentence(nb_words=6),
        "content": fake.paragraph(),
        "category": "question",
        "location": fake.city(),
        "tags": "wheat, irrigation",
    }
    data.update(overrides)
    return data


def create_test_tip_data(**overrides: Any) -> Dict[str, Any]:
    """Generate expert tip data."""
    data = {
        "title": fake.sentence(nb_words=5),
        "content": fake.paragraph(),
        "category": "irrigation",
        "difficulty_level": "beginner",
        "estimated_cost": "low",
        "season": "all_seasons",
        "crop_types": ["wheat"],
    }
    data.update(overrides)
    return data


def disease_analysis_payload(**overrides: Any) -> Dict[str, Any]:
    """What the generation service returns for a diseased leaf."""
    data = {
        "detected_disease": "Early Blight",
        "plant_type": "Tomato",
        "confidence_score": 87.5,
        "symptoms": ["Dark spots with rings", "Yellowing lower leaves"],
        "treatment_recommendations": ["Remove affected leaves", "Apply copper fungicide"],
        "prevention_tips": ["Water at soil level", "Rotate crops"],
        "severity": "moderate",
        "is_healthy": False,
    }
    data.update(overrides)
    return data


def weather_snapshot_payload(**overrides: Any) -> Dict[str, Any]:
    data = {
        "temperature": 28,
        "humidity": 65,
        "wind_speed": 12,
        "condition": "Partly Cloudy",
        "farming_advice": "Good day for irrigation in the evening.",
        "location": "Punjab, India",
    }
    data.update(overrides)
    return data
