"""Prompts and response schemas sent to the generation service."""

from typing import Optional

DISEASE_ANALYSIS_PROMPT = """Analyze this plant image for diseases, pests, or health issues. Provide detailed analysis including:
- Detected disease or issue (if any)
- Plant type identification
- Confidence level (0-100)
- Visible symptoms
- Treatment recommendations
- Prevention tips
- Severity assessment
Be very thorough and provide practical farming advice."""

DISEASE_ANALYSIS_SCHEMA = {
    "type": "object",
    "properties": {
        "detected_disease": {"type": "string"},
        "plant_type": {"type": "string"},
        "confidence_score": {"type": "number"},
        "symptoms": {"type": "array", "items": {"type": "string"}},
        "treatment_recommendations": {"type": "array", "items": {"type": "string"}},
        "prevention_tips": {"type": "array", "items": {"type": "string"}},
        "severity": {
            "type": "string",
            "enum": ["low", "moderate", "high", "critical"],
        },
        "is_healthy": {"type": "boolean"},
    },
}

WEATHER_SNAPSHOT_PROMPT = (
    "Get current weather information for farming. Include temperature, humidity, "
    "wind speed, condition, and brief farming advice for today's weather conditions."
)

WEATHER_SNAPSHOT_SCHEMA = {
    "type": "object",
    "properties": {
        "temperature": {"type": "number"},
        "humidity": {"type": "number"},
        "wind_speed": {"type": "number"},
        "condition": {"type": "string"},
        "farming_advice": {"type": "string"},
        "location": {"type": "string"},
    },
}

WEATHER_REPORT_PROMPT = """Get comprehensive weather information for farming including:
- Current weather conditions (temperature, humidity, wind, pressure)
- 7-day forecast with detailed daily information
- UV index and visibility
- Sunrise and sunset times
- Specific farming advice based on current weather
- Any weather alerts or warnings for farmers
- Best times for different farming activities today
- Soil temperature and moisture recommendations
- Pest and disease risk assessment based on weather"""

WEATHER_REPORT_SCHEMA = {
    "type": "object",
    "properties": {
        "current": {
            "type": "object",
            "properties": {
                "temperature": {"type": "number"},
                "condition": {"type": "string"},
                "humidity": {"type": "number"},
                "wind_speed": {"type": "number"},
                "wind_direction": {"type": "string"},
                "pressure": {"type": "number"},
                "uv_index": {"type": "number"},
                "visibility": {"type": "number"},
                "sunrise": {"type": "string"},
                "sunset": {"type": "string"},
                "location": {"type": "string"},
            },
        },
        "forecast": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "day": {"type": "string"},
                    "date": {"type": "string"},
                    "high_temp": {"type": "number"},
                    "low_temp": {"type": "number"},
                    "condition": {"type": "string"},
                    "precipitation_chance": {"type": "number"},
                    "wind_speed": {"type": "number"},
                    "humidity": {"type": "number"},
                },
            },
        },
        "farming_advice": {"type": "string"},
        "alerts": {"type": "array", "items": {"type": "string"}},
        "best_times": {
            "type": "object",
            "properties": {
                "watering": {"type": "string"},
                "spraying": {"type": "string"},
                "harvesting": {"type": "string"},
                "planting": {"type": "string"},
            },
        },
        "risks": {
            "type": "object",
            "properties": {
                "pest_risk": {"type": "string"},
                "disease_risk": {"type": "string"},
                "frost_risk": {"type": "string"},
            },
        },
    },
}


def with_location(prompt: str, location: Optional[str]) -> str:
    """Append the farm location to a weather prompt when known."""
    if not location:
        return prompt
    return f"{prompt}\nLocation: {location}"
