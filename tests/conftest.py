"""Pytest configuration and fixtures."""

import json
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "location": {
            "latitude": 39.7456,
            "longitude": -97.0892,
        },
        "service": {
            "base_url": "https://api.weather.gov",
            "hourly": False,
            "user_agent": "forecastview-tests",
            "timeout_seconds": 5,
        },
        "settings": {
            "log_level": "DEBUG",
            "default_style": "extended",
        },
    }


@pytest.fixture
def sample_config_file(temp_dir, sample_config_data):
    """Create a sample config file for testing."""
    config_path = temp_dir / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_data, f)
    return config_path


@pytest.fixture
def sample_periods():
    """Three NWS forecast periods spanning two days (UTC)."""
    return [
        {
            "number": 1,
            "name": "Monday",
            "startTime": "2024-01-01T06:00:00Z",
            "endTime": "2024-01-01T18:00:00Z",
            "isDaytime": True,
            "temperature": 40,
            "temperatureUnit": "F",
            "temperatureTrend": None,
            "windSpeed": "10 mph",
            "windDirection": "SW",
            "shortForecast": "Sunny",
            "detailedForecast": "Sunny, with a high near 40.",
        },
        {
            "number": 2,
            "name": "Monday Night",
            "startTime": "2024-01-01T18:00:00Z",
            "endTime": "2024-01-01T23:00:00Z",
            "isDaytime": False,
            "temperature": 30,
            "temperatureUnit": "F",
            "windSpeed": "5 mph",
            "windDirection": "S",
            "shortForecast": "Clear",
            "detailedForecast": "Clear, with a low around 30.",
        },
        {
            "number": 3,
            "name": "Tuesday",
            "startTime": "2024-01-02T06:00:00Z",
            "endTime": "2024-01-02T18:00:00Z",
            "isDaytime": True,
            "temperature": 45,
            "temperatureUnit": "F",
            "windSpeed": "15 mph",
            "windDirection": "W",
            "shortForecast": "Partly Cloudy",
            "detailedForecast": "Partly cloudy, with a high near 45.",
        },
    ]


@pytest.fixture
def sample_response(sample_periods):
    """Forecast response envelope as returned by the NWS API."""
    return {
        "type": "Feature",
        "properties": {
            "units": "us",
            "generatedAt": "2024-01-01T05:30:00+00:00",
            "periods": sample_periods,
        },
    }
