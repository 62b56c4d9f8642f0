"""
Test configuration and fixtures for HueForge tests.
"""
import pytest
from fastapi.testclient import TestClient

from main import app
from hueforge.utils.metrics import reset_metrics as _reset_metrics


# Eight dark, clearly distinct colors: base, two accents, five semantic roles
DARK_PALETTE = [
    "#101020", "#3050A0", "#205080", "#207040",
    "#902020", "#806010", "#602070", "#106060",
]

# Eight pale colors, average luminance well above 0.5
LIGHT_PALETTE = [
    "#F0F0F0", "#FFE0E0", "#E0FFE0", "#E0E0FF",
    "#FFFFD0", "#FFD0FF", "#D0FFFF", "#F8F8F8",
]

# Twelve colors at least 127 apart from each other
WELL_SEPARATED = [
    "#000000", "#FFFFFF", "#FF0000", "#00FF00", "#0000FF", "#FFFF00",
    "#FF00FF", "#00FFFF", "#808080", "#800000", "#008000", "#000080",
]


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def dark_palette():
    return list(DARK_PALETTE)


@pytest.fixture
def light_palette():
    return list(LIGHT_PALETTE)


@pytest.fixture
def well_separated():
    return list(WELL_SEPARATED)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset metrics before each test."""
    _reset_metrics()
