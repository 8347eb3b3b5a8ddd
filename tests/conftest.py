"""Shared test fixtures for floorplan page tests."""
import pytest
from pagegeom.svg import extract_metadata
from floorplan.config import DEFAULT_CONFIG
from floorplan.layout import compute_layout
from floorplan.gen_floorplan import build_floorplan_data


ICON_SVG = b"""<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24"
     preserveAspectRatio="xMidYMid meet">
  <path d="M 2 4 L 20 4 L 20 18 L 2 18 Z" fill="#333"/>
  <path d="M6,8 L12,21" stroke="#333"/>
</svg>
"""


@pytest.fixture(scope="session")
def config():
    """Default template configuration."""
    return DEFAULT_CONFIG


@pytest.fixture(scope="session")
def layout(config):
    """FloorplanLayout for the default configuration."""
    return compute_layout(config)


@pytest.fixture(scope="session")
def icon_svg():
    """Raw icon bytes."""
    return ICON_SVG


@pytest.fixture(scope="session")
def icon(icon_svg):
    """IconAsset parsed from icon_svg."""
    return extract_metadata(icon_svg)


@pytest.fixture(scope="session")
def floorplan_data(config, icon):
    """build_floorplan_data result with the test icon."""
    return build_floorplan_data(config, icon)
