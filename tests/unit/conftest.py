"""
Unit test fixtures: factory-built styles and features.
"""

import pytest
from shapely.geometry import Point

from ol_engine import Feature
from tests.factories.style_factories import (
    make_circle_symbolizer,
    make_line_symbolizer,
    make_fill_symbolizer,
    make_text_symbolizer,
)


@pytest.fixture
def circle_data():
    """Return randomized Circle symbolizer dict."""
    return make_circle_symbolizer()


@pytest.fixture
def line_data():
    """Return randomized Line symbolizer dict."""
    return make_line_symbolizer()


@pytest.fixture
def fill_data():
    """Return randomized Fill symbolizer dict."""
    return make_fill_symbolizer()


@pytest.fixture
def text_data():
    """Return randomized Text symbolizer dict."""
    return make_text_symbolizer()


@pytest.fixture
def city_filter():
    """New York with fewer than a million inhabitants."""
    return ["And", ["==", "NAME", "New York"], ["<", "POPULATION", 1000000]]


@pytest.fixture
def make_feature():
    """Factory fixture: point feature with the given attributes."""
    def _make(**properties):
        return Feature(properties, geometry=Point(13.4, 52.5))
    return _make
