"""
Pytest configuration and shared fixtures for mugplugin tests.
"""

import pytest

from mugplugin.io.loaders import ConstraintPolicy
from mugplugin.parameters.presets import AVERAGE, MINIMUM, MAXIMUM
from mugplugin.parameters.store import ParameterStore


# ─── Stores ──────────────────────────────────────────────────────────────


@pytest.fixture
def store():
    """Fresh store seeded with the average preset (87, 95, 7, 33.25, 66.5)."""
    return ParameterStore()


@pytest.fixture
def policy():
    """Default constraint policy."""
    return ConstraintPolicy()


# ─── Raw values ──────────────────────────────────────────────────────────


@pytest.fixture
def average_values():
    """Average preset as a ParameterKind -> float dict."""
    return dict(AVERAGE.values())


@pytest.fixture(params=[MINIMUM, AVERAGE, MAXIMUM], ids=lambda p: p.name)
def any_preset(request):
    """Each built-in preset in turn."""
    return request.param
