"""
Pytest configuration and fixtures.
"""
import pytest

from cfaccess.models import AccessRule


@pytest.fixture
def sample_rules():
    return [
        AccessRule(id="1", target="192.168.1.1", mode="block", notes="temporary block for testing"),
        AccessRule(id="2", target="192.168.2.1", mode="block", notes="permanent security block"),
        AccessRule(id="3", target="10.0.0.1", mode="challenge", notes="temp access rule"),
        AccessRule(id="4", target="AS64496", mode="allow", notes=""),
    ]
