"""
Tests for the AccessRule value type.
"""
import pytest

from cfaccess.errors import UnsupportedScopeError
from cfaccess.models import AccessRule, Scope


def test_access_rule_fields():
    rule = AccessRule(id="test-id", target="192.168.1.1", mode="block", notes="test note", scope="zone")
    assert rule.id == "test-id"
    assert rule.target == "192.168.1.1"
    assert rule.mode == "block"
    assert rule.notes == "test note"
    assert rule.scope is Scope.ZONE


def test_string_scope_is_coerced():
    assert AccessRule(id="1", target="AS64496", mode="block", scope="account").scope is Scope.ACCOUNT


def test_unknown_scope_rejected_at_construction():
    with pytest.raises(UnsupportedScopeError) as exc:
        AccessRule(id="1", target="10.0.0.1", mode="block", scope="organization")
    assert exc.value.scope == "organization"


def test_rule_is_immutable():
    rule = AccessRule(id="1", target="10.0.0.1", mode="block")
    with pytest.raises(AttributeError):
        rule.target = "10.0.0.2"


def test_from_api():
    rule = AccessRule.from_api(
        {
            "id": "92f17202ed8bd63d69a66b86a49a8f6b",
            "mode": "challenge",
            "notes": "This rule is on because of an event that occured on date X",
            "configuration": {"target": "ip", "value": "198.51.100.4"},
            "scope": {"id": "023e105f4ecef8ad9ca31a8372d0c353", "type": "zone"},
        }
    )
    assert rule.id == "92f17202ed8bd63d69a66b86a49a8f6b"
    assert rule.target == "198.51.100.4"
    assert rule.mode == "challenge"
    assert rule.notes.startswith("This rule is on")
    assert rule.scope is Scope.ZONE


def test_from_api_missing_notes():
    rule = AccessRule.from_api({"id": "a", "mode": "block", "notes": None, "configuration": {"value": "AS13335"}})
    assert rule.notes == ""


def test_describe():
    rule = AccessRule(id="1", target="10.0.0.0/24", mode="block", notes="office")
    assert rule.describe() == "10.0.0.0/24 (block) - office"
