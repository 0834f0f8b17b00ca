"""
Shared fixtures for the rule engine tests.
"""

import pytest

from fieldrules import RULE_REGISTRY, RuleRegistry


@pytest.fixture
def registry() -> RuleRegistry:
    """Copy of the global registry that tests may extend freely"""
    return RULE_REGISTRY.copy()


@pytest.fixture
def signup_request():
    return {
        "name": "John Doe",
        "username": "jhondoe",
        "email": "john@mail.com",
        "zip": "8233",
    }


@pytest.fixture
def signup_rules():
    return {
        "name": ["required"],
        "age": ["between:5,16"],
        "email": ["email"],
        "zip": ["digits:4"],
    }
