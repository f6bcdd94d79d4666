"""Shared pytest fixtures for capture_core tests."""

from __future__ import annotations

import logging
import uuid
from typing import Any, Callable

import pytest


@pytest.fixture
def sample_properties() -> dict[Any, Any]:
    """Nested event properties with long strings and a numeric key."""
    return {
        "key": "value",
        5: "looongvalue",
        "nested": {
            "keeeey": ["vaaaaaalue", 1, 99999999999.4],
        },
    }


@pytest.fixture
def recursive_properties() -> dict[str, Any]:
    """Properties that reference themselves through a list and a direct key."""
    properties: dict[str, Any] = {"key": "vaaaaalue", "values": ["fooobar"]}
    properties["values"].append(properties)
    properties["ref"] = properties
    return properties


@pytest.fixture
def user_agent_for() -> Callable[[str], str]:
    """Build a crawler-style user agent around a bot signature."""

    def _build(bot_string: str) -> str:
        rand_one = uuid.uuid4().hex[:6]
        rand_two = uuid.uuid4().hex[:6]
        return f"Mozilla/5.0 (compatible; {bot_string}/{rand_one}; +http://a.com/bot/{rand_two})"

    return _build


@pytest.fixture
def reset_logging():
    """Restore root logging after tests that call configure_logging."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)
