"""Pytest configuration and shared fixtures for the lexdoc test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import json
import os
from pathlib import Path
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import editor_state, element, text_node

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=30)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")


@pytest.fixture
def newsletter_path() -> Path:
    """Path of the sample newsletter editor state."""
    return FIXTURES_DIR / "newsletter.json"


@pytest.fixture
def newsletter_state(newsletter_path: Path) -> dict[str, Any]:
    """Load the sample newsletter editor state."""
    return json.loads(newsletter_path.read_text(encoding="utf-8"))


@pytest.fixture
def simple_state() -> dict[str, Any]:
    """A heading, a paragraph with marks and a bullet list."""
    return editor_state(
        element("heading", text_node("Welcome"), tag="h1"),
        element("paragraph", text_node("Hello "), text_node("world", format=1)),
        element(
            "list",
            element("listitem", text_node("One"), value=1),
            element("listitem", text_node("Two"), value=2),
            listType="bullet",
            tag="ul",
        ),
    )
