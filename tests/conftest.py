"""Pytest configuration and shared fixtures for the all2rst test suite.

This module provides shared fixtures and test configuration used across
the unit, integration and end-to-end tests.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from all2rst.ast import Document, Emphasis, Heading, Paragraph, Space, Text

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=30)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")


@pytest.fixture
def hello_document() -> Document:
    """Provide the smallest interesting document: a heading and a paragraph.

    Returns
    -------
    Document
        ``Title`` heading followed by ``Hello *world*``.

    """
    return Document(
        children=[
            Heading(level=1, content=[Text(content="Title")]),
            Paragraph(content=[Text(content="Hello"), Space(), Emphasis(content=[Text(content="world")])]),
        ]
    )

