"""Common test fixtures."""

import pytest

from uritemplates import api


@pytest.fixture(autouse=True)
def clear_template_cache():
    """Start every test with an empty ``expand()`` compile cache."""
    api.clear_cache()
    yield
