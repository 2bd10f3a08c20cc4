"""
Shared pytest configuration.

Keeps the project root importable and restores the default text
measurer after every test.
"""

import pytest

from composedoc.core.measure import set_text_measurer


@pytest.fixture(autouse=True)
def reset_text_measurer():
    yield
    set_text_measurer(None)
