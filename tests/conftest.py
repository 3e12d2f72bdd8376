"""
Shared pytest fixtures for ncode unit tests.
"""

import pytest
from hypothesis import settings

from ncode import Ncode

# Select with --hypothesis-profile=thorough
settings.register_profile("ncode", max_examples=200)
settings.register_profile("thorough", max_examples=5000)
settings.load_profile("ncode")


@pytest.fixture
def sample_ncode():
    """The reference catalog entry, n1000cb."""
    return Ncode(530947)


@pytest.fixture
def max_ncode():
    """Largest representable catalog number."""
    return Ncode(0xFFFFFFFF)
