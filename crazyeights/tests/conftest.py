"""Shared pytest setup for the Crazy Eights tests."""

import pytest

from crazyeights.messages.localization import DEFAULT_LOCALES_DIR, Localization


@pytest.fixture(autouse=True, scope="session")
def localization():
    """Load the bundled .ftl files once for the whole session."""
    Localization.init(DEFAULT_LOCALES_DIR)
    return Localization
