"""
Shared fixtures for venue resolver tests.
"""
import pytest

from venue_resolver.models import CatalogEntry


@pytest.fixture
def rusty_mic_catalog():
    """Two venues where one name is a prefix of the other."""
    return (
        CatalogEntry(id="1", name="The Rusty Mic"),
        CatalogEntry(id="2", name="The Rusty Mic Room"),
    )


@pytest.fixture
def brewhouse_catalog():
    """Single venue with a three-word name (acronym "ltb")."""
    return (CatalogEntry(id="1", name="Long Table Brewhouse"),)


@pytest.fixture
def sunshine_catalog():
    """Venue with a curated alias override and an explicit slug."""
    return (
        CatalogEntry(id="5", name="Sunshine Studios: Live", slug="sunshine-studios-live"),
        CatalogEntry(id="6", name="Blue Door"),
    )
