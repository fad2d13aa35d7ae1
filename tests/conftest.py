"""
Shared fixtures for the nearby service tests.
"""
import pytest

from tests.wiki_fakes import FakeWikipedia, make_transport
from wikinearby.models.geometry import Extent, WEB_MERCATOR
from wikinearby.services.map_view import InMemoryMapView


@pytest.fixture
def fake_wikipedia():
    return FakeWikipedia()


@pytest.fixture
def transport(fake_wikipedia):
    return make_transport(fake_wikipedia)


@pytest.fixture
def paris_view():
    # roughly 2km across, centered near the Eiffel Tower in Web Mercator
    return InMemoryMapView(Extent(254422.0, 6249000.0, 256422.0, 6251000.0, WEB_MERCATOR))
