"""
Unit tests for merging geosearch hits with page metadata
"""
import pytest

from wikinearby.models.geometry import Point, WEB_MERCATOR, WGS84
from wikinearby.models.nearby import PageMetadata, RawSpatialHit
from wikinearby.services.result_assembler import ResultAssembler

EIFFEL = RawSpatialHit(id=1, title="Eiffel Tower", lat=48.8584, lon=2.2945)
LOUVRE = RawSpatialHit(id=2, title="Louvre", lat=48.8606, lon=2.3376)
ORSAY = RawSpatialHit(id=3, title="Musée d'Orsay", lat=48.8600, lon=2.3266)


def test_eiffel_tower_with_metadata():
    metadata = {
        1: PageMetadata(
            thumbnail_url="t.jpg",
            canonical_url="https://en.wikipedia.org/wiki/Eiffel_Tower",
        )
    }
    [item] = ResultAssembler().assemble([EIFFEL], metadata, WEB_MERCATOR)

    assert item.id == 1
    assert item.title == "Eiffel Tower"
    assert item.url == "https://en.wikipedia.org/wiki/Eiffel_Tower"
    assert item.image == "t.jpg"
    assert item.point.spatial_reference == WEB_MERCATOR
    assert item.point.x == pytest.approx(255422.57, abs=1.0)
    assert 6.2e6 < item.point.y < 6.3e6


def test_eiffel_tower_without_metadata():
    """A lookup miss is not an error: url and image are both None"""
    [item] = ResultAssembler().assemble([EIFFEL], {}, WEB_MERCATOR)

    assert item.image is None
    assert item.url is None
    assert item.title == "Eiffel Tower"


def test_empty_thumbnail_normalizes_to_none():
    metadata = {1: PageMetadata(thumbnail_url="", canonical_url="https://x")}
    [item] = ResultAssembler().assemble([EIFFEL], metadata, WEB_MERCATOR)
    assert item.image is None


def test_order_and_length_follow_spatial_hits():
    metadata = {
        3: PageMetadata(thumbnail_url="orsay.jpg"),
        1: PageMetadata(canonical_url="https://en.wikipedia.org/wiki/Eiffel_Tower"),
        99: PageMetadata(thumbnail_url="unrelated.jpg"),
    }
    items = ResultAssembler().assemble([ORSAY, EIFFEL, LOUVRE], metadata, WEB_MERCATOR)

    assert [i.id for i in items] == [3, 1, 2]
    assert items[0].image == "orsay.jpg"
    assert items[1].image is None
    assert items[2].url is None


def test_assemble_is_pure():
    metadata = {2: PageMetadata(thumbnail_url="louvre.jpg")}
    hits = [EIFFEL, LOUVRE]
    assembler = ResultAssembler()

    first = assembler.assemble(hits, metadata, WEB_MERCATOR)
    second = assembler.assemble(hits, metadata, WEB_MERCATOR)

    assert first == second
    assert hits == [EIFFEL, LOUVRE]
    assert metadata == {2: PageMetadata(thumbnail_url="louvre.jpg")}


def test_geographic_working_reference_keeps_lon_lat():
    [item] = ResultAssembler().assemble([EIFFEL], {}, WGS84)
    assert item.point == Point(2.2945, 48.8584, WGS84)


def test_result_items_are_immutable():
    [item] = ResultAssembler().assemble([EIFFEL], {}, WEB_MERCATOR)
    with pytest.raises(AttributeError):
        item.title = "Tour Eiffel"


def test_attributes_exclude_point():
    [item] = ResultAssembler().assemble([EIFFEL], {}, WEB_MERCATOR)
    assert item.attributes() == {"id": 1, "title": "Eiffel Tower", "url": None, "image": None}
