"""
Map view collaborator: the protocol the overlay and radius logic rely on,
plus an in-memory view for headless use.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Optional, Protocol, Sequence

from wikinearby.models.geometry import Extent, Point, SpatialReference

logger = logging.getLogger(__name__)


class OverlayCollection(Protocol):
    def add(self, item: Any) -> None: ...
    def add_many(self, items: Iterable[Any]) -> None: ...
    def remove(self, item: Any) -> None: ...
    def remove_many(self, items: Iterable[Any]) -> None: ...


class PopupLike(Protocol):
    visible: bool

    def open(self, *, features: Sequence[Any], update_location_enabled: bool = False) -> None: ...


class MapView(Protocol):
    extent: Extent
    graphics: OverlayCollection
    popup: PopupLike

    @property
    def spatial_reference(self) -> SpatialReference: ...

    async def go_to(self, target: Point) -> None: ...


class GraphicsCollection:
    """Ordered overlay collection; membership is by identity."""

    def __init__(self):
        self._items: list[Any] = []

    def add(self, item: Any) -> None:
        if item not in self:
            self._items.append(item)

    def add_many(self, items: Iterable[Any]) -> None:
        for item in items:
            self.add(item)

    def remove(self, item: Any) -> None:
        self._items = [i for i in self._items if i is not item]

    def remove_many(self, items: Iterable[Any]) -> None:
        doomed = {id(i) for i in items}
        self._items = [i for i in self._items if id(i) not in doomed]

    def __contains__(self, item: Any) -> bool:
        return any(i is item for i in self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


class Popup:
    def __init__(self):
        self.visible = False
        self.features: list[Any] = []
        self.update_location_enabled = False

    def open(self, *, features: Sequence[Any], update_location_enabled: bool = False) -> None:
        self.features = list(features)
        self.update_location_enabled = update_location_enabled
        self.visible = True

    @property
    def selected_feature(self) -> Optional[Any]:
        return self.features[0] if self.features else None


class InMemoryMapView:
    """A view with no renderer: ``go_to`` re-centers the extent immediately."""

    def __init__(self, extent: Extent):
        self.extent = extent
        self.graphics = GraphicsCollection()
        self.popup = Popup()
        self.history: list[Point] = []

    @property
    def spatial_reference(self) -> SpatialReference:
        return self.extent.spatial_reference

    async def go_to(self, target: Point) -> None:
        logger.debug(f"Moving view to ({target.x:.2f}, {target.y:.2f})")
        self.history.append(target)
        self.extent = self.extent.centered_at(target)
