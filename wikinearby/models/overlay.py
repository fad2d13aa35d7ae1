"""Marker types placed on a map view's overlay collection."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from wikinearby.models.geometry import Point


@dataclass(frozen=True)
class MarkerSymbol:
    """Picture symbol drawn for every marker; one instance is shared process-wide."""
    url: str
    width: int
    height: int


@dataclass(frozen=True)
class PopupTemplate:
    """Popup content with ``{field}`` placeholders bound to marker attributes."""
    title: str
    content: str

    def render(self, attributes: dict[str, Any]) -> dict[str, str]:
        values = {k: "" if v is None else v for k, v in attributes.items()}
        return {
            "title": self.title.format_map(values),
            "content": self.content.format_map(values),
        }


@dataclass(eq=False)
class MarkerRecord:
    """
    A marker on the map. Equality is identity so that two markers built
    from equal results are still removed independently.
    """
    geometry: Point
    symbol: MarkerSymbol
    attributes: dict[str, Any] = field(default_factory=dict)
    popup_template: PopupTemplate | None = None

    @property
    def item_id(self) -> Any:
        return self.attributes.get("id")
