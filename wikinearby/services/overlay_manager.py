"""
Overlay lifecycle for nearby results: create, clear and highlight markers.

The view's overlay collection and popup are shared state mutated without
locking; callers drive these operations one at a time.
"""

import logging
from typing import Optional, Sequence

from wikinearby.config.settings import get_settings
from wikinearby.models.nearby import ItemId, ResultItem
from wikinearby.models.overlay import MarkerRecord, MarkerSymbol, PopupTemplate
from wikinearby.services.map_view import MapView

logger = logging.getLogger(__name__)


# Process-wide marker symbol, built once from settings
_symbol: Optional[MarkerSymbol] = None


def get_marker_symbol() -> MarkerSymbol:
    """Get the shared marker symbol."""
    global _symbol
    if _symbol is None:
        wiki = get_settings().wiki
        _symbol = MarkerSymbol(url=wiki.icon_path, width=wiki.icon_size, height=wiki.icon_size)
    return _symbol


def build_popup_template(more_info_label: str) -> PopupTemplate:
    return PopupTemplate(
        title="{title}",
        content=f'<a target="_blank" href="{{url}}">{more_info_label}</a>',
    )


class OverlayManager:
    def __init__(
        self,
        symbol: Optional[MarkerSymbol] = None,
        more_info_label: Optional[str] = None
    ):
        self.symbol = symbol or get_marker_symbol()
        self.popup_template = build_popup_template(
            more_info_label or get_settings().wiki.more_info_label
        )

    def add_markers(self, view: MapView, results: Sequence[ResultItem]) -> list[MarkerRecord]:
        """
        Place one marker per result on ``view`` and return them in input order.

        The popup is closed first; passing results rather than markers to the
        clear step leaves the overlay itself untouched.
        """
        self.clear_markers(view, results)

        markers = []
        for result in results:
            marker = self._create_marker(result)
            view.graphics.add(marker)
            markers.append(marker)

        logger.debug(f"Added {len(markers)} markers")
        return markers

    def clear_markers(self, view: MapView, markers: Sequence[object]) -> None:
        view.graphics.remove_many(markers)
        view.popup.visible = False

    async def highlight_marker(
        self,
        view: MapView,
        item_id: ItemId,
        markers: Sequence[MarkerRecord]
    ) -> Optional[MarkerRecord]:
        """
        Move the view to the marker for ``item_id``, then open its popup.

        Returns the marker, or ``None`` without touching the view when no
        marker carries that id.
        """
        marker = self.find_marker(item_id, markers)
        if marker is None:
            logger.warning(f"No marker for item {item_id} among {len(markers)} markers")
            return None

        await view.go_to(marker.geometry)
        view.popup.open(features=[marker], update_location_enabled=True)
        return marker

    @staticmethod
    def find_marker(item_id: ItemId, markers: Sequence[MarkerRecord]) -> Optional[MarkerRecord]:
        """First marker whose id matches; ids from URLs or DOM data arrive as strings."""
        wanted = str(item_id)
        return next((m for m in markers if str(m.item_id) == wanted), None)

    def _create_marker(self, result: ResultItem) -> MarkerRecord:
        return MarkerRecord(
            geometry=result.point,
            symbol=self.symbol,
            attributes=result.attributes(),
            popup_template=self.popup_template,
        )
