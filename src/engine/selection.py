"""
The player's current path of tiles.

A path is an ordered, unique list of tile ids where each tile touches the one
before it. Appends that would break the path are rejected here, so callers
don't need to pre-filter. Only the end of the path can be removed, so
toggling the same tile twice always gives back the path it started from.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from .grid import Grid
from .models import TileStatus
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class TileSelection(BaseModel):
    """
    Ordered path of selected tiles.

    Attributes:
        grid: The board the path lives on
        ids: Selected tile ids in path order
    """

    grid: Grid
    ids: List[int] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.ids

    def contains(self, tile_id: int) -> bool:
        return tile_id in self.ids

    @property
    def last(self) -> Optional[int]:
        """The mutable end of the path, or None when nothing is selected."""
        return self.ids[-1] if self.ids else None

    @property
    def current_word(self) -> str:
        return self.grid.word_for(self.ids)

    def can_append(self, tile_id: int) -> bool:
        """Whether a tile could extend the path right now."""
        if not self.grid.contains(tile_id) or tile_id in self.ids:
            return False
        if not self.ids:
            return True
        return self.grid.are_adjacent(self.ids[-1], tile_id)

    def toggle(self, tile_id: int) -> bool:
        """
        Select or deselect a tile.

        Only the end of the path can be deselected. Toggling any other
        selected tile is rejected and leaves the path alone. An unselected
        tile is appended only if it touches the end of the path.

        Args:
            tile_id: Row-major id of the tile

        Returns:
            True if the selection changed, False if the toggle was rejected

        Raises:
            ValueError: If the id is not on the board
        """
        self.grid.tile(tile_id)

        if tile_id == self.last:
            self.ids.pop()
            LOGGER.debug("Deselected tile %s (path now %s)", tile_id, self.ids)
            return True

        if tile_id in self.ids:
            LOGGER.debug("Rejected tile %s: only the path end %s can be removed", tile_id, self.last)
            return False

        if not self.can_append(tile_id):
            LOGGER.debug("Rejected tile %s: not adjacent to %s", tile_id, self.last)
            return False

        self.ids.append(tile_id)
        LOGGER.debug("Selected tile %s (path now %s)", tile_id, self.ids)
        return True

    def clear(self) -> None:
        self.ids = []

    def eligible_tiles(self) -> List[int]:
        """Unselected tiles that may extend the path."""
        if not self.ids:
            return [t.id for t in self.grid.tiles]
        return [n for n in self.grid.neighbors(self.ids[-1]) if n not in self.ids]

    def status_of(self, tile_id: int) -> TileStatus:
        """
        Status of one tile. Only "selected-last" and "eligible" tiles respond
        to a toggle.
        """
        self.grid.tile(tile_id)
        if tile_id == self.last:
            return "selected-last"
        if tile_id in self.ids:
            return "selected"
        if self.can_append(tile_id):
            return "eligible"
        return "disabled"

    def statuses(self) -> Dict[int, TileStatus]:
        return {t.id: self.status_of(t.id) for t in self.grid.tiles}
