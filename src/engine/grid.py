"""Static board geometry: tile layout and adjacency."""

from typing import List, Sequence, Tuple
from pydantic import BaseModel, ConfigDict, model_validator

from .models import GameConfig, Tile


def are_adjacent(a: int, b: int, columns: int) -> bool:
    """
    Whether two row-major tile ids are orthogonal neighbours.

    Horizontal steps never wrap across a row boundary and there are no
    diagonals. Bounds are the caller's concern; see Grid.are_adjacent.
    """
    if b == a - columns or b == a + columns:
        return True
    if b == a - 1:
        return a % columns != 0
    if b == a + 1:
        return b % columns != 0
    return False


class Grid(BaseModel):
    """
    Immutable letter grid.

    Attributes:
        columns: Tiles per row
        rows: Number of rows
        tiles: Row-major tiles, length == columns * rows
    """

    model_config = ConfigDict(frozen=True)

    columns: int
    rows: int
    tiles: Tuple[Tile, ...]

    @model_validator(mode="after")
    def _check_layout(self) -> "Grid":
        if self.columns * self.rows != len(self.tiles):
            raise ValueError(
                f"Grid {self.columns}x{self.rows} needs {self.columns * self.rows} tiles, "
                f"got {len(self.tiles)}"
            )
        for index, tile in enumerate(self.tiles):
            if tile.id != index:
                raise ValueError(f"Tile at position {index} has id {tile.id}")
        return self

    @classmethod
    def create(cls, columns: int, rows: int, letters: Sequence[str]) -> "Grid":
        """
        Build a grid from a letter pool, ignoring letters past columns * rows.

        Raises:
            ValueError: If the pool has fewer letters than the grid has tiles
        """
        needed = columns * rows
        if len(letters) < needed:
            raise ValueError(
                f"Number of letters provided ({len(letters)}) should be equal to "
                f"or greater than the number of tiles ({needed})"
            )
        tiles = tuple(Tile(id=i, letter=letter) for i, letter in enumerate(letters[:needed]))
        return cls(columns=columns, rows=rows, tiles=tiles)

    @classmethod
    def from_config(cls, config: GameConfig) -> "Grid":
        return cls.create(config.columns, config.rows, config.letters)

    @property
    def size(self) -> int:
        return len(self.tiles)

    @property
    def letters(self) -> List[str]:
        return [t.letter for t in self.tiles]

    def contains(self, tile_id: int) -> bool:
        return 0 <= tile_id < self.size

    def tile(self, tile_id: int) -> Tile:
        """
        Raises:
            ValueError: If the id is not on the board
        """
        if not self.contains(tile_id):
            raise ValueError(f"Tile {tile_id} is not on the {self.columns}x{self.rows} board")
        return self.tiles[tile_id]

    def are_adjacent(self, a: int, b: int) -> bool:
        """Adjacency restricted to ids that exist on this board."""
        if not (self.contains(a) and self.contains(b)):
            return False
        return are_adjacent(a, b, self.columns)

    def neighbors(self, tile_id: int) -> List[int]:
        """Orthogonal neighbours of a tile, in ascending id order."""
        candidates = (tile_id - self.columns, tile_id - 1, tile_id + 1, tile_id + self.columns)
        return [c for c in candidates if self.are_adjacent(tile_id, c)]

    def rows_of_tiles(self) -> List[List[Tile]]:
        return [
            list(self.tiles[r * self.columns:(r + 1) * self.columns])
            for r in range(self.rows)
        ]

    def word_for(self, tile_ids: Sequence[int]) -> str:
        """Concatenate the letters of the given tiles, in order."""
        return "".join(self.tiles[i].letter for i in tile_ids)
