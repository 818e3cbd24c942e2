from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Any, List, Tuple, Union

import numpy as np

from .counts import adjacent_mine_counts
from .options import Options, ReturnType, normalize_options
from .symbols import CellTypes, unspoiler

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]
Matrix = List[List[str]]
Result = Union[str, Matrix, None]

NO_CELL: Coordinate = (-1, -1)


@dataclass
class Cell:
    is_mine: bool = False
    is_revealed: bool = False
    adj_mines: int = 0


class Minesweeper:
    """Generates one static minesweeper field made of spoiler-tagged emotes.

    Coordinates are (row, column) and the grid is indexed `grid[row][col]`.
    """

    def __init__(self, opts: Union[Options, dict, None] = None, **overrides: Any):
        self.options = normalize_options(opts, **overrides)
        self.rows = self.options.rows
        self.columns = self.options.columns
        self.mines = self.options.mines
        self.rng = self.options.rng
        self.types = CellTypes.build(self.options.emote, self.options.spaces)
        self.grid: List[List[Cell]] = []
        self.safe_cells: List[Coordinate] = []

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def neighbors(self, row: int, col: int, include_self: bool = False) -> List[Coordinate]:
        coords = []
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0 and not include_self:
                    continue
                nr, nc = row + dr, col + dc
                if self.in_bounds(nr, nc):
                    coords.append((nr, nc))
        return coords

    def _pick(self, count: int) -> int:
        return math.floor(self.rng() * count)

    def symbol(self, row: int, col: int) -> str:
        c = self.grid[row][col]
        masked = self.types.mine if c.is_mine else self.types.numbers[c.adj_mines]
        return unspoiler(masked) if c.is_revealed else masked

    @property
    def matrix(self) -> Matrix:
        return [[self.symbol(r, c) for c in range(self.columns)] for r in range(self.rows)]

    def generate_empty_matrix(self) -> None:
        self.grid = [[Cell() for _ in range(self.columns)] for _ in range(self.rows)]
        self.safe_cells = []

    def plant_mines(self) -> None:
        # Rejection sampling; only terminates while mines < rows * columns
        planted = 0
        attempts = 0
        while planted < self.mines:
            row = self._pick(self.rows)
            col = self._pick(self.columns)
            attempts += 1
            cell = self.grid[row][col]
            if cell.is_mine:
                continue
            cell.is_mine = True
            planted += 1
        logger.debug(f"Planted {planted} mines in {attempts} attempts")

    def mine_mask(self) -> np.ndarray:
        return np.array([[c.is_mine for c in row] for row in self.grid], dtype=bool)

    def populate(self) -> None:
        counts = adjacent_mine_counts(self.mine_mask())
        for r in range(self.rows):
            for c in range(self.columns):
                cell = self.grid[r][c]
                if cell.is_mine:
                    continue
                cell.adj_mines = int(counts[r, c])
                self.safe_cells.append((r, c))
        logger.debug(f"Populated field with {len(self.safe_cells)} safe cells")

    def reveal_first(self) -> Coordinate:
        if not self.options.reveal_first_cell or not self.safe_cells:
            return NO_CELL

        zero_cells = [(r, c) for r, c in self.safe_cells if self.grid[r][c].adj_mines == 0]
        if self.options.zero_first_cell and zero_cells:
            row, col = zero_cells[self._pick(len(zero_cells))]
            self.grid[row][col].is_revealed = True
            self.reveal_surroundings((row, col))
        else:
            row, col = self.safe_cells[self._pick(len(self.safe_cells))]
            self.grid[row][col].is_revealed = True
        logger.debug(f"Revealed first cell at {(row, col)}")
        return row, col

    def reveal_surroundings(self, origin: Coordinate) -> None:
        """Flood-fill the zero region around `origin`.

        Every still-hidden cell around a zero gets revealed; the ones that
        are zeros themselves are expanded in turn. Only meant to be called
        on a zero cell.
        """
        pending = [origin]
        while pending:
            row, col = pending.pop()
            for nr, nc in self.neighbors(row, col, include_self=True):
                c = self.grid[nr][nc]
                if c.is_revealed:
                    continue
                c.is_revealed = True
                if not c.is_mine and c.adj_mines == 0:
                    pending.append((nr, nc))

    def get_text_representation(self) -> str:
        separator = ' ' if self.options.spaces else ''
        return '\n'.join(separator.join(row) for row in self.matrix)

    def render_ascii(self) -> str:
        rows = []
        for r in range(self.rows):
            row = []
            for c in range(self.columns):
                cell = self.grid[r][c]
                if cell.is_mine:
                    row.append('*')
                elif cell.adj_mines == 0:
                    row.append('.')
                else:
                    row.append(str(cell.adj_mines))
            rows.append(' '.join(row))
        return '\n'.join(rows)

    def start(self) -> Result:
        if self.rows < 1 or self.columns < 1 or self.mines < 1:
            logger.info(f"Refusing {self.rows}x{self.columns} field with {self.mines} mines: degenerate size")
            return None
        if self.rows * self.columns <= self.mines * 2:
            logger.info(f"Refusing {self.rows}x{self.columns} field with {self.mines} mines: too dense")
            return None

        self.generate_empty_matrix()
        self.plant_mines()
        self.populate()
        self.reveal_first()

        if self.options.return_type is ReturnType.CODE:
            return f'```{self.get_text_representation()}```'
        if self.options.return_type is ReturnType.MATRIX:
            return self.matrix
        return self.get_text_representation()


def generate(opts: Union[Options, dict, None] = None, **overrides: Any) -> Result:
    return Minesweeper(opts, **overrides).start()
