import sys
from enum import IntEnum

import numpy as np
from termcolor import colored


class CellState(IntEnum):
    DEAD = 0
    ALIVE = 1
    INFECTED = 2


GLYPHS = {
    CellState.DEAD: "░░░",
    CellState.ALIVE: "███",
    CellState.INFECTED: "XXX",
}

GLYPH_COLORS = {
    CellState.ALIVE: "green",
    CellState.INFECTED: "red",
}

OFFSETS = [(i, j) for i in (-1, 0, 1) for j in (-1, 0, 1) if (i != 0 or j != 0)]


class Grid:
    """Square grid of cell states, advanced by the rule of its variant."""

    def __init__(self, size, variant):
        if size <= 0:
            raise ValueError(f"grid size must be positive, got {size}")
        self.size = size
        self.variant = variant
        self.cells = np.full((size, size), CellState.DEAD, dtype=np.uint8)
        self.generation = 0

    @property
    def wrap(self):
        return self.variant.wrap

    @property
    def shape(self):
        return self.cells.shape

    def randomize(self, rng=None):
        """Replace every cell with an independent draw from the variant."""
        if rng is None:
            rng = np.random.default_rng()
        self.cells = self.variant.draw(rng, self.shape).astype(np.uint8)

    def render(self, out=None, color=False):
        """Write the grid to `out`, one line of glyphs per row."""
        if out is None:
            out = sys.stdout
        glyphs = {state: self._glyph(state, color) for state in CellState}
        out.write("".join(
            "".join(glyphs[c] for c in row) + "\n" for row in self.cells.tolist()
        ))

    @staticmethod
    def _glyph(state, color):
        if color and state in GLYPH_COLORS:
            return colored(GLYPHS[state], GLYPH_COLORS[state], force_color=True)
        return GLYPHS[state]

    def advance(self):
        """Advance the simulation by one generation."""
        current = self.cells.copy()
        current.flags.writeable = False
        alive = self.count_neighbors(CellState.ALIVE, current)
        infected = None
        if CellState.INFECTED in self.variant.counted:
            infected = self.count_neighbors(CellState.INFECTED, current)
        self.cells = self.variant.transition(current, alive, infected).astype(np.uint8)
        self.generation += 1

    def count_neighbors(self, state, cells=None):
        """Count, for each cell, the neighbors that are in `state`."""
        if cells is None:
            cells = self.cells
        mask = (cells == state).astype(int)
        if self.wrap:
            return sum(np.roll(np.roll(mask, i, 0), j, 1) for i, j in OFFSETS)
        # zero border so out-of-bounds positions never count
        padded = np.pad(mask, 1)
        h, w = mask.shape
        return sum(padded[1 + i:1 + i + h, 1 + j:1 + j + w] for i, j in OFFSETS)

    def neighbor_positions(self, row, col):
        """Positions examined when counting the neighbors of (row, col)."""
        positions = []
        for i, j in OFFSETS:
            r, c = row + i, col + j
            if self.wrap:
                positions.append((r % self.size, c % self.size))
            elif 0 <= r < self.size and 0 <= c < self.size:
                positions.append((r, c))
        return positions

    def set_pattern(self, pattern, row, col, state=CellState.ALIVE):
        """Place a smaller 0/1 pattern with its top-left corner at (row, col)."""
        pattern = np.asarray(pattern)
        h, w = pattern.shape
        region = self.cells[row:row+h, col:col+w]
        region[pattern[:region.shape[0], :region.shape[1]] != 0] = state

    def count(self, state=CellState.ALIVE):
        """Return number of cells in `state`."""
        return int(np.count_nonzero(self.cells == state))
