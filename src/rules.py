"""Rule variants: topology, transition table and seeding distribution."""
from dataclasses import dataclass
from typing import Callable, Tuple

import numpy as np

from game_of_life import CellState

ALIVE = CellState.ALIVE
DEAD = CellState.DEAD
INFECTED = CellState.INFECTED


def conway_transition(cells, alive, infected=None):
    """Classic B3/S23 step: survive on 2 or 3 neighbors, birth on exactly 3."""
    survive = (cells == ALIVE) & ((alive == 2) | (alive == 3))
    birth = (cells == DEAD) & (alive == 3)
    nxt = np.full(cells.shape, DEAD, dtype=np.uint8)
    nxt[survive | birth] = ALIVE
    return nxt


def infection_transition(cells, alive, infected):
    """Conway's rules plus an absorbing infected state.

    A live cell with more than one infected neighbor becomes infected. Dead
    cells are never infected directly, they can only be born alive.
    """
    nxt = conway_transition(cells, alive)
    nxt[(cells == ALIVE) & (infected > 1)] = INFECTED
    nxt[cells == INFECTED] = INFECTED
    return nxt


def draw_infection(rng, shape):
    # 0-51 alive, 52-98 dead, 99 infected
    num = rng.integers(0, 100, size=shape)
    return np.select([num <= 51, num <= 98], [ALIVE, DEAD], default=INFECTED)


def draw_conway(rng, shape):
    return np.where(rng.random(shape) < 0.5, ALIVE, DEAD)


@dataclass(frozen=True)
class Variant:
    name: str
    size: int
    wrap: bool
    counted: Tuple[CellState, ...]
    transition: Callable
    draw: Callable


INFECTION = Variant(
    name="infection",
    size=30,
    wrap=False,
    counted=(ALIVE, INFECTED),
    transition=infection_transition,
    draw=draw_infection,
)

CONWAY = Variant(
    name="conway",
    size=130,
    wrap=True,
    counted=(ALIVE,),
    transition=conway_transition,
    draw=draw_conway,
)

VARIANTS = {v.name: v for v in (INFECTION, CONWAY)}


def get_variant(name):
    try:
        return VARIANTS[name]
    except KeyError:
        raise KeyError(f"unknown variant {name!r}, choose from {sorted(VARIANTS)}") from None
