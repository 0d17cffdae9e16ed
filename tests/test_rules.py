import numpy as np
import pytest

from game_of_life import CellState
from rules import CONWAY, INFECTION, conway_transition, get_variant, infection_transition

ALIVE = CellState.ALIVE
DEAD = CellState.DEAD
INFECTED = CellState.INFECTED


def cells_of(*states):
    return np.array([states], dtype=np.uint8)


def counts(*values):
    return np.array([values])


def test_conway_table():
    cells = cells_of(ALIVE, ALIVE, ALIVE, ALIVE, DEAD, DEAD, DEAD)
    alive = counts(1, 2, 3, 4, 2, 3, 4)

    nxt = conway_transition(cells, alive)

    assert nxt.tolist() == [[DEAD, ALIVE, ALIVE, DEAD, DEAD, ALIVE, DEAD]]


def test_infection_table():
    cells = cells_of(ALIVE, ALIVE, ALIVE, ALIVE, DEAD, DEAD, INFECTED, INFECTED)
    alive = counts(2, 2, 1, 8, 3, 3, 0, 3)
    infected = counts(2, 1, 1, 0, 5, 0, 0, 8)

    nxt = infection_transition(cells, alive, infected)

    assert nxt.tolist() == [[INFECTED, ALIVE, DEAD, DEAD, ALIVE, ALIVE, INFECTED, INFECTED]]


def test_infection_beats_overcrowding():
    nxt = infection_transition(cells_of(ALIVE), counts(6), counts(2))

    assert nxt.tolist() == [[INFECTED]]


def test_transitions_do_not_touch_input():
    cells = cells_of(ALIVE, DEAD, INFECTED)
    before = cells.copy()

    infection_transition(cells, counts(0, 3, 0), counts(3, 3, 3))

    assert np.array_equal(cells, before)


def test_variant_configuration():
    assert (INFECTION.size, INFECTION.wrap) == (30, False)
    assert (CONWAY.size, CONWAY.wrap) == (130, True)
    assert INFECTED in INFECTION.counted
    assert INFECTED not in CONWAY.counted


def test_get_variant():
    assert get_variant("conway") is CONWAY
    assert get_variant("infection") is INFECTION
    with pytest.raises(KeyError, match="unknown variant"):
        get_variant("highlife")


def test_draws_only_produce_variant_states():
    rng = np.random.default_rng(0)

    assert set(np.unique(CONWAY.draw(rng, (50, 50)))) <= {DEAD, ALIVE}
    assert set(np.unique(INFECTION.draw(rng, (50, 50)))) == {DEAD, ALIVE, INFECTED}
