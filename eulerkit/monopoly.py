"""Monte Carlo estimate of the most visited Monopoly squares."""

import random

BOARD_SIZE = 40
GO = 0
JAIL = 10
GO_TO_JAIL = 30
CHANCE = frozenset({7, 22, 36})
COMMUNITY_CHEST = frozenset({2, 17, 33})
CARDS = 16


def _next_railway(position):
    if position < 5 or position > 35:
        return 5
    if position < 15:
        return 15
    if position < 25:
        return 25
    return 35


def _next_utility(position):
    return 12 if position < 12 or position > 28 else 28


def _chance(position, card):
    """Square reached after drawing ``card`` from the Chance pile on ``position``."""
    fixed = {0: GO, 1: JAIL, 2: 11, 3: 24, 4: 39, 5: 5}
    if card in fixed:
        return fixed[card]
    if card in (6, 7):
        return _next_railway(position)
    if card == 8:
        return _next_utility(position)
    if card == 9:
        return position - 3
    return position


def _community_chest(position, card):
    """Square reached after drawing ``card`` from the Community Chest pile."""
    if card == 0:
        return GO
    if card == 1:
        return JAIL
    return position


def simulate(rolls=1_000_000, sides=4, seed=None):
    """Play ``rolls`` turns with two ``sides``-sided dice and count where each turn ends.

    Three doubles in a row send the player to jail without moving. Returns
    a list of 40 visit counts, one per square.
    """
    if rolls < 0:
        raise ValueError("rolls must not be negative")
    if sides < 1:
        raise ValueError("dice need at least one side")
    rng = random.Random(seed)
    counts = [0] * BOARD_SIZE
    position = GO
    doubles = 0
    for _ in range(rolls):
        first = rng.randrange(sides)
        second = rng.randrange(sides)
        if first == second:
            doubles += 1
            if doubles == 3:
                position = JAIL
                counts[JAIL] += 1
                doubles = 0
                continue
        else:
            doubles = 0
        position = (position + 2 + first + second) % BOARD_SIZE
        if position == GO_TO_JAIL:
            position = JAIL
        elif position in CHANCE:
            position = _chance(position, rng.randrange(CARDS))
        elif position in COMMUNITY_CHEST:
            position = _community_chest(position, rng.randrange(CARDS))
        counts[position] += 1
    return counts


def most_visited(counts, n=3):
    """Indices of the ``n`` largest counts, largest first; ties favour the lower index."""
    if n < 0:
        raise ValueError("n must not be negative")
    ranked = sorted(range(len(counts)), key=lambda square: -counts[square])
    return tuple(ranked[:n])


def solve(rolls=1_000_000, seed=None):
    """The three most visited squares with four-sided dice, written one after another."""
    return "".join(str(square) for square in most_visited(simulate(rolls, 4, seed), 3))