# eulerkit

A small, dependency-free toolkit of solvers for classic recreational
mathematics problems: prime sieves and primality tests, digit and
divisor chains, Roman numerals, Sudoku, shortest paths through number
grids, dice and card puzzles, and exact arithmetic over digit sets.

Every module exposes plain functions that work on ordinary Python
values. Modules built around one specific problem carry that problem's
data and also provide a `solve()` function that answers it.

## Modules at a glance

| Module | What it offers |
| --- | --- |
| `eulerkit.paths` | `minimal_path_sum(matrix)`: cheapest route from the top-left to the bottom-right cell, moving in four directions; `solve()` |
| `eulerkit.squares` | `is_square`, `closest_rectangle_area`, `cuboid_route_threshold`, `almost_equilateral_perimeter_sum` |
| `eulerkit.geometry` | `count_right_triangles(size)`: right triangles with one corner at the origin on a lattice grid |
| `eulerkit.roman` | `to_number`, `to_numeral`, `characters_saved`; `solve()` |
| `eulerkit.chains` | `square_digit_sum`, `count_arriving_at_89`, `proper_divisor_sums`, `longest_amicable_chain_minimum` |
| `eulerkit.sudoku` | the `Grid` class with `solve`, `is_valid`, `top_left_number` and a `rows` property; `solve_all(puzzles)`; `solve()` |
| `eulerkit.exponents` | `largest_exponential_line`, `last_digits_of_prime`; `solve()` |
| `eulerkit.monopoly` | Monte Carlo board simulation: `simulate`, `most_visited`, `solve` |
| `eulerkit.primes` | `primes_up_to`, `is_prime`, `count_prime_power_triples`, `first_composite_primorial_plus_one` |
| `eulerkit.products` | `factorizations(n)` and `minimal_product_sum_total(max_k)` |
| `eulerkit.dice` | `count_cube_arrangements()` for the two-cube square display puzzle |
| `eulerkit.expressions` | `reachable_targets`, `consecutive_run`, `best_digit_set` |

## Examples

Perfect squares and primes:

```python
from eulerkit.squares import is_square
from eulerkit.primes import is_prime, primes_up_to

is_square(16384)         # True
is_square(99)            # False
is_prime(100000007)      # True
primes_up_to(20)         # [2, 3, 5, 7, 11, 13, 17, 19]
```

`is_prime` is a Miller-Rabin test that is deterministic for every
number below 3.3 * 10**24.

Roman numerals, read in any additive form and written back in the
shortest form (thousands are written as repeated `M`):

```python
from eulerkit.roman import to_number, to_numeral, characters_saved

to_number("XIIII")                    # 14
to_numeral(14)                        # "XIV"
characters_saved(["XIIII", "VIIII"])  # 5
```

Invalid characters, an empty numeral or a number below 1 raise
`ValueError`.

Shortest path through a grid of weights, counting both end cells:

```python
from eulerkit.paths import minimal_path_sum

minimal_path_sum([
    [1, 9, 1],
    [1, 9, 1],
    [1, 1, 1],
])  # 5
```

Solving a Sudoku, with blanks written as 0. Rows may be lists of
integers or strings of digits:

```python
from eulerkit.sudoku import Grid, solve_all

grid = Grid([
    "003020600",
    "900305001",
    "001806400",
    "008102900",
    "700000008",
    "006708200",
    "002609500",
    "800203009",
    "005010300",
])
grid.solve()            # True; the grid is filled in place
grid.is_valid()         # True
grid.top_left_number()  # the three digits of the top-left cells as one number

solved = solve_all([grid.rows])  # list of solved Grid objects
```

`Grid.solve()` returns `False` and leaves the grid unchanged when the
puzzle has no solution; `solve_all` raises `ValueError` in that case.

Enumerating multiplicative partitions (a generator of tuples):

```python
from eulerkit.products import factorizations

list(factorizations(12))  # [(12,), (3, 4), (2, 6), (2, 2, 3)]
```

Arithmetic over a digit set, with exact fractions and division by zero
giving zero:

```python
from eulerkit.expressions import consecutive_run, reachable_targets

consecutive_run((1, 2, 3, 4))  # largest n with 1..n all reachable
```

## Problem answers

Modules written around one specific problem carry its data and offer
`solve()`:

```python
from eulerkit import exponents, paths, roman, sudoku

paths.solve()      # minimal path sum through the bundled 80x80 matrix
roman.solve()      # characters saved over the bundled numerals
sudoku.solve()     # sum of top-left numbers of the fifty bundled puzzles
exponents.solve()  # (largest exponential line, last ten digits of the prime)
```

The board simulation in `eulerkit.monopoly` is random; pass a `seed`
to `simulate` or `solve` for repeatable results:

```python
from eulerkit.monopoly import most_visited, simulate

counts = simulate(rolls=100_000, sides=4, seed=1)
most_visited(counts, 3)  # indices of the three most visited squares
```

## What the package does not do

There is no command-line program: everything is used by importing
the modules from Python. The problem data is bundled inside the
modules, and nothing is read from or written to files.

## Testing

The test suite uses pytest and is available through the `test` extra:

```
pip install -e ".[test]"
pytest
```