# csesalgo

A library of small, self-contained algorithms for classic competitive
programming problems. Each function takes its input as ordinary Python values
(lists, tuples, strings) and returns the answer as a Python value.

Nodes and positions are numbered from 1, as in the problem statements. When an
instance has no solution, the function raises
`csesalgo.errors.ImpossibleError`. Invalid arguments, such as a negative
count, raise `ValueError`. Node numbers outside `1..n` raise `IndexError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `csesalgo.combinatorics`

- `apple_division(weights)`: the smallest difference between the totals of two groups.
- `bit_strings(n)`: `2**n` modulo `10**9 + 7`.
- `creating_strings(text)`: every distinct arrangement of the characters, sorted.
- `gray_code(n)`: the reflected Gray code of `n` bits, as bit strings.
- `tower_of_hanoi(n)`: the list of `(from_peg, to_peg)` moves that carry `n` discs from peg 1 to peg 3.
- `trailing_zeros(n)`: the number of trailing zeros of `n!`.
- `missing_coin_sum(coins)`: the smallest sum that no subset of the coins makes.
- `stick_lengths(sticks)`: the least total cost to make all sticks the same length.

### `csesalgo.textsearch`

- `prefix_function(text)`: the longest proper border of each prefix.
- `borders(text)`: the lengths of all proper borders, shortest first.
- `count_occurrences(text, pattern)`: the number of matches of `pattern` in `text`, overlapping matches included.

### `csesalgo.sequences`

- `CollectingNumbers(values)`: holds a permutation of `1..n` and its current
  number of collection rounds in the `rounds` attribute. `swap(i, j)` exchanges
  two 1-based positions and returns the new round count.
- `collecting_rounds(values, swaps)`: the round count after each swap.

### `csesalgo.disjoint_set`

- `DisjointSet(n)`: union by size with path compression over nodes `1..n`.
  `find(node)` returns the representative of the node's set. `union(u, v)`
  returns whether two separate sets were merged. The attributes `components`
  and `max_size` follow every merge.
- `connect_components(n, roads)`: new roads that join consecutive components.
- `road_construction(n, roads)`: `(components, largest size)` after each road is added.
- `road_reparation(n, roads)`: the cost of a minimum spanning tree over `(u, v, cost)` roads.

### `csesalgo.graphs`

- `building_roads(n, roads)`: new roads from the first component's city to each other component.
- `building_teams(n, friendships)`: a team (1 or 2) for each pupil so that no two friends share a team.
- `course_schedule(n, requirements)`: a topological order of the courses.
- `flight_routes_check(n, flights)`: `None` when every city reaches every
  other. Otherwise it returns a pair `(a, b)` such that there is no route from `a` to `b`.
- `message_route(n, links)`: a shortest path from computer 1 to computer `n`.
- `round_trip(n, flights)`: a directed cycle, with the first city repeated at the end.
- `shortest_routes(n, flights)`: the shortest distance from city 1 to each
  city over weighted `(u, v, weight)` flights. Cities that cannot be reached get `None`.

### `csesalgo.grids`

A grid is a sequence of equally long strings. `#` marks a wall.

- `count_rooms(grid)`: the number of connected areas of cells that are not walls.
- `labyrinth(grid)`: a shortest path from `A` to `B`, as a string of `U`, `D`, `L` and `R` moves.
- `monsters(grid)`: moves that take `A` to the edge of the grid, reaching every
  cell before any `M` can reach it.

### `csesalgo.trees`

Trees have nodes `1..n` and are rooted at node 1.

- `AncestorTable(bosses)`: a binary-lifting table. `bosses` lists the direct
  boss of employees 2, 3, and so on. `ancestor(node, k)` returns the boss `k`
  levels up, or `None` when there is no such boss.
- `LcaTree(n, edges)`, or `LcaTree.from_bosses(bosses)`: `lca(a, b)` returns
  the lowest common ancestor and `distance(a, b)` returns the number of edges
  between the two nodes. The attribute `depth` holds each node's depth.
- `find_centroid(n, edges)`: the smallest-numbered centroid.
- `subordinates(bosses)`: the number of subordinates of each employee.
- `tree_diameter(n, edges)`: the number of edges on the longest path.
- `tree_distances(n, edges)`: for each node, the distance to the node farthest from it.

## Example

```python
from csesalgo.combinatorics import apple_division, gray_code
from csesalgo.textsearch import borders, count_occurrences
from csesalgo.disjoint_set import DisjointSet
from csesalgo.errors import ImpossibleError
from csesalgo.graphs import message_route
from csesalgo.trees import LcaTree

apple_division([3, 2, 7, 4, 1])   # 1
gray_code(2)                      # ['00', '01', '11', '10']
borders("abcababcab")             # [2, 5]
count_occurrences("saippuakauppias", "pp")   # 2

ds = DisjointSet(5)
ds.union(1, 2)
ds.find(2) == ds.find(1)          # True

tree = LcaTree(5, [(1, 2), (1, 3), (3, 4), (3, 5)])
tree.lca(4, 5)                    # 3
tree.distance(2, 4)               # 3

try:
    message_route(3, [(1, 2)])
except ImpossibleError:
    print("IMPOSSIBLE")
```

## What it does not do

The package is a library only. It has no command-line program and does not
parse problem input from standard input or print answers in a contest output
format. Callers read the input and format the output themselves.