# daa_algorithms

Textbook algorithms as plain Python functions. Each one takes ordinary lists
and returns its result rather than printing it. A small command runs any of
them on integers read from standard input.

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

| Module | Names | What it does |
| --- | --- | --- |
| `daa_algorithms.knapsack` | `knapsack_table`, `knapsack`, `fractional_knapsack`, `KnapsackStep`, `FractionalResult` | 0/1 knapsack by dynamic programming, returning the full table or only the best profit. Greedy fractional knapsack that records each item it takes. |
| `daa_algorithms.sorting` | `heapify`, `heap_sort`, `merge_sort`, `partition`, `quick_sort` | Heap sort, merge sort and quick sort (first element as pivot). Each returns a new sorted list. |
| `daa_algorithms.permutations` | `swap_permutations`, `largest_mobile`, `johnson_trotter` | Permutations by recursive swapping, and by the Johnson–Trotter method. |
| `daa_algorithms.queens` | `is_safe`, `n_queens` | Every placement of N non-attacking queens, in lexicographic order. |
| `daa_algorithms.shortest_paths` | `dijkstra`, `floyd`, `INF` | Single-source and all-pairs shortest paths over a cost matrix. |
| `daa_algorithms.spanning_trees` | `kruskal`, `prim`, `SpanningTree` | Minimum spanning trees, returned as their edges in the order chosen plus the total cost. |
| `daa_algorithms.topological` | `topological_sort_dfs`, `indegrees`, `topological_sort_source_removal` | Topological order by depth-first search, and by source removal. |
| `daa_algorithms.closure` | `transitive_closure` | Path matrix of a directed graph by Warshall's method. |

### Graph input

Graphs are square matrices given as lists of lists, with vertices numbered from 0.

- **Cost matrices:** the value `INF` (999) means "no edge".
- **Unreachable vertices:** `dijkstra` and `floyd` report these as `None`.

### Errors

Each of these raises `ValueError`:

- A matrix that is not square.
- A disconnected graph passed to `kruskal` or `prim`.
- A cyclic graph passed to `topological_sort_source_removal`.
- Mismatched weight and profit lists.
- A negative capacity or weight in `knapsack_table`.
- A weight that is not positive in `fractional_knapsack`.

### Details

- **`fractional_knapsack`:** returns a `FractionalResult`. It holds `total_value` and a list of `KnapsackStep`s, each with `item` (1-based), `weight`, `profit`, `fraction`, `space_left` and `complete`.
- **`johnson_trotter(n)`:** yields at most `2 ** n` permutations of `1..n`. For `n >= 4` it therefore stops before all `n!` of them.
- **`prim`:** grows the tree from vertex 0. Each edge is `(new vertex, parent)`.

## Library use

```python
from daa_algorithms.sorting import merge_sort
from daa_algorithms.knapsack import knapsack
from daa_algorithms.closure import transitive_closure

merge_sort([5, 2, 9, 1])                                   # [1, 2, 5, 9]
knapsack([2, 1, 3, 2], [12, 10, 20, 15], 5)                # 37
transitive_closure([[0, 1, 0], [0, 0, 1], [0, 0, 0]])      # [[0, 1, 1], [0, 0, 1], [0, 0, 0]]
```

## Command line

The `daa-algorithms` command takes the name of an algorithm as a subcommand:

```
daa-algorithms --help
```

It reads all of standard input as whitespace-separated integers and prints the result. If input is missing or invalid, it writes `error: ...` to standard error and exits with status 1.

| Subcommand | Input |
| --- | --- |
| `knapsack` | n, n weights, n profits, capacity (prints the best profit and the DP table) |
| `fractional-knapsack` | n, n weights, n profits, capacity |
| `heap-sort` | n, then n elements |
| `quick-sort` | n. Sorts n random values below 200; `--seed` fixes them. |
| `johnson-trotter` | n |
| `n-queens` | n |
| `dijkstra` | n, an n × n cost matrix, and a 1-based source vertex |
| `floyd` | n, an n × n cost matrix |
| `kruskal` | n, an n × n cost matrix |
| `prim` | n, an n × n cost matrix |
| `topological` | n, an n × n adjacency matrix (depth-first order) |
| `warshall` | n, an n × n adjacency matrix |

Example:

```
echo "4  2 1 3 2  12 10 20 15  5" | daa-algorithms knapsack
```

The first line printed is `Maximum Profit is: 37`.

## What it does not do

The command does not prompt for its input. It reads the input once and runs the algorithm a single time; it does not offer to run again.

Some functions have no subcommand and are available only from Python:

- `merge_sort`
- `swap_permutations`
- `topological_sort_source_removal`