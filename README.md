# cs8lab

Classic data structures, search algorithms and puzzle models in plain Python,
with no runtime dependencies.

## Modules

| Module | Contents |
| --- | --- |
| `cs8lab.sorting` | `merge_sort`, `merge`, `quick_sort`, `partition`: in-place sorts of mutable sequences |
| `cs8lab.graph` | `WeightedGraph`, `Edge`, `Vertex` and Dijkstra's `shortest_path` |
| `cs8lab.astar` | `PuzzleState`, `Coord`, `find_zero`, `get_children`, `reconstruct`, `manhattan_distance`, `custom_heuristic` and `a_star` for sliding puzzles |
| `cs8lab.nqueens` | `n_queens_solutions`, `count_solutions`, `place`, `format_solution` |
| `cs8lab.heap` | `Heap`, a binary max-heap that compares with `<` only |
| `cs8lab.linked_list` | `LinkedList`, a doubly linked list of `ListNode`s |
| `cs8lab.trees` | `BSTree`, `AVLTree` and `TreeNode`, with in-, pre-, post- and breadth-order traversals |
| `cs8lab.state_machine` | `StateMachine` and `StateNode`, an automaton accepting letters, digits and underscores |
| `cs8lab.autocorrect` | `Word`, `read_words`, `levenshtein_distance`, `WordSuggester`, `IdentifierValidator` |
| `cs8lab.mine_cell` | `Cell` and `Coordinates` for a minesweeper board |
| `cs8lab.minesweeper` | `Model` (bombs, flood-fill reveals, flags, candidate flag sets) and `Step` |
| `cs8lab.backtracker` | `Backtracker`, which finds a flag layout by backtracking and replays its steps |
| `cs8lab.sliding_puzzle` | `Board`, `Tile`, `Frame` and `BoardController` for 8- and 15-puzzles |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Solve an 8-puzzle with A*; the result lists the tile values slid into the gap:

```python
from cs8lab.astar import PuzzleState, a_star, manhattan_distance

start = PuzzleState([[1, 2, 3], [4, 5, 6], [0, 7, 8]])
goal = PuzzleState([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
print(a_star(start, goal, manhattan_distance))  # [7, 8]
```

Shortest paths in a weighted graph, as the predecessor of each vertex
(-1 for the start and for unreachable vertices):

```python
from cs8lab.graph import WeightedGraph, shortest_path

graph = WeightedGraph()
for _ in range(3):
    graph.add_vertex()
graph.add_edge(0, 1, 4)
graph.add_edge(1, 2, 1)
graph.add_edge(0, 2, 7)
print(shortest_path(graph, 0))  # [-1, 0, 1]
```

Count n-queens solutions:

```python
from cs8lab.nqueens import count_solutions

print(count_solutions(8))  # 92
```

Edit distance, word suggestions and identifier checks:

```python
from cs8lab.autocorrect import IdentifierValidator, WordSuggester, levenshtein_distance

print(levenshtein_distance("kitten", "sitting"))  # 3

suggester = WordSuggester(["anna", "annabel", "bella"])
print(suggester.suggest("ann"))  # best matches first

validator = IdentifierValidator(["class", "return"])
print(validator.is_valid_identifier("my_var"))  # True
print(validator.is_valid_identifier("class"))   # False
```

`WordSuggester` scores each word by its edit distance to the query, less a
bonus when the word starts with the query, and returns up to five words
(queries shorter than two characters give none). Both classes can also be
built from a word-per-line file with `from_file`.

Reveal a minesweeper board and solve its flags:

```python
from cs8lab.backtracker import Backtracker
from cs8lab.mine_cell import Coordinates
from cs8lab.minesweeper import Model

model = Model(3, 3, mines=[Coordinates(0, 0)])
model.press_node(Coordinates(2, 2))
model.update_node_combinations()

solver = Backtracker(model)
print(solver.solve())  # True
while solver.take_a_step() is not None:
    pass
print(sorted(model.flagged_nodes))  # [Coordinates(x=0, y=0)]
```

Without `mines`, `Model(cols, rows, bombs, rng=...)` plants bombs at random.

Drive a sliding puzzle board:

```python
from cs8lab.sliding_puzzle import Board, BoardController

board = Board(fifteen=False)
controller = BoardController(board, fifteen=False)
controller.randomize()
while board.swapping:
    board.process_frame()
controller.solve_board()
while board.swapping:
    board.process_frame()
print(board.current_state())  # [[1, 2, 3], [4, 5, 6], [7, 8, 0]]
```

Each call to `Board.process_frame` performs at most one queued move and applies
its animation frames to the tiles' `position`.

## What this package does not do

The puzzle modules are models only: there is no window, drawing, textures or
mouse and keyboard handling, and no command or game launcher. A caller drives
the boards by calling their methods (`press_node`, `click_tile`,
`process_frame` and so on) and reads the state back.