# pyrohex

A forest fire on a hexagonal grid. You can run it as an interactive game or as
a batch simulation. The simulation shows how many trees survive at each
planting density.

Each cell of the grid is in one of five states:

- empty ground
- a living tree
- a smouldering tree
- a burning tree
- a burned-out tree

On every step, each smouldering tree sets its living neighbours smouldering
and then starts to burn. Each burning tree burns out. The fire stops when no
cell is smouldering or burning.

## Installation

```
pip install .
```

This also installs pygame, which draws the game window, and matplotlib, which
draws the simulation chart.

## Usage

The `pyrohex` command needs exactly one mode: `--game` (`-g`) or
`--simulation` (`-s`). `pyrohex --version` prints the version.

### Game

```
pyrohex --game
```

This opens a resizable 800×600 window with a forest planted at half density.
The cell under the mouse is drawn brighter. Right-click to set alight the cells
whose centres are near the pointer. Clicking empty ground also starts a fire
there. The fire then spreads by one step each frame. Press Escape or close the
window to quit.

### Simulation

```
pyrohex --simulation --steps 20
```

`--steps` gives the number of trials per density. It must be a non-negative
integer. It is required in simulation mode and is not allowed in game mode.

The simulation plants forests at densities 1.0, 0.9, … down to 0.0. Each trial
sets one random living tree alight and lets the fire burn out. The result for
each density is the number of surviving trees, averaged over the trials. A
trial at a density that plants no trees counts as zero survivors.

The results are drawn as an 800×600 chart of average survivors against
density. The chart is saved as `survivors_vs_density.png` in the current
directory.

### Grid size

Both modes accept `--grid WIDTH HEIGHT`. The default is `--grid 25 50`:

```
pyrohex --simulation --steps 10 --grid 40 30
```

If a value is not a non-negative integer, that dimension falls back to its
default.

## Library use

```python
import random
from pyrohex.grid import CellState, HexGrid
from pyrohex.simulation import Simulation
from pyrohex.plot import plot_results

grid = HexGrid(25, 50).plant_trees(0.6, random.Random(1))
row, col = sorted(grid.alive_trees)[0]
grid.ignite(row, col)
while grid.is_burning():
    grid.update()
print(len(grid.alive_trees), grid.dead_trees)

sim = Simulation(25, 50, steps=5, rng=random.Random(1))
results = sim.run()          # list of (density, average survivors)
plot_results(results, "survivors_vs_density.png")
```

### `pyrohex.grid`

- `CellState`: an integer enum with the members `EMPTY`, `TREE`,
  `SMOLDERING`, `BURNING` and `BURNED`.
- `HexGrid(q, r)`: a map of `r` rows. Each row is stored as `q + r // 2`
  cells, and `row_bounds(row)` gives the columns of that row that lie on the
  map. Its methods:
  - `plant_trees(density, rng=None)` fills a fraction of the map, between 0
    and 1, with trees, and returns the grid.
  - `alive_neighbors(row, col)` lists the neighbours of a cell that hold a
    living tree.
  - `ignite(row, col)` sets a cell smouldering.
  - `update()` advances the fire by one step.
  - `is_burning()` tells whether the fire is still going.

  The attributes `alive_trees`, `smoldering`, `burning` and `dead_trees` track
  the state of the fire.

### `pyrohex.simulation`

`Simulation(q, r, steps, rng=None)` has these methods:

- `densities()`: the densities that are tested.
- `run_trial(density)`: runs one trial and returns the number of surviving
  trees.
- `run()`: returns a list of `(density, average survivors)` pairs.

### `pyrohex.plot`

- `plot_results(results, output_path="survivors_vs_density.png")` writes the
  PNG chart and returns its path. With no results it prints `no data` and
  returns `None`.
- `padded_range(values)` returns the span of the values widened by 5% on each
  side.

### `pyrohex.game`

- `calculate_geometry(rows, cols, width, height)` fits the grid into a window
  and centres it. It returns a `Geometry` with `hex_size`, `offset_x`,
  `offset_y` and `cell_center(row, col)`.
- `Level(q, r, density=0.5, width=800, height=600, rng=None)` holds one forest.
  Its methods:
  - `cells()` iterates over the map.
  - `ignite_at(x, y)` sets alight the cells near a screen point.
  - `advance()` runs one fire step.
  - `render(surface, mouse_pos, time)` draws the forest onto a pygame surface.
- `Game(q, r).run()` opens the window.

## What it does not do

The game has a single level and keeps no score. `Level` and `Game` have points
fields, but nothing ever changes them. The game never ends by itself: it runs
until you quit. The simulation always writes its chart to the same file name,
and there is no option to change it from the command line.

## Running the tests

```
pip install .[test]
pytest
```