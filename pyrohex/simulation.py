"""Monte Carlo study of surviving trees against forest density."""

from __future__ import annotations

import random

from pyrohex.grid import HexGrid


class Simulation:
    """Burns many random forests at each density and averages the survivors."""

    density_step = 0.1

    def __init__(
        self, q: int, r: int, steps: int, rng: random.Random | None = None
    ) -> None:
        if steps < 0:
            raise ValueError("steps must be non-negative")
        self.q = q
        self.r = r
        self.steps = steps
        self.rng = rng if rng is not None else random.Random()

    def densities(self) -> list[float]:
        """Return the densities to test, from 1.0 down to 0.0."""
        count = round(1.0 / self.density_step)
        return [round(1.0 - i * self.density_step, 10) for i in range(count + 1)]

    def run_trial(self, density: float) -> int:
        """Burn one random forest from a random tree; return the survivors."""
        grid = HexGrid(self.q, self.r).plant_trees(density, self.rng)
        if not grid.alive_trees:
            return 0
        grid.ignite(*self.rng.choice(sorted(grid.alive_trees)))
        while grid.is_burning():
            grid.update()
        return len(grid.alive_trees)

    def run(self) -> list[tuple[float, float]]:
        """Return ``(density, average survivors)`` for every tested density."""
        results = []
        for density in self.densities():
            total = sum(self.run_trial(density) for _ in range(self.steps))
            average = total / self.steps if self.steps else 0.0
            results.append((density, average))
        return results