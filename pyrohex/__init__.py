"""Forest fire on a hexagonal grid: the model, a density simulation, a chart and a pygame game."""

__version__ = "0.1.0"