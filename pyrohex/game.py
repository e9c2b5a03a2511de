"""Interactive mode: watch the forest and set it on fire with the mouse."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterator, Sequence

import pygame

from pyrohex.grid import Cell, CellState, HexGrid

SQRT_3 = math.sqrt(3.0)
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_DENSITY = 0.5
FRAME_RATE = 60
IGNITE_RADIUS = 0.8
HOVER_BOOST = 0.2

Color = tuple[int, int, int, int]


def _rgba(r: float, g: float, b: float, a: float = 1.0) -> Color:
    return (round(r * 255), round(g * 255), round(b * 255), round(a * 255))


@dataclass(frozen=True)
class CellStyle:
    """Colours used to draw one cell state."""

    fill: Color
    border: Color
    highlight: Color


PALETTE: dict[CellState, CellStyle] = {
    CellState.EMPTY: CellStyle(
        _rgba(0.5, 0.3, 0.1), _rgba(0.3, 0.2, 0.05), _rgba(1.0, 1.0, 1.0, 0.2)
    ),
    CellState.TREE: CellStyle(
        _rgba(0.0, 0.8, 0.0), _rgba(0.0, 0.4, 0.0), _rgba(1.0, 1.0, 1.0, 0.3)
    ),
    CellState.SMOLDERING: CellStyle(
        _rgba(1.0, 0.5, 0.0), _rgba(0.8, 0.3, 0.0), _rgba(1.0, 1.0, 1.0, 0.4)
    ),
    CellState.BURNING: CellStyle(
        _rgba(1.0, 0.1, 0.1), _rgba(0.7, 0.05, 0.05), _rgba(1.0, 1.0, 1.0, 0.5)
    ),
    CellState.BURNED: CellStyle(
        _rgba(0.4, 0.4, 0.4), _rgba(0.2, 0.2, 0.2), _rgba(1.0, 1.0, 1.0, 0.1)
    ),
}
BACKGROUND: Color = _rgba(0.2, 0.15, 0.1)
GROUND_SHADE: Color = _rgba(0.3, 0.25, 0.15, 0.5)
TREE_PULSE: Color = _rgba(0.0, 1.0, 0.0, 0.3)

_HIGHLIGHTED_STATES = {CellState.TREE, CellState.SMOLDERING, CellState.BURNING}


@dataclass(frozen=True)
class Geometry:
    """Size and placement of the hexagons inside a window."""

    hex_size: float
    offset_x: float
    offset_y: float

    def cell_center(self, row: int, col: int) -> tuple[float, float]:
        """Return the screen position of the centre of a cell."""
        x = self.offset_x + (col + row / 2.0) * self.hex_size * SQRT_3
        y = self.offset_y + row * self.hex_size * 1.5
        return x, y


def calculate_geometry(rows: int, cols: int, width: float, height: float) -> Geometry:
    """Fit a grid of ``rows`` by ``cols`` stored cells into the window, centred."""
    if rows <= 0 or cols <= 0:
        raise ValueError("the grid must have at least one row and one column")
    span = cols + (rows - 1) / 2.0
    hex_size = min(width / (span * SQRT_3), height / (rows * 1.5))
    total_width = span * hex_size * SQRT_3
    total_height = rows * hex_size * 1.5
    return Geometry(
        hex_size=hex_size,
        offset_x=(width - total_width) / 2.0,
        offset_y=(height - total_height) / 2.0,
    )


def _hex_points(
    x: float, y: float, size: float, pointy: bool
) -> list[tuple[float, float]]:
    start = 90.0 if pointy else 0.0
    return [
        (
            x + size * math.cos(math.radians(start + 60.0 * i)),
            y + size * math.sin(math.radians(start + 60.0 * i)),
        )
        for i in range(6)
    ]


def _draw_polygon(
    surface: pygame.Surface,
    color: Color,
    points: Sequence[tuple[float, float]],
    width: int = 0,
) -> None:
    alpha = color[3]
    if alpha == 0:
        return
    if alpha == 255:
        pygame.draw.polygon(surface, color, points, width)
        return
    left = math.floor(min(px for px, _ in points))
    top = math.floor(min(py for _, py in points))
    right = math.ceil(max(px for px, _ in points))
    bottom = math.ceil(max(py for _, py in points))
    layer = pygame.Surface((right - left + 1, bottom - top + 1), pygame.SRCALPHA)
    pygame.draw.polygon(
        layer, color, [(px - left, py - top) for px, py in points], width
    )
    surface.blit(layer, (left, top))


def _brighten(color: Color) -> Color:
    boost = round(HOVER_BOOST * 255)
    r, g, b, a = color
    return (min(255, r + boost), min(255, g + boost), min(255, b + boost), a)


class Level:
    """One forest, its screen layout and the player's score."""

    def __init__(
        self,
        q: int,
        r: int,
        density: float = DEFAULT_DENSITY,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        rng: random.Random | None = None,
    ) -> None:
        self.board = HexGrid(q, r).plant_trees(density, rng)
        self.density = density
        self.player_points = 0
        self.best_points = 0
        self.geometry = calculate_geometry(
            self.board.rows, self.board.columns, width, height
        )

    def cells(self) -> Iterator[tuple[int, int, CellState]]:
        """Yield ``(row, col, state)`` for every cell on the map."""
        for row in range(self.board.rows):
            for col in self.board.row_bounds(row):
                yield row, col, self.board.cells[row][col]

    def ignite_at(self, x: float, y: float) -> list[Cell]:
        """Set on fire every cell whose centre is close to a screen point."""
        radius = self.geometry.hex_size * IGNITE_RADIUS
        hits = [
            (row, col)
            for row, col, _ in self.cells()
            if math.dist((x, y), self.geometry.cell_center(row, col)) < radius
        ]
        for row, col in hits:
            self.board.ignite(row, col)
        return hits

    def advance(self) -> None:
        """Let the fire spread by one step."""
        self.board.update()

    def render(
        self,
        surface: pygame.Surface,
        mouse_pos: tuple[float, float],
        time: float,
    ) -> None:
        """Draw the level onto ``surface``, refitting it to the surface size."""
        width, height = surface.get_size()
        self.geometry = calculate_geometry(
            self.board.rows, self.board.columns, width, height
        )
        surface.fill(BACKGROUND)
        shade = pygame.Surface((width, height - height // 2), pygame.SRCALPHA)
        shade.fill(GROUND_SHADE)
        surface.blit(shade, (0, height // 2))

        size = self.geometry.hex_size
        mouse_x, mouse_y = mouse_pos
        pulse = (math.sin(time) * 0.5 + 0.5) * 0.1 + 0.9

        for row, col, state in self.cells():
            x, y = self.geometry.cell_center(row, col)
            style = PALETTE[state]
            hovered = x - size <= mouse_x <= x + size and y - size <= mouse_y <= y + size
            fill = _brighten(style.fill) if hovered else style.fill

            _draw_polygon(surface, fill, _hex_points(x, y, size, pointy=True))
            if state in _HIGHLIGHTED_STATES:
                _draw_polygon(
                    surface,
                    style.highlight,
                    _hex_points(x, y - size * 0.1, size * 0.9, pointy=True),
                )
            if state is CellState.TREE:
                _draw_polygon(
                    surface,
                    TREE_PULSE,
                    _hex_points(x, y, size * pulse, pointy=False),
                    width=1,
                )


class Game:
    """The interactive window holding a single level."""

    def __init__(self, q: int, r: int) -> None:
        self.q = q
        self.r = r
        self.level = Level(q, r, DEFAULT_DENSITY)
        self.total_points = 0
        self.game_over = False

    def run(self) -> None:
        """Open the window and play until it is closed or Escape is pressed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode(
                (DEFAULT_WIDTH, DEFAULT_HEIGHT), pygame.RESIZABLE
            )
            pygame.display.set_caption("PyroHex")
            clock = pygame.time.Clock()
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT or (
                        event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                    ):
                        return
                    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 3:
                        self.level.ignite_at(*event.pos)
                self.level.render(
                    screen, pygame.mouse.get_pos(), pygame.time.get_ticks() / 1000.0
                )
                pygame.display.flip()
                self.level.advance()
                clock.tick(FRAME_RATE)
        finally:
            pygame.quit()