"""Window drawing of the grid, cones and car."""

from __future__ import annotations

import math

import pygame

Color = tuple[int, int, int]
Line = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255)
LIGHT_GRAY: Color = (200, 200, 200)
BLUE: Color = (0, 0, 255)
RED: Color = (255, 0, 0)


def grid_lines(width: int, height: int, grid_size: int) -> list[Line]:
    """Vertical then horizontal grid lines as ``(x1, y1, x2, y2)``."""
    if grid_size <= 0:
        raise ValueError("grid_size must be positive")
    vertical = [(x, 0, x, height) for x in range(0, width, grid_size)]
    horizontal = [(0, y, width, y) for y in range(0, height, grid_size)]
    return vertical + horizontal


def filled_circle_spans(centre_x: int, centre_y: int, radius: int) -> list[Line]:
    """Horizontal spans, top to bottom, that together fill a circle."""
    spans = []
    for y in range(-radius, radius + 1):
        dx = int(math.sqrt(radius * radius - y * y))
        spans.append((centre_x - dx, centre_y + y, centre_x + dx, centre_y + y))
    return spans


def heading_endpoint(x: float, y: float, radius: float, yaw: float) -> tuple[int, int]:
    """End of the heading line drawn from ``(x, y)`` in the ``yaw`` direction."""
    return int(x + radius * math.cos(yaw)), int(y + radius * math.sin(yaw))


class Graphics:
    """A window with a drawing colour, closed on exit from a ``with`` block."""

    def __init__(self, title: str, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.color: Color = (0, 0, 0)
        try:
            pygame.display.init()
            self.surface = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            pygame.quit()
            raise RuntimeError(f"cannot open window: {exc}") from exc
        pygame.display.set_caption(title)

    def __enter__(self) -> Graphics:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def set_color(self, r: int, g: int, b: int) -> None:
        """Set the colour used by the following drawing calls."""
        self.color = (r, g, b)

    def _line(self, line: Line) -> None:
        x1, y1, x2, y2 = line
        pygame.draw.line(self.surface, self.color, (x1, y1), (x2, y2))

    def clear(self) -> None:
        """Fill the window with white."""
        self.set_color(*WHITE)
        self.surface.fill(self.color)

    def draw_grid(self, grid_size: int) -> None:
        """Draw light gray grid lines ``grid_size`` pixels apart."""
        self.set_color(*LIGHT_GRAY)
        for line in grid_lines(self.width, self.height, grid_size):
            self._line(line)

    def draw_filled_circle(self, centre_x: int, centre_y: int, radius: int) -> None:
        """Draw a filled circle in the current colour."""
        for span in filled_circle_spans(centre_x, centre_y, radius):
            self._line(span)

    def draw_car(self, x: float, y: float, radius: float, yaw: float) -> None:
        """Draw the car as a blue disc with a red heading line."""
        self.set_color(*BLUE)
        self.draw_filled_circle(int(x), int(y), int(radius))
        x2, y2 = heading_endpoint(x, y, radius, yaw)
        self.set_color(*RED)
        self._line((int(x), int(y), x2, y2))

    def poll_quit(self) -> bool:
        """Handle pending window events; True when the window was asked to close."""
        quit_requested = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
        return quit_requested

    def present(self) -> None:
        """Show the frame drawn so far."""
        pygame.display.flip()

    def close(self) -> None:
        """Close the window and release the display."""
        pygame.display.quit()
        pygame.quit()