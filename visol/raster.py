"""An ASCII canvas with depth buffer, line drawing and a spinning cube demo."""

from __future__ import annotations

import argparse
import math
import sys
import time
from typing import Optional

from visol.vecmath import Vec3

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 40

CUBE_VERTICES = (
    Vec3(-1, -1, -1), Vec3(1, -1, -1), Vec3(1, 1, -1), Vec3(-1, 1, -1),
    Vec3(-1, -1, 1), Vec3(1, -1, 1), Vec3(1, 1, 1), Vec3(-1, 1, 1),
)
CUBE_EDGES = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
)


def _bresenham(x0: int, y0: int, x1: int, y1: int):
    dx, sx = abs(x1 - x0), (1 if x0 < x1 else -1)
    dy, sy = -abs(y1 - y0), (1 if y0 < y1 else -1)
    err = dx + dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


class Canvas:
    """A grid of characters with a depth buffer; depth 1.0 is farthest."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas size must be positive")
        self.width = width
        self.height = height
        self.clear()

    def clear(self) -> None:
        """Blank every cell and reset depth to the far value."""
        self.cells = [[" "] * self.width for _ in range(self.height)]
        self.depth = [[1.0] * self.width for _ in range(self.height)]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, c: str) -> None:
        """Set a cell; points outside the canvas are ignored."""
        if self._inside(x, y):
            self.cells[y][x] = c

    def put_pixel_depth(self, x: int, y: int, depth: float, c: str) -> None:
        """Set a cell only if ``depth`` is nearer than what is stored there."""
        if self._inside(x, y) and depth < self.depth[y][x]:
            self.depth[y][x] = depth
            self.cells[y][x] = c

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, c: str) -> None:
        """Draw a Bresenham line including both end points."""
        for x, y in _bresenham(x0, y0, x1, y1):
            self.put_pixel(x, y, c)

    def draw_line_depth(
        self, x0: int, y0: int, z0: float, x1: int, y1: int, z1: float, c: str
    ) -> None:
        """Draw a depth-tested line, interpolating depth along its length."""
        length = max(abs(x1 - x0), abs(y1 - y0))
        for i, (x, y) in enumerate(_bresenham(x0, y0, x1, y1)):
            t = 0.0 if length == 0 else i / length
            self.put_pixel_depth(x, y, z0 + t * (z1 - z0), c)

    def render(self) -> str:
        """Return the canvas as text, one newline-terminated line per row."""
        return "".join("".join(row) + "\n" for row in self.cells)


def clip_segment(
    p0: Vec3, p1: Vec3, near: float, far: float
) -> Optional[tuple[Vec3, Vec3]]:
    """Clip a segment to near <= z <= far; None if it lies wholly outside."""
    if p0.z > far and p1.z > far:
        return None
    if p0.z < near and p1.z < near:
        return None

    def towards(p: Vec3, q: Vec3, plane: float) -> Vec3:
        t = (plane - p.z) / (q.z - p.z)
        return Vec3(p.x + (q.x - p.x) * t, p.y + (q.y - p.y) * t, plane)

    if p0.z < near:
        p0 = towards(p0, p1, near)
    if p1.z < near:
        p1 = towards(p1, p0, near)
    if p0.z > far:
        p0 = towards(p0, p1, far)
    if p1.z > far:
        p1 = towards(p1, p0, far)
    return p0, p1


def rotate_y(v: Vec3, angle: float) -> Vec3:
    """Rotate ``v`` about the y axis by ``angle`` radians."""
    c, s = math.cos(angle), math.sin(angle)
    return Vec3(v.x * c + v.z * s, v.y, -v.x * s + v.z * c)


def project_simple(v: Vec3, fov_degrees: float, viewer_distance: float) -> Vec3:
    """Perspective-divide x and y by depth from a viewer; z is kept."""
    z = max(viewer_distance + v.z, 0.1)
    factor = 1.0 / math.tan(math.radians(fov_degrees) / 2.0)
    scale = factor / z
    return Vec3(v.x * scale, v.y * scale, v.z)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def render_cube_frame(
    canvas: Canvas, angle: float, fov: float, viewer_distance: float
) -> None:
    """Clear ``canvas`` and draw a wireframe cube rotated by ``angle``."""
    canvas.clear()
    projected = [
        project_simple(rotate_y(v, angle), fov, viewer_distance) for v in CUBE_VERTICES
    ]
    half_w, half_h = canvas.width // 2, canvas.height // 2

    def screen(p: Vec3) -> tuple[int, int]:
        x = _clamp(int((p.x + 1) * half_w), 0, canvas.width - 1)
        y = _clamp(int((1 - p.y) * half_h), 0, canvas.height - 1)
        return x, y

    for a, b in CUBE_EDGES:
        x0, y0 = screen(projected[a])
        x1, y1 = screen(projected[b])
        if (x0, y0) == (x1, y1):
            canvas.put_pixel(x0, y0, "*")
        else:
            canvas.draw_line(x0, y0, x1, y1, "*")


def main(argv: Optional[list[str]] = None) -> int:
    """Animate a spinning wireframe cube in the terminal."""
    parser = argparse.ArgumentParser(description="Spinning ASCII cube.")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    parser.add_argument("--fov", type=float, default=90.0)
    parser.add_argument("--distance", type=float, default=3.0)
    parser.add_argument("--delay", type=float, default=0.03, help="seconds between frames")
    args = parser.parse_args(argv)

    canvas = Canvas()
    out = sys.stdout
    out.write("\x1b[2J\x1b[?25l")
    angle = 0.0
    frame = 0
    try:
        while args.frames is None or frame < args.frames:
            render_cube_frame(canvas, angle, args.fov, args.distance)
            out.write("\x1b[H" + canvas.render())
            out.flush()
            angle += 0.05
            if angle > 2 * math.pi:
                angle -= 2 * math.pi
            frame += 1
            time.sleep(args.delay)
    except KeyboardInterrupt:
        pass
    finally:
        out.write("\x1b[?25h")
        out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())