"""
Line walking on the logical plane.

Samples are handed to ``canvas.paint(Point2)``; the canvas decides which
terminal cell each one lands in.
"""

from .geometry import CUBE_EDGES, Point2, Point3
from .projection import project


def draw_line(canvas, a: Point3, b: Point3):
    pa = project(a)
    pb = project(b)

    # Walk axis is picked on truncated x. Near-vertical lines whose x values
    # truncate equal are walked along y even if they are not exactly vertical.
    if int(pa.x) != int(pb.x):
        start, end = (pa, pb) if pa.x < pb.x else (pb, pa)
        dy = end.y - start.y
        dx = end.x - start.x
        m = dy / dx
        i = 0
        while start.x + i <= end.x:
            canvas.paint(Point2(start.x + i, start.y + m * i))
            i += 1
    else:
        start = min(pa.y, pb.y)
        end = max(pa.y, pb.y)
        j = 0
        while start + j <= end:
            # x always comes from the first endpoint
            canvas.paint(Point2(pa.x, start + j))
            j += 1


def draw_cube(canvas, cube):
    for i, j in CUBE_EDGES:
        draw_line(canvas, cube[i], cube[j])


def draw_axes(canvas, config):
    """Debug overlay: the y axis, then the x axis, across the whole window."""
    draw_line(canvas, Point3(0.0, config.top, 0.0), Point3(0.0, config.bot, 0.0))
    draw_line(canvas, Point3(config.left, 0.0, 10.0), Point3(config.right, 0.0, 10.0))
