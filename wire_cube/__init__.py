from .config import CubeConfig
from .geometry import CUBE_EDGES, Cube, Point2, Point3
from .projection import project
from .transform import rotate_cube, rotate_x, rotate_y, rotate_z
from .rasterizer import draw_axes, draw_cube, draw_line
from .terminal import Canvas
from .animation import AnimationState, run
