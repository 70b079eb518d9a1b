import numpy as np

from .geometry import Cube


def rotate_x(verts, angle):
    c, s = np.cos(angle), np.sin(angle)
    # y' = y*c - z*s
    # z' = y*s + z*c
    v_new = verts.copy()
    v_new[:, 1] = verts[:, 1] * c - verts[:, 2] * s
    v_new[:, 2] = verts[:, 1] * s + verts[:, 2] * c
    return v_new


def rotate_y(verts, angle):
    c, s = np.cos(angle), np.sin(angle)
    # x' = x*c + z*s
    # z' = -x*s + z*c
    v_new = verts.copy()
    v_new[:, 0] = verts[:, 0] * c + verts[:, 2] * s
    v_new[:, 2] = -verts[:, 0] * s + verts[:, 2] * c
    return v_new


def rotate_z(verts, angle):
    c, s = np.cos(angle), np.sin(angle)
    # x' = x*c - y*s
    # y' = x*s + y*c
    v_new = verts.copy()
    v_new[:, 0] = verts[:, 0] * c - verts[:, 1] * s
    v_new[:, 1] = verts[:, 0] * s + verts[:, 1] * c
    return v_new


def rotate_cube(cube: Cube, angle: float):
    """Tumble the cube in place: X, then Y, then Z, all by the same angle."""
    verts = rotate_x(cube.vertices, angle)
    verts = rotate_y(verts, angle)
    verts = rotate_z(verts, angle)
    cube.vertices[:] = verts
