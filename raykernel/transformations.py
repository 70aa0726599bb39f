import math
from raykernel.math import Matrix


def _from_identity(cells):
    """Build a 4x4 matrix from identity with the given {(row, col): value} cells overwritten."""
    rows = [[1.0 if r == c else 0.0 for c in range(4)] for r in range(4)]
    for (r, c), value in cells.items():
        rows[r][c] = value
    return Matrix(rows)


def translation(x, y, z) -> Matrix:
    return _from_identity({(0, 3): x, (1, 3): y, (2, 3): z})


def scaling(x, y, z) -> Matrix:
    return _from_identity({(0, 0): x, (1, 1): y, (2, 2): z})


def rotation_x(radians) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return _from_identity({(1, 1): c, (1, 2): -s,
                           (2, 1): s, (2, 2): c})


def rotation_y(radians) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return _from_identity({(0, 0): c, (0, 2): s,
                           (2, 0): -s, (2, 2): c})


def rotation_z(radians) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return _from_identity({(0, 0): c, (0, 1): -s,
                           (1, 0): s, (1, 1): c})


def skewing(xy, xz, yx, yz, zx, zy) -> Matrix:
    # each coefficient moves one axis in proportion to another, e.g. xy: x by y
    return _from_identity({(0, 1): xy, (0, 2): xz,
                           (1, 0): yx, (1, 2): yz,
                           (2, 0): zx, (2, 1): zy})
