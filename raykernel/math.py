import math
import numpy as np

EPSILON = 1e-5


def equal(a: float, b: float) -> bool:
    return abs(a - b) < EPSILON


class Tuple:
    """Homogeneous coordinate. w == 1 is a point, w == 0 is a vector."""

    def __init__(self, x=0.0, y=0.0, z=0.0, w=0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    @classmethod
    def from_sequence(cls, values):
        values = list(values)
        if len(values) != 4:
            raise ValueError(f"Tuple needs exactly 4 components, got {len(values)}")
        return cls(*values)

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __add__(self, other):
        return Tuple(self.x + other.x,
                     self.y + other.y,
                     self.z + other.z,
                     self.w + other.w)

    def __sub__(self, other):
        return Tuple(self.x - other.x,
                     self.y - other.y,
                     self.z - other.z,
                     self.w - other.w)

    def __mul__(self, k):
        return Tuple(self.x * k, self.y * k, self.z * k, self.w * k)

    __rmul__ = __mul__

    def __truediv__(self, k):
        return Tuple(self.x / k, self.y / k, self.z / k, self.w / k)

    def __neg__(self):
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __eq__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return (equal(self.x, other.x) and equal(self.y, other.y)
                and equal(self.z, other.z) and equal(self.w, other.w))

    __hash__ = None

    def __getitem__(self, idx: int) -> float:
        if idx == 0:
            return self.x
        if idx == 1:
            return self.y
        if idx == 2:
            return self.z
        if idx == 3:
            return self.w
        raise IndexError(f"Tuple index out of range: {idx}")

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y
                         + self.z * self.z + self.w * self.w)

    def normalize(self):
        m = self.magnitude()
        if m == 0:
            # direction is undefined; callers must never normalize a zero vector
            return Tuple(math.nan, math.nan, math.nan, math.nan)
        return self / m

    def dot(self, other) -> float:
        return (self.x * other.x + self.y * other.y
                + self.z * other.z + self.w * other.w)

    def cross(self, other):
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def reflect(self, normal):
        # r = v - 2 * dot(v, n) * n, n must be unit length
        return self - normal * (2 * self.dot(normal))

    def to_np(self):
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)

    def __repr__(self):
        return f"Tuple({self.x:.5f}, {self.y:.5f}, {self.z:.5f}, {self.w:.1f})"


def point(x, y, z) -> Tuple:
    return Tuple(x, y, z, 1.0)


def vector(x, y, z) -> Tuple:
    return Tuple(x, y, z, 0.0)


class Matrix:
    """Immutable rows x cols grid of floats.

    Products are only defined for 4x4 operands; determinant and inverse work
    for any square size through cofactor expansion along row 0.
    """

    def __init__(self, rows):
        data = tuple(tuple(float(v) for v in row) for row in rows)
        if not data or not data[0]:
            raise ValueError("Matrix needs at least one row and one column")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("Matrix rows must all have the same length")
        self._data = data
        self._inverse = None

    @classmethod
    def identity(cls, n: int = 4):
        return cls([[1.0 if r == c else 0.0 for c in range(n)] for r in range(n)])

    @property
    def rows(self) -> int:
        return len(self._data)

    @property
    def cols(self) -> int:
        return len(self._data[0])

    @property
    def shape(self):
        return self.rows, self.cols

    def __getitem__(self, idx) -> float:
        row, col = idx
        return self._data[row][col]

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(equal(a, b)
                   for row_a, row_b in zip(self._data, other._data)
                   for a, b in zip(row_a, row_b))

    __hash__ = None

    def _require_4x4(self):
        if self.shape != (4, 4):
            raise ValueError(f"Expected a 4x4 matrix, got {self.rows}x{self.cols}")

    def __mul__(self, other):
        if isinstance(other, Matrix):
            self._require_4x4()
            other._require_4x4()
            return Matrix([[sum(self._data[r][k] * other._data[k][c] for k in range(4))
                            for c in range(4)]
                           for r in range(4)])
        if isinstance(other, Tuple):
            self._require_4x4()
            return Tuple.from_sequence(
                sum(self._data[r][k] * other[k] for k in range(4)) for r in range(4)
            )
        return NotImplemented

    def transpose(self):
        return Matrix([[self._data[r][c] for r in range(self.rows)]
                       for c in range(self.cols)])

    def submatrix(self, row: int, col: int):
        return Matrix([[v for c, v in enumerate(cells) if c != col]
                       for r, cells in enumerate(self._data) if r != row])

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        m = self.minor(row, col)
        return -m if (row + col) % 2 else m

    def determinant(self) -> float:
        if self.rows != self.cols:
            raise ValueError(f"Determinant needs a square matrix, got {self.rows}x{self.cols}")
        if self.rows == 1:
            return self._data[0][0]
        if self.rows == 2:
            (a, b), (c, d) = self._data
            return a * d - b * c
        return sum(self._data[0][c] * self.cofactor(0, c) for c in range(self.cols))

    def is_invertible(self) -> bool:
        return self.determinant() != 0

    def inverse(self):
        if self._inverse is None:
            det = self.determinant()
            if det == 0:
                raise ValueError("Matrix is not invertible")
            n = self.rows
            cells = [[0.0] * n for _ in range(n)]
            for r in range(n):
                for c in range(n):
                    # adjugate: cofactor(r, c) lands on the transposed cell
                    cells[c][r] = self.cofactor(r, c) / det
            self._inverse = Matrix(cells)
        return self._inverse

    # Fluent builders: each applies its transform after the ones already chained.
    def translate(self, x, y, z):
        from raykernel.transformations import translation
        return translation(x, y, z) * self

    def scale(self, x, y, z):
        from raykernel.transformations import scaling
        return scaling(x, y, z) * self

    def rotate_x(self, radians):
        from raykernel.transformations import rotation_x
        return rotation_x(radians) * self

    def rotate_y(self, radians):
        from raykernel.transformations import rotation_y
        return rotation_y(radians) * self

    def rotate_z(self, radians):
        from raykernel.transformations import rotation_z
        return rotation_z(radians) * self

    def skew(self, xy, xz, yx, yz, zx, zy):
        from raykernel.transformations import skewing
        return skewing(xy, xz, yx, yz, zx, zy) * self

    def to_np(self):
        return np.array(self._data, dtype=np.float64)

    def __repr__(self):
        return f"Matrix({[list(row) for row in self._data]})"


class Ray:
    def __init__(self, origin: Tuple, direction: Tuple):
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Tuple:
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix):
        return Ray(matrix * self.origin, matrix * self.direction)

    def __repr__(self):
        return f"Ray({self.origin!r}, {self.direction!r})"
