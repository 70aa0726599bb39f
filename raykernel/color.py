import numpy as np
from raykernel.math import equal


class Color:
    def __init__(self, r=0.0, g=0.0, b=0.0):
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)

    def __add__(self, other):
        return Color(self.r + other.r,
                     self.g + other.g,
                     self.b + other.b)

    def __sub__(self, other):
        return Color(self.r - other.r,
                     self.g - other.g,
                     self.b - other.b)

    def __mul__(self, k):
        # scalar, or componentwise (Hadamard) with another Color
        if isinstance(k, Color):
            return Color(self.r * k.r,
                         self.g * k.g,
                         self.b * k.b)
        return Color(self.r * k, self.g * k, self.b * k)

    __rmul__ = __mul__

    def __neg__(self):
        return Color(-self.r, -self.g, -self.b)

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return equal(self.r, other.r) and equal(self.g, other.g) and equal(self.b, other.b)

    __hash__ = None

    def __iter__(self):
        return iter((self.r, self.g, self.b))

    def to_np(self):
        return np.array([self.r, self.g, self.b], dtype=np.float64)

    def __repr__(self):
        return f"Color({self.r:.5f}, {self.g:.5f}, {self.b:.5f})"


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
