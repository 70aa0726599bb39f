import math
from typing import List, Optional
from raykernel.math import Matrix, Ray, Tuple, point, equal
from raykernel.material import Material

LOCAL_ORIGIN = point(0, 0, 0)


class Sphere:
    """Unit sphere centered at the local origin, placed in the world by `transform`."""

    def __init__(self, transform: Matrix = None, material: Material = None):
        self.transform = transform if transform is not None else Matrix.identity(4)
        self.material = material if material is not None else Material()

    def set_transform(self, transform: Matrix):
        self.transform = transform

    def intersect(self, ray: Ray) -> List["Intersection"]:
        # solve in object space, where the sphere is the unit sphere at the origin
        local = ray.transform(self.transform.inverse())
        v = local.origin - LOCAL_ORIGIN
        a = local.direction.dot(local.direction)
        b = 2.0 * local.direction.dot(v)
        c = v.dot(v) - 1.0
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return []

        # a > 0, so the "-" root is always the smaller one; a tangent ray yields it twice
        sqrt_d = math.sqrt(discriminant)
        t1 = (-b - sqrt_d) / (2 * a)
        t2 = (-b + sqrt_d) / (2 * a)
        return [Intersection(t1, self), Intersection(t2, self)]

    def normal_at(self, world_point: Tuple) -> Tuple:
        inverse = self.transform.inverse()
        object_point = inverse * world_point
        object_normal = object_point - LOCAL_ORIGIN
        world_normal = inverse.transpose() * object_normal
        world_normal.w = 0.0
        return world_normal.normalize()

    def __eq__(self, other):
        if not isinstance(other, Sphere):
            return NotImplemented
        return self.transform == other.transform and self.material == other.material

    __hash__ = None

    def __repr__(self):
        return f"Sphere(transform={self.transform!r}, material={self.material!r})"


class Intersection:
    def __init__(self, t: float, sphere: Sphere):
        self.t = float(t)
        self.sphere = sphere

    def __lt__(self, other):
        return self.t < other.t

    def __eq__(self, other):
        if not isinstance(other, Intersection):
            return NotImplemented
        return equal(self.t, other.t) and self.sphere == other.sphere

    __hash__ = None

    def __repr__(self):
        return f"Intersection(t={self.t:.5f})"


def hit(intersections: List[Intersection]) -> Optional[Intersection]:
    """Nearest intersection with t >= 0, or None if everything is behind the ray origin."""
    closest = None
    for i in intersections:
        if i.t < 0:
            continue
        if closest is None or i.t < closest.t:
            closest = i
    return closest


def normal_at(sphere: Sphere, world_point: Tuple) -> Tuple:
    return sphere.normal_at(world_point)
