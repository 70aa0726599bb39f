from typing import List, Optional
from dataclasses import dataclass
from raykernel.math import Ray, point
from raykernel.color import Color, BLACK, WHITE
from raykernel.geometry import Sphere, Intersection, hit
from raykernel.material import Material, PointLight, lighting
from raykernel.transformations import scaling


@dataclass
class RenderSettings:
    width: int = 100
    height: int = 100
    eye_z: float = -5.0      # rays start at point(0, 0, eye_z)
    wall_z: float = 10.0     # the image plane rays are cast through
    wall_size: float = 7.0   # world-space height of the image plane


class World:
    def __init__(self, objects: List[Sphere] = None, lights: List[PointLight] = None):
        self.objects: List[Sphere] = list(objects) if objects else []
        self.lights: List[PointLight] = list(lights) if lights else []

    def add_object(self, obj: Sphere):
        self.objects.append(obj)

    def add_light(self, light: PointLight):
        self.lights.append(light)

    def intersect(self, ray: Ray) -> List[Intersection]:
        intersections = []
        for obj in self.objects:
            intersections.extend(obj.intersect(ray))
        return sorted(intersections, key=lambda i: i.t)

    def hit(self, ray: Ray) -> Optional[Intersection]:
        return hit(self.intersect(ray))

    def shade(self, ray: Ray) -> Color:
        """Color seen along `ray`: black on a miss, else the lights' Phong contributions summed."""
        h = self.hit(ray)
        if h is None:
            return BLACK

        position = ray.position(h.t)
        normal = h.sphere.normal_at(position)
        eye = -ray.direction
        color = BLACK
        for light in self.lights:
            color = color + lighting(h.sphere.material, light, position, eye, normal)
        return color


def default_world() -> World:
    outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere(transform=scaling(0.5, 0.5, 0.5))
    light = PointLight(point(-10, 10, -10), WHITE)
    return World([outer, inner], [light])
