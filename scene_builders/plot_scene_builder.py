import math
from raykernel.math import Matrix, point, vector
from raykernel.color import Color, WHITE
from raykernel.canvas import Canvas
from raykernel.ballistics import Projectile, Environment, tick


class ClockSceneBuilder:
    """Twelve hour marks placed by rotating 12 o'clock clockwise around the z axis."""

    def __init__(self, size: int = 100):
        self.size = size
        self.radius = size * 3 / 8

    def build_canvas(self) -> Canvas:
        canvas = Canvas(self.size, self.size)
        center = self.size / 2
        twelve = point(0, 1, 0)
        for hour in range(12):
            transform = (Matrix.identity(4)
                         .rotate_z(-hour * math.pi / 6)
                         .scale(self.radius, self.radius, 1))
            p = transform * twelve
            # canvas rows grow downwards
            canvas.write_pixel(round(center + p.x), round(center - p.y), WHITE)
        return canvas


class BallisticsSceneBuilder:
    """Trajectory of a projectile under gravity and a head wind."""

    def __init__(self, width: int = 900, height: int = 550):
        self.width = width
        self.height = height
        self.color = Color(1, 0, 0)

    def create_projectile(self) -> Projectile:
        return Projectile(point(0, 1, 0), vector(1, 1.8, 0).normalize() * 11.25)

    def create_environment(self) -> Environment:
        return Environment(gravity=vector(0, -0.1, 0), wind=vector(-0.01, 0, 0))

    def build_canvas(self) -> Canvas:
        canvas = Canvas(self.width, self.height)
        proj = self.create_projectile()
        env = self.create_environment()
        while proj.position.y > 0:
            col = round(proj.position.x)
            row = self.height - round(proj.position.y)
            if canvas.contains(col, row):
                canvas.write_pixel(col, row, self.color)
            proj = tick(env, proj)
        return canvas
