import math
from raykernel.math import Matrix, Tuple, point
from raykernel.color import Color, WHITE
from raykernel.material import Material, PointLight
from raykernel.geometry import Sphere
from raykernel.scene import World, RenderSettings
from raykernel.transformations import rotation_z, scaling, skewing


TRANSFORM_PRESETS = {
    "none": lambda: Matrix.identity(4),
    "squash": lambda: scaling(1, 0.5, 1),
    "shrink_rotate": lambda: rotation_z(math.pi / 4) * scaling(0.5, 1, 1),
    "shear": lambda: skewing(1, 0, 0, 0, 0, 0) * scaling(0.5, 1, 1),
}


class SphereSceneBuilder:
    """A single colored sphere lit from the upper left, seen from -z."""

    def __init__(self,
                 color: Color = None,
                 transform_preset: str = "none",
                 light_position: Tuple = None):
        if transform_preset not in TRANSFORM_PRESETS:
            raise ValueError(f"Unknown transform preset: {transform_preset}")
        self.color = color if color is not None else Color(1.0, 0.2, 1.0)
        self.transform_preset = transform_preset
        self.light_position = light_position if light_position is not None else point(-10, 10, -10)

    def build_scene(self) -> World:
        world = World()
        world.add_object(Sphere(self._create_transform(), self._create_material()))
        world.add_light(self._create_lighting())
        return world

    def create_settings(self, width: int, height: int) -> RenderSettings:
        return RenderSettings(width=width, height=height)

    def _create_transform(self) -> Matrix:
        return TRANSFORM_PRESETS[self.transform_preset]()

    def _create_material(self) -> Material:
        return Material(color=self.color)

    def _create_lighting(self) -> PointLight:
        return PointLight(self.light_position, WHITE)
