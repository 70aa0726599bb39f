from abc import ABC, abstractmethod
from typing import List
from raykernel.canvas import Canvas
from raykernel.math import Ray, point
from raykernel.scene import World, RenderSettings


class BaseRenderer(ABC):
    """Base class every renderer implements."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def render(self, world: World, settings: RenderSettings) -> Canvas:
        """Render the world into a new Canvas."""
        pass

    @abstractmethod
    def get_capabilities(self) -> List[str]:
        pass

    def get_name(self) -> str:
        return self.name

    def supports(self, feature: str) -> bool:
        return feature in self.get_capabilities()

    @staticmethod
    def primary_ray(settings: RenderSettings, col: int, row: int) -> Ray:
        """Ray from the eye through pixel (col, row) of the wall at z = wall_z."""
        pixel_size = settings.wall_size / settings.height
        half_height = settings.wall_size / 2
        half_width = pixel_size * settings.width / 2

        world_x = -half_width + pixel_size * col
        world_y = half_height - pixel_size * row
        origin = point(0, 0, settings.eye_z)
        target = point(world_x, world_y, settings.wall_z)
        return Ray(origin, (target - origin).normalize())


class RendererFactory:
    _renderers = {}

    @classmethod
    def register(cls, name: str, renderer_class):
        cls._renderers[name] = renderer_class

    @classmethod
    def create(cls, name: str, **kwargs) -> BaseRenderer:
        if name not in cls._renderers:
            raise ValueError(f"Unknown renderer: {name}")
        return cls._renderers[name](**kwargs)

    @classmethod
    def list_available(cls) -> List[str]:
        return list(cls._renderers.keys())
