import time
from typing import List

from raykernel.canvas import Canvas
from raykernel.color import Color
from raykernel.scene import World, RenderSettings
from renderers.base_renderer import BaseRenderer, RendererFactory


class SilhouetteRenderer(BaseRenderer):
    """Flat hit mask: every pixel whose ray hits anything gets `color`."""

    def __init__(self, color: Color = None):
        super().__init__("silhouette")
        self.color = color if color is not None else Color(1, 0, 0)

    def get_capabilities(self) -> List[str]:
        return ["ray_tracing", "affine_transforms"]

    def render(self, world: World, settings: RenderSettings) -> Canvas:
        start_time = time.time()
        print(f"Silhouette render started: {settings.width}x{settings.height}")

        canvas = Canvas(settings.width, settings.height)
        for row in range(settings.height):
            for col in range(settings.width):
                if world.hit(self.primary_ray(settings, col, row)) is not None:
                    canvas.write_pixel(col, row, self.color)

        elapsed = time.time() - start_time
        print(f"Silhouette render finished: {elapsed:.2f}s")
        return canvas


RendererFactory.register("silhouette", SilhouetteRenderer)
