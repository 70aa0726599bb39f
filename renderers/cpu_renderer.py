import time
from typing import List

from raykernel.canvas import Canvas
from raykernel.scene import World, RenderSettings
from renderers.base_renderer import BaseRenderer, RendererFactory


class CPURenderer(BaseRenderer):
    """Phong-shaded wall projection, one primary ray per pixel."""

    def __init__(self):
        super().__init__("phong")

    def get_capabilities(self) -> List[str]:
        return [
            "ray_tracing",
            "phong_shading",
            "multiple_lights",
            "affine_transforms"
        ]

    def render(self, world: World, settings: RenderSettings) -> Canvas:
        start_time = time.time()
        print(f"Phong render started: {settings.width}x{settings.height}, "
              f"{len(world.objects)} objects, {len(world.lights)} lights")

        canvas = Canvas(settings.width, settings.height)
        for row in range(settings.height):
            for col in range(settings.width):
                ray = self.primary_ray(settings, col, row)
                canvas.write_pixel(col, row, world.shade(ray))

            if row % 50 == 0:
                print(f"Rows remaining: {settings.height - row}")

        elapsed = time.time() - start_time
        print(f"Phong render finished: {int(elapsed // 60)}m {elapsed % 60:.2f}s")
        return canvas


RendererFactory.register("phong", CPURenderer)
