import time
import argparse
from scene_builders.sphere_scene_builder import SphereSceneBuilder, TRANSFORM_PRESETS
from scene_builders.plot_scene_builder import ClockSceneBuilder, BallisticsSceneBuilder
from renderers.base_renderer import RendererFactory

# imported for registration
import renderers.cpu_renderer
import renderers.silhouette_renderer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Phong sphere ray tracer')
    parser.add_argument('--scene',
                        choices=['sphere', 'clock', 'ballistics'],
                        default='sphere',
                        help='scene to draw')
    parser.add_argument('--renderer', '-r',
                        choices=RendererFactory.list_available(),
                        default='phong',
                        help='renderer for the sphere scene')
    parser.add_argument('--preset',
                        choices=sorted(TRANSFORM_PRESETS),
                        default='none',
                        help='sphere transform preset')
    parser.add_argument('--width', '-w', type=int, default=100,
                        help='image width in pixels')
    parser.add_argument('--height', type=int, default=100,
                        help='image height in pixels')
    parser.add_argument('--output', '-o', default='output.ppm',
                        help='output file; .ppm is written as P3 text, anything else through Pillow')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    start_time = time.time()
    print(f"Building scene: {args.scene}")
    if args.scene == 'clock':
        canvas = ClockSceneBuilder(size=min(args.width, args.height)).build_canvas()
    elif args.scene == 'ballistics':
        canvas = BallisticsSceneBuilder().build_canvas()
    else:
        builder = SphereSceneBuilder(transform_preset=args.preset)
        world = builder.build_scene()
        settings = builder.create_settings(args.width, args.height)

        print(f"Creating renderer: {args.renderer}")
        renderer = RendererFactory.create(args.renderer)
        print(f"Capabilities: {', '.join(renderer.get_capabilities())}")
        canvas = renderer.render(world, settings)

    canvas.save(args.output)
    print(f"Image saved: {args.output}")

    elapsed = time.time() - start_time
    print(f"Total time: {int(elapsed // 60)}m {elapsed % 60:.2f}s")
    return canvas


if __name__ == "__main__":
    main()
