# main.py
import argparse
import sys
import traceback
from penumbra.renderer.raytracer import MAX_DEPTH, WORKER_COUNT, Renderer
from penumbra.scenes import demo_scene, load_scene

QUALITY_LEVELS = {
    "preview": {"size": 100, "depth": 2},
    "balanced": {"size": 250, "depth": 5},
    "final": {"size": 500, "depth": MAX_DEPTH},
}

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Soft-shadow ray tracer')
    parser.add_argument('--scene', type=str, default=None,
                        help='Path to a JSON scene file (default: built-in demo scene)')
    parser.add_argument('--quality', choices=sorted(QUALITY_LEVELS), default='final',
                        help='Resolution/depth preset, overridden by --width/--height/--depth')
    parser.add_argument('--width', type=int, default=None, help='Image width')
    parser.add_argument('--height', type=int, default=None, help='Image height')
    parser.add_argument('--depth', type=int, default=None, help='Maximum reflection depth')
    parser.add_argument('--workers', type=int, default=WORKER_COUNT, help='Number of render threads')
    parser.add_argument('--output', type=str, default='output.ppm',
                        help='Output image; .ppm is written as P3 text, other extensions via Pillow')
    parser.add_argument('--preview', action='store_true', help='Show the finished image in a window')
    return parser.parse_args(argv)

def resolve_settings(args: argparse.Namespace):
    """Returns (width, height, depth) from the quality preset and explicit flags."""
    quality = QUALITY_LEVELS[args.quality]
    width = args.width if args.width is not None else quality["size"]
    height = args.height if args.height is not None else quality["size"]
    depth = args.depth if args.depth is not None else quality["depth"]
    return width, height, depth

def main(argv=None) -> int:
    args = parse_args(argv)
    width, height, depth = resolve_settings(args)

    try:
        print("\n=== Creating Scene ===", file=sys.stderr)
        scene = load_scene(args.scene) if args.scene else demo_scene()
        print(f"Source: {args.scene or 'demo scene'}", file=sys.stderr)
        print(f"Camera position: {scene.camera.position}", file=sys.stderr)

        renderer = Renderer(width, height, workers=args.workers, max_depth=depth)
        buffer = renderer.render_to_file(scene, args.output)
    except Exception as e:
        print(f"Error during rendering: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1

    if args.preview:
        from penumbra.renderer.preview import show_image
        show_image(buffer, title=f"penumbra - {args.output}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
