import argparse
import os
import sys

from .image import IMAGE_HEIGHT, IMAGE_WIDTH, write_ppm


def _dimension(value: str) -> int:
    n = int(value)
    if n < 2:
        raise argparse.ArgumentTypeError(f"must be at least 2, got {n}")
    return n


def _positive(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ppm-gradient", description="Write a gradient test image as a P3 PPM.")
    parser.add_argument("--width", type=_dimension, default=IMAGE_WIDTH, help="Image width in pixels")
    parser.add_argument("--height", type=_dimension, default=IMAGE_HEIGHT, help="Image height in pixels")
    parser.add_argument("--output", "-o", default=None, help="Output PPM file path (default: stdout)")
    parser.add_argument("--workers", "-j", type=_positive, default=1, help="Threads used to render row bands")
    parser.add_argument("--verbose", "-v", action="store_true", help="Report progress on stderr")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    def report(index):
        if args.verbose:
            print(f"Band {index} completed", file=sys.stderr)

    try:
        if args.output is None:
            write_ppm(sys.stdout, args.width, args.height, args.workers, on_band=report)
        else:
            with open(args.output, "w", encoding="ascii", newline="\n") as f:
                write_ppm(f, args.width, args.height, args.workers, on_band=report)
    except BrokenPipeError:
        # Reader went away; keep the interpreter from flushing into the closed pipe again
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        print("error: output pipe closed", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print("Done.", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
