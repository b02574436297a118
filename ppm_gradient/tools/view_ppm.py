import sys
from pathlib import Path

from PIL import Image


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Usage: python -m ppm_gradient.tools.view_ppm <image.ppm>")
        return 1

    img_path = Path(argv[0])
    if not img_path.exists():
        print(f"PPM not found: {img_path}")
        return 1

    img = Image.open(img_path)
    img.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
