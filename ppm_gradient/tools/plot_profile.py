import argparse

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from PIL import Image


def load_pixels(path) -> np.ndarray:
    with Image.open(path) as img:
        return np.array(img.convert("RGB"), dtype=np.uint8)


def channel_profiles(pixels: np.ndarray):
    # Red runs left to right along the top row, green runs top to bottom down the first column
    red = pixels[0, :, 0].astype(np.int64)
    green = pixels[:, 0, 1].astype(np.int64)
    return red, green


def plot_profiles(pixels: np.ndarray, out_path) -> None:
    red, green = channel_profiles(pixels)

    fig, (ax_r, ax_g) = plt.subplots(1, 2, figsize=(10, 4))
    ax_r.plot(np.arange(len(red)), red, color="tab:red")
    ax_r.set_xlabel("Column")
    ax_r.set_ylabel("Value")
    ax_r.set_title("Red, top row")
    ax_r.grid(True, alpha=0.3)

    ax_g.plot(np.arange(len(green)), green, color="tab:green")
    ax_g.set_xlabel("Row (from top)")
    ax_g.set_title("Green, first column")
    ax_g.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(out_path, dpi=150)
    plt.close(fig)


def main(argv=None) -> None:
    matplotlib.use("Agg")
    parser = argparse.ArgumentParser(description="Plot the channel profiles of a gradient PPM.")
    parser.add_argument("image", help="PPM file to inspect")
    parser.add_argument("--output", "-o", default="gradient_profile.png", help="Output PNG path")
    args = parser.parse_args(argv)
    plot_profiles(load_pixels(args.image), args.output)


if __name__ == "__main__":
    main()
