from .image import (
    IMAGE_HEIGHT,
    IMAGE_WIDTH,
    MAX_VALUE,
    color_at,
    format_pixels,
    render,
    render_rows,
    write_header,
    write_ppm,
)

__all__ = [
    "IMAGE_HEIGHT",
    "IMAGE_WIDTH",
    "MAX_VALUE",
    "color_at",
    "format_pixels",
    "render",
    "render_rows",
    "write_header",
    "write_ppm",
]
