"""Class colour palettes and drawing of detections onto images."""

from collections.abc import Iterable, Sequence

import numpy as np
from PIL import Image, ImageDraw, ImageFont

__all__ = ["hsv_to_bgr", "uniform_color", "render_inference_result"]

Color = tuple[int, int, int]

# For each hue sector: indices into (v, p, q, t) for the blue, green and red outputs.
_SECTORS = ((1, 3, 0), (1, 0, 2), (3, 0, 1), (0, 2, 1), (0, 1, 3), (2, 1, 0))

_BOX_THICKNESS = 4


def _to_u8(value: float) -> int:
    return min(255, max(0, round(value * 255.0)))


def hsv_to_bgr(h: int, s: int, v: int) -> Color:
    """Convert an 8-bit HSV colour (hue in 0..180) to an 8-bit BGR triple."""
    hue = h * 6.0 / 180.0
    sat = s / 255.0
    val = v / 255.0
    if sat == 0:
        b = g = r = val
    else:
        if hue < 0:
            hue += 6.0
        elif hue >= 6.0:
            hue -= 6.0
        sector = int(np.floor(hue))
        hue -= sector
        if not 0 <= sector < 6:
            sector, hue = 0, 0.0
        tab = (
            val,
            val * (1.0 - sat),
            val * (1.0 - sat * hue),
            val * (1.0 - sat * (1.0 - hue)),
        )
        bi, gi, ri = _SECTORS[sector]
        b, g, r = tab[bi], tab[gi], tab[ri]
    return (_to_u8(b), _to_u8(g), _to_u8(r))


def uniform_color(n: int) -> list[Color]:
    """Return ``n`` fully saturated BGR colours with evenly spaced hues."""
    return [hsv_to_bgr(i * 180 // n, 255, 255) for i in range(n)]


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def render_inference_result(
    image, boxes: Iterable[Sequence[float]], colors: Sequence[Sequence[int]]
) -> np.ndarray:
    """Draw normalised boxes and their labels on a copy of a BGR image."""
    canvas = np.array(image, dtype=np.uint8, copy=True)
    box_list = list(boxes)
    if not box_list:
        return canvas
    if canvas.ndim != 3 or canvas.shape[2] != 3:
        raise ValueError("Input image must be an 8-bit 3-channel image")
    palette = [tuple(int(c) for c in color[:3]) for color in colors]
    if not palette:
        raise ValueError("At least one colour is required")

    rows, cols = canvas.shape[:2]
    picture = Image.fromarray(np.ascontiguousarray(canvas))
    draw = ImageDraw.Draw(picture)
    font = ImageFont.load_default()
    descent = font.getmetrics()[1] if hasattr(font, "getmetrics") else 0

    for box in box_list:
        x1, y1, x2, y2, conf, cls = tuple(box)[:6]
        class_id = int(cls)
        px1 = _clamp(int(float(x1) * cols), 0, cols - 1)
        py1 = _clamp(int(float(y1) * rows), 0, rows - 1)
        px2 = _clamp(int(float(x2) * cols), 0, cols - 1)
        py2 = _clamp(int(float(y2) * rows), 0, rows - 1)

        color = palette[class_id % len(palette)]
        draw.rectangle(
            [min(px1, px2), min(py1, py2), max(px1, px2), max(py1, py2)],
            outline=color,
            width=_BOX_THICKNESS,
        )

        label = f"{class_id} {float(conf):.2f}"
        left, text_top, right, bottom = draw.textbbox((0, 0), label, font=font)
        label_w = right - left
        label_h = bottom - text_top
        top = max(py1, label_h)

        draw.rectangle(
            [px1, top - label_h - 2, px1 + label_w, top + descent - 2],
            fill=color,
        )
        draw.text((px1 - left, top - 2 - label_h - text_top), label, fill=(0, 0, 0), font=font)

    return np.array(picture, dtype=np.uint8)