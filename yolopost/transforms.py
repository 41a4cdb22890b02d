"""Image preprocessing and box serialisation for YOLO-style models."""

from collections.abc import Iterable, Sequence

import numpy as np

__all__ = ["resize_nearest", "preprocess_image", "boxes_to_yolo_str"]


def _as_u8c3(image) -> np.ndarray:
    if image is None:
        raise ValueError("Input image is empty")
    array = np.asarray(image)
    if array.size == 0:
        raise ValueError("Input image is empty")
    if array.dtype != np.uint8 or array.ndim != 3 or array.shape[2] != 3:
        raise ValueError("Input image must be an 8-bit 3-channel image")
    return array


def resize_nearest(image, out_h: int, out_w: int) -> np.ndarray:
    """Resize an HxWx3 uint8 image with nearest-neighbour sampling."""
    src = _as_u8c3(image)
    if out_h <= 0 or out_w <= 0:
        raise ValueError("Output size must be positive")
    in_h, in_w = src.shape[:2]

    scale_y = np.float32(in_h) / np.float32(out_h)
    scale_x = np.float32(in_w) / np.float32(out_w)
    ys = (np.arange(out_h, dtype=np.float32) * scale_y).astype(np.int64)
    xs = (np.arange(out_w, dtype=np.float32) * scale_x).astype(np.int64)
    ys = np.minimum(ys, in_h - 1)
    xs = np.minimum(xs, in_w - 1)
    return src[ys[:, None], xs[None, :]]


def preprocess_image(image, target_shape: Sequence[int]) -> np.ndarray:
    """Turn a BGR image into a flat, normalised RGB tensor in CHW order.

    ``target_shape`` is ``(height, width)``; the result holds
    ``3 * height * width`` float32 values in ``[0, 1]``.
    """
    height, width = target_shape
    resized = resize_nearest(image, height, width)
    planes = resized[..., ::-1].transpose(2, 0, 1)
    return (planes.astype(np.float32) / np.float32(255.0)).ravel()


def _shortest(value) -> str:
    return np.format_float_positional(np.float32(value), unique=True, trim="-")


def boxes_to_yolo_str(boxes: Iterable[Sequence[float]]) -> str:
    """Format corner boxes ``(x1, y1, x2, y2, conf, class)`` as YOLO label lines."""
    lines = []
    for box in boxes:
        x1, y1, x2, y2, _conf, class_id = (np.float32(v) for v in tuple(box)[:6])
        two = np.float32(2.0)
        center_x = (x1 + x2) / two
        center_y = (y1 + y2) / two
        width = x2 - x1
        height = y2 - y1
        lines.append(
            f"{_shortest(class_id)} {float(center_x):.7f} {float(center_y):.7f} "
            f"{float(width):.7f} {float(height):.7f}\n"
        )
    return "".join(lines)