"""Decoding of YOLO detection output and non-maximum suppression."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np

__all__ = ["Detection", "calculate_iou", "apply_nms", "process_detect_output"]

CONFIDENCE_THRESHOLD = 0.25
IOU_THRESHOLD = 0.5


@dataclass(frozen=True)
class Detection:
    """A box in normalised corner coordinates with its score and class."""

    x1: float
    y1: float
    x2: float
    y2: float
    confidence: float
    class_id: int

    @property
    def box(self) -> tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)

    def as_tuple(self) -> tuple[float, float, float, float, float, int]:
        """Return ``(x1, y1, x2, y2, confidence, class_id)``."""
        return (self.x1, self.y1, self.x2, self.y2, self.confidence, self.class_id)

    def __iter__(self) -> Iterator:
        return iter(self.as_tuple())


def calculate_iou(box1: Sequence[float], box2: Sequence[float]) -> float:
    """Intersection over union of two ``(x1, y1, x2, y2)`` boxes."""
    ax1, ay1, ax2, ay2 = box1[:4]
    bx1, by1, bx2, by2 = box2[:4]
    inter_w = max(0.0, min(ax2, bx2) - max(ax1, bx1))
    inter_h = max(0.0, min(ay2, by2) - max(ay1, by1))
    inter = inter_w * inter_h
    union = (ax2 - ax1) * (ay2 - ay1) + (bx2 - bx1) * (by2 - by1) - inter
    if union == 0:
        return 0.0
    return inter / union


def apply_nms(detections: Sequence[Detection], iou_threshold: float) -> list[Detection]:
    """Greedy per-class suppression; earlier detections take precedence."""
    kept: list[Detection] = []
    suppressed = [False] * len(detections)
    for i, current in enumerate(detections):
        if suppressed[i]:
            continue
        kept.append(current)
        for j in range(i + 1, len(detections)):
            other = detections[j]
            if (
                current.class_id == other.class_id
                and calculate_iou(current.box, other.box) > iou_threshold
            ):
                suppressed[j] = True
    return kept


def process_detect_output(output, class_num: int = 1, image_size: float = 320.0) -> list[Detection]:
    """Decode a flat YOLO detect head output into filtered, suppressed detections.

    The output is laid out attribute-major: all centre-x values, then all
    centre-y values, widths, heights and one score row per class.
    """
    if not 1 <= class_num <= 255:
        raise ValueError("class_num must be between 1 and 255")
    values = np.asarray(output, dtype=np.float32).ravel()
    dim_1 = 4 + class_num
    dim_0 = values.size // dim_1
    mat = values[: dim_0 * dim_1].reshape(dim_1, dim_0).T

    boxes = mat[:, :4] / np.float32(image_size)
    cx, cy, w, h = boxes.T
    half = np.float32(0.5)
    x1 = cx - half * w
    x2 = x1 + w
    y1 = cy - half * h
    y2 = y1 + h

    scores = mat[:, 4:]
    best_class = scores.argmax(axis=1)
    best_score = scores.max(axis=1)

    detections = [
        Detection(
            float(x1[i]),
            float(y1[i]),
            float(x2[i]),
            float(y2[i]),
            float(best_score[i]),
            int(best_class[i]),
        )
        for i in np.flatnonzero(best_score > np.float32(CONFIDENCE_THRESHOLD))
    ]
    detections.sort(key=lambda d: d.confidence, reverse=True)
    return apply_nms(detections, IOU_THRESHOLD)