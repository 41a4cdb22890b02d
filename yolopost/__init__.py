"""Image preprocessing, detection decoding, NMS, rendering and timing helpers for YOLO11 models."""

__version__ = "0.1.0"