[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yolopost"
version = "0.1.0"
description = "Pre- and post-processing for YOLO11 object detection: resizing, tensor preparation, NMS and result rendering"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = ["yolo", "object-detection", "nms", "image-processing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Recognition",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["yolopost"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
