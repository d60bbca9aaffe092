[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imgsharpen"
version = "0.1.0"
description = "Batch 3x3 sharpening of PNG and JPEG images, run sequentially, on a thread pool or split round-robin between workers"
requires-python = ">=3.10"
keywords = ["image", "sharpen", "convolution", "batch", "parallel"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
imgsharpen-sequential = "imgsharpen.sequential:main"
imgsharpen-threaded = "imgsharpen.threaded:main"
imgsharpen-distributed = "imgsharpen.distributed:main"

[tool.hatch.build.targets.wheel]
packages = ["imgsharpen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
