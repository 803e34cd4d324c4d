[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "softy"
version = "0.1.0"
description = "A small software renderer: vector and matrix math, transforms, homogeneous clipping and wireframe rasterization"
requires-python = ">=3.10"
dependencies = []
keywords = ["renderer", "rasterizer", "software-rendering", "3d", "graphics", "linear-algebra"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
softy = "softy.app:main"

[tool.hatch.build.targets.wheel]
packages = ["softy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
