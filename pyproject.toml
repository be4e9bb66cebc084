[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minigfx"
version = "0.1.0"
description = "Pure-Python RGBA images, depth-sorted render queues, XPM42 textures, printf-style formatting and line reading"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "image", "rgba", "xpm42", "render-queue", "printf", "line-reader"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minigfx"]

[tool.pytest.ini_options]
addopts = "-ra"
