[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zonealloc"
version = "0.1.0"
description = "A zone-based memory allocator on a simulated address space, with small text and number utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["allocator", "malloc", "memory", "zones", "heap", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zonealloc-show = "zonealloc.report:main"

[tool.hatch.build.targets.wheel]
packages = ["zonealloc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
