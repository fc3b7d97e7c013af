[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "onairlight"
version = "0.6.0"
description = "Building blocks for an on-air indicator light: simulated pins, light effects, a debounced button, analog sensors and JSON-style configuration registries."
requires-python = ">=3.10"
dependencies = []
keywords = ["on-air", "light", "home-automation", "gpio", "pwm", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["onairlight"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
