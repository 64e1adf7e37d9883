[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcukit"
version = "0.1.0"
description = "Simulated microcontroller peripherals and drivers, a serial command shell, and C-style string and buffer helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "gpio", "uart", "rs232", "rs485", "simulation", "debounce", "command-shell"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mcukit"]

[tool.pytest.ini_options]
addopts = "-ra"
