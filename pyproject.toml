[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bleapi"
version = "0.1.0"
description = "Platform-neutral Bluetooth Low Energy API types: device addresses, BLE UUIDs, GATT models and event plumbing"
requires-python = ">=3.10"
dependencies = []
keywords = ["bluetooth", "ble", "gatt", "uuid", "asyncio"]
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
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["bleapi"]

[tool.pytest.ini_options]
addopts = "-ra"
