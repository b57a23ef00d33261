[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "avtpkit"
version = "0.1.0"
description = "Build and parse IEEE 1722 AVTP packet headers: common, UDP, AAF, CVF, RVF, CRF, NTSCF/TSCF, ACF CAN and sensor messages."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "avtp",
    "ieee1722",
    "tsn",
    "avb",
    "can",
    "h264",
    "protocol",
    "packet",
]
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
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["avtpkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
