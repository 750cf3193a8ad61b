[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wintergen"
version = "0.1.0"
description = "Source pre-processor that generates reflection, component and endpoint registration code for annotated C++ headers"
requires-python = ">=3.10"
dependencies = []
keywords = ["preprocessor", "code-generation", "reflection", "annotations", "dependency-injection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Pre-processors",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wintergen = "wintergen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wintergen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
