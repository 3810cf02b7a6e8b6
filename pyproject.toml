[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yamlenum"
version = "0.1.0"
description = "Enum-like classification types defined in YAML, loaded at runtime or generated ahead of time."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["enum", "yaml", "classification", "types", "code generation"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
yamlenum-demo = "yamlenum.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["yamlenum"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
