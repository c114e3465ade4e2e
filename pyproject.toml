[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cmoperator"
version = "0.1.0"
description = "Typed models for the cert-manager operator API: the CertManager resource, status conditions, feature gates and API group helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["cert-manager", "operator", "kubernetes", "api", "custom-resource", "conditions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cmoperator"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
